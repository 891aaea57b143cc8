##
## Copyright (c) 2019 Mutation Portal contributors.
##
## This file is part of Mutation Portal.
##
## Licensed to the Apache Software Foundation (ASF) under one
## or more contributor license agreements.  See the NOTICE file
## distributed with this work for additional information
## regarding copyright ownership.  The ASF licenses this file
## to you under the Apache License, Version 2.0 (the
## "License"); you may not use this file except in compliance
## with the License.  You may obtain a copy of the License at
##
##   http://www.apache.org/licenses/LICENSE-2.0
##
## Unless required by applicable law or agreed to in writing,
## software distributed under the License is distributed on an
## "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
## KIND, either express or implied.  See the License for the
## specific language governing permissions and limitations
## under the License.
##
from django.db import models
from model_utils.models import TimeStampedModel
from .gene import Gene


class GenePanelManager(models.Manager):
    def get_gene_panels(self):
        return self.get_queryset().order_by('stable_id')

    def get_gene_panel_by_stable_id(self, stable_id):
        """Panels matching the id, with their genes prefetched"""

        return self.get_queryset()\
            .filter(stable_id=stable_id)\
            .prefetch_related('genes')


class GenePanel(TimeStampedModel):
    stable_id = models.CharField(max_length=255, unique=True, db_index=True)
    description = models.TextField(blank=True, default='')
    genes = models.ManyToManyField(Gene, related_name='gene_panels', blank=True)

    objects = GenePanelManager()

    def __str__(self):
        return self.stable_id

    @property
    def number_of_genes(self):
        return self.genes.count()
