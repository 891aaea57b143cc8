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


class GeneManager(models.Manager):
    def get_gene_list_by_hugo_symbols(self, hugo_gene_symbols):
        return list(
            self.get_queryset().filter(hugo_gene_symbol__in=hugo_gene_symbols)
        )


class Gene(models.Model):
    entrez_gene_id = models.IntegerField(primary_key=True)
    hugo_gene_symbol = models.CharField(max_length=255, unique=True, db_index=True)
    type = models.CharField(max_length=50, null=True, blank=True)
    cytoband = models.CharField(max_length=64, null=True, blank=True)
    length = models.IntegerField(null=True, blank=True)

    objects = GeneManager()

    class Meta:
        ordering = ["hugo_gene_symbol"]

    def __str__(self):
        return "{symbol} (Entrez: {entrez_gene_id})".format(
            symbol=self.hugo_gene_symbol,
            entrez_gene_id=self.entrez_gene_id
        )
