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
from .genepanel import GenePanel


class Sample(models.Model):
    stable_id = models.CharField(max_length=255, unique=True, db_index=True)

    def __str__(self):
        return self.stable_id


class GeneticProfile(models.Model):
    stable_id = models.CharField(max_length=255, unique=True, db_index=True)
    name = models.CharField(max_length=255, blank=True, default='')

    def __str__(self):
        return self.stable_id


class SampleProfileManager(models.Manager):
    def get_gene_panel_id(self, sample_id, profile_id):
        """Stable id of the panel a sample was profiled with, None if unknown"""

        return self.get_queryset().filter(
            sample__stable_id=sample_id,
            genetic_profile__stable_id=profile_id,
            gene_panel__isnull=False
        ).values_list('gene_panel__stable_id', flat=True).first()


class SampleProfile(models.Model):
    sample = models.ForeignKey(Sample, on_delete=models.CASCADE)
    genetic_profile = models.ForeignKey(GeneticProfile, on_delete=models.CASCADE)
    gene_panel = models.ForeignKey(GenePanel, null=True, blank=True, on_delete=models.SET_NULL)

    objects = SampleProfileManager()

    class Meta:
        unique_together = (('sample', 'genetic_profile'),)

    def __str__(self):
        return "{} / {}".format(self.sample, self.genetic_profile)
