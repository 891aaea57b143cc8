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
import factory
from genes.models import Gene
from genes.models import GenePanel
from genes.models import Sample
from genes.models import GeneticProfile
from genes.models import SampleProfile

from faker import Faker

fake = Faker()


class GeneFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Gene

    entrez_gene_id = factory.Sequence(lambda n: 1000 + n)
    hugo_gene_symbol = factory.Sequence(lambda n: "GENE{}".format(n))
    type = "protein-coding"
    cytoband = factory.LazyAttribute(lambda g: "{}p{}".format(fake.random_int(1, 22), fake.random_int(11, 36)))
    length = factory.Faker("random_int", min=1000, max=200000)


class GenePanelFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = GenePanel

    stable_id = factory.Sequence(lambda n: "PANEL-{}".format(n))
    description = factory.Faker("sentence", nb_words=6, variable_nb_words=True)

    @factory.post_generation
    def genes(self, create, extracted, **kwargs):
        if not create:
            return

        if extracted:
            for gene in extracted:
                self.genes.add(gene)


class SampleFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Sample

    stable_id = factory.Sequence(lambda n: "TCGA-{:02d}-{:04d}-01".format(n % 100, n))


class GeneticProfileFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = GeneticProfile

    stable_id = factory.Sequence(lambda n: "study_{}_mutations".format(n))
    name = "Mutations"


class SampleProfileFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = SampleProfile

    sample = factory.SubFactory(SampleFactory)
    genetic_profile = factory.SubFactory(GeneticProfileFactory)
    gene_panel = factory.SubFactory(GenePanelFactory)
