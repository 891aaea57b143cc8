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
from genes.tests.factories import GeneFactory
from mutations.models import Mutation
from mutations.models import PfamSequence
from mutations.models import PdbAlignment


class MutationFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Mutation

    gene = factory.SubFactory(GeneFactory)
    sample_id = factory.Sequence(lambda n: "SAMPLE-{}".format(n))
    protein_position = factory.Faker("random_int", min=1, max=300)
    protein_change = factory.LazyAttribute(lambda m: "p.R{}H".format(m.protein_position))
    mutation_type = Mutation.TYPES.Missense_Mutation
    mutation_status = Mutation.STATUS.Somatic


class PfamSequenceFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = PfamSequence

    gene = factory.SubFactory(GeneFactory)
    uniprot_id = factory.Sequence(lambda n: "P{:05d}".format(n))
    length = 350
    regions = factory.LazyFunction(lambda: [{"start": 100, "end": 290, "name": "P53"}])


class PdbAlignmentFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = PdbAlignment

    uniprot_id = factory.Sequence(lambda n: "P{:05d}".format(n))
    pdb_id = factory.Sequence(lambda n: "{}X{:02d}".format(n % 9 + 1, n % 100))
    chain = "A"
    uniprot_from = 1
    uniprot_to = 300
    identity_percent = factory.Faker("pyfloat", min_value=50, max_value=100, right_digits=1)
