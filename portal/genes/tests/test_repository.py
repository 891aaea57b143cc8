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
from unittest import mock
from django.test import SimpleTestCase
from django.test import TestCase
from genes.repository import GeneRepository
from genes.tests.factories import GeneFactory


class TestGeneRepositoryShortCircuit(SimpleTestCase):
    def setUp(self):
        super().setUp()
        self.mapper = mock.Mock()
        self.repository = GeneRepository(mapper=self.mapper)

    def test_none_returns_empty_list(self):
        self.assertEqual(self.repository.get_gene_list_by_hugo_symbols(None), [])
        self.mapper.get_gene_list_by_hugo_symbols.assert_not_called()

    def test_empty_collections_return_empty_list(self):
        for keys in ([], (), set()):
            self.assertEqual(self.repository.get_gene_list_by_hugo_symbols(keys), [])

        self.assertEqual(self.mapper.get_gene_list_by_hugo_symbols.call_count, 0)

    def test_keys_forwarded_verbatim(self):
        keys = ["TP53", "BRCA1", "TP53"]
        self.repository.get_gene_list_by_hugo_symbols(keys)
        self.mapper.get_gene_list_by_hugo_symbols.assert_called_once_with(keys)

    def test_mapper_result_returned_unchanged(self):
        mapped = [mock.sentinel.brca1, mock.sentinel.tp53, mock.sentinel.tp53]
        self.mapper.get_gene_list_by_hugo_symbols.return_value = mapped

        result = self.repository.get_gene_list_by_hugo_symbols(["TP53", "BRCA1"])

        assert result is mapped
        assert result == [mock.sentinel.brca1, mock.sentinel.tp53, mock.sentinel.tp53]


class TestGeneRepository(TestCase):
    def test_default_mapper_is_gene_manager(self):
        tp53 = GeneFactory(hugo_gene_symbol="TP53", entrez_gene_id=7157)
        brca1 = GeneFactory(hugo_gene_symbol="BRCA1", entrez_gene_id=672)
        GeneFactory(hugo_gene_symbol="KRAS", entrez_gene_id=3845)

        genes = GeneRepository().get_gene_list_by_hugo_symbols(["TP53", "BRCA1", "UNKNOWN"])

        self.assertEqual(sorted(g.pk for g in genes), sorted([tp53.pk, brca1.pk]))

    def test_unknown_symbols(self):
        GeneFactory.create_batch(3)
        self.assertEqual(GeneRepository().get_gene_list_by_hugo_symbols(["NOPE"]), [])
