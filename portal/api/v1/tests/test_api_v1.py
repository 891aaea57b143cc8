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
from django.test import TestCase
from django.urls import reverse_lazy
from genes.tests.factories import GeneFactory
from genes.tests.factories import GenePanelFactory


class TestAPIV1(TestCase):
    def setUp(self):
        super().setUp()
        self.tp53 = GeneFactory(hugo_gene_symbol="TP53", entrez_gene_id=7157)
        self.brca1 = GeneFactory(hugo_gene_symbol="BRCA1", entrez_gene_id=672)
        self.genes = GeneFactory.create_batch(3, type="ncRNA")
        self.panel = GenePanelFactory(stable_id="GENIE-1", genes=[self.tp53, self.brca1])

    def test_list_genes(self):
        r = self.client.get(reverse_lazy("api:v1:genes-list"))
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["count"], 5)

    def test_read_only_list_of_genes(self):
        r = self.client.post(reverse_lazy("api:v1:genes-list"), {"hugo_gene_symbol": "KRAS"})
        self.assertEqual(r.status_code, 403)

    def test_filter_genes_by_type(self):
        r = self.client.get(reverse_lazy("api:v1:genes-list"), {"type": "ncRNA"})
        self.assertEqual(r.json()["count"], 3)

    def test_genes_by_hugo_symbols(self):
        url = reverse_lazy("api:v1:genes-list")
        r = self.client.get("{}?hugo_gene_symbol=TP53,BRCA1".format(url))
        self.assertEqual(r.status_code, 200)
        symbols = sorted(g["hugo_gene_symbol"] for g in r.json()["results"])
        self.assertEqual(symbols, ["BRCA1", "TP53"])

    def test_empty_hugo_symbols_skip_lookup(self):
        url = reverse_lazy("api:v1:genes-list")
        with mock.patch("genes.models.Gene.objects.get_gene_list_by_hugo_symbols") as lookup:
            r = self.client.get("{}?hugo_gene_symbol=".format(url))

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["results"], [])
        lookup.assert_not_called()

    def test_retrieve_gene(self):
        r = self.client.get(reverse_lazy("api:v1:genes-detail", args=("TP53",)))
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["entrez_gene_id"], 7157)

    def test_list_gene_panels(self):
        GenePanelFactory.create_batch(2)
        r = self.client.get(reverse_lazy("api:v1:genepanels-list"))
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["count"], 3)
        self.assertNotIn("genes", r.json()["results"][0])

    def test_retrieve_gene_panel(self):
        r = self.client.get(reverse_lazy("api:v1:genepanels-detail", args=("GENIE-1",)))
        self.assertEqual(r.status_code, 200)
        self.assertEqual(len(r.json()["genes"]), 2)

    def test_retrieve_unknown_gene_panel(self):
        r = self.client.get(reverse_lazy("api:v1:genepanels-detail", args=("NOPE",)))
        self.assertEqual(r.status_code, 404)
