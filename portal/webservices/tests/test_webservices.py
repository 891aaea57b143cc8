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
import json
from unittest import mock
from django.test import TestCase
from django.urls import reverse_lazy
from genes.tests.factories import GeneFactory
from genes.tests.factories import GenePanelFactory
from genes.tests.factories import SampleProfileFactory


class TestGenePanelController(TestCase):
    """Controller only forwards to the service"""

    def test_no_panel_id_returns_all_panels(self):
        all_panels = [{"stable_id": "A", "description": "a"}, {"stable_id": "B", "description": "b"}]
        with mock.patch("webservices.views.gene_panel_service") as service:
            service.get_gene_panels.return_value = all_panels
            r = self.client.get(reverse_lazy("webservices:genepanel"))

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), all_panels)
        service.get_gene_panels.assert_called_once_with()
        service.get_gene_panel_by_stable_id.assert_not_called()

    def test_panel_id_is_passed_literally(self):
        panel = [{"stable_id": "GENIE-1", "description": "", "genes": []}]
        with mock.patch("webservices.views.gene_panel_service") as service:
            service.get_gene_panel_by_stable_id.return_value = panel
            r = self.client.get(reverse_lazy("webservices:genepanel"), {"panel_id": "GENIE-1"})

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), panel)
        service.get_gene_panel_by_stable_id.assert_called_once_with("GENIE-1")
        service.get_gene_panels.assert_not_called()

    def test_empty_panel_id_is_present(self):
        with mock.patch("webservices.views.gene_panel_service") as service:
            service.get_gene_panel_by_stable_id.return_value = []
            r = self.client.get("{}?panel_id=".format(reverse_lazy("webservices:genepanel")))

        self.assertEqual(r.json(), [])
        service.get_gene_panel_by_stable_id.assert_called_once_with("")

    def test_gene_panel_data_payload_is_opaque(self):
        with mock.patch("webservices.views.gene_panel_service") as service:
            service.get_gene_panel_by_sample_id_and_profile_id.return_value = '"PANEL-X"'
            r = self.client.get(
                reverse_lazy("webservices:genepanel_data"), {"sample_id": "S1", "profile_id": "P1"}
            )

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r["Content-Type"], "application/json")
        self.assertEqual(r.content, b'"PANEL-X"')
        service.get_gene_panel_by_sample_id_and_profile_id.assert_called_once_with("S1", "P1")

    def test_gene_panel_data_requires_both_ids(self):
        url = reverse_lazy("webservices:genepanel_data")
        with mock.patch("webservices.views.gene_panel_service") as service:
            for params in ({}, {"sample_id": "S1"}, {"profile_id": "P1"}):
                r = self.client.get(url, params)
                self.assertEqual(r.status_code, 400)

        service.get_gene_panel_by_sample_id_and_profile_id.assert_not_called()

    def test_read_only(self):
        r = self.client.post(reverse_lazy("webservices:genepanel"), {"panel_id": "GENIE-1"})
        self.assertEqual(r.status_code, 405)


class TestGenePanelWebservices(TestCase):
    def setUp(self):
        super().setUp()
        self.genes = GeneFactory.create_batch(4)
        self.panel = GenePanelFactory(stable_id="GENIE-1", genes=self.genes)
        GenePanelFactory.create_batch(2)

    def test_list_gene_panels(self):
        r = self.client.get(reverse_lazy("webservices:genepanel"))
        self.assertEqual(r.status_code, 200)
        self.assertEqual(len(r.json()), 3)
        self.assertNotIn("genes", r.json()[0])

    def test_get_gene_panel(self):
        r = self.client.get(reverse_lazy("webservices:genepanel"), {"panel_id": "GENIE-1"})
        self.assertEqual(r.status_code, 200)
        result = r.json()
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0]["stable_id"], "GENIE-1")
        self.assertEqual(len(result[0]["genes"]), 4)

    def test_get_unknown_gene_panel(self):
        r = self.client.get(reverse_lazy("webservices:genepanel"), {"panel_id": "UNKNOWN"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), [])

    def test_gene_panel_data(self):
        sp = SampleProfileFactory(gene_panel=self.panel)
        r = self.client.get(reverse_lazy("webservices:genepanel_data"), {
            "sample_id": sp.sample.stable_id,
            "profile_id": sp.genetic_profile.stable_id,
        })
        self.assertEqual(r.status_code, 200)
        self.assertEqual(json.loads(r.content)["gene_panel_id"], "GENIE-1")
