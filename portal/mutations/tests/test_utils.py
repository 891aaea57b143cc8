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
from types import SimpleNamespace
from unittest import mock
import requests
from django.test import SimpleTestCase
from django.test import override_settings
from mutations.utils import MutationDetailsUtil
from mutations.utils import SvgToPdfConnector


def mutation(sample_id, gene_symbol="TP53", germline=False):
    return SimpleNamespace(gene_symbol=gene_symbol, sample_id=sample_id, is_germline=germline)


class TestMutationDetailsUtil(SimpleTestCase):
    def test_counts_distinct_cases(self):
        util = MutationDetailsUtil([
            mutation("S1"),
            mutation("S1"),
            mutation("S2", germline=True),
            mutation("S3", gene_symbol="KRAS"),
            mutation("OTHER"),
        ])

        count = util.count_mutations("TP53", ["S1", "S2", "S3", "S4"])

        self.assertEqual(count, {
            'num_cases': 4,
            'num_mutated': 2,
            'num_somatic': 1,
            'num_germline': 1,
            'somatic_mutation_rate': 25.0,
            'germline_mutation_rate': 25.0,
        })

    def test_gene_symbol_is_case_insensitive(self):
        util = MutationDetailsUtil([mutation("S1")])
        self.assertEqual(util.count_mutations("tp53", ["S1"])['num_somatic'], 1)

    def test_duplicate_cases_counted_once(self):
        util = MutationDetailsUtil([mutation("S1")])
        count = util.count_mutations("TP53", ["S1", "S1", "S2"])
        self.assertEqual(count['num_cases'], 2)
        self.assertEqual(count['somatic_mutation_rate'], 50.0)

    def test_no_cases(self):
        count = MutationDetailsUtil([mutation("S1")]).count_mutations("TP53", [])
        self.assertEqual(count['somatic_mutation_rate'], 0.0)

    def test_process_mutation_data_extends_maps(self):
        util = MutationDetailsUtil()
        util.process_mutation_data([mutation("S1")])
        util.process_mutation_data([mutation("S2", gene_symbol="KRAS")])

        self.assertEqual(util.count_mutations("KRAS", ["S1", "S2"])["num_mutated"], 1)
        self.assertEqual(util.count_mutations("TP53", ["S1", "S2"])["num_mutated"], 1)

    def test_summary_without_germline(self):
        summary = MutationDetailsUtil.generate_summary({
            'num_germline': 0,
            'germline_mutation_rate': 0.0,
            'somatic_mutation_rate': 100 / 3,
        })
        self.assertEqual(summary, "[Somatic Mutation Frequency: 33.3%]")

    def test_summary_with_germline(self):
        summary = MutationDetailsUtil.generate_summary({
            'num_germline': 1,
            'germline_mutation_rate': 12.5,
            'somatic_mutation_rate': 50,
        })
        self.assertEqual(summary, "[Germline Mutation Rate: 12.5%, Somatic Mutation Frequency: 50.0%]")


@override_settings(SVG_TO_PDF_SERVICE_URL="http://converter.test/", SVG_TO_PDF_TIMEOUT=5)
class TestSvgToPdfConnector(SimpleTestCase):
    def test_convert(self):
        with mock.patch("mutations.utils.requests.post") as post:
            post.return_value.content = b"%PDF-1.4"
            content = SvgToPdfConnector().convert("<svg/>", "TP53_mutations.pdf")

        self.assertEqual(content, b"%PDF-1.4")
        post.assert_called_once_with("http://converter.test/", data={
            'svgelement': "<svg/>",
            'filetype': 'pdf',
            'filename': "TP53_mutations.pdf",
        }, timeout=5)
        post.return_value.raise_for_status.assert_called_once_with()

    def test_converter_failure_propagates(self):
        with mock.patch("mutations.utils.requests.post") as post:
            post.return_value.raise_for_status.side_effect = requests.HTTPError("502")
            with self.assertRaises(requests.HTTPError):
                SvgToPdfConnector().convert("<svg/>", "TP53_mutations.pdf")
