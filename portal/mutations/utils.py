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
import logging
from collections import defaultdict
from django.conf import settings
import requests


logger = logging.getLogger(__name__)


class MutationDetailsUtil:
    """Indexes mutations by gene and counts mutated cases"""

    def __init__(self, mutations=None):
        self._gene_map = defaultdict(list)

        if mutations:
            self.process_mutation_data(mutations)

    def process_mutation_data(self, mutations):
        for mutation in mutations:
            self._gene_map[mutation.gene_symbol.upper()].append(mutation)

    def get_mutations_by_gene(self, gene_symbol):
        return list(self._gene_map.get(gene_symbol.upper(), []))

    def count_mutations(self, gene_symbol, cases):
        """Count distinct mutated cases of a gene

        Rates are percentages of the distinct `cases` given.
        """

        cases = set(cases)
        somatic = set()
        germline = set()

        for mutation in self.get_mutations_by_gene(gene_symbol):
            if mutation.sample_id not in cases:
                continue

            if mutation.is_germline:
                germline.add(mutation.sample_id)
            else:
                somatic.add(mutation.sample_id)

        num_cases = len(cases)

        def rate(count):
            return (count / num_cases) * 100 if num_cases else 0.0

        return {
            'num_cases': num_cases,
            'num_mutated': len(somatic | germline),
            'num_somatic': len(somatic),
            'num_germline': len(germline),
            'somatic_mutation_rate': rate(len(somatic)),
            'germline_mutation_rate': rate(len(germline)),
        }

    @staticmethod
    def generate_summary(count):
        summary = "["

        if count['num_germline'] > 0:
            summary += "Germline Mutation Rate: {:.1f}%, ".format(count['germline_mutation_rate'])

        summary += "Somatic Mutation Frequency: {:.1f}%]".format(count['somatic_mutation_rate'])
        return summary


class SvgToPdfConnector:
    """Converts an exported diagram to PDF with an external service"""

    def __init__(self, url=None, timeout=None):
        self.url = url or settings.SVG_TO_PDF_SERVICE_URL
        self.timeout = timeout or settings.SVG_TO_PDF_TIMEOUT

    def convert(self, svg_string, filename):
        logger.debug("Converting %s to PDF via %s", filename, self.url)

        r = requests.post(self.url, data={
            'svgelement': svg_string,
            'filetype': 'pdf',
            'filename': filename,
        }, timeout=self.timeout)
        r.raise_for_status()
        return r.content
