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
import re
from mutations.models import PfamSequence
from mutations.proxies import MutationDataProxy
from mutations.proxies import PdbDataProxy


LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_length(value):
    """Sequence length as a positive int, None when missing or malformed

    Only the leading integer counts, so "12.5" and "350aa" give 12 and 350.
    """

    if value is None:
        return None

    match = LEADING_INT.match(str(value))
    if match is None:
        return None

    length = int(match.group(1))
    return length if length > 0 else None


class SequenceMetadata:
    def __init__(self, identifier=None):
        self.identifier = identifier


class SequenceDescriptor:
    """Protein sequence the mutation diagram is drawn for

    `length` is kept as received (int or string) and validated by the view.
    """

    def __init__(self, length="", identifier=None, regions=None):
        self.length = length
        self.metadata = SequenceMetadata(identifier)
        self.regions = list(regions) if regions else []

    @classmethod
    def from_pfam_sequence(cls, pfam_sequence):
        return cls(
            length=pfam_sequence.length if pfam_sequence.length is not None else "",
            identifier=pfam_sequence.uniprot_id,
            regions=pfam_sequence.regions,
        )


class MutationViewModel:
    def __init__(self, gene_symbol, mutation_data, sequence, sample_array,
                 mutation_proxy, pdb_proxy, diagram_opts=None, table_opts=None):
        self.gene_symbol = gene_symbol
        self.mutation_data = mutation_data
        self.sequence = sequence
        self.sample_array = list(sample_array) if sample_array else []
        self.mutation_proxy = mutation_proxy
        self.pdb_proxy = pdb_proxy
        self.diagram_opts = diagram_opts or {}
        self.table_opts = table_opts or {}

    @classmethod
    def for_gene(cls, gene, sample_ids=None, mutation_proxy=None, pdb_proxy=None, **kwargs):
        """Build the view model of a gene from the database"""

        mutation_proxy = mutation_proxy or MutationDataProxy()
        pdb_proxy = pdb_proxy or PdbDataProxy()

        mutation_data = mutation_proxy.get_mutation_data(
            gene.hugo_gene_symbol, sample_ids if sample_ids else None
        )

        try:
            sequence = SequenceDescriptor.from_pfam_sequence(gene.pfam_sequence)
        except PfamSequence.DoesNotExist:
            sequence = SequenceDescriptor()

        return cls(
            gene_symbol=gene.hugo_gene_symbol,
            mutation_data=mutation_data,
            sequence=sequence,
            sample_array=sample_ids,
            mutation_proxy=mutation_proxy,
            pdb_proxy=pdb_proxy,
            **kwargs
        )
