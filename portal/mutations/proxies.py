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
from .models import Mutation
from .models import PdbAlignment
from .utils import MutationDetailsUtil


logger = logging.getLogger(__name__)


class MutationDataProxy:
    """Fetches mutations and keeps them indexed for summary counts"""

    def __init__(self, mapper=None):
        self.mapper = mapper if mapper is not None else Mutation.objects
        self._mutation_util = MutationDetailsUtil()

    def get_mutation_data(self, gene_symbol, sample_ids=None):
        mutations = list(self.mapper.get_mutations(gene_symbol, sample_ids))
        logger.debug("Fetched %s mutations for %s", len(mutations), gene_symbol)

        self._mutation_util.process_mutation_data(mutations)
        return mutations

    def get_mutation_util(self):
        return self._mutation_util


class PdbDataProxy:
    def __init__(self, mapper=None):
        self.mapper = mapper if mapper is not None else PdbAlignment.objects
        self._cache = {}

    def get_pdb_data(self, uniprot_id):
        """PDB chain alignments for a protein, best identity first"""

        if not uniprot_id:
            return []

        if uniprot_id not in self._cache:
            self._cache[uniprot_id] = list(self.mapper.get_alignments(uniprot_id))

        return self._cache[uniprot_id]

    def has_pdb_data(self, uniprot_id):
        return len(self.get_pdb_data(uniprot_id)) > 0
