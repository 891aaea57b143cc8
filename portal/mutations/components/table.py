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
from django.template.loader import render_to_string
from mutations.tables import MutationTable


class MutationDetailsTableView:
    """Table of the mutations of a gene

    `table_opts` accepts `exclude` (column names) and `empty_text`.
    """

    template_name = "mutations/components/mutation_table.html"

    def __init__(self, el, gene_symbol, mutations, table_opts=None):
        self.el = el
        self.gene_symbol = gene_symbol
        self.mutations = mutations
        self.table_opts = table_opts or {}
        self.table = None

    def render(self):
        self.table = MutationTable(
            self.mutations,
            exclude=self.table_opts.get('exclude'),
            empty_text=self.table_opts.get('empty_text'),
        )

        self.el.update(render_to_string(self.template_name, {
            'gene_symbol': self.gene_symbol,
            'table': self.table,
        }))
