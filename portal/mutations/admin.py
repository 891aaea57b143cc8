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
from django.contrib import admin
from .models import Mutation
from .models import PfamSequence
from .models import PdbAlignment


class MutationAdmin(admin.ModelAdmin):
    list_display = ('gene', 'sample_id', 'protein_change', 'mutation_type', 'mutation_status',)
    list_filter = ('mutation_type', 'mutation_status',)
    search_fields = ('gene__hugo_gene_symbol', 'sample_id', 'protein_change',)
    raw_id_fields = ('gene',)


class PfamSequenceAdmin(admin.ModelAdmin):
    list_display = ('gene', 'uniprot_id', 'length',)
    search_fields = ('gene__hugo_gene_symbol', 'uniprot_id',)


class PdbAlignmentAdmin(admin.ModelAdmin):
    list_display = ('uniprot_id', 'pdb_id', 'chain', 'uniprot_from', 'uniprot_to', 'coverage', 'identity_percent',)
    search_fields = ('uniprot_id', 'pdb_id',)


admin.site.register(Mutation, MutationAdmin)
admin.site.register(PfamSequence, PfamSequenceAdmin)
admin.site.register(PdbAlignment, PdbAlignmentAdmin)
