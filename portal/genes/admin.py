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
from .models import Gene
from .models import GenePanel
from .models import Sample
from .models import GeneticProfile
from .models import SampleProfile


admin.site.site_header = "Mutation Portal administration"


class GeneAdmin(admin.ModelAdmin):
    list_display = ('hugo_gene_symbol', 'entrez_gene_id', 'type', 'cytoband',)
    search_fields = ('hugo_gene_symbol', 'entrez_gene_id',)


class GenePanelAdmin(admin.ModelAdmin):
    list_display = ('stable_id', 'description', 'number_of_genes', 'created',)
    search_fields = ('stable_id', 'description',)
    filter_horizontal = ('genes',)


class SampleProfileAdmin(admin.ModelAdmin):
    list_display = ('sample', 'genetic_profile', 'gene_panel',)
    search_fields = ('sample__stable_id', 'genetic_profile__stable_id',)
    raw_id_fields = ('sample',)


admin.site.register(Gene, GeneAdmin)
admin.site.register(GenePanel, GenePanelAdmin)
admin.site.register(Sample)
admin.site.register(GeneticProfile)
admin.site.register(SampleProfile, SampleProfileAdmin)
