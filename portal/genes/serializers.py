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
from rest_framework import serializers
from .models import Gene
from .models import GenePanel


class GeneSerializer(serializers.ModelSerializer):
    class Meta:
        model = Gene
        fields = ('entrez_gene_id', 'hugo_gene_symbol', 'type', 'cytoband', 'length')


class GenePanelGeneSerializer(serializers.ModelSerializer):
    class Meta:
        model = Gene
        fields = ('entrez_gene_id', 'hugo_gene_symbol')


class GenePanelSerializer(serializers.ModelSerializer):
    class Meta:
        model = GenePanel
        fields = ('stable_id', 'description')

    def __init__(self, *args, **kwargs):
        self.include_genes = False
        if kwargs.get('include_genes', False):
            kwargs.pop('include_genes')
            self.include_genes = True

        super().__init__(*args, **kwargs)

        if self.include_genes:
            self.fields['genes'] = GenePanelGeneSerializer(many=True, read_only=True)
