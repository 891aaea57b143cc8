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
from rest_framework import viewsets
from rest_framework import permissions
from rest_framework.response import Response
from django_filters import rest_framework as filters
from genes.models import Gene
from genes.models import GenePanel
from genes.repository import GeneRepository
from genes.serializers import GeneSerializer
from genes.serializers import GenePanelSerializer


class ReadOnlyListViewset(
    viewsets.mixins.RetrieveModelMixin,
    viewsets.mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    pass


class GenesFilter(filters.FilterSet):
    type = filters.CharFilter(field_name="type", help_text="Gene type, i.e. protein-coding")

    class Meta:
        model = Gene
        fields = ["type"]


class GeneViewSet(ReadOnlyListViewset):
    """Genes

    ?hugo_gene_symbol=TP53,BRCA1 - only genes with these symbols
    """

    permission_classes = (permissions.IsAuthenticatedOrReadOnly,)
    serializer_class = GeneSerializer
    lookup_field = "hugo_gene_symbol"
    lookup_value_regex = "[^/]+"
    filter_backends = (filters.DjangoFilterBackend,)
    filterset_class = GenesFilter

    def get_queryset(self):
        return Gene.objects.all()

    def list(self, request, *args, **kwargs):
        symbols = request.query_params.get("hugo_gene_symbol")
        if symbols is None:
            return super().list(request, *args, **kwargs)

        genes = GeneRepository().get_gene_list_by_hugo_symbols(
            [s.strip() for s in symbols.split(",") if s.strip()]
        )

        page = self.paginate_queryset(genes)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        serializer = self.get_serializer(genes, many=True)
        return Response(serializer.data)


class GenePanelViewSet(ReadOnlyListViewset):
    """Gene panels

    Retrieving a single panel also returns its genes.
    """

    permission_classes = (permissions.IsAuthenticatedOrReadOnly,)
    serializer_class = GenePanelSerializer
    lookup_field = "stable_id"
    lookup_value_regex = "[^/]+"

    def get_queryset(self):
        return GenePanel.objects.get_gene_panels().prefetch_related("genes")

    def get_serializer(self, *args, **kwargs):
        if self.action == "retrieve":
            kwargs["include_genes"] = True
        return super().get_serializer(*args, **kwargs)
