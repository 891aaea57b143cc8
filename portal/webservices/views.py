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
from django.db import transaction
from django.http import HttpResponse
from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ParseError
from rest_framework.response import Response

from genes.services import GenePanelService

logger = logging.getLogger(__name__)

gene_panel_service = GenePanelService()

panel_id_param = openapi.Parameter(
    'panel_id',
    openapi.IN_QUERY,
    description="gene panel id. If provided, the list of genes associated with the gene panel will be "
                "presented. Otherwise, only the stable id and description will be shown for all gene "
                "panels in the database.",
    type=openapi.TYPE_STRING,
    required=False
)
sample_id_param = openapi.Parameter(
    'sample_id',
    openapi.IN_QUERY,
    description="sample id",
    type=openapi.TYPE_STRING,
    required=True
)
profile_id_param = openapi.Parameter(
    'profile_id',
    openapi.IN_QUERY,
    description="genetic profile id",
    type=openapi.TYPE_STRING,
    required=True
)


@swagger_auto_schema(
    method='get',
    operation_id='getGenePanel',
    operation_description="Get gene panel information",
    manual_parameters=[panel_id_param]
)
@api_view(['GET'])
@permission_classes((permissions.AllowAny,))
@transaction.atomic
def get_gene_panel(request):
    panel_id = request.query_params.get('panel_id')

    if panel_id is not None:
        return Response(gene_panel_service.get_gene_panel_by_stable_id(panel_id))
    else:
        return Response(gene_panel_service.get_gene_panels())


@swagger_auto_schema(
    method='get',
    operation_id='getGenePanelData',
    operation_description="Get gene panel information for a sample profile pair",
    manual_parameters=[sample_id_param, profile_id_param]
)
@api_view(['GET'])
@permission_classes((permissions.AllowAny,))
@transaction.atomic
def get_gene_panel_data(request):
    sample_id = request.query_params.get('sample_id')
    profile_id = request.query_params.get('profile_id')

    missing = [name for name, value in (('sample_id', sample_id), ('profile_id', profile_id)) if value is None]
    if missing:
        raise ParseError(detail="Required parameter(s) missing: {}".format(", ".join(missing)))

    payload = gene_panel_service.get_gene_panel_by_sample_id_and_profile_id(sample_id, profile_id)
    return HttpResponse(payload, content_type='application/json')
