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
from rest_framework.renderers import JSONRenderer
from .models import GenePanel
from .models import SampleProfile
from .serializers import GenePanelSerializer

logger = logging.getLogger(__name__)


class GenePanelService:
    """Read-only gene panel lookups

    Results are already in their wire shape: lists of plain dicts for panels,
    and a JSON string for the sample/profile lookup.
    """

    def get_gene_panels(self):
        panels = GenePanel.objects.get_gene_panels()
        return GenePanelSerializer(panels, many=True).data

    def get_gene_panel_by_stable_id(self, stable_id):
        panels = GenePanel.objects.get_gene_panel_by_stable_id(stable_id)
        data = GenePanelSerializer(panels, many=True, include_genes=True).data
        if not data:
            logger.info("Gene panel {} not found".format(stable_id))
        return data

    def get_gene_panel_by_sample_id_and_profile_id(self, sample_id, profile_id):
        gene_panel_id = SampleProfile.objects.get_gene_panel_id(sample_id, profile_id)
        payload = {
            'sample_id': sample_id,
            'profile_id': profile_id,
            'gene_panel_id': gene_panel_id,
        }
        return JSONRenderer().render(payload).decode('utf-8')
