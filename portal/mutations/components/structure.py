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
from django.template.loader import render_to_string


logger = logging.getLogger(__name__)


class Mutation3dVisView:
    """Host panel of the 3D structure viewer"""

    def __init__(self, visible=False):
        self.visible = visible

    def is_visible(self):
        return self.visible

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False


class Mutation3dView:
    template_name = "mutations/components/mutation_3d_view.html"

    def __init__(self, el, uniprot_id, gene_symbol, pdb_proxy):
        self.el = el
        self.uniprot_id = uniprot_id
        self.gene_symbol = gene_symbol
        self.pdb_proxy = pdb_proxy
        self.selected_alignment = None

    def render(self):
        self.el.update(render_to_string(self.template_name, {
            'gene_symbol': self.gene_symbol,
            'uniprot_id': self.uniprot_id,
            'has_pdb_data': self.pdb_proxy.has_pdb_data(self.uniprot_id),
            'selected_alignment': self.selected_alignment,
        }))

    def reset_view(self):
        """Select the best aligned PDB chain and redraw"""

        alignments = self.pdb_proxy.get_pdb_data(self.uniprot_id)
        self.selected_alignment = alignments[0] if alignments else None
        logger.debug("3D view of %s reset to %s", self.gene_symbol, self.selected_alignment)

        self.render()
        return self.selected_alignment


class PdbPanelView:
    template_name = "mutations/components/pdb_panel.html"

    def __init__(self, el, gene_symbol, pdb_collection, pdb_proxy, diagram=None):
        self.el = el
        self.gene_symbol = gene_symbol
        self.pdb_collection = list(pdb_collection or [])
        self.pdb_proxy = pdb_proxy
        self.diagram = diagram

    def get_rows(self):
        rows = []
        for alignment in self.pdb_collection:
            row = {'alignment': alignment, 'x': None, 'width': None}
            if self.diagram is not None:
                x = self.diagram.x_scale(alignment.uniprot_from)
                row['x'] = round(x, 2)
                row['width'] = round(self.diagram.x_scale(alignment.uniprot_to) - x, 2)
            rows.append(row)
        return rows

    def render(self):
        self.el.update(render_to_string(self.template_name, {
            'gene_symbol': self.gene_symbol,
            'rows': self.get_rows(),
        }))
