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
from collections import namedtuple
from enum import Enum
from django.template.loader import render_to_string
from .elements import ViewElement
from .model import parse_length
from .diagram import MutationDiagram
from .table import MutationDetailsTableView
from .structure import Mutation3dView
from .structure import PdbPanelView
from .customize import MutationCustomizePanelView


logger = logging.getLogger(__name__)


MutationViewComponents = namedtuple('MutationViewComponents', ['diagram', 'table_view', 'view3d'])


class ViewState(Enum):
    UNRENDERED = 0
    RENDERED = 1
    COMPONENTS_INITIALIZED = 2


class ViewSequenceError(Exception):
    pass


class MainMutationView:
    """Mutation details of a single gene

    Call `render()` first, then `init_components()`, then optionally
    `init_pdb_panel_view()`. Toolbar actions are dispatched with `trigger()`.
    """

    template_name = "mutations/components/main_mutation_view.html"
    filter_info_template_name = "mutations/components/filter_info.html"
    toolbar_template_name = "mutations/components/diagram_toolbar.html"

    diagram_class = MutationDiagram
    table_view_class = MutationDetailsTableView
    view3d_class = Mutation3dView
    pdb_panel_view_class = PdbPanelView
    customize_panel_view_class = MutationCustomizePanelView

    def __init__(self, model, el=None, request=None):
        self.model = model
        self.el = el if el is not None else ViewElement()
        self.request = request
        self.state = ViewState.UNRENDERED
        self.actions = {}

        self.diagram = None
        self.table_view = None
        self.view3d = None
        self.pdb_panel_view = None
        self.customize_panel_view = None

    def _check_state(self, expected, operation):
        if self.state != expected:
            raise ViewSequenceError("{} called in state {}, expected {}".format(
                operation, self.state.name, expected.name))

    def _check_rendered(self, operation):
        if self.state == ViewState.UNRENDERED:
            raise ViewSequenceError("{} called before render".format(operation))

    def render(self):
        self._check_state(ViewState.UNRENDERED, 'render')

        gene_symbol = self.model.gene_symbol
        self.el.update(render_to_string(self.template_name, {
            'gene_symbol': gene_symbol,
            'mutation_summary': self._mutation_summary(),
            'uniprot_id': self.model.sequence.metadata.identifier,
        }))
        self._render_filter_info()

        self.format()
        self.state = ViewState.RENDERED

    def format(self):
        self.el.region('filter_info').hide()
        self.el.region('toolbar').hide()
        self.el.region('customize').hide()

    def init_components(self, mut3d_vis_view=None):
        self._check_state(ViewState.RENDERED, 'init_components')

        gene_symbol = self.model.gene_symbol
        mutation_data = self.model.mutation_data

        diagram = self._init_mutation_diagram(
            gene_symbol, mutation_data, self.model.sequence, self.model.diagram_opts)

        view3d = None
        if diagram is not None:
            self._init_toolbar(diagram, gene_symbol)
            view3d = self._init_3d_view(
                gene_symbol, self.model.sequence, self.model.pdb_proxy, mut3d_vis_view)
        else:
            logger.error("Error initializing mutation diagram: %s", gene_symbol)

        table_view = self._init_mutation_table_view(
            gene_symbol, mutation_data, self.model.table_opts)

        self.diagram = diagram
        self.table_view = table_view
        self.view3d = view3d
        self.state = ViewState.COMPONENTS_INITIALIZED

        return MutationViewComponents(diagram, table_view, view3d)

    def init_pdb_panel_view(self, pdb_collection):
        self._check_state(ViewState.COMPONENTS_INITIALIZED, 'init_pdb_panel_view')
        if self.pdb_panel_view is not None:
            raise ViewSequenceError("PDB panel view already initialized")

        panel = self.pdb_panel_view_class(
            el=self.el.region('pdb_panel'),
            gene_symbol=self.model.gene_symbol,
            pdb_collection=pdb_collection,
            pdb_proxy=self.model.pdb_proxy,
            diagram=self.diagram,
        )
        panel.render()

        self.pdb_panel_view = panel
        return panel

    def trigger(self, action, *args, **kwargs):
        return self.actions[action](*args, **kwargs)

    def add_reset_callback(self, callback):
        self._check_rendered('add_reset_callback')
        self.actions['filter-reset'] = callback

    def show_filter_info(self):
        """Show which samples the view is limited to

        A registered reset callback returns the location of the unfiltered
        view, which the reset link points to.
        """

        self._check_rendered('show_filter_info')
        reset = self.actions.get('filter-reset')
        self._render_filter_info(reset_url=reset() if reset is not None else None)
        self.el.region('filter_info').slide_down()

    def hide_filter_info(self):
        self._check_rendered('hide_filter_info')
        self.el.region('filter_info').slide_up()

    def _render_filter_info(self, reset_url=None):
        self.el.region('filter_info').update(render_to_string(self.filter_info_template_name, {
            'gene_symbol': self.model.gene_symbol,
            'num_samples': len(self.model.sample_array),
            'reset_url': reset_url,
        }))

    def _mutation_summary(self):
        cases = self.model.sample_array
        if not cases:
            return ""

        mutation_util = self.model.mutation_proxy.get_mutation_util()
        count = mutation_util.count_mutations(self.model.gene_symbol, cases)
        return mutation_util.generate_summary(count)

    def _init_mutation_diagram(self, gene_symbol, mutation_data, sequence, options):
        if parse_length(sequence.length) is None:
            return None

        diagram = self.diagram_class(
            gene_symbol, options, mutation_data, el=self.el.region('diagram'))
        diagram.init_diagram(sequence)
        return diagram

    def _init_toolbar(self, diagram, gene_symbol):
        def alter_diagram_for_export(rollback):
            diagram.update_top_label("" if rollback else gene_symbol)

        def submit_form(form_class):
            alter_diagram_for_export(False)
            svg_string = diagram.to_svg_string()
            alter_diagram_for_export(True)

            form = self.el.form(form_class)
            form.fields['svgelement'] = svg_string
            form.fields['filename'] = "{}_mutations.{}".format(gene_symbol, form.filetype)
            return form.submit()

        def toggle_customize_panel():
            if self.customize_panel_view is None:
                self.customize_panel_view = self.customize_panel_view_class(
                    el=self.el.region('customize'),
                    diagram=diagram,
                    query=self.request.GET if self.request is not None else None,
                )
                self.customize_panel_view.render()

            self.customize_panel_view.toggle_view()
            return self.customize_panel_view

        self.actions['diagram-to-svg'] = lambda: submit_form('svg-to-file-form')
        self.actions['diagram-to-pdf'] = lambda: submit_form('svg-to-pdf-form')
        self.actions['diagram-customize'] = toggle_customize_panel

        toolbar = self.el.region('toolbar')
        toolbar.update(render_to_string(self.toolbar_template_name, {
            'gene_symbol': gene_symbol,
            'forms': list(self.el.forms.values()),
        }, request=self.request))
        toolbar.show()

    def _init_3d_view(self, gene_symbol, sequence, pdb_proxy, mut3d_vis_view):
        if mut3d_vis_view is None:
            return None

        view3d = self.view3d_class(
            el=self.el.region('view3d'),
            uniprot_id=sequence.metadata.identifier,
            gene_symbol=gene_symbol,
            pdb_proxy=pdb_proxy,
        )
        view3d.render()

        if mut3d_vis_view.is_visible():
            view3d.reset_view()

        return view3d

    def _init_mutation_table_view(self, gene_symbol, mutation_data, options):
        table_view = self.table_view_class(
            el=self.el.region('table'),
            gene_symbol=gene_symbol,
            mutations=mutation_data,
            table_opts=options,
        )
        table_view.render()
        return table_view
