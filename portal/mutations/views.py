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
from django.http import Http404
from django.http import HttpResponse
from django.http import QueryDict
from django.urls import reverse
from django.views.generic import TemplateView
from django.views.generic import View
from genes.repository import GeneRepository
from .components import MainMutationView
from .components import Mutation3dVisView
from .components import MutationViewModel
from .components import ViewElement
from .forms import DiagramCustomizeForm
from .utils import SvgToPdfConnector


logger = logging.getLogger(__name__)


class MutationViewMixin:
    state_params = ('sample_id', 'y_max', 'show_regions')

    def get_gene(self):
        gene_symbol = self.kwargs['gene_symbol'].upper()
        genes = GeneRepository().get_gene_list_by_hugo_symbols([gene_symbol])
        if not genes:
            raise Http404("Gene {} not found".format(gene_symbol))
        return genes[0]

    def get_sample_ids(self):
        sample_ids = self.request.GET.get('sample_id', '')
        return [sample_id for sample_id in sample_ids.split(',') if sample_id]

    def options_submitted(self):
        return any(name in self.request.GET for name in DiagramCustomizeForm.base_fields)

    def get_diagram_opts(self):
        if not self.options_submitted():
            return {}

        form = DiagramCustomizeForm(self.request.GET)
        return form.cleaned_data if form.is_valid() else {}

    def get_state_query(self):
        """Query parameters the diagram is drawn from"""

        query = QueryDict(mutable=True)
        for name in self.state_params:
            if name in self.request.GET:
                query.setlist(name, self.request.GET.getlist(name))
        return query

    def get_view_element(self, gene_symbol):
        query = self.get_state_query().urlencode()
        suffix = "?{}".format(query) if query else ""

        return ViewElement(
            svg_action=reverse('mutations:export', args=(gene_symbol, 'svg')) + suffix,
            pdf_action=reverse('mutations:export', args=(gene_symbol, 'pdf')) + suffix,
        )

    def build_view(self):
        gene = self.get_gene()
        model = MutationViewModel.for_gene(
            gene, sample_ids=self.get_sample_ids(), diagram_opts=self.get_diagram_opts())
        view = MainMutationView(
            model, el=self.get_view_element(gene.hugo_gene_symbol), request=self.request)
        view.render()
        return view


class MutationDetailsView(MutationViewMixin, TemplateView):
    template_name = "mutations/mutation_details.html"

    def get_reset_url(self):
        query = self.request.GET.copy()
        query.pop('sample_id', None)
        query = query.urlencode()
        return "{}?{}".format(self.request.path, query) if query else self.request.path

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)

        view = self.build_view()
        vis_view = Mutation3dVisView(visible=self.request.GET.get('view3d', '').lower() == 'true')
        components = view.init_components(vis_view)

        uniprot_id = view.model.sequence.metadata.identifier
        view.init_pdb_panel_view(view.model.pdb_proxy.get_pdb_data(uniprot_id))

        if components.diagram is not None and self.request.GET.get('customize', '').lower() == 'true':
            panel = view.trigger('diagram-customize')
            if self.options_submitted():
                panel.apply(self.request.GET)

        if view.model.sample_array:
            reset_url = self.get_reset_url()
            view.add_reset_callback(lambda: reset_url)
            view.show_filter_info()

        ctx['view'] = view
        ctx['components'] = components
        ctx['gene_symbol'] = view.model.gene_symbol
        return ctx


class DiagramExportView(MutationViewMixin, View):
    actions = {
        'svg': 'diagram-to-svg',
        'pdf': 'diagram-to-pdf',
    }

    content_types = {
        'svg': 'image/svg+xml',
        'pdf': 'application/pdf',
    }

    def post(self, request, *args, **kwargs):
        view = self.build_view()
        components = view.init_components()
        if components.diagram is None:
            raise Http404("No mutation diagram for {}".format(view.model.gene_symbol))

        for form in view.el.forms.values():
            form.submit_handler = self.deliver

        return view.trigger(self.actions[kwargs['filetype']])

    def deliver(self, form):
        filename = form.fields['filename']
        content = form.svgelement

        if form.filetype == 'pdf':
            content = SvgToPdfConnector().convert(content, filename)

        logger.info("Exporting %s", filename)

        response = HttpResponse(content, content_type=self.content_types[form.filetype])
        response['Content-Disposition'] = 'attachment; filename="{}"'.format(filename)
        return response
