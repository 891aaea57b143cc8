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
from mutations.forms import DiagramCustomizeForm


class MutationCustomizePanelView:
    template_name = "mutations/components/customize_panel.html"

    # page parameters the form sends back along with the options
    keep_params = ('sample_id', 'view3d')

    def __init__(self, el, diagram, query=None):
        self.el = el
        self.diagram = diagram
        self.query = query
        self.form = None

    def get_hidden_params(self):
        if self.query is None:
            return []
        return [(name, value) for name in self.keep_params for value in self.query.getlist(name)]

    def render(self, form=None):
        self.form = form or DiagramCustomizeForm(initial={
            'y_max': self.diagram.options['y_max'],
            'show_regions': self.diagram.options['show_regions'],
        })
        self.el.update(render_to_string(self.template_name, {
            'form': self.form,
            'hidden_params': self.get_hidden_params(),
        }))

    def toggle_view(self):
        self.el.toggle()

    def apply(self, data):
        """Redraw the diagram with submitted options, returns False on invalid data"""

        form = DiagramCustomizeForm(data)
        if form.is_valid():
            self.diagram.update_options(**form.cleaned_data)
        self.render(form)
        return form.is_valid()
