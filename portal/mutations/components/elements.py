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
"""Server side containers for the parts of the mutation details view

Each sub-view is handed the `Region` it draws into, and export forms are
handed the callable that delivers them.
"""
from collections import OrderedDict
from django.core.exceptions import ImproperlyConfigured
from django.utils.safestring import mark_safe


class Region:
    def __init__(self, name, css_class, visible=True):
        self.name = name
        self.css_class = css_class
        self.visible = visible
        self.html = ""

    def __repr__(self):
        return "<Region {} visible={}>".format(self.name, self.visible)

    def update(self, html):
        self.html = mark_safe(html)

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False

    def slide_down(self):
        self.show()

    def slide_up(self):
        self.hide()

    def toggle(self):
        self.visible = not self.visible


class ExportForm:
    def __init__(self, css_class, filetype, action=""):
        self.css_class = css_class
        self.filetype = filetype
        self.action = action
        self.fields = {
            'svgelement': "",
            'filetype': filetype,
            'filename': "",
        }
        self.submit_handler = None

    @property
    def svgelement(self):
        return self.fields['svgelement']

    def submit(self):
        if self.submit_handler is None:
            raise ImproperlyConfigured("No submit handler set for {}".format(self.css_class))
        return self.submit_handler(self)


class ViewElement:
    """Root element of a mutation details view"""

    REGIONS = (
        ('filter_info', 'mutation-details-filter-info'),
        ('toolbar', 'mutation-diagram-toolbar'),
        ('customize', 'mutation-diagram-customize'),
        ('diagram', 'mutation-diagram-container'),
        ('view3d', 'mutation-3d-initializer'),
        ('pdb_panel', 'mutation-pdb-panel-view'),
        ('table', 'mutation-details-table-view'),
    )

    def __init__(self, svg_action="", pdf_action=""):
        self.html = ""
        self.regions = OrderedDict(
            (name, Region(name, css_class)) for name, css_class in self.REGIONS
        )
        self.forms = OrderedDict([
            ('svg-to-file-form', ExportForm('svg-to-file-form', 'svg', svg_action)),
            ('svg-to-pdf-form', ExportForm('svg-to-pdf-form', 'pdf', pdf_action)),
        ])

    def update(self, html):
        self.html = mark_safe(html)

    def region(self, name):
        return self.regions[name]

    def form(self, css_class):
        return self.forms[css_class]

    def layout(self):
        return list(self.regions.values())
