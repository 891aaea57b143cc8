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
from django.urls import path
from django.urls import re_path
from .views import MutationDetailsView
from .views import DiagramExportView

app_name = 'mutations'
urlpatterns = [
    path('<str:gene_symbol>/', MutationDetailsView.as_view(), name='detail'),
    re_path(r'^(?P<gene_symbol>[^/]+)/export/(?P<filetype>svg|pdf)/$', DiagramExportView.as_view(), name='export'),
]
