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
import django_tables2 as tables


class MutationTable(tables.Table):
    sample_id = tables.Column(verbose_name="Sample ID")
    protein_change = tables.Column(verbose_name="AA change", default="")
    mutation_type = tables.Column(verbose_name="Type")
    mutation_status = tables.Column(verbose_name="MS")
    protein_position = tables.Column(verbose_name="Position", default="")

    class Meta:
        orderable = False
        empty_text = "No mutations"
        attrs = {'class': "mutation-details-table"}
