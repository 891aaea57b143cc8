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
from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse_lazy
from genes.tests.factories import GeneFactory
from genes.tests.factories import GenePanelFactory


class TestGenePanelAdmin(TestCase):
    def setUp(self):
        super().setUp()
        self.client.force_login(User.objects.create_superuser("admin", "admin@example.com", "pass"))

    def test_changelist_shows_number_of_genes(self):
        GenePanelFactory(stable_id="GENIE-1", genes=GeneFactory.create_batch(3))

        r = self.client.get(reverse_lazy("admin:genes_genepanel_changelist"))

        self.assertEqual(r.status_code, 200)
        self.assertContains(r, "GENIE-1")
        self.assertContains(r, '<td class="field-number_of_genes">3</td>', html=True)
