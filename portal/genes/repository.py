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
from .models import Gene

logger = logging.getLogger(__name__)


class GeneRepository:
    """Genes keyed by Hugo symbol

    The mapper does the actual lookup; by default it's the `Gene` manager.
    An empty key list never reaches the mapper: `IN ()` is not valid SQL on
    every backend and the answer is known anyway.
    """

    def __init__(self, mapper=None):
        self.mapper = mapper if mapper is not None else Gene.objects

    def get_gene_list_by_hugo_symbols(self, hugo_gene_symbols):
        if not hugo_gene_symbols:
            logger.debug("No hugo gene symbols supplied, skipping gene lookup")
            return []

        return self.mapper.get_gene_list_by_hugo_symbols(hugo_gene_symbols)
