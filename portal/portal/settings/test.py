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
from .base import *  # noqa
import logging

logging.disable(logging.CRITICAL)

DEBUG = False
TEMPLATE_DEBUG = False

SECRET_KEY = "test"

ALLOWED_HOSTS = ["localhost", "testserver"]

DATABASES = {"default": dj_database_url.parse("sqlite://:memory:")}  # noqa

HEALTH_CHECK_TOKEN = "CHANGE ME"

SVG_TO_PDF_SERVICE_URL = "http://svgtopdf.test/convert"

PASSWORD_HASHERS = ("django.contrib.auth.hashers.MD5PasswordHasher",)
