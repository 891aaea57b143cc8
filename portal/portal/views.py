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
import os
import logging
from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.views.generic import View
from django.http import JsonResponse
from genes.models import Gene

logger = logging.getLogger(__name__)


class HealthCheckView(View):
    def get(self, request, *args, **kwargs):
        token = (
            request.META.get("HTTP_TOKEN")
            if request.META.get("HTTP_TOKEN")
            else request.GET.get("token")
        )

        if (
            not settings.HEALTH_CHECK_TOKEN
            or not token
            or token != settings.HEALTH_CHECK_TOKEN
        ):
            raise PermissionDenied

        out = {}
        status = 200

        for service in settings.HEALTH_CHECK_SERVICES:
            service_method = getattr(self, "_check_{service}".format(service=service))
            if callable(service_method):
                out[service] = service_method()
                if out[service] != "OK":
                    status = 500

        return JsonResponse(out, status=status)

    @staticmethod
    def _check_maintenance():
        status = "OK"
        if settings.HEALTH_MAINTENANCE_LOCATION and os.path.isfile(
            settings.HEALTH_MAINTENANCE_LOCATION
        ):
            status = "Maintenance"

        return status

    @staticmethod
    def _check_database():
        status = "OK"
        try:
            Gene.objects.first()
        except Exception as e:
            logger.error(e)
            status = "Error"

        return status


class VersionView(View):
    def get(self, request, *args, **kwargs):
        return JsonResponse({"version": settings.PACKAGE_VERSION})
