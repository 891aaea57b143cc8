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

# Gunicorn configuration for the mutation portal
#
# Defaults can be overridden with MUTATION_PORTAL_* environment variables,
# e.g. MUTATION_PORTAL_WORKERS=8

import multiprocessing
import os


def _env(name, default):
    return os.getenv("MUTATION_PORTAL_{}".format(name), default)


wsgi_app = "portal.wsgi:application"
chdir = _env("CHDIR", os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "portal"))
bind = _env("BIND", "0.0.0.0:8080")
workers = int(_env("WORKERS", multiprocessing.cpu_count() * 2 + 1))
timeout = int(_env("TIMEOUT", 60))
accesslog = "-"
errorlog = "-"

log_level = os.getenv("DJANGO_LOG_LEVEL", "INFO")

logconfig_dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "class": "simple_json_log_formatter.SimpleJsonFormatter",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "loggers": {
        "root": {"handlers": ["console"], "level": log_level},
        "gunicorn.error": {"handlers": ["console"], "level": log_level, "propagate": False},
        "gunicorn.access": {"handlers": ["console"], "level": log_level, "propagate": False},
        "mutations": {"handlers": ["console"], "level": log_level, "propagate": False},
        "webservices": {"handlers": ["console"], "level": log_level, "propagate": False},
        "genes": {"handlers": ["console"], "level": log_level, "propagate": False},
    },
}
