# flake8: noqa

"""Development settings and globals."""

import dj_database_url

from .base import *


# ######## DATABASE CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#databases
if "ADINJECTOR_DB_URL" in environ:
    DATABASES["default"] = dj_database_url.config(
        env="ADINJECTOR_DB_URL", conn_max_age=600
    )
# ######## END DATABASE CONFIGURATION


# ######## DEBUG CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = True
TEMPLATES[0]["OPTIONS"]["debug"] = True
# ######## END DEBUG CONFIGURATION


# ######## STATIC FILE CONFIGURATION
# Serve static files without a collectstatic manifest.
STORAGES["staticfiles"] = {
    "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"
}
# ######## END STATIC FILE CONFIGURATION


# ######## CACHE CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#caches
CACHES = {"default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"}}
# ######## END CACHE CONFIGURATION


# ######## AUTHENTICATION CONFIGURATION
# Disable password validation in local development environment.
AUTH_PASSWORD_VALIDATORS = []
# ######## END AUTHENTICATION CONFIGURATION
