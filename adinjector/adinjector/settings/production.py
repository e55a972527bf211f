# flake8: noqa

"""Production settings and globals."""

import dj_database_url

from .base import *


# ######## DATABASE CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#databases
if "ADINJECTOR_DB_URL" in environ:
    DATABASES["default"] = dj_database_url.config(
        env="ADINJECTOR_DB_URL", conn_max_age=600
    )
else:
    DATABASES["default"] = {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": get_env_variable("ADINJECTOR_DB_NAME"),
    }
# ######## END DATABASE CONFIGURATION


# ######## HOST CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#allowed-hosts
ALLOWED_HOSTS = get_env_variable("DJANGO_ALLOWED_HOSTS").split(",")
# ######## END HOST CONFIGURATION


# ######## CACHE CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#caches
CACHES = {"default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"}}
# ######## END CACHE CONFIGURATION


# ######## SECRET CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = get_env_variable("DJANGO_SECRET_KEY")
# ######## END SECRET CONFIGURATION
