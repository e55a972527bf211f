#! /usr/bin/env python

# This file is part of googleads-injector.

# googleads-injector is free software: you can redistribute it
# and/or modify it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the License,
# or (at your option) any later version.
#
# googleads-injector is distributed in the hope that it will be
# useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with googleads-injector.  If not,
# see <http://www.gnu.org/licenses/>.

import codecs
import os
import re

from setuptools import find_packages
from setuptools import setup


def read(*parts):
    path = os.path.join(os.path.dirname(__file__), *parts)
    with codecs.open(path, encoding="utf-8") as fobj:
        return fobj.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


setup(
    name="googleads-injector",
    packages=find_packages("adinjector"),
    package_dir={"": "adinjector"},
    include_package_data=True,
    version=find_version("adinjector", "adinjector", "__init__.py"),
    description="Django based site that injects Google ad banners into content pages",
    license="Affero GNU General Public License v3 or later",
    python_requires=">=3.9",
    install_requires=[
        "Django>=4.2",
        "dj-database-url",
        "django-prometheus",
        "gunicorn",
        "prometheus-client",
        "whitenoise",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-django",
            "pytest-mock",
        ]
    },
)
