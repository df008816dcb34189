# Copyright 2026 The TableDump Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Package tabledump.

This package is the facade of the public TableDump library, which renders
Python values as collapsible HTML tables for debugging web services. Its only
dependency is jinja2.
"""

# pylint: disable=g-bad-import-order
# pylint: disable=unused-import
# pylint: disable=wildcard-import

from tabledump.core import *

# pylint: enable=wildcard-import
# pylint: enable=unused-import
# pylint: enable=g-bad-import-order

__version__ = "0.1.0"
