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
"""Utilities shared by the rest of tabledump.

  +---------------------+--------------------------------------------+
  | Functionality       | API                                        |
  +=====================+============================================+
  | Missing values      | :const:`tabledump.MISSING_VALUE`           |
  +---------------------+--------------------------------------------+
  | Display strings     | :func:`tabledump.display_str`,             |
  |                     | :func:`tabledump.timestamp_to_str`         |
  +---------------------+--------------------------------------------+
"""
# pylint: disable=g-bad-import-order
# pylint: disable=g-importing-member

from tabledump.core.utils.missing import MissingValue
from tabledump.core.utils.missing import MISSING_VALUE

from tabledump.core.utils.text import display_str
from tabledump.core.utils.text import timestamp_to_str

# pylint: enable=g-importing-member
# pylint: enable=g-bad-import-order
