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
"""HTML building blocks."""

# pylint: disable=g-importing-member

from tabledump.core.html.base import EMPTY_ELEMENTS
from tabledump.core.html.base import Html
from tabledump.core.html.base import HtmlComponent

from tabledump.core.html.base import element
from tabledump.core.html.base import element_factory
from tabledump.core.html.base import is_empty_element
from tabledump.core.html.base import start_tag

from tabledump.core.html.base import div
from tabledump.core.html.base import style
from tabledump.core.html.base import img
from tabledump.core.html.base import button
from tabledump.core.html.base import table
from tabledump.core.html.base import tr
from tabledump.core.html.base import td
from tabledump.core.html.base import th
from tabledump.core.html.base import h1
from tabledump.core.html.base import h2
from tabledump.core.html.base import pre
from tabledump.core.html.base import body
from tabledump.core.html.base import html

# pylint: enable=g-importing-member
