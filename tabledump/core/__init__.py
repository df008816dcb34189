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
"""Core TableDump.

This package renders arbitrary Python values as nested, collapsible HTML
tables for debug pages, error pages and inspection endpoints. The output of
one call is a self-contained fragment (styles, tables and scripts) that can be
returned as-is in an HTTP response.

Here lists the sub-modules included in the core library:

  tabledump/core
   |__ classifier      :  Kinds of runtime values and their children.
   |__ config          :  Render settings and process-wide defaults.
   |__ table_view      :  Recursive value-to-table rendering.
   |__ content         :  Titled blocks, stylesheet and expand/collapse script.
   |__ errors          :  Rendering exceptions as values.
   |__ naming          :  Element ids and CSS class names.
   |__ html            :  HTML elements and fragments.
   |__ logging         :  Logging facade.
   |__ utils           :  Missing values and display strings.

"""

# pylint: disable=g-bad-import-order
# pylint: disable=unused-import
# pylint: disable=g-import-not-at-top

#
# Shared utilities.
#

from tabledump.core import utils

MISSING_VALUE = utils.MISSING_VALUE
MissingValue = utils.MissingValue
display_str = utils.display_str
timestamp_to_str = utils.timestamp_to_str

from tabledump.core import logging

#
# Settings.
#

from tabledump.core import config

RenderConfig = config.RenderConfig
DEFAULT_DEPTH_LIMIT = config.DEFAULT_DEPTH_LIMIT
get_depth_limit = config.get_depth_limit
set_depth_limit = config.set_depth_limit
get_suppress_functions = config.get_suppress_functions
set_suppress_functions = config.set_suppress_functions
config_scope = config.config_scope
default_config = config.default_config

#
# Value classification.
#

from tabledump.core import classifier

ValueKind = classifier.ValueKind
classify = classifier.classify
type_of = classifier.type_of
is_expandable = classifier.is_expandable
is_key_only = classifier.is_key_only
column_heading = classifier.column_heading
children = classifier.children
size_of = classifier.size_of

#
# Rendering.
#

from tabledump.core import naming
from tabledump.core import html

Html = html.Html
HtmlComponent = html.HtmlComponent

from tabledump.core import table_view

render = table_view.render

from tabledump.core import errors

ErrorValue = errors.ErrorValue
as_error = errors.as_error
dumpable_error = errors.dumpable_error

from tabledump.core import content

Entry = content.Entry
create_content = content.create_content
create_content_table = content.create_content_table
show_object = content.show_object
object_to_html = content.object_to_html
to_document = content.to_document

# pylint: enable=g-import-not-at-top
# pylint: enable=unused-import
# pylint: enable=g-bad-import-order
