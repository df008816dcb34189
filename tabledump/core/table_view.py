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
"""Recursive value-to-table rendering.

`render` turns a value into a nested HTML table:

* Scalars render as their (HTML-escaped) display string.
* Functions render as 'Source code suppressed', or their source code when
  suppression is turned off.
* Empty containers render as `[]` or `{}`.
* Non-empty containers at or beyond the depth limit render as `[...]` or
  `{...}` without visiting their children.
* Other containers render as a table with one row per child. Rows show the
  key, the kind of the child and the rendered child, whose table is hidden
  behind an expand control unless it belongs to a top-level value.

Example::

  render({'a': 1}, 'tdump-0', 0, RenderConfig())

outputs (line breaks added)::

  <div id="tdump-0-content" class="tdump-content">
  <table class="tdump-table">
  <tr><th class="tdump-th">Property</th><th class="tdump-th">Type</th>
  <th class="tdump-th">Value (depth=1)</th></tr>
  <tr><td class="tdump-td">a</td><td class="tdump-td">Number</td>
  <td class="tdump-td">1</td></tr>
  </table></div>

Traversal depth is bounded by `RenderConfig.depth_limit`, which also bounds
the work done on cyclic object graphs.
"""

import dataclasses
import html as html_lib
import inspect
import json
from typing import Any, Optional, Tuple

from tabledump.core import classifier
from tabledump.core import config as config_lib
from tabledump.core import html
from tabledump.core import naming
from tabledump.core.utils import text


ValueKind = classifier.ValueKind
RenderConfig = config_lib.RenderConfig

SUPPRESSED_SOURCE = 'Source code suppressed'

# CSS classes.
CSS_TABLE = f'{naming.CSS_PREFIX}-table'
CSS_TH = f'{naming.CSS_PREFIX}-th'
CSS_TD = f'{naming.CSS_PREFIX}-td'
CSS_ARROW_DOWN = f'{naming.CSS_PREFIX}-{naming.ARROW_DOWN_SUFFIX}'
CSS_ARROW_RIGHT = f'{naming.CSS_PREFIX}-{naming.ARROW_RIGHT_SUFFIX}'
CSS_CONTENT = f'{naming.CSS_PREFIX}-{naming.CONTENT_SUFFIX}'
CSS_SOURCE = f'{naming.CSS_PREFIX}-source'


@dataclasses.dataclass(frozen=True)
class RenderNode:
  """An expandable value being rendered.

  Attributes:
    identifier: Hierarchical identifier of the node.
    kind: Kind of the value.
    depth: Nesting level; 0 for top-level values.
    children: Ordered (key, value) pairs of the value.
  """
  identifier: str
  kind: ValueKind
  depth: int
  children: Tuple[Tuple[Any, Any], ...]

  @classmethod
  def create(
      cls,
      value: Any,
      identifier: str,
      depth: int,
      kind: Optional[ValueKind] = None,
  ) -> 'RenderNode':
    kind = kind or classifier.classify(value)
    return cls(
        identifier=identifier,
        kind=kind,
        depth=depth,
        children=classifier.children(value, kind),
    )


def _th(content: str) -> str:
  return html.th({'class': CSS_TH}, content)


def _td(content: str) -> str:
  return html.td({'class': CSS_TD}, content)


def function_source(fn: Any) -> str:
  """Returns the HTML of a function's source code, or its repr if unknown."""
  try:
    source = inspect.getsource(fn)
  except (OSError, TypeError):
    source = text.display_str(fn, escape=False)
  return html.pre({'class': CSS_SOURCE}, html_lib.escape(source))


def render_scalar(value: Any, kind: ValueKind, config: RenderConfig) -> str:
  """Renders a non-expandable value."""
  if kind is ValueKind.FUNCTION:
    if config.suppress_functions:
      return SUPPRESSED_SOURCE
    return function_source(value)
  return text.display_str(value)


def is_expanded(
    value: Any, kind: ValueKind, depth: int, config: RenderConfig
) -> bool:
  """Returns True if a value at a depth renders as a table."""
  return (
      kind.expandable
      and depth < config.depth_limit
      and classifier.size_of(value, kind) > 0
  )


def expand_controls(node_id: str) -> str:
  """Returns the expand and collapse icons addressing a node."""
  js_id = json.dumps(node_id)
  return html.img({
      'name': CSS_ARROW_RIGHT,
      'id': naming.suffixed(node_id, naming.ARROW_RIGHT_SUFFIX),
      'class': CSS_ARROW_RIGHT,
      'alt': 'Expand',
      'onclick': f'expand({js_id})',
  }) + html.img({
      'name': CSS_ARROW_DOWN,
      'id': naming.suffixed(node_id, naming.ARROW_DOWN_SUFFIX),
      'class': CSS_ARROW_DOWN,
      'alt': 'Collapse',
      'style': 'display: none',
      'onclick': f'collapse({js_id})',
  })


def render_type(
    value: Any,
    kind: ValueKind,
    node_id: str,
    depth: int,
    config: RenderConfig
) -> str:
  """Renders the type cell content of a value at a depth."""
  if is_expanded(value, kind, depth, config):
    return expand_controls(node_id) + kind.value
  return kind.value


def render_header(node: RenderNode) -> str:
  """Renders the header row of a node's table."""
  cells = [_th(node.kind.column_heading)]
  if not node.kind.key_only:
    cells.append(_th('Type'))
    cells.append(_th(f'Value (depth={node.depth + 1})'))
  return html.tr(None, ''.join(cells))


def render_row(
    node: RenderNode, key: Any, value: Any, config: RenderConfig
) -> str:
  """Renders the row of a child."""
  if node.kind.key_only:
    return html.tr(None, _td(text.display_str(value)))

  child_id = naming.child_id(node.identifier, key)
  child_kind = classifier.classify(value)
  child_depth = node.depth + 1
  return html.tr(
      None,
      _td(text.display_str(key))
      + _td(render_type(value, child_kind, child_id, child_depth, config))
      + _td(render(value, child_id, child_depth, config))
  )


def render_rows(node: RenderNode, config: RenderConfig) -> Tuple[str, ...]:
  """Renders the data rows of a node, one per child."""
  return tuple(
      render_row(node, key, value, config) for key, value in node.children
  )


def render(
    value: Any,
    node_id: str,
    depth: int = 0,
    config: Optional[RenderConfig] = None,
) -> str:
  """Renders a value as HTML.

  Args:
    value: Any value.
    node_id: Identifier of the value, which addresses its table for the
      expand/collapse script.
    depth: Nesting level of the value. 0 for top-level values, whose table is
      visible initially. Tables of nested values start hidden.
    config: Render settings. If None, the default config is used.

  Returns:
    The HTML fragment. Rendering never raises for any input value.
  """
  if config is None:
    config = config_lib.default_config()

  kind = classifier.classify(value)
  if not kind.expandable:
    return render_scalar(value, kind, config)
  if classifier.size_of(value, kind) == 0:
    return kind.empty_placeholder
  if depth >= config.depth_limit:
    return kind.truncated_placeholder

  node = RenderNode.create(value, node_id, depth, kind)
  rows = (render_header(node),) + render_rows(node, config)
  return html.div(
      {
          'id': naming.suffixed(node_id, naming.CONTENT_SUFFIX),
          'class': CSS_CONTENT,
          'style': None if depth == 0 else 'display: none',
      },
      html.table({'class': CSS_TABLE}, ''.join(rows)),
  )
