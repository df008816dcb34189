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
"""Assembling rendered values into a self-contained HTML fragment.

The fragment carries everything a browser needs, so it can be returned as the
body of a single HTTP response::

  <style>...</style>                      # fixed stylesheet
  <div class="tdump-block" id="tdump-0">  # one titled block per value
  <h2 class="tdump-header2">Request</h2>
  <div id="tdump-0-content" ...><table ...>...</table></div>
  </div>
  <script>...</script>                    # expand/collapse and icons

Icons are assigned by the script at load time to every `<img>` sharing their
name, so the base64 payload of each icon appears once per fragment instead of
once per expandable value.
"""

import base64
import dataclasses
import inspect
import json
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from tabledump.core import config as config_lib
from tabledump.core import errors
from tabledump.core import html
from tabledump.core import logging
from tabledump.core import naming
from tabledump.core import table_view
from tabledump.core.utils import missing


RenderConfig = config_lib.RenderConfig

DEFAULT_TITLE = 'Object'
NOTHING_TO_DISPLAY = 'nothing to display'

CSS_BLOCK = f'{naming.CSS_PREFIX}-block'
CSS_HEADER2 = f'{naming.CSS_PREFIX}-header2'
CSS_EMPTY = f'{naming.CSS_PREFIX}-empty'

STYLESHEET = [
    f"""
    .{table_view.CSS_TABLE} {{
      float: left;
      border-collapse: collapse;
    }}
    .{table_view.CSS_TABLE}, .{table_view.CSS_TH}, .{table_view.CSS_TD} {{
      border: 1px solid grey;
    }}
    .{table_view.CSS_TH}, .{table_view.CSS_TD} {{
      padding: 3px;
      vertical-align: top;
    }}
    .{table_view.CSS_TH} {{
      background-color: #DDD;
    }}
    .{table_view.CSS_ARROW_DOWN}, .{table_view.CSS_ARROW_RIGHT} {{
      float: left;
      cursor: pointer;
      margin: 4px 4px 0 0;
    }}
    .{table_view.CSS_CONTENT} {{
      display: block;
    }}
    .{table_view.CSS_SOURCE} {{
      margin: 0;
    }}
    .{CSS_BLOCK} {{
      overflow: auto;
    }}
    .{CSS_HEADER2} {{
      clear: both;
      font-family: sans-serif;
    }}
    """
]


def _svg_data_uri(svg: str) -> str:
  encoded = base64.b64encode(inspect.cleandoc(svg).encode('utf-8'))
  return 'data:image/svg+xml;base64,' + encoded.decode('ascii')


ARROW_RIGHT_ICON = _svg_data_uri(
    """
    <svg xmlns="http://www.w3.org/2000/svg" width="8" height="10"
         viewBox="0 0 8 10"><path d="M0 0 L8 5 L0 10 Z" fill="#555"/></svg>
    """
)

ARROW_DOWN_ICON = _svg_data_uri(
    """
    <svg xmlns="http://www.w3.org/2000/svg" width="11" height="8"
         viewBox="0 0 11 8"><path d="M0 0 L11 0 L5.5 8 Z" fill="#555"/></svg>
    """
)

_TOGGLE_SCRIPT = f"""
    function expand(nodeId) {{
      document.getElementById(nodeId + '-{naming.CONTENT_SUFFIX}').style.display = 'block';
      document.getElementById(nodeId + '-{naming.ARROW_DOWN_SUFFIX}').style.display = 'block';
      document.getElementById(nodeId + '-{naming.ARROW_RIGHT_SUFFIX}').style.display = 'none';
    }}
    function collapse(nodeId) {{
      document.getElementById(nodeId + '-{naming.CONTENT_SUFFIX}').style.display = 'none';
      document.getElementById(nodeId + '-{naming.ARROW_DOWN_SUFFIX}').style.display = 'none';
      document.getElementById(nodeId + '-{naming.ARROW_RIGHT_SUFFIX}').style.display = 'block';
    }}
    """

_ICONS_BY_NAME = json.dumps({
    table_view.CSS_ARROW_DOWN: ARROW_DOWN_ICON,
    table_view.CSS_ARROW_RIGHT: ARROW_RIGHT_ICON,
})

_ICON_SCRIPT = f"""
    (function() {{
      var icons = {_ICONS_BY_NAME};
      Object.keys(icons).forEach(function(name) {{
        document.getElementsByName(name).forEach(function(el) {{
          el.src = icons[name];
        }});
      }});
    }})();
    """

JAVASCRIPT = [_TOGGLE_SCRIPT, _ICON_SCRIPT]


@dataclasses.dataclass(frozen=True)
class Entry:
  """A titled value to render.

  Attributes:
    title: Title shown above the table of the value.
    value: The value to render.
  """
  title: str
  value: Any


EntryLike = Union[Entry, Tuple[str, Any], dict]  # pylint: disable=g-bare-generic


def _to_entry(entry: EntryLike) -> Entry:
  if isinstance(entry, Entry):
    return entry
  if isinstance(entry, dict) and 'title' in entry:
    return Entry(str(entry['title']), entry.get('value', missing.MISSING_VALUE))
  if isinstance(entry, (tuple, list)) and len(entry) == 2:
    return Entry(str(entry[0]), entry[1])
  raise TypeError(
      'Each entry must be an `Entry`, a (title, value) tuple or a dict with '
      f'keys "title" and "value". Encountered: {entry!r}.'
  )


def _to_entries(entries: Optional[Iterable[EntryLike]]) -> List[Entry]:
  if entries is None:
    return []
  return [_to_entry(e) for e in entries]


class TitledBlock(html.HtmlComponent):
  """A titled table of a top-level value.

  Attributes:
    title: The title of the block.
    node_id: Identifier of the top-level value.
    table: Rendered value.
  """
  title: str
  node_id: str
  table: str

  HTML = inspect.cleandoc(
      f"""
      <div class="{CSS_BLOCK}" id="{{{{ node_id }}}}">
      <h2 class="{CSS_HEADER2}">{{{{ title | e }}}}</h2>
      {{{{ table }}}}
      </div>
      """
  )
  STYLES = STYLESHEET
  SCRIPTS = JAVASCRIPT


def create_content_table(
    title: str,
    value: Any,
    *,
    node_id: str = naming.root_id(0),
    config: Optional[RenderConfig] = None,
) -> TitledBlock:
  """Renders a value into a titled block.

  Args:
    title: The title of the block.
    value: The value to render. An `ErrorValue` is converted into a dict
      first.
    node_id: Identifier of the value. Must be unique within a page.
    config: Render settings. If None, the default config is used.

  Returns:
    The block, which carries the stylesheet and the scripts as shared parts.
  """
  if config is None:
    config = config_lib.default_config()
  value = errors.dumpable_error(value)
  return TitledBlock(
      title=title,
      node_id=node_id,
      table=table_view.render(value, node_id, 0, config),
  )


def _render_page(
    entries: Optional[Iterable[EntryLike]],
    config: Optional[RenderConfig],
) -> Optional[html.Html]:
  entries = _to_entries(entries)
  if not entries:
    return None
  if config is None:
    config = config_lib.default_config()
  logging.debug(
      'Rendering %d value(s) with depth limit %d.',
      len(entries), config.depth_limit
  )
  page = html.Html()
  for i, entry in enumerate(entries):
    page.add(
        create_content_table(
            entry.title, entry.value,
            node_id=naming.root_id(i), config=config
        )
    )
  return page


def _nothing_to_display() -> str:
  return html.div({'class': CSS_EMPTY}, NOTHING_TO_DISPLAY)


def create_content(
    entries: Optional[Sequence[EntryLike]],
    *,
    config: Optional[RenderConfig] = None,
    include_javascript: bool = True,
) -> str:
  """Renders titled values into a self-contained HTML fragment.

  Example::

    create_content([
        ('Request', {'path': '/users', 'query': {'id': '3'}}),
        ('Environment', os.environ),
    ])

  Args:
    entries: `Entry` objects, (title, value) tuples or dicts with keys
      'title' and 'value'.
    config: Render settings shared by all values. If None, a snapshot of the
      default config is taken.
    include_javascript: If False, the script for expanding and collapsing
      nested tables is omitted.

  Returns:
    The stylesheet, one titled block per entry and the script, or a
    'nothing to display' block if there is no entry.
  """
  page = _render_page(entries, config)
  if page is None:
    return _nothing_to_display()
  if include_javascript:
    return page.fragment_str()
  return page.style_section + page.body_content + '\n'


def to_document(
    entries: Optional[Sequence[EntryLike]],
    *,
    config: Optional[RenderConfig] = None,
) -> str:
  """Renders titled values into a complete HTML document."""
  page = _render_page(entries, config)
  if page is None:
    page = html.Html(_nothing_to_display())
  return page.html_str()


def show_object(
    title: str,
    value: Any,
    *,
    config: Optional[RenderConfig] = None,
    include_javascript: bool = True,
) -> str:
  """Renders a single titled value into a self-contained HTML fragment."""
  return create_content(
      [Entry(title, value)],
      config=config,
      include_javascript=include_javascript,
  )


def object_to_html(
    value: Any,
    *,
    title: Optional[str] = None,
    include_javascript: bool = True,
    hide_functions: Optional[bool] = None,
    depth_limit: Optional[int] = None,
    is_error: bool = False,
) -> str:
  """Renders a value into a self-contained HTML fragment.

  Args:
    value: The value to render.
    title: Title of the value. Defaults to 'Object'.
    include_javascript: Whether to include the expand/collapse script.
    hide_functions: Whether to suppress function source code. None uses the
      default setting.
    depth_limit: Depth limit for this call. None, or an invalid limit, uses
      the default setting.
    is_error: If True, `value` is an exception to be rendered with its
      message and stack trace.

  Returns:
    The HTML fragment.
  """
  if is_error and not isinstance(value, errors.ErrorValue):
    value = errors.as_error(value)
  config = config_lib.default_config().override(
      depth_limit=depth_limit, suppress_functions=hide_functions
  )
  return show_object(
      title or DEFAULT_TITLE,
      value,
      config=config,
      include_javascript=include_javascript,
  )
