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
"""HTML elements and the `Html` fragment with consolidated CSS and scripts."""

import dataclasses
import functools
import html as html_lib
import inspect
import io
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple, Union

import jinja2
from jinja2 import meta as jinja2_meta


# Elements that never have content nor a closing tag.
EMPTY_ELEMENTS = frozenset([
    'area', 'base', 'basefont', 'br', 'col', 'frame', 'hr', 'img', 'input',
    'isindex', 'link', 'meta', 'param', 'command', 'keygen', 'source',
])

Attributes = Union[
    Dict[str, Any],
    Iterable[Tuple[str, Any]],
    None,
]


def is_empty_element(tag_name: str) -> bool:
  """Returns True if the tag is a void element."""
  return tag_name.lower() in EMPTY_ELEMENTS


def _attribute_str(attributes: Attributes) -> str:
  if not attributes:
    return ''
  items = attributes.items() if isinstance(attributes, dict) else attributes
  s = io.StringIO()
  for name, value in items:
    if value is None or value is False:
      continue
    s.write(' ')
    s.write(name)
    if value is not True:
      s.write('="')
      s.write(html_lib.escape(str(value), quote=True))
      s.write('"')
  return s.getvalue()


def start_tag(tag_name: str, attributes: Attributes = None) -> str:
  """Returns the opening tag of an element."""
  return f'<{tag_name}{_attribute_str(attributes)}>'


def element(
    tag_name: str,
    attributes: Attributes = None,
    content: Optional[str] = None,
) -> str:
  """Returns the markup of an HTML element.

  Example::

    element('td', {'class': 'tdump-td'}, 'Number')
    # <td class="tdump-td">Number</td>

  Args:
    tag_name: Tag name of the element.
    attributes: Attribute names and values. Values are HTML-escaped;
      None/False values are skipped and True values produce bare attributes.
    content: Markup inside the element. It is inserted as is. If None, only
      the opening tag is returned.

  Returns:
    The markup string.
  """
  tag = start_tag(tag_name, attributes)
  if is_empty_element(tag_name) or content is None:
    return tag
  return f'{tag}{content}</{tag_name}>'


def element_factory(tag_name: str) -> Callable[..., str]:
  """Returns a function that builds elements of a given tag."""
  return functools.partial(element, tag_name)


div = element_factory('div')
style = element_factory('style')
img = element_factory('img')
button = element_factory('button')
table = element_factory('table')
tr = element_factory('tr')
td = element_factory('td')
th = element_factory('th')
h1 = element_factory('h1')
h2 = element_factory('h2')
pre = element_factory('pre')
body = element_factory('body')
html = element_factory('html')


def _shared_section(tag_name: str, parts: Iterable[str]) -> str:
  parts = [inspect.cleandoc(p) for p in parts]
  if not parts:
    return ''
  return f'<{tag_name}>\n' + '\n'.join(parts) + f'\n</{tag_name}>\n'


class Html:
  """Markup together with the styles and scripts it depends on.

  Styles and scripts are shared parts: each one is kept once, in the order it
  was first added, no matter how many children carry it. A page made of many
  rendered values therefore ships a single stylesheet and a single copy of
  the expand/collapse script::

    page = Html()
    page.add(block_a, block_b)  # Both carry the same STYLES and SCRIPTS.
    page.fragment_str()

  outputs::

    <style>
    ...
    </style>
    <div class="tdump-block" id="tdump-0">...</div><div ...>...</div>
    <script>
    ...
    </script>
  """

  def __init__(
      self,
      content: Optional[str] = None,
      *,
      styles: Optional[Iterable[str]] = None,
      scripts: Optional[Iterable[str]] = None,
  ):
    self._styles: Dict[str, None] = dict.fromkeys(styles or [])
    self._scripts: Dict[str, None] = dict.fromkeys(scripts or [])
    self._children: List[Union[str, 'Html']] = [content] if content else []

  @property
  def styles(self) -> List[str]:
    """Returns the distinct styles in insertion order."""
    return list(self._styles)

  @property
  def scripts(self) -> List[str]:
    """Returns the distinct scripts in insertion order."""
    return list(self._scripts)

  @property
  def body_content(self) -> str:
    """Returns the markup of the children."""
    return ''.join(
        c if isinstance(c, str) else c.body_content for c in self._children
    )

  @property
  def style_section(self) -> str:
    """Returns the `<style>` block, or '' if there is no style."""
    return _shared_section('style', self._styles)

  @property
  def script_section(self) -> str:
    """Returns the `<script>` block, or '' if there is no script."""
    return _shared_section('script', self._scripts)

  def add_style(self, *css: str) -> 'Html':
    """Adds CSS blocks. Blocks already present are ignored."""
    self._styles.update(dict.fromkeys(css))
    return self

  def add_script(self, *js: str) -> 'Html':
    """Adds scripts. Scripts already present are ignored."""
    self._scripts.update(dict.fromkeys(js))
    return self

  def add(
      self,
      *parts: Union[str, 'Html', None],
      shared_parts_only: bool = False
  ) -> 'Html':
    """Appends parts to the content. None parts are ignored.

    Args:
      *parts: Markup strings or `Html` objects. The styles and scripts of
        `Html` parts are merged into this object.
      shared_parts_only: If True, only the styles and scripts of `parts` are
        merged, their content is not appended.

    Returns:
      The current HTML.
    """
    parts = [p for p in parts if p is not None]
    for part in parts:
      if isinstance(part, Html):
        self.add_style(*part.styles)
        self.add_script(*part.scripts)
    if not shared_parts_only:
      self._children.extend(parts)
    return self

  def html_str(self, *, content_only: bool = False) -> str:
    """Returns a complete HTML document, or only the content.

    Args:
      content_only: If True, only the content is returned.

    Returns:
      The HTML string.
    """
    body_content = self.body_content
    if content_only:
      return body_content
    return (
        '<html>\n<head>\n' + self.style_section + self.script_section
        + '</head>\n<body>\n' + body_content + '\n</body>\n</html>\n'
    )

  def fragment_str(self) -> str:
    """Returns a self-contained fragment: styles, content, then scripts.

    Unlike `html_str`, the result can be embedded in an existing page. The
    scripts come last so they can address the elements of the content when
    they run.
    """
    body_content = self.body_content
    return self.style_section + body_content + '\n' + self.script_section

  def __str__(self) -> str:
    return self.html_str()

  def __repr__(self) -> str:
    return (
        f'{self.__class__.__name__}(body_content={self.body_content!r}, '
        f'styles={self.styles!r}, scripts={self.scripts!r})'
    )

  def __eq__(self, other: Any) -> bool:
    if not isinstance(other, Html):
      return False
    return (
        self.body_content == other.body_content
        and self.styles == other.styles
        and self.scripts == other.scripts
    )

  def __ne__(self, other: Any) -> bool:
    return not self.__eq__(other)

  def __hash__(self):
    return hash(self.html_str())


_MISSING_VAR = (None,)


@dataclasses.dataclass
class HtmlComponent(Html):
  """Jinja2-based HTML component.

  Subclasses declare their fields as dataclass fields and refer to them in the
  `HTML` template. `Html` values referred to by the template are rendered as
  their body content, and their styles and scripts are merged into the
  component::

    class Caption(HtmlComponent):
      text: str

      HTML = '<h2 class="caption">{{ text | e }}</h2>'
      STYLES = ['.caption { clear: both; }']
  """

  # Jinja2 template of the component.
  HTML = None

  # Shared CSS styles for the component.
  STYLES = []

  # Shared scripts for the component.
  SCRIPTS = []

  def __init_subclass__(cls):
    return dataclasses.dataclass(cls)

  def __post_init__(self):
    super().__init__(styles=self.STYLES, scripts=self.SCRIPTS)
    referred_vars = dict()
    for var_name in self.var_names():
      v = getattr(self, var_name, _MISSING_VAR)
      if v is _MISSING_VAR:
        raise ValueError(f'Missing variable {var_name!r} for {self!r}.')
      if isinstance(v, Html):
        super().add(v, shared_parts_only=True)
      referred_vars[var_name] = v
    self._referred_vars = referred_vars

  @classmethod
  @functools.cache
  def _template(cls) -> jinja2.Template:
    assert isinstance(cls.HTML, str), cls.HTML
    return jinja2.Template(cls.HTML)

  @classmethod
  @functools.cache
  def var_names(cls) -> Set[str]:
    if not isinstance(cls.HTML, str) or not cls.HTML:
      raise TypeError(
          f'Class variable `HTML` must be a non-empty string for {cls!r}'
      )
    try:
      return jinja2_meta.find_undeclared_variables(
          jinja2.Environment().parse(cls.HTML)
      )
    except jinja2.TemplateSyntaxError as e:
      raise ValueError(f'Bad template string:\n\n{cls.HTML}') from e

  def add(
      self,
      *parts,
      shared_parts_only: bool = False
  ) -> Html:
    if not shared_parts_only:
      raise ValueError(
          'Adding content through `HtmlComponent.add` not supported. '
          'Use `HTML` to write content with child components instead.'
      )
    return super().add(*parts, shared_parts_only=shared_parts_only)

  @functools.cached_property
  def body_content(self) -> str:
    variables = {
        k: v.body_content if isinstance(v, Html) else v
        for k, v in self._referred_vars.items()
    }
    return self._template().render(**variables)
