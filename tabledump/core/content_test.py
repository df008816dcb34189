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
"""Tests for tabledump.core.content."""

import base64
import threading
import unittest

from tabledump.core import config as config_lib
from tabledump.core import content
from tabledump.core import errors


def foo(x):
  return x + 1


class AssetsTest(unittest.TestCase):

  def test_icons(self):
    for icon in (content.ARROW_DOWN_ICON, content.ARROW_RIGHT_ICON):
      prefix = 'data:image/svg+xml;base64,'
      self.assertTrue(icon.startswith(prefix))
      svg = base64.b64decode(icon[len(prefix):]).decode('utf-8')
      self.assertTrue(svg.startswith('<svg'))
      self.assertTrue(svg.endswith('</svg>'))

  def test_script(self):
    script = '\n'.join(content.JAVASCRIPT)
    self.assertIn('function expand(nodeId)', script)
    self.assertIn('function collapse(nodeId)', script)
    self.assertIn('"tdump-arrow-down": "data:image/svg+xml;base64,', script)
    self.assertIn('"tdump-arrow-right": "data:image/svg+xml;base64,', script)

  def test_stylesheet(self):
    css = '\n'.join(content.STYLESHEET)
    for css_class in ('tdump-table', 'tdump-th', 'tdump-td',
                      'tdump-arrow-down', 'tdump-arrow-right',
                      'tdump-content', 'tdump-header2'):
      self.assertIn(f'.{css_class}', css)


class CreateContentTableTest(unittest.TestCase):

  def test_block(self):
    block = content.create_content_table(
        'Count', 1, node_id='tdump-3', config=config_lib.RenderConfig()
    )
    self.assertIsInstance(block, content.TitledBlock)
    self.assertEqual(
        block.body_content,
        '<div class="tdump-block" id="tdump-3">\n'
        '<h2 class="tdump-header2">Count</h2>\n'
        '1\n'
        '</div>'
    )
    self.assertEqual(block.styles, content.STYLESHEET)
    self.assertEqual(block.scripts, content.JAVASCRIPT)

  def test_title_is_escaped(self):
    block = content.create_content_table('<b>&</b>', None)
    self.assertIn('&lt;b&gt;&amp;&lt;/b&gt;', block.body_content)

  def test_error_value(self):
    block = content.create_content_table(
        'Error', errors.as_error(ValueError('bad'))
    )
    self.assertIn('<td class="tdump-td">message</td>', block.body_content)
    self.assertIn('<td class="tdump-td">bad</td>', block.body_content)


class CreateContentTest(unittest.TestCase):

  def test_layout(self):
    s = content.create_content([('A', 1)])
    self.assertTrue(s.startswith('<style>\n'))
    self.assertTrue(s.endswith('</script>\n'))
    self.assertLess(s.index('</style>'), s.index('class="tdump-block"'))
    self.assertLess(s.index('class="tdump-block"'), s.index('<script>'))

  def test_multiple_entries(self):
    s = content.create_content([
        ('Request', {'path': '/users'}),
        content.Entry('Response', [1, 2]),
        {'title': 'Status', 'value': 200},
    ])
    self.assertEqual(s.count('<style>'), 1)
    self.assertEqual(s.count('<script>'), 1)
    self.assertIn('id="tdump-0"', s)
    self.assertIn('id="tdump-0-content"', s)
    self.assertIn('id="tdump-1-content"', s)
    self.assertIn('id="tdump-2"', s)
    self.assertLess(s.index('Request'), s.index('Response'))
    self.assertLess(s.index('Response'), s.index('Status'))

  def test_dict_entry_without_value(self):
    s = content.create_content([{'title': 'Nothing'}])
    self.assertIn('MISSING_VALUE', s)

  def test_bad_entry(self):
    with self.assertRaisesRegex(TypeError, 'Each entry must be'):
      content.create_content([('a', 1, 2)])
    with self.assertRaisesRegex(TypeError, 'Each entry must be'):
      content.create_content([1])

  def test_without_javascript(self):
    s = content.create_content([('A', {'x': 1})], include_javascript=False)
    self.assertNotIn('<script>', s)
    self.assertIn('<style>', s)
    self.assertIn('tdump-0-content', s)

  def test_nothing_to_display(self):
    expected = '<div class="tdump-empty">nothing to display</div>'
    self.assertEqual(content.create_content([]), expected)
    self.assertEqual(content.create_content(None), expected)

  def test_config(self):
    value = {'a': {'b': 1}}
    self.assertIn(
        '{...}',
        content.create_content(
            [('v', value)], config=config_lib.RenderConfig(depth_limit=1)
        ),
    )
    self.assertNotIn(
        '{...}',
        content.create_content(
            [('v', value)], config=config_lib.RenderConfig(depth_limit=2)
        ),
    )

  def test_deterministic(self):
    value = {'b': [1, {2, 3}], 'a': {'c': None}}
    self.assertEqual(
        content.create_content([('v', value)]),
        content.create_content([('v', value)]),
    )


class ToDocumentTest(unittest.TestCase):

  def test_document(self):
    s = content.to_document([('A', [1])])
    self.assertTrue(s.startswith('<html>\n<head>\n<style>'))
    self.assertIn('<script>', s)
    self.assertIn('<body>\n<div class="tdump-block" id="tdump-0">', s)
    self.assertTrue(s.endswith('</body>\n</html>\n'))

  def test_empty_document(self):
    self.assertEqual(
        content.to_document([]),
        '<html>\n<head>\n</head>\n<body>\n'
        '<div class="tdump-empty">nothing to display</div>\n'
        '</body>\n</html>\n'
    )


class ObjectToHtmlTest(unittest.TestCase):

  def test_default_title(self):
    s = content.object_to_html({'a': 1})
    self.assertIn('<h2 class="tdump-header2">Object</h2>', s)
    s = content.object_to_html({'a': 1}, title='Payload')
    self.assertIn('<h2 class="tdump-header2">Payload</h2>', s)

  def test_show_object(self):
    self.assertEqual(
        content.show_object('Object', {'a': 1}),
        content.object_to_html({'a': 1}),
    )

  def test_escaping(self):
    s = content.object_to_html({'c': "wish me luck & @ dont run &'"})
    self.assertIn('wish me luck &amp; @ dont run &amp;&#x27;', s)

  def test_depth_limit(self):
    value = {'a': {'b': {'c': 1}}}
    self.assertIn('{...}', content.object_to_html(value))
    self.assertNotIn('{...}', content.object_to_html(value, depth_limit=3))
    # Invalid limits fall back to the default.
    self.assertEqual(
        content.object_to_html(value, depth_limit=0),
        content.object_to_html(value),
    )

  def test_hide_functions(self):
    s = content.object_to_html({'f': foo})
    self.assertIn('Source code suppressed', s)
    s = content.object_to_html({'f': foo}, hide_functions=False)
    self.assertIn('<pre class="tdump-source">def foo(x):', s)
    self.assertNotIn('Source code suppressed', s)

  def test_config_scope(self):
    value = {'a': {'b': 1}}
    with config_lib.config_scope(depth_limit=1):
      self.assertIn('{...}', content.object_to_html(value))
      self.assertNotIn('{...}', content.object_to_html(value, depth_limit=2))
    self.assertNotIn('{...}', content.object_to_html(value))

  def test_is_error(self):
    try:
      raise KeyError('missing & gone')
    except KeyError as e:
      s = content.object_to_html(e, is_error=True)
    self.assertIn('<td class="tdump-td">KeyError</td>', s)
    self.assertIn('missing &amp; gone', s)
    self.assertIn('<td class="tdump-td">stack</td>', s)
    self.assertIn('Traceback (most recent call last):', s)

  def test_error_value(self):
    error = errors.as_error(ValueError('bad'))
    self.assertEqual(
        content.object_to_html(error),
        content.object_to_html(error.error, is_error=True),
    )

  def test_is_error_with_non_exception(self):
    with self.assertRaisesRegex(TypeError, 'is not an exception'):
      content.object_to_html({'a': 1}, is_error=True)

  def test_concurrent_renders(self):
    value = {'a': {'b': 1}}
    results = {}

    def render(depth_limit):
      with config_lib.config_scope(depth_limit=depth_limit):
        for _ in range(20):
          results.setdefault(depth_limit, set()).add(
              content.object_to_html(value)
          )

    threads = [threading.Thread(target=render, args=(i,)) for i in (1, 2)]
    for t in threads:
      t.start()
    for t in threads:
      t.join()
    self.assertEqual(len(results[1]), 1)
    self.assertEqual(len(results[2]), 1)
    self.assertIn('{...}', next(iter(results[1])))
    self.assertNotIn('{...}', next(iter(results[2])))


if __name__ == '__main__':
  unittest.main()
