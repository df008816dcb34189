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
"""Tests for tabledump.core.config."""

import threading
import unittest

from tabledump.core import config


class RenderConfigTest(unittest.TestCase):

  def test_defaults(self):
    c = config.RenderConfig()
    self.assertEqual(c.depth_limit, 2)
    self.assertTrue(c.suppress_functions)

  def test_invalid_depth_limit(self):
    for limit in (0, -1, 1.5, '3', True, None):
      with self.assertRaisesRegex(ValueError, '`depth_limit` must be'):
        config.RenderConfig(depth_limit=limit)

  def test_override(self):
    c = config.RenderConfig()
    self.assertIs(c.override(), c)
    self.assertEqual(c.override(depth_limit=5).depth_limit, 5)
    self.assertFalse(c.override(suppress_functions=False).suppress_functions)
    # Invalid values are ignored.
    self.assertIs(c.override(depth_limit=0), c)
    self.assertIs(c.override(depth_limit='x', suppress_functions=1), c)


class GlobalSettingsTest(unittest.TestCase):

  def setUp(self):
    super().setUp()
    self._depth_limit = config.get_depth_limit()
    self._suppress_functions = config.get_suppress_functions()

  def tearDown(self):
    config.set_depth_limit(self._depth_limit)
    config.set_suppress_functions(self._suppress_functions)
    super().tearDown()

  def test_depth_limit(self):
    config.set_depth_limit(4)
    self.assertEqual(config.get_depth_limit(), 4)
    for invalid in (0, -3, 2.5, 'abc', None, False):
      config.set_depth_limit(invalid)
      self.assertEqual(config.get_depth_limit(), 4)
    self.assertEqual(config.default_config().depth_limit, 4)

  def test_suppress_functions(self):
    config.set_suppress_functions(False)
    self.assertFalse(config.get_suppress_functions())
    config.set_suppress_functions('yes')
    self.assertFalse(config.get_suppress_functions())
    config.set_suppress_functions()
    self.assertTrue(config.get_suppress_functions())
    self.assertTrue(config.default_config().suppress_functions)

  def test_config_scope(self):
    config.set_depth_limit(3)
    with config.config_scope(depth_limit=7) as c:
      self.assertEqual(c.depth_limit, 7)
      self.assertEqual(config.default_config().depth_limit, 7)
      with config.config_scope(suppress_functions=False):
        self.assertEqual(
            config.default_config(),
            config.RenderConfig(depth_limit=7, suppress_functions=False)
        )
      self.assertTrue(config.default_config().suppress_functions)
    self.assertEqual(config.default_config().depth_limit, 3)

  def test_config_scope_is_thread_local(self):
    seen = []

    def read_default():
      seen.append(config.default_config().depth_limit)

    with config.config_scope(depth_limit=9):
      t = threading.Thread(target=read_default)
      t.start()
      t.join()
    self.assertEqual(seen, [config.get_depth_limit()])


if __name__ == '__main__':
  unittest.main()
