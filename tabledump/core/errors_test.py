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
"""Tests for tabledump.core.errors."""

import unittest

from tabledump.core import errors


class HttpError(Exception):

  def __init__(self, message, status):
    super().__init__(message)
    self.status = status


class _UnprintableError(Exception):

  def __str__(self):
    raise RuntimeError('boom')


def _raise_chained():
  try:
    raise KeyError('k')
  except KeyError as e:
    raise ValueError('bad value') from e


class ErrorsTest(unittest.TestCase):

  def test_as_error(self):
    e = ValueError('x')
    self.assertIs(errors.as_error(e).error, e)
    with self.assertRaisesRegex(TypeError, 'is not an exception'):
      errors.as_error('x')

  def test_non_error_values_are_unchanged(self):
    value = {'message': 'x', 'stack': 'y'}
    self.assertIs(errors.dumpable_error(value), value)
    e = ValueError('x')
    self.assertIs(errors.dumpable_error(e), e)

  def test_dumpable_error(self):
    try:
      raise HttpError('not found', 404)
    except HttpError as e:
      result = errors.dumpable_error(errors.as_error(e))

    self.assertEqual(result['type'], 'HttpError')
    self.assertEqual(result['tag'], 'HttpError')
    self.assertEqual(result['message'], 'not found')
    self.assertEqual(result['args'], ['not found'])
    self.assertEqual(result['status'], 404)
    self.assertIsInstance(result['stack'], list)
    self.assertEqual(result['stack'][0], 'Traceback (most recent call last):')
    self.assertTrue(result['stack'][-1].endswith('HttpError: not found'))

  def test_chained_error(self):
    try:
      _raise_chained()
    except ValueError as e:
      result = errors.dumpable_error(errors.as_error(e))
    self.assertEqual(result['tag'], 'ValueError.KeyError')
    self.assertIn('ValueError: bad value', result['stack'])

  def test_cyclic_cause(self):
    a = ValueError('a')
    b = KeyError('b')
    a.__cause__ = b
    b.__cause__ = a
    self.assertEqual(errors.error_tag(a), 'ValueError.KeyError')
    result = errors.dumpable_error(errors.as_error(a))
    self.assertEqual(result['tag'], 'ValueError.KeyError')
    self.assertEqual(result['message'], 'a')

  def test_unprintable_error(self):
    result = errors.dumpable_error(errors.as_error(_UnprintableError('x')))
    self.assertEqual(result['type'], '_UnprintableError')
    self.assertEqual(
        result['message'], '<unprintable _UnprintableError object>'
    )
    self.assertEqual(result['args'], ['x'])

  def test_error_without_traceback(self):
    result = errors.dumpable_error(errors.as_error(RuntimeError('x')))
    self.assertEqual(result['stack'], ['RuntimeError: x'])


if __name__ == '__main__':
  unittest.main()
