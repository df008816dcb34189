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
"""Adapting exceptions into values that render as tables.

Exceptions carry little enumerable state, so rendering one directly shows
almost nothing. Callers declare that a value is an error by wrapping it with
`as_error`; `dumpable_error` then turns it into a plain dict before rendering::

  try:
    handle(request)
  except Exception as e:  # pylint: disable=broad-exception-caught
    return tabledump.object_to_html(tabledump.as_error(e), title='Error')
"""

import dataclasses
import traceback
from typing import Any, Dict, List

from tabledump.core.classifier import property_names
from tabledump.core.utils import text


@dataclasses.dataclass(frozen=True)
class ErrorValue:
  """A value explicitly tagged as an error.

  Attributes:
    error: The exception to render.
  """
  error: BaseException


def as_error(error: BaseException) -> ErrorValue:
  """Tags an exception for rendering as an error."""
  if not isinstance(error, BaseException):
    raise TypeError(f'{error!r} is not an exception.')
  return ErrorValue(error)


def error_tag(error: BaseException) -> str:
  """Returns the path of the error types in the exception chain.

  The chain follows `__cause__` and stops at the first exception seen before,
  so cyclic chains terminate.
  """
  error_types = []
  seen = set()
  while error is not None and id(error) not in seen:
    seen.add(id(error))
    error_types.append(error.__class__.__name__)
    error = error.__cause__
  return '.'.join(error_types)


def stack_lines(error: BaseException) -> List[str]:
  """Returns the formatted traceback of an error as a list of lines."""
  return ''.join(
      traceback.format_exception(type(error), error, error.__traceback__)
  ).splitlines()


def dumpable_error(value: Any) -> Any:
  """Converts an `ErrorValue` into a dict; returns other values unchanged.

  Args:
    value: Any value.

  Returns:
    For an `ErrorValue`, a dict with the error's `type`, `tag`, `message`,
    `args`, own attributes and `stack` (a list of traceback lines). Otherwise
    `value` itself.
  """
  if not isinstance(value, ErrorValue):
    return value
  error = value.error
  result: Dict[str, Any] = {
      'type': type(error).__name__,
      'tag': error_tag(error),
      'message': text.display_str(error, escape=False),
      'args': list(error.args),
  }
  for name in property_names(error):
    result.setdefault(name, getattr(error, name))
  result['stack'] = stack_lines(error)
  return result
