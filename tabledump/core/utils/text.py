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
"""Display strings for scalar values."""

import datetime
import html as html_lib
from typing import Any, Optional, Union

from tabledump.core import logging


Timestamp = Union[int, float, datetime.datetime, datetime.date, None]


def timestamp_to_str(ts: Timestamp) -> Optional[str]:
  """Returns a timestamp in the local time format.

  Args:
    ts: A POSIX timestamp in seconds, a `datetime.date`/`datetime.datetime`
      object or None.

  Returns:
    None if `ts` is None, otherwise the locale's date/time representation of
    `ts`, e.g. 'Tue Mar  5 14:03:00 2024'.
  """
  if ts is None:
    return None
  if isinstance(ts, datetime.datetime):
    return ts.strftime('%c')
  if isinstance(ts, datetime.date):
    return ts.strftime('%x')
  return datetime.datetime.fromtimestamp(ts).strftime('%c')


def display_str(value: Any, escape: bool = True) -> str:
  """Returns the display string of a scalar value.

  Byte strings are shown with their literal form so non-printable content
  stays visible. A value whose `__str__` raises is shown as
  `<unprintable TYPE object>` instead of propagating the error.

  Args:
    value: The value to display.
    escape: If True, the returned string is HTML-escaped.

  Returns:
    The display string.
  """
  try:
    if isinstance(value, (bytes, bytearray)):
      text = repr(value)
    elif isinstance(value, (datetime.date, datetime.datetime)):
      text = timestamp_to_str(value)
    else:
      text = str(value)
  except Exception as e:  # pylint: disable=broad-exception-caught
    logging.warning(
        'Cannot convert %s object to string: %s', type(value).__name__, e
    )
    text = f'<unprintable {type(value).__name__} object>'
  return html_lib.escape(text) if escape else text
