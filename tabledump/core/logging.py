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
"""Logging for tabledump.

Rendering never raises on bad input. Degraded paths are reported here
instead: values that cannot be stringified or enumerated, and settings that
are ignored. Messages go to the `tabledump` logger unless an application
installs its own with `set_logger`::

  tabledump.logging.set_logger(logging.getLogger('myapp.debug_pages'))

Records are attributed to the tabledump function that logged them, not to
the helpers of this module.
"""

import logging
from typing import IO, Optional


_DEFAULT_LOGGER = logging.getLogger('tabledump')

# Frames between the caller of `debug` (etc.) and `Logger.log`.
_STACKLEVEL = 3


def set_logger(logger: logging.Logger) -> None:
  """Routes tabledump messages to `logger`."""
  global _DEFAULT_LOGGER
  _DEFAULT_LOGGER = logger


def get_logger() -> logging.Logger:
  """Returns the logger tabledump messages go to."""
  return _DEFAULT_LOGGER


def use_stream(
    stream: IO[str],
    level: int = logging.INFO,
    name: str = 'tabledump',
    fmt: Optional[str] = '%(asctime)s %(levelname)s %(name)s: %(message)s',
) -> logging.Logger:
  """Sends tabledump messages to a text stream.

  The named logger is reset to a single handler writing to `stream`, stops
  propagating to its parents and becomes the current logger.

  Args:
    stream: A text stream, e.g. `sys.stderr` or `io.StringIO()`.
    level: Minimum level of the messages to write.
    name: Name of the logger.
    fmt: Format string for the records. If None, the default format of
      `logging.Formatter` is used.

  Returns:
    The configured logger.
  """
  logger = logging.getLogger(name)
  logger.setLevel(level)
  logger.propagate = False
  for handler in list(logger.handlers):
    logger.removeHandler(handler)
  handler = logging.StreamHandler(stream)
  handler.setFormatter(logging.Formatter(fmt))
  logger.addHandler(handler)
  set_logger(logger)
  return logger


def _log(level: int, msg: str, args, kwargs) -> None:
  kwargs.setdefault('stacklevel', _STACKLEVEL)
  _DEFAULT_LOGGER.log(level, msg, *args, **kwargs)


def debug(msg: str, *args, **kwargs) -> None:
  """Logs a debug message, e.g. an ignored setting."""
  _log(logging.DEBUG, msg, args, kwargs)


def info(msg: str, *args, **kwargs) -> None:
  _log(logging.INFO, msg, args, kwargs)


def warning(msg: str, *args, **kwargs) -> None:
  """Logs a warning, e.g. a value rendered in degraded form."""
  _log(logging.WARNING, msg, args, kwargs)


def error(msg: str, *args, **kwargs) -> None:
  _log(logging.ERROR, msg, args, kwargs)


def critical(msg: str, *args, **kwargs) -> None:
  _log(logging.CRITICAL, msg, args, kwargs)
