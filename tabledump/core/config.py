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
"""Render configuration: explicit per-call settings and process-wide defaults.

Renderers never read global state while traversing a value. The outermost
entry point takes a `RenderConfig` snapshot (either given by the caller or
built by `default_config()`) and threads it through every call.

Process-wide defaults are plain module globals with getters and setters.
`config_scope` overrides them for the current thread only, so concurrent
renders in different threads do not race on each other's settings::

  with tabledump.config_scope(depth_limit=5):
    html = tabledump.show_object('request', request)
"""

import contextlib
import dataclasses
import threading
from typing import Any, Iterator, Optional

from tabledump.core import logging


DEFAULT_DEPTH_LIMIT = 2

_DEPTH_LIMIT = DEFAULT_DEPTH_LIMIT
_SUPPRESS_FUNCTIONS = True

# Holds the `config_scope` override of the current thread, if any.
_thread_local_state = threading.local()


def _is_valid_depth_limit(limit: Any) -> bool:
  return isinstance(limit, int) and not isinstance(limit, bool) and limit >= 1


@dataclasses.dataclass(frozen=True)
class RenderConfig:
  """Settings for rendering a value.

  Attributes:
    depth_limit: Nesting level at which containers are no longer expanded.
      Top-level values are at depth 0, so a non-empty container at depth
      `depth_limit` or deeper is shown as `{...}` or `[...]`.
    suppress_functions: If True, functions are shown as
      'Source code suppressed' instead of their source code.
  """
  depth_limit: int = DEFAULT_DEPTH_LIMIT
  suppress_functions: bool = True

  def __post_init__(self):
    if not _is_valid_depth_limit(self.depth_limit):
      raise ValueError(
          f'`depth_limit` must be an integer >= 1. '
          f'Encountered: {self.depth_limit!r}.'
      )

  def override(
      self,
      depth_limit: Any = None,
      suppress_functions: Any = None,
  ) -> 'RenderConfig':
    """Returns a copy with valid new values applied; invalid ones are ignored.

    Args:
      depth_limit: New depth limit. Ignored unless it is an integer >= 1.
      suppress_functions: New function suppression flag. Ignored unless it is
        a bool.

    Returns:
      A new RenderConfig, or self if nothing changes.
    """
    changes = {}
    if depth_limit is not None:
      if _is_valid_depth_limit(depth_limit):
        changes['depth_limit'] = depth_limit
      else:
        logging.debug('Ignoring invalid depth limit: %r', depth_limit)
    if suppress_functions is not None:
      if isinstance(suppress_functions, bool):
        changes['suppress_functions'] = suppress_functions
      else:
        logging.debug(
            'Ignoring invalid function suppression flag: %r',
            suppress_functions
        )
    if not changes:
      return self
    return dataclasses.replace(self, **changes)


def get_depth_limit() -> int:
  """Returns the process-wide default depth limit."""
  return _DEPTH_LIMIT


def set_depth_limit(limit: Any) -> None:
  """Sets the process-wide default depth limit.

  Invalid values (non-integers, or integers less than 1) are ignored and the
  previous limit is retained.

  Args:
    limit: The new depth limit.
  """
  global _DEPTH_LIMIT
  if _is_valid_depth_limit(limit):
    _DEPTH_LIMIT = limit
  else:
    logging.debug(
        'Ignoring invalid depth limit %r, keeping %d.', limit, _DEPTH_LIMIT
    )


def get_suppress_functions() -> bool:
  """Returns True if functions are rendered without their source code."""
  return _SUPPRESS_FUNCTIONS


def set_suppress_functions(suppress: Any = True) -> None:
  """Sets whether functions are rendered without their source code.

  Non-bool values are ignored and the previous setting is retained.

  Args:
    suppress: The new flag.
  """
  global _SUPPRESS_FUNCTIONS
  if isinstance(suppress, bool):
    _SUPPRESS_FUNCTIONS = suppress
  else:
    logging.debug('Ignoring invalid function suppression flag: %r', suppress)


@contextlib.contextmanager
def config_scope(
    depth_limit: Optional[int] = None,
    suppress_functions: Optional[bool] = None,
) -> Iterator[RenderConfig]:
  """Context manager that overrides the defaults for the current thread.

  Args:
    depth_limit: Depth limit within the scope. None keeps the current value.
    suppress_functions: Function suppression within the scope. None keeps the
      current value.

  Yields:
    The effective default config within the scope.
  """
  config = default_config().override(
      depth_limit=depth_limit, suppress_functions=suppress_functions
  )
  previous = getattr(_thread_local_state, 'config', None)
  _thread_local_state.config = config
  try:
    yield config
  finally:
    _thread_local_state.config = previous


def default_config() -> RenderConfig:
  """Returns a snapshot of the default config for the current thread."""
  config = getattr(_thread_local_state, 'config', None)
  if config is not None:
    return config
  return RenderConfig(
      depth_limit=_DEPTH_LIMIT, suppress_functions=_SUPPRESS_FUNCTIONS
  )
