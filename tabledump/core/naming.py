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
"""Hierarchical identifiers for rendered nodes.

Each rendered container is addressed by the client script through an
identifier composed of its ancestors' keys, e.g. `tdump-0-users-3-address`.
Sibling keys are unique within their container, so composing the full
ancestor chain keeps identifiers unique within a fragment. Keys are
stringified with `display_str` and case-folded, not escaped.
"""

from typing import Any

from tabledump.core.utils import text

# Prefix for CSS classes and root identifiers.
CSS_PREFIX = 'tdump'

CONTENT_SUFFIX = 'content'
ARROW_DOWN_SUFFIX = 'arrow-down'
ARROW_RIGHT_SUFFIX = 'arrow-right'


def child_id(parent_id: str, key: Any) -> str:
  """Returns the identifier of a child node.

  Keys go through `display_str`, so a key whose `__str__` raises yields an
  `<unprintable TYPE object>` fragment instead of an error.
  """
  return f'{parent_id}-{text.display_str(key, escape=False)}'.lower()


def root_id(index: int, prefix: str = CSS_PREFIX) -> str:
  """Returns the identifier of the i-th top-level value of a fragment."""
  return child_id(prefix, index)


def suffixed(node_id: str, suffix: str) -> str:
  """Returns the id of an element associated with a node."""
  return f'{node_id}-{suffix}'
