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
"""Classification of runtime values into a closed set of kinds.

Every value reaching the table renderer is first mapped to a `ValueKind`.
The mapping is nominal: it looks at the type of a value (`isinstance` checks
against concrete types and registered ABCs) rather than at the attributes a
value happens to have, so the same value always gets the same kind.

  +-----------------------------------------+-------------+
  | Python value                            | Kind        |
  +=========================================+=============+
  | None                                    | Null        |
  | MISSING_VALUE, dataclasses.MISSING      | Undefined   |
  | bool                                    | Boolean     |
  | int (signed 64-bit range), Number       | Number      |
  | int (outside signed 64-bit range)       | BigInt      |
  | str, bytes, bytearray                   | String      |
  | enum.Enum members                       | Symbol      |
  | routines, classes, functools.partial    | Function    |
  | list, tuple, deque, range, Sequence     | Array       |
  | set, frozenset, collections.abc.Set     | Set         |
  | dict with str keys                      | Object      |
  | other Mapping (OrderedDict, os.environ) | Map         |
  | modules, objects with attributes        | Object      |
  | anything else                           | Other       |
  +-----------------------------------------+-------------+
"""

import collections
import collections.abc
import dataclasses
import enum
import functools
import inspect
import numbers
import types
from typing import Any, Iterable, Optional, Tuple

from tabledump.core import logging
from tabledump.core.utils import missing


_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

_UNDEFINED_VALUES = (dataclasses.MISSING, inspect.Parameter.empty)


class ValueKind(enum.Enum):
  """Kind of a runtime value."""

  NULL = 'Null'
  UNDEFINED = 'Undefined'
  BOOLEAN = 'Boolean'
  NUMBER = 'Number'
  BIGINT = 'BigInt'
  STRING = 'String'
  SYMBOL = 'Symbol'
  FUNCTION = 'Function'
  ARRAY = 'Array'
  SET = 'Set'
  MAP = 'Map'
  OBJECT = 'Object'
  OTHER = 'Other'

  @property
  def expandable(self) -> bool:
    """Returns True if values of this kind have enumerable children."""
    return self in _EXPANDABLE_KINDS

  @property
  def key_only(self) -> bool:
    """Returns True if children of this kind are shown by key only."""
    return self is ValueKind.SET

  @property
  def column_heading(self) -> str:
    """Returns the heading of the key column."""
    if self is ValueKind.ARRAY:
      return 'Index'
    if self in (ValueKind.MAP, ValueKind.SET):
      return 'Key'
    return 'Property'

  @property
  def empty_placeholder(self) -> str:
    return '[]' if self is ValueKind.ARRAY else '{}'

  @property
  def truncated_placeholder(self) -> str:
    return '[...]' if self is ValueKind.ARRAY else '{...}'


_EXPANDABLE_KINDS = frozenset([
    ValueKind.ARRAY, ValueKind.SET, ValueKind.MAP, ValueKind.OBJECT
])


def _is_plain_object(value: dict) -> bool:  # pylint: disable=g-bare-generic
  return not isinstance(value, collections.OrderedDict) and all(
      isinstance(k, str) for k in value.keys()
  )


def _classify(value: Any) -> ValueKind:
  """Classifies a value. May raise if the value misbehaves on inspection."""
  if value is None:
    return ValueKind.NULL
  if isinstance(value, missing.MissingValue) or any(
      value is v for v in _UNDEFINED_VALUES):
    return ValueKind.UNDEFINED
  if isinstance(value, bool):
    return ValueKind.BOOLEAN
  if isinstance(value, int) and not isinstance(value, enum.Enum):
    if _INT64_MIN <= value <= _INT64_MAX:
      return ValueKind.NUMBER
    return ValueKind.BIGINT
  if isinstance(value, enum.Enum):
    return ValueKind.SYMBOL
  if isinstance(value, numbers.Number):
    return ValueKind.NUMBER
  if isinstance(value, (str, bytes, bytearray)):
    return ValueKind.STRING
  if (inspect.isroutine(value)
      or inspect.isclass(value)
      or isinstance(value, functools.partial)):
    return ValueKind.FUNCTION
  if isinstance(value, dict) and _is_plain_object(value):
    return ValueKind.OBJECT
  if isinstance(value, collections.abc.Mapping):
    return ValueKind.MAP
  if isinstance(value, collections.abc.Set):
    return ValueKind.SET
  if isinstance(value, collections.abc.Sequence):
    return ValueKind.ARRAY
  if isinstance(value, BaseException):
    return ValueKind.OTHER
  if isinstance(value, types.ModuleType):
    return ValueKind.OBJECT
  if hasattr(value, '__dict__') or _slot_names(type(value)):
    return ValueKind.OBJECT
  return ValueKind.OTHER


def classify(value: Any) -> ValueKind:
  """Returns the kind of a value.

  Args:
    value: Any value.

  Returns:
    The kind of the value. `ValueKind.OTHER` is returned when the value cannot
    be classified, e.g. a mapping whose key iteration raises.
  """
  try:
    return _classify(value)
  except Exception as e:  # pylint: disable=broad-exception-caught
    logging.debug(
        'Cannot classify %s object, treating it as Other: %s',
        type(value).__name__, e
    )
    return ValueKind.OTHER


def type_of(value: Any) -> str:
  """Returns the kind name of a value, e.g. 'Number'."""
  return classify(value).value


def is_expandable(kind: ValueKind) -> bool:
  """Returns True if values of the kind have countable children."""
  return kind.expandable


def is_key_only(kind: ValueKind) -> bool:
  """Returns True if the kind is a key-only container (sets)."""
  return kind.key_only


def column_heading(kind: ValueKind) -> str:
  """Returns the heading for the first column of a table of the kind."""
  return kind.column_heading


@functools.lru_cache(maxsize=None)
def _slot_names(cls: type) -> Tuple[str, ...]:
  names = []
  for base in cls.__mro__:
    slots = base.__dict__.get('__slots__', ())
    if isinstance(slots, str):
      slots = (slots,)
    for name in slots:
      if name not in ('__dict__', '__weakref__') and name not in names:
        names.append(name)
  return tuple(names)


def _is_dunder(name: str) -> bool:
  return name.startswith('__') and name.endswith('__')


def property_names(value: Any) -> Tuple[str, ...]:
  """Returns the enumerable property names of an object, sorted."""
  if isinstance(value, dict):
    return tuple(sorted(value.keys()))
  if isinstance(value, types.ModuleType):
    return tuple(sorted(k for k in vars(value) if not k.startswith('_')))
  names = set()
  instance_dict = getattr(value, '__dict__', None)
  if isinstance(instance_dict, dict):
    names.update(
        k for k in instance_dict
        if isinstance(k, str) and not _is_dunder(k)
    )
  for name in _slot_names(type(value)):
    if not _is_dunder(name) and hasattr(value, name):
      names.add(name)
  return tuple(sorted(names))


def _property_value(value: Any, name: str) -> Any:
  if isinstance(value, dict):
    return value[name]
  instance_dict = getattr(value, '__dict__', None)
  if isinstance(instance_dict, dict) and name in instance_dict:
    return instance_dict[name]
  return getattr(value, name, missing.MISSING_VALUE)


def children(
    value: Any, kind: Optional[ValueKind] = None
) -> Tuple[Tuple[Any, Any], ...]:
  """Returns the ordered (key, child) pairs of a value.

  Arrays are enumerated by index, maps and sets in iteration order (set
  elements are keyed by position), and objects by property name in
  lexicographical order. Non-expandable values have no children.

  Args:
    value: Any value.
    kind: The kind of `value`. If None, it will be computed.

  Returns:
    A tuple of (key, child value) pairs.
  """
  kind = kind or classify(value)
  try:
    return tuple(_children(value, kind))
  except Exception as e:  # pylint: disable=broad-exception-caught
    logging.warning(
        'Cannot enumerate children of %s object: %s', type(value).__name__, e
    )
    return ()


def _children(value: Any, kind: ValueKind) -> Iterable[Tuple[Any, Any]]:
  if kind is ValueKind.ARRAY:
    return enumerate(value)
  if kind is ValueKind.MAP:
    return value.items()
  if kind is ValueKind.SET:
    return enumerate(value)
  if kind is ValueKind.OBJECT:
    return ((k, _property_value(value, k)) for k in property_names(value))
  return ()


def size_of(value: Any, kind: Optional[ValueKind] = None) -> int:
  """Returns the number of children of a value.

  Args:
    value: Any value.
    kind: The kind of `value`. If None, it will be computed.

  Returns:
    The length of arrays, maps and sets, the number of enumerable properties
    of objects, and 0 for every other kind. Never raises.
  """
  kind = kind or classify(value)
  try:
    if kind in (ValueKind.ARRAY, ValueKind.MAP, ValueKind.SET) or (
        kind is ValueKind.OBJECT and isinstance(value, dict)):
      return len(value)
    if kind is ValueKind.OBJECT:
      return len(property_names(value))
  except Exception as e:  # pylint: disable=broad-exception-caught
    logging.warning(
        'Cannot count children of %s object: %s', type(value).__name__, e
    )
  return 0
