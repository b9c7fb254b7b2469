# Copyright 2024 The Parseviz Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Scoped settings for the layout passes.

Settings are read anywhere with `get`, but can only be changed for the
duration of a ``with`` block::

  with settings.fit_tolerance.set_scoped(2.0):
    abbreviation.abbreviate(grammar, fits)

This keeps a page-setup run from leaking configuration into the next one.
"""

from __future__ import annotations

import contextlib
import dataclasses
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(init=False)
class Setting(Generic[T]):
  """A global setting which can be overridden within a delimited scope.

  Attributes:
    __module__: The module where this setting is defined.
    __qualname__: The name of the setting within its module.
    _raw_value: The current value. Use `get` and `set_scoped` instead.
  """

  __module__: str | None
  __qualname__: str | None
  _raw_value: T

  def __init__(
      self,
      initial_value: T,
      module: str | None = None,
      qualname: str | None = None,
  ):
    self.__module__ = module
    self.__qualname__ = qualname
    self._raw_value = initial_value

  def get(self) -> T:
    """Retrieves the current value."""
    return self._raw_value

  @contextlib.contextmanager
  def set_scoped(self, new_value: T) -> Iterator[None]:
    """Overrides the setting until the ``with`` block exits.

    Args:
      new_value: The value to use inside the block.

    Yields:
      Nothing; the override is active while the block runs.
    """
    old_value = self._raw_value
    self._raw_value = new_value
    try:
      yield
    finally:
      assert self._raw_value is new_value
      self._raw_value = old_value


fit_tolerance: Setting[float] = Setting(
    1.5, module=__name__, qualname="fit_tolerance"
)
"""Height, in lines, above which an element no longer fits on one line."""

placeholder_text: Setting[str] = Setting(
    "…", module=__name__, qualname="placeholder_text"
)
"""Text shown in place of an abbreviated region."""
