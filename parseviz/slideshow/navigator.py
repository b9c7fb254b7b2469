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

"""Slideshow navigation over the entries of a parse log."""

from __future__ import annotations

import enum
import logging
from typing import Callable, Sequence

import bs4

from parseviz.core import dom_util
from parseviz.core import markup

logger = logging.getLogger(__name__)


class NavigationCommand(enum.Enum):
  """The slideshow controls, valued by their button labels."""

  FIRST = "|⇇"
  BACK_10 = "⇇"
  BACK_1 = "←"
  FORWARD_1 = "→"
  FORWARD_10 = "⇉"
  LAST = "⇉|"

  @property
  def label(self) -> str:
    return self.value


_STEPS = {
    NavigationCommand.BACK_10: -10,
    NavigationCommand.BACK_1: -1,
    NavigationCommand.FORWARD_1: +1,
    NavigationCommand.FORWARD_10: +10,
}


class SlideshowNavigator:
  """Shows one log entry at a time.

  The first time an entry becomes current, ``on_first_display`` is called
  with it. This defers layout work (abbreviation) until an entry is actually
  viewed, and runs it at most once per entry.

  Attributes:
    entries: The log entries, fixed at construction.
    current_index: Index of the visible entry, or -1 before the first
      navigation.
  """

  def __init__(
      self,
      entries: Sequence[bs4.Tag],
      on_first_display: Callable[[bs4.Tag], object] | None = None,
      counter: bs4.Tag | None = None,
  ):
    self.entries = tuple(entries)
    self.current_index = -1
    self._on_first_display = on_first_display
    self._counter = counter
    self._processed: set[int] = set()

  def __len__(self) -> int:
    return len(self.entries)

  @property
  def processed(self) -> frozenset[int]:
    """Indices of the entries that have already been displayed."""
    return frozenset(self._processed)

  @property
  def current_entry(self) -> bs4.Tag | None:
    if 0 <= self.current_index < len(self.entries):
      return self.entries[self.current_index]
    return None

  @property
  def counter_text(self) -> str:
    return f"{self.current_index + 1}/{len(self.entries)}"

  def _clamp(self, index: int) -> int:
    return min(max(0, index), len(self.entries) - 1)

  def set_current(self, index: int) -> None:
    """Makes the entry at ``index`` current, clamped into range."""
    dom_util.remove_class(self.current_entry, markup.CURRENT_CLASS)
    self.current_index = self._clamp(index)
    dom_util.set_text(self._counter, self.counter_text)

    entry = self.current_entry
    if entry is None:
      return
    dom_util.add_class(entry, markup.CURRENT_CLASS)
    if self.current_index not in self._processed:
      self._processed.add(self.current_index)
      if self._on_first_display is not None:
        logger.debug("First display of entry %d.", self.current_index)
        self._on_first_display(entry)

  def adjust_current(self, delta: int) -> None:
    """Moves ``delta`` entries, saturating at either end."""
    self.set_current(self.current_index + delta)

  def run(self, command: NavigationCommand) -> None:
    if command is NavigationCommand.FIRST:
      self.set_current(0)
    elif command is NavigationCommand.LAST:
      self.set_current(len(self.entries) - 1)
    else:
      self.adjust_current(_STEPS[command])
