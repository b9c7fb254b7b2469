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

"""The one-line fit oracle.

Whether an element fits on one line depends on fonts, container width and
the layout of its siblings, so it cannot be derived from the markup. The
layout passes therefore only ever ask a `LayoutEngine` for heights, and
reduce those to a single boolean with `fits_on_one_line`.
"""

from __future__ import annotations

import abc
import dataclasses
import functools
import json
import math
import os
from typing import Any, Callable, Mapping

import bs4

from parseviz.core import markup
from parseviz.core import settings

FitOracle = Callable[[bs4.Tag], bool]


class LayoutEngine(abc.ABC):
  """Source of live layout metrics for rendered elements."""

  @abc.abstractmethod
  def offset_height(self, el: bs4.Tag) -> float:
    """Returns the rendered height of ``el``."""
    raise NotImplementedError()

  @abc.abstractmethod
  def computed_line_height(self, el: bs4.Tag) -> float | None:
    """Returns the computed line height, or None or NaN if it is not a length.

    A computed value such as ``normal`` has no numeric reading, in which case
    callers fall back to `probe_height`.
    """
    raise NotImplementedError()

  @abc.abstractmethod
  def probe_height(self, el: bs4.Tag, line_count: int) -> float:
    """Returns the height of a clone of ``el`` holding ``line_count`` breaks."""
    raise NotImplementedError()


def calculate_line_height(el: bs4.Tag, engine: LayoutEngine) -> float:
  """Returns the height of one line of text in ``el``.

  The result is cached on the element in ``data-line-height``. If the
  computed line height cannot be read, it is synthesized from the difference
  between a two-line and a one-line probe.

  Args:
    el: Element to measure.
    engine: Layout engine to query.

  Returns:
    The line height, which may be zero for degenerate layouts.
  """
  cached = el.get(markup.LINE_HEIGHT_ATTRIBUTE)
  if cached is not None:
    return float(cached)

  computed = engine.computed_line_height(el)
  if computed is not None and not math.isnan(computed):
    line_height = float(int(computed))
  else:
    line_height = float(
        engine.probe_height(el, 2) - engine.probe_height(el, 1)
    )

  el[markup.LINE_HEIGHT_ATTRIBUTE] = f"{line_height:g}"
  return line_height


def fits_on_one_line(el: bs4.Tag, engine: LayoutEngine) -> bool:
  """Whether ``el`` is no taller than `settings.fit_tolerance` lines."""
  height = engine.offset_height(el)
  line_height = calculate_line_height(el, engine) or 1
  return not height / line_height > settings.fit_tolerance.get()


def fit_oracle(engine: LayoutEngine | None) -> FitOracle | None:
  """Binds `fits_on_one_line` to an engine; no engine means no oracle."""
  if engine is None:
    return None
  return functools.partial(fits_on_one_line, engine=engine)


################################################################################
# Recorded layouts
################################################################################


@dataclasses.dataclass(frozen=True)
class LayoutRecord:
  """Metrics recorded for one element during a live layout pass.

  Attributes:
    height: Rendered height of the element.
    line_height: Computed line height, or None if it was not a length.
    probe_heights: Heights of the one-line and two-line probes, used when
      ``line_height`` is None.
  """

  height: float
  line_height: float | None = None
  probe_heights: tuple[float, float] | None = None

  @classmethod
  def from_json(cls, data: Mapping[str, Any]) -> LayoutRecord:
    probes = data.get("probe_heights")
    return cls(
        height=float(data["height"]),
        line_height=(
            None if data.get("line_height") is None
            else float(data["line_height"])
        ),
        probe_heights=(
            None if probes is None else (float(probes[0]), float(probes[1]))
        ),
    )


def layout_key(el: bs4.Tag) -> str | None:
  """Returns the key identifying ``el`` in a recorded layout."""
  return el.get("id") or el.get("data-layout-key")


class RecordedLayout(LayoutEngine):
  """Replays metrics captured from a live layout of the same document.

  Elements are matched to records by their ``id`` attribute, or by
  ``data-layout-key`` for elements without one.
  """

  def __init__(self, records: Mapping[str, LayoutRecord]):
    self._records = dict(records)

  @classmethod
  def from_json(cls, data: Mapping[str, Mapping[str, Any]]) -> RecordedLayout:
    return cls({
        key: LayoutRecord.from_json(value) for key, value in data.items()
    })

  @classmethod
  def load(cls, path: str | os.PathLike[str]) -> RecordedLayout:
    with open(path, "r", encoding="utf-8") as f:
      return cls.from_json(json.load(f))

  def record_for(self, el: bs4.Tag) -> LayoutRecord:
    key = layout_key(el)
    if key is None or key not in self._records:
      raise KeyError(
          f"No layout was recorded for <{el.name}> with key {key!r}."
      )
    return self._records[key]

  def offset_height(self, el: bs4.Tag) -> float:
    return self.record_for(el).height

  def computed_line_height(self, el: bs4.Tag) -> float | None:
    return self.record_for(el).line_height

  def probe_height(self, el: bs4.Tag, line_count: int) -> float:
    record = self.record_for(el)
    if record.probe_heights is None:
      raise ValueError(
          f"No line metrics were recorded for {layout_key(el)!r}: it needs"
          " either a line height or probe heights."
      )
    if line_count not in (1, 2):
      raise ValueError(
          f"Only one- and two-line probes are recorded, got {line_count}."
      )
    return record.probe_heights[line_count - 1]
