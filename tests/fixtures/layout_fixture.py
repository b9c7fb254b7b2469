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

"""Documents and layout doubles shared by the layout and slideshow tests."""

from __future__ import annotations

from typing import Mapping

import bs4
from parseviz.layout import measurement


def parse(source: str) -> bs4.BeautifulSoup:
  return bs4.BeautifulSoup(source, "html.parser")


class ScriptedOracle:
  """A fit oracle answering from a table keyed by element id.

  Elements missing from the table fit. Every query is logged, so tests can
  check how often and in which order the oracle was polled.
  """

  def __init__(self, fits_by_id: Mapping[str, bool]):
    self.fits_by_id = dict(fits_by_id)
    self.calls: list[str] = []

  def __call__(self, el: bs4.Tag) -> bool:
    key = el.get("id")
    self.calls.append(key)
    return self.fits_by_id.get(key, True)


class CountingLayout(measurement.RecordedLayout):
  """A recorded layout that counts line-height lookups."""

  def __init__(self, records):
    super().__init__(records)
    self.line_height_lookups = 0
    self.probe_lookups = 0

  def computed_line_height(self, el):
    self.line_height_lookups += 1
    return super().computed_line_height(el)

  def probe_height(self, el, line_count):
    self.probe_lookups += 1
    return super().probe_height(el, line_count)


def uniform_layout(
    heights: Mapping[str, float], line_height: float = 20.0
) -> CountingLayout:
  """Builds a layout where every element has the same line height."""
  return CountingLayout({
      key: measurement.LayoutRecord(height=height, line_height=line_height)
      for key, height in heights.items()
  })


NESTED_REGIONS = """
<div id="root">
  <span class="abv" id="a">a
    <b><i><span class="abv" id="b">b
      <span class="abv" id="c">c</span>
    </span></i></b>
    <span class="abv" id="d">d</span>
  </span>
  <span class="abv" id="e">e</span>
</div>
"""
"""Regions a(b(c), d) and e, with plain markup between a and b."""
