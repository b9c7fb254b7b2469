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

"""Decides which collapsible regions to abbreviate.

Regions are visited deepest first. A region is abbreviated when one of its
strict ancestors does not fit on one line, and that ancestor is flagged as
overflowing so the stylesheet can treat it specially.

The pass is single and non-reactive: the oracle is polled once per
(region, ancestor) pair and abbreviations made earlier in the pass are not
fed back into later decisions. Re-measuring until a fixed point would change
which regions end up abbreviated.
"""

from __future__ import annotations

import dataclasses
import logging

import bs4

from parseviz.core import dom_util
from parseviz.core import markup
from parseviz.layout import measurement
from parseviz.layout import region_tree

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class AbbreviationResult:
  """What one decision pass marked.

  Attributes:
    abbreviated: Indices of the regions whose wrappers were abbreviated, in
      the order they were visited.
    overflowing: Indices of the ancestors flagged as overflowing, each listed
      once, in the order they were first flagged.
  """

  abbreviated: list[int] = dataclasses.field(default_factory=list)
  overflowing: list[int] = dataclasses.field(default_factory=list)


def _first_overflowing_ancestor(
    tree: region_tree.RegionTree,
    region: region_tree.Region,
    fits: measurement.FitOracle,
) -> region_tree.Region | None:
  for ancestor in tree.ancestors(region):
    if not fits(ancestor.element):
      return ancestor
  return None


def decide(
    tree: region_tree.RegionTree,
    fits: measurement.FitOracle | None,
) -> AbbreviationResult:
  """Abbreviates the regions needed for their ancestors to fit on one line.

  Args:
    tree: Regions to consider, as built by `region_tree.build`.
    fits: The one-line fit oracle. If None, nothing is marked.

  Returns:
    The regions that were abbreviated and the ancestors that overflowed.
  """
  result = AbbreviationResult()
  if fits is None or not tree:
    return result

  for region in reversed(tree.by_depth()):
    ancestor = _first_overflowing_ancestor(tree, region, fits)
    if ancestor is None:
      continue
    dom_util.add_class(tree.wrapper_of(region), markup.ABBREVIATED_CLASS)
    result.abbreviated.append(region.index)
    if not dom_util.has_class(ancestor.element, markup.OVERFLOWS_CLASS):
      dom_util.add_class(ancestor.element, markup.OVERFLOWS_CLASS)
      result.overflowing.append(ancestor.index)

  logger.debug(
      "Abbreviated %d of %d regions under %d overflowing ancestors.",
      len(result.abbreviated),
      len(tree),
      len(result.overflowing),
  )
  return result


def abbreviate(
    container: bs4.Tag | None,
    fits: measurement.FitOracle | None,
) -> AbbreviationResult:
  """Builds the region tree of ``container`` and runs one decision pass.

  Without an oracle the document is left untouched, wrappers included.

  Args:
    container: Element holding the collapsible regions.
    fits: The one-line fit oracle.

  Returns:
    The result of the decision pass.
  """
  if fits is None:
    return AbbreviationResult()
  return decide(region_tree.build(container), fits)
