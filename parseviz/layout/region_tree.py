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

"""Reconstructs the nesting of collapsible regions inside a container.

Collapsible regions can sit arbitrarily deep inside other markup. The tree
built here only keeps the regions themselves: a region's parent is the
nearest enclosing element that is also a region, regardless of how much
non-collapsible structure lies between them.

Regions live in an arena addressed by index. Parents and children are
stored as indices, so the tree holds no reference cycles.
"""

from __future__ import annotations

import dataclasses
from typing import Iterator, Sequence

import bs4

from parseviz.core import dom_util
from parseviz.core import markup


@dataclasses.dataclass(frozen=True)
class Region:
  """One collapsible region.

  Attributes:
    index: Position of the region in document order.
    element: The rendered region element. Owned by the document.
    parent: Index of the nearest enclosing region, or None for a root.
    children: Indices of the regions whose parent is this one, in document
      order.
    depth: Number of enclosing regions.
  """

  index: int
  element: bs4.Tag
  parent: int | None
  children: tuple[int, ...]
  depth: int


@dataclasses.dataclass(frozen=True)
class RegionTree:
  """The regions of one container, in document order."""

  regions: tuple[Region, ...] = ()

  def __len__(self) -> int:
    return len(self.regions)

  def __iter__(self) -> Iterator[Region]:
    return iter(self.regions)

  def __getitem__(self, index: int) -> Region:
    return self.regions[index]

  def parent_of(self, region: Region) -> Region | None:
    if region.parent is None:
      return None
    return self.regions[region.parent]

  def children_of(self, region: Region) -> list[Region]:
    return [self.regions[i] for i in region.children]

  def ancestors(self, region: Region) -> Iterator[Region]:
    """Yields the strict ancestors of ``region``, nearest first."""
    index = region.parent
    while index is not None:
      ancestor = self.regions[index]
      yield ancestor
      index = ancestor.parent

  def roots(self) -> list[Region]:
    return [r for r in self.regions if r.parent is None]

  def by_depth(self) -> list[Region]:
    """Regions sorted by ascending depth; ties keep document order."""
    return sorted(self.regions, key=lambda r: r.depth)

  def wrapper_of(self, region: Region) -> bs4.Tag:
    return region.element.parent


def _nearest_region_ancestor(
    el: bs4.Tag, container: bs4.Tag, index_by_id: dict[int, int]
) -> int | None:
  for ancestor in el.parents:
    if ancestor is container:
      return None
    index = index_by_id.get(id(ancestor))
    if index is not None:
      return index
  return None


def build(container: bs4.Tag | None) -> RegionTree:
  """Builds the region tree for every collapsible region in ``container``.

  Every region is wrapped (see `dom_util.wrap_with_placeholder`) before any
  parent is resolved. Wrapping is one-shot, so building twice over the same
  container yields an equivalent fresh tree without double-wrapping.

  Args:
    container: Element whose descendant regions to collect. ``None`` is
      treated as an empty container.

  Returns:
    The region tree, in document order.
  """
  elements: Sequence[bs4.Tag] = dom_util.select_all(
      "." + markup.REGION_CLASS, container
  )
  if not elements:
    return RegionTree()

  for el in elements:
    dom_util.wrap_with_placeholder(el)

  index_by_id = {id(el): i for i, el in enumerate(elements)}
  parents = [
      _nearest_region_ancestor(el, container, index_by_id) for el in elements
  ]

  children: list[list[int]] = [[] for _ in elements]
  for i, parent in enumerate(parents):
    if parent is not None:
      children[parent].append(i)

  # An ancestor always precedes its descendants in document order, so one
  # forward pass sees every parent's depth before its children.
  depths: list[int] = []
  for i, parent in enumerate(parents):
    if parent is None:
      depths.append(0)
    else:
      assert parent < i
      depths.append(depths[parent] + 1)

  return RegionTree(
      regions=tuple(
          Region(
              index=i,
              element=el,
              parent=parents[i],
              children=tuple(children[i]),
              depth=depths[i],
          )
          for i, el in enumerate(elements)
      )
  )
