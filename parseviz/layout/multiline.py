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

"""Flags long-form alternations that cannot be laid out on one line."""

from __future__ import annotations

import bs4

from parseviz.core import dom_util
from parseviz.core import markup
from parseviz.layout import measurement


def _last_alternative(alternation: bs4.Tag) -> bs4.Tag | None:
  alternatives = alternation.find_all(recursive=False)
  return alternatives[-1] if alternatives else None


def mark_multiline_ors(
    source: bs4.Tag | None,
    fits: measurement.FitOracle | None,
) -> list[bs4.Tag]:
  """Marks each alternation under ``source`` that needs several lines.

  Alternations ending in the empty variant (the ``x?`` and ``x*`` forms) are
  skipped. Others are floated while measured so that they shrink to their
  own content, then restored.

  Args:
    source: Root to search for alternations.
    fits: The one-line fit oracle. If None, nothing is marked.

  Returns:
    The alternations that were marked multiline.
  """
  if fits is None:
    return []
  marked = []
  for alternation in dom_util.select_all(markup.ALTERNATION_SELECTOR, source):
    if dom_util.has_class(
        _last_alternative(alternation), markup.EMPTY_VARIANT_CLASS
    ):
      continue
    dom_util.set_style_property(alternation, "float", "left")
    try:
      if not fits(alternation):
        dom_util.add_class(alternation, markup.MULTILINE_CLASS)
        marked.append(alternation)
    finally:
      dom_util.set_style_property(alternation, "float", "")
  return marked
