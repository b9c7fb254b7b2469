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

"""One-time setup of a parse-log slideshow page.

The grammar is abbreviated up front. Log entries are abbreviated lazily, the
first time the navigator shows each of them.
"""

from __future__ import annotations

import dataclasses
import logging

import bs4

from parseviz.core import dom_util
from parseviz.core import markup
from parseviz.core import timing
from parseviz.layout import abbreviation
from parseviz.layout import measurement
from parseviz.layout import multiline
from parseviz.slideshow import navigator as navigator_lib

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class PageSession:
  """State left behind by `initialize`.

  Attributes:
    navigator: Navigator over the parse-log entries.
    grammar_result: What abbreviating the grammar marked.
    multiline_ors: Alternations marked multiline.
    entry_results: Abbreviation results of the entries displayed so far,
      keyed by entry index.
  """

  navigator: navigator_lib.SlideshowNavigator
  grammar_result: abbreviation.AbbreviationResult
  multiline_ors: list[bs4.Tag]
  entry_results: dict[int, abbreviation.AbbreviationResult] = (
      dataclasses.field(default_factory=dict)
  )


def _insert_counter(parse_log: bs4.Tag | None) -> bs4.Tag | None:
  """Inserts the slide counter just before the parse log."""
  if parse_log is None:
    return None
  controls = dom_util.new_element("div", markup.CONTROLS_CLASS)
  counter = dom_util.new_element("tt", markup.COUNTER_CLASS)
  controls.append(counter)
  parse_log.insert_before(controls)
  return counter


def _start_slideshow(
    document: bs4.BeautifulSoup,
    fits: measurement.FitOracle | None,
    entry_results: dict[int, abbreviation.AbbreviationResult],
) -> navigator_lib.SlideshowNavigator:
  parse_log = dom_util.select_one(markup.PARSE_LOG_SELECTOR, document)
  dom_util.remove_class(parse_log, markup.OVERLAP_ALL_CLASS)

  entries = dom_util.select_all(markup.LOG_ENTRY_SELECTOR, document)
  dom_util.add_class(parse_log, markup.SLIDESHOW_CLASS)
  counter = _insert_counter(parse_log)

  index_by_id = {id(entry): i for i, entry in enumerate(entries)}

  def abbreviate_entry(entry: bs4.Tag) -> None:
    entry_results[index_by_id[id(entry)]] = abbreviation.abbreviate(
        entry, fits
    )

  navigator = navigator_lib.SlideshowNavigator(
      entries, on_first_display=abbreviate_entry, counter=counter
  )
  navigator.set_current(0)
  return navigator


def initialize(
    document: bs4.BeautifulSoup,
    fits: measurement.FitOracle | None,
) -> PageSession:
  """Lays out a slideshow page.

  All parse-log entries are kept visible (``overlap-all``) while the grammar
  is measured, so that abbreviating does not trigger a reflow per entry.

  Args:
    document: The page, as written by `page_writer.SlideshowPageWriter`.
    fits: The one-line fit oracle. If None, no layout pass marks anything.

  Returns:
    The page session, holding the navigator.

  Raises:
    RuntimeError: If the page was already initialized.
  """
  parse_log = dom_util.select_one(markup.PARSE_LOG_SELECTOR, document)
  if dom_util.has_class(parse_log, markup.SLIDESHOW_CLASS):
    raise RuntimeError("The page is already a slideshow.")

  with timing.timed("page setup"):
    dom_util.add_class(parse_log, markup.OVERLAP_ALL_CLASS)

    with timing.timed("abbreviate grammar"):
      grammar_result = abbreviation.abbreviate(
          dom_util.select_one(markup.GRAMMAR_SELECTOR, document), fits
      )
    with timing.timed("mark multiline alternations"):
      multiline_ors = multiline.mark_multiline_ors(document, fits)

    entry_results: dict[int, abbreviation.AbbreviationResult] = {}
    with timing.timed("start slideshow"):
      navigator = _start_slideshow(document, fits, entry_results)

  logger.info(
      "Initialized slideshow with %d entries; %d grammar regions abbreviated.",
      len(navigator),
      len(grammar_result.abbreviated),
  )
  return PageSession(
      navigator=navigator,
      grammar_result=grammar_result,
      multiline_ors=multiline_ors,
      entry_results=entry_results,
  )
