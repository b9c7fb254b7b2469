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

"""Writes a parse-log slideshow page.

The page has two halves: a table with one row per grammar production, and
the parse log, an ``<ul id="parse-log">`` with one ``<li class="entry">`` per
logged parser event. `page_setup.initialize` lays out the resulting document.

Grammar bodies, inputs, stack frames and outputs are passed in as HTML
fragments, already rendered by their owners. Plain text arguments (names and
event kinds) are escaped here.
"""

from __future__ import annotations

import contextlib
import html
import io
from typing import Iterator, Mapping, Sequence

from parseviz.core import markup


def _attrs(**attributes: str) -> str:
  parts = []
  for name, value in attributes.items():
    parts.append(f' {name.rstrip("_")}="{html.escape(value, quote=True)}"')
  return "".join(parts)


class SlideshowPageWriter:
  """Streams a slideshow page to a text stream.

  Call `start` once, then `write_entry` per event, then `finish`.

  Attributes:
    link_to_remote_resources: Whether to link ``viz.css`` and ``viz.js``
      instead of inlining ``stylesheet`` and ``script``.
    stylesheet: Stylesheet text to inline.
    script: Script text to inline. When a script is present, the page calls
      its ``init()`` once the document has loaded.
  """

  def __init__(
      self,
      stream: io.TextIOBase,
      *,
      link_to_remote_resources: bool = False,
      stylesheet: str = "",
      script: str = "",
  ):
    self._stream = stream
    self.link_to_remote_resources = link_to_remote_resources
    self.stylesheet = stylesheet
    self.script = script
    self._started = False
    self._finished = False

  @property
  def has_script(self) -> bool:
    return self.link_to_remote_resources or bool(self.script)

  def _write(self, text: str) -> None:
    self._stream.write(text)

  @contextlib.contextmanager
  def _open(self, tag: str, **attributes: str) -> Iterator[None]:
    self._write(f"<{tag}{_attrs(**attributes)}>")
    try:
      yield
    finally:
      self._write(f"</{tag}>")

  def _check_writable(self) -> None:
    if not self._started:
      raise RuntimeError("start() must be called before writing entries.")
    if self._finished:
      raise RuntimeError("The page has already been finished.")

  def start(
      self,
      productions: Mapping[str, str],
      title: str = "Parser Slideshow",
  ) -> None:
    """Writes the document head and the grammar table.

    Args:
      productions: Grammar body HTML, keyed by production name, in display
        order.
      title: Document title.

    Raises:
      RuntimeError: If the page was already started.
    """
    if self._started:
      raise RuntimeError("The page has already been started.")
    self._started = True

    self._write("<!doctype html>\n<html><head>\n")
    self._write(f"<title>{html.escape(title)}</title>\n")
    if self.link_to_remote_resources:
      self._write('  <link rel="stylesheet" href="viz.css">\n')
      self._write('  <script src="viz.js"></script>\n')
    else:
      if self.stylesheet:
        self._write(f"  <style>\n{self.stylesheet}\n</style>\n")
      if self.script:
        self._write(f"  <script>\n{self.script}\n</script>\n")
    self._write("</head><body>\n")

    self._write('<table><tr valign="top"><td width="50%">')
    grammar_id = markup.GRAMMAR_SELECTOR.lstrip("#")
    with self._open("table", id=grammar_id, class_=grammar_id):
      for name, body_html in productions.items():
        with self._open("tr"):
          with self._open("th", id=f"def:{name}", class_="def"):
            self._write(html.escape(name))
          with self._open("th"):
            self._write("::==")
          with self._open("td"):
            self._write(body_html)
    parse_log_id = markup.PARSE_LOG_SELECTOR.lstrip("#")
    self._write(f'</td>\n<td width="50%"><ul id="{parse_log_id}">\n')

  def write_entry(
      self,
      kind: str,
      *,
      event_html: str = "",
      input_html: str | None = None,
      from_branches: Sequence[str] = (),
      to_branch: str | None = None,
      stack: Sequence[str] | None = None,
      output: Sequence[str] | None = None,
  ) -> None:
    """Writes one parse-log entry.

    Args:
      kind: Event kind, e.g. ``entered`` or ``finished PASSED``. Each word
        also becomes a class of the event element.
      event_html: Description of the combinator involved, if any.
      input_html: Rendering of the parser input at this event.
      from_branches: Renderings of the branches an event joins or forks from.
      to_branch: Rendering of the branch an event joins or forks into.
      stack: Renderings of the parser stack frames, innermost first.
      output: Renderings of the parser outputs, oldest first.

    Raises:
      RuntimeError: If the page is not started or is already finished.
    """
    self._check_writable()
    with self._open("li", class_="entry"):
      if input_html is not None:
        with self._open("div", class_="input"):
          self._write(input_html)
      with self._open("div", class_=f"event {kind}"):
        self._write(html.escape(kind) + " ")
        self._write(event_html)
        if from_branches:
          with self._open("ul", class_="from-branches"):
            for branch in from_branches:
              with self._open("li", class_="from-branch"):
                self._write(branch)
        if to_branch is not None:
          with self._open("div", class_="to-branch"):
            self._write(to_branch)
      if stack is not None:
        with self._open("ol", class_="stack"):
          for frame in stack:
            with self._open("li"):
              self._write(frame)
      if output is not None:
        with self._open("ol", class_="output"):
          for item in output:
            with self._open("li"):
              self._write(item)
    self._write("\n")

  def finish(self, state: str, **entry_kwargs) -> None:
    """Writes the final ``finished`` entry and closes the document.

    Args:
      state: Completion state of the parse, e.g. ``PASSED``.
      **entry_kwargs: Forwarded to `write_entry` for the final entry.

    Raises:
      RuntimeError: If the page is not started or is already finished.
    """
    self.write_entry(f"finished {state}", **entry_kwargs)
    self._finished = True
    self._write("  </ul></td></tr>\n</table>\n</body>\n")
    if self.has_script:
      self._write("<script>init()</script>\n")
    self._write("</html>\n")


def render_page(
    productions: Mapping[str, str],
    entries: Sequence[Mapping[str, object]],
    state: str,
    **writer_kwargs,
) -> str:
  """Renders a whole page to a string.

  Args:
    productions: Grammar body HTML, keyed by production name.
    entries: Keyword arguments for each `SlideshowPageWriter.write_entry`
      call, each including ``kind``.
    state: Completion state for the final entry.
    **writer_kwargs: Forwarded to `SlideshowPageWriter`.

  Returns:
    The HTML source of the page.
  """
  stream = io.StringIO()
  writer = SlideshowPageWriter(stream, **writer_kwargs)
  writer.start(productions)
  for entry in entries:
    writer.write_entry(**entry)
  writer.finish(state)
  return stream.getvalue()
