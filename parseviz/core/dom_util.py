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

"""Queries and presentation mutations on the rendered document.

The document is a BeautifulSoup tree. Every helper that mutates presentation
(classes, inline style, text) treats a missing element as a no-op, so callers
can pass the result of `select_one` straight through.
"""

from __future__ import annotations

import bs4

from parseviz.core import markup
from parseviz.core import settings


def select_all(
    selector: str, source: bs4.Tag | None
) -> list[bs4.Tag]:
  """Returns descendants of ``source`` matching ``selector``, in document order."""
  if source is None:
    return []
  return list(source.select(selector))


def select_one(selector: str, source: bs4.Tag | None) -> bs4.Tag | None:
  """Returns the first descendant of ``source`` matching ``selector``."""
  if source is None:
    return None
  return source.select_one(selector)


def class_list(el: bs4.PageElement | None) -> list[str]:
  """Returns the classes of an element; text nodes and `None` have none."""
  if not isinstance(el, bs4.Tag):
    return []
  value = el.get("class")
  if value is None:
    return []
  if isinstance(value, str):
    return value.split()
  return list(value)


def has_class(el: bs4.PageElement | None, class_name: str) -> bool:
  return class_name in class_list(el)


def add_class(el: bs4.PageElement | None, class_name: str) -> None:
  if not isinstance(el, bs4.Tag):
    return
  classes = class_list(el)
  if class_name not in classes:
    el["class"] = classes + [class_name]


def remove_class(el: bs4.PageElement | None, class_name: str) -> None:
  if not isinstance(el, bs4.Tag):
    return
  classes = [c for c in class_list(el) if c != class_name]
  if classes:
    el["class"] = classes
  elif "class" in el.attrs:
    del el["class"]


def set_style_property(
    el: bs4.Tag | None, name: str, value: str
) -> None:
  """Sets one inline style declaration, or removes it if ``value`` is empty.

  Other declarations in the ``style`` attribute are kept in order.

  Args:
    el: Element to restyle.
    name: CSS property name, e.g. ``float``.
    value: New value. An empty string removes the declaration.
  """
  if el is None:
    return
  declarations = []
  for declaration in el.get("style", "").split(";"):
    prop, sep, prop_value = declaration.partition(":")
    if not sep or prop.strip() == name:
      continue
    declarations.append((prop.strip(), prop_value.strip()))
  if value:
    declarations.append((name, value))
  if declarations:
    el["style"] = "; ".join(f"{p}: {v}" for p, v in declarations)
  elif "style" in el.attrs:
    del el["style"]


def set_text(el: bs4.Tag | None, text: str) -> None:
  if el is None:
    return
  el.string = text


def new_element(name: str, class_name: str | None = None) -> bs4.Tag:
  """Creates a detached element; no owning document is needed."""
  el = bs4.Tag(name=name)
  if class_name:
    add_class(el, class_name)
  return el


def is_wrapped(el: bs4.Tag) -> bool:
  """Whether ``el`` already sits inside a placeholder wrapper."""
  return has_class(el.parent, markup.WRAPPER_CLASS)


def wrap_with_placeholder(el: bs4.Tag) -> bs4.Tag:
  """Wraps a collapsible region so that it can be abbreviated later.

  The wrapper holds the region followed by a placeholder span, so that
  abbreviating is a pure class toggle on the wrapper. Wrapping is one-shot:
  an element that is already wrapped keeps its existing wrapper.

  Args:
    el: The collapsible region.

  Returns:
    The wrapper element.
  """
  if is_wrapped(el):
    return el.parent
  wrapper = new_element("span", markup.WRAPPER_CLASS)
  placeholder = new_element("span", markup.PLACEHOLDER_CLASS)
  placeholder.string = settings.placeholder_text.get()
  el.wrap(wrapper)
  wrapper.append(placeholder)
  return wrapper
