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

"""Tests for the document helpers."""

from absl.testing import absltest
import bs4
from parseviz.core import dom_util
from parseviz.core import markup
from parseviz.core import settings
from tests.fixtures import layout_fixture


class ClassHelpersTest(absltest.TestCase):

  def test_missing_element_is_a_no_op(self):
    dom_util.add_class(None, "x")
    dom_util.remove_class(None, "x")
    dom_util.set_style_property(None, "float", "left")
    dom_util.set_text(None, "1/1")
    self.assertFalse(dom_util.has_class(None, "x"))
    self.assertEqual(dom_util.select_all(".x", None), [])
    self.assertIsNone(dom_util.select_one(".x", None))

  def test_add_class_does_not_duplicate(self):
    doc = layout_fixture.parse('<p id="p" class="a b"></p>')
    el = doc.select_one("#p")
    dom_util.add_class(el, "c")
    dom_util.add_class(el, "c")
    dom_util.add_class(el, "a")
    self.assertEqual(el["class"], ["a", "b", "c"])

  def test_remove_class(self):
    doc = layout_fixture.parse('<p id="p" class="a b a"></p>')
    el = doc.select_one("#p")
    dom_util.remove_class(el, "a")
    self.assertEqual(el["class"], ["b"])
    dom_util.remove_class(el, "b")
    self.assertNotIn("class", el.attrs)
    self.assertEqual(str(el), '<p id="p"></p>')

  def test_text_nodes_have_no_classes(self):
    doc = layout_fixture.parse("<p>text</p>")
    text = doc.p.contents[0]
    self.assertIsInstance(text, bs4.NavigableString)
    self.assertFalse(dom_util.has_class(text, "empty"))
    dom_util.add_class(text, "empty")
    self.assertEqual(str(doc), "<p>text</p>")

  def test_class_from_new_tag_string(self):
    doc = layout_fixture.parse("")
    el = doc.new_tag("span", attrs={"class": "one two"})
    self.assertTrue(dom_util.has_class(el, "two"))


class StyleTest(absltest.TestCase):

  def test_set_and_clear_keeps_other_declarations(self):
    doc = layout_fixture.parse('<p id="p" style="color: red; margin:0"></p>')
    el = doc.select_one("#p")
    dom_util.set_style_property(el, "float", "left")
    self.assertEqual(el["style"], "color: red; margin: 0; float: left")
    dom_util.set_style_property(el, "float", "")
    self.assertEqual(el["style"], "color: red; margin: 0")

  def test_clearing_last_declaration_drops_attribute(self):
    doc = layout_fixture.parse('<p id="p"></p>')
    el = doc.select_one("#p")
    dom_util.set_style_property(el, "float", "left")
    self.assertEqual(el["style"], "float: left")
    dom_util.set_style_property(el, "float", "")
    self.assertNotIn("style", el.attrs)


class WrapTest(absltest.TestCase):

  def test_wrap_inserts_wrapper_and_placeholder(self):
    doc = layout_fixture.parse('<div><span class="abv" id="r">x</span></div>')
    region = doc.select_one("#r")
    wrapper = dom_util.wrap_with_placeholder(region)
    self.assertIs(region.parent, wrapper)
    self.assertTrue(dom_util.has_class(wrapper, markup.WRAPPER_CLASS))
    self.assertEqual(
        str(doc.div),
        '<div><span class="abv-wrapper"><span class="abv" id="r">x</span>'
        '<span class="diaresis">…</span></span></div>',
    )

  def test_wrap_is_one_shot(self):
    doc = layout_fixture.parse('<div><span class="abv" id="r">x</span></div>')
    region = doc.select_one("#r")
    first = dom_util.wrap_with_placeholder(region)
    second = dom_util.wrap_with_placeholder(region)
    self.assertIs(first, second)
    self.assertLen(doc.select("." + markup.WRAPPER_CLASS), 1)
    self.assertLen(doc.select("." + markup.PLACEHOLDER_CLASS), 1)

  def test_placeholder_text_setting(self):
    doc = layout_fixture.parse('<div><span class="abv" id="r">x</span></div>')
    with settings.placeholder_text.set_scoped("..."):
      wrapper = dom_util.wrap_with_placeholder(doc.select_one("#r"))
    self.assertEqual(wrapper.select_one(".diaresis").string, "...")
    self.assertEqual(settings.placeholder_text.get(), "…")

  def test_wrap_inside_detached_element(self):
    doc = layout_fixture.parse(
        '<div id="d"><span class="abv" id="r">x</span></div>'
    )
    detached = doc.select_one("#d").extract()
    wrapper = dom_util.wrap_with_placeholder(detached.select_one("#r"))
    self.assertIs(wrapper.parent, detached)
    self.assertEqual(
        [dom_util.class_list(c) for c in wrapper.children],
        [[markup.REGION_CLASS], [markup.PLACEHOLDER_CLASS]],
    )

  def test_new_element(self):
    el = dom_util.new_element("tt", markup.COUNTER_CLASS)
    self.assertEqual(str(el), '<tt class="slide-counter"></tt>')
    self.assertIsNone(el.parent)


if __name__ == "__main__":
  absltest.main()
