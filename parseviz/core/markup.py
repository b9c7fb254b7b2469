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

"""Class names and selectors shared by the page writer and the layout passes.

The stylesheet keys off these names, so they form the contract between the
generated markup, the layout passes that toggle them, and the styling.
"""

# Collapsible regions.
REGION_CLASS = "abv"
WRAPPER_CLASS = "abv-wrapper"
PLACEHOLDER_CLASS = "diaresis"
ABBREVIATED_CLASS = "abbreviated"
OVERFLOWS_CLASS = "overflows"

# Alternations in long-form grammar bodies.
ALTERNATION_SELECTOR = r".or.detail\:long"
EMPTY_VARIANT_CLASS = "empty"
MULTILINE_CLASS = "multiline"

# Page structure.
GRAMMAR_SELECTOR = "#grammar"
PARSE_LOG_SELECTOR = "#parse-log"
LOG_ENTRY_SELECTOR = "#parse-log > li.entry"
CURRENT_CLASS = "current"
SLIDESHOW_CLASS = "slideshow"
OVERLAP_ALL_CLASS = "overlap-all"
CONTROLS_CLASS = "slideshow-controls"
COUNTER_CLASS = "slide-counter"

# Cached measurement.
LINE_HEIGHT_ATTRIBUTE = "data-line-height"
