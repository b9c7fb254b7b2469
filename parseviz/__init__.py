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

"""Parseviz: interactive slideshows of grammar parse logs."""

# pylint: disable=g-multiple-import,g-importing-member,unused-import

from parseviz.layout.abbreviation import (
    AbbreviationResult,
    abbreviate,
    decide,
)
from parseviz.layout.measurement import (
    LayoutEngine,
    LayoutRecord,
    RecordedLayout,
    fit_oracle,
    fits_on_one_line,
)
from parseviz.layout.multiline import (
    mark_multiline_ors,
)
from parseviz.layout.region_tree import (
    Region,
    RegionTree,
    build as build_region_tree,
)
from parseviz.slideshow.navigator import (
    NavigationCommand,
    SlideshowNavigator,
)
from parseviz.slideshow.page_setup import (
    PageSession,
    initialize,
)
from parseviz.slideshow.page_writer import (
    SlideshowPageWriter,
    render_page,
)

__version__ = "0.1.0"
