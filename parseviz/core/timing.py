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

"""Phase timing for page setup."""

from __future__ import annotations

import contextlib
import logging
import time
from typing import Iterator

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def timed(label: str) -> Iterator[None]:
  """Logs the wall-clock time spent inside the block at DEBUG level."""
  start = time.perf_counter()
  try:
    yield
  finally:
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.debug("%s: %.2fms", label, elapsed_ms)
