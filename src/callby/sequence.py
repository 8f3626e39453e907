#
# Copyright 2026 The callby Authors
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
#
from __future__ import annotations

import logging
import time
from typing import Iterable, MutableSequence

from tqdm import tqdm

from callby.bigint import BigInteger

LOG = logging.getLogger(__name__)

RANGE_START = 1_500_000
RANGE_END = 3_000_000


def populate(
    seq: MutableSequence[BigInteger],
    start: int = RANGE_START,
    end: int = RANGE_END,
    *,
    progress_bar: bool = False,
) -> None:
    """Appends a new value for every integer from ``start`` to ``end`` inclusive."""
    LOG.info("Populating sequence with values %d..%d", start, end)
    global_start = time.monotonic()

    iterator: Iterable[int] = range(start, end + 1)
    if progress_bar:
        iterator = tqdm(
            iterator,
            desc="Populating sequence",
            unit="values",
            total=max(end - start + 1, 0),
        )
    for i in iterator:
        seq.append(BigInteger.value_of(i))

    LOG.info(
        "Populating sequence done, %d elements, took %.2f s",
        len(seq),
        time.monotonic() - global_start,
    )
