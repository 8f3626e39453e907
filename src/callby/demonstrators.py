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
from typing import Iterable, List

from tqdm import tqdm

from callby.bigint import BigInteger
from callby.report import Reporter

LOG = logging.getLogger(__name__)


def pass_through(seq: List[BigInteger], reporter: Reporter) -> List[BigInteger]:
    """Receives the list and hands the very same object back."""
    reporter.identity(seq)
    return seq


def deep_copy(
    seq: List[BigInteger], reporter: Reporter, *, progress_bar: bool = False
) -> List[BigInteger]:
    """Builds a new list of new values, each one rebuilt from its byte array."""
    LOG.info("Deep copying %d elements", len(seq))
    start = time.monotonic()

    iterator: Iterable[BigInteger] = seq
    if progress_bar:
        iterator = tqdm(
            iterator,
            desc="Deep copying",
            unit="values",
            total=len(seq),
        )
    result = [BigInteger.from_byte_array(value.to_byte_array()) for value in iterator]

    LOG.info("Deep copy done, took %.2f s", time.monotonic() - start)
    reporter.identity(result)
    return result


def rebind_demo(seq: List[BigInteger], reporter: Reporter) -> None:
    """Reassigns a local name and shows the caller's list is left alone."""
    seq2 = seq
    reporter.identity(seq2, label="list2 hash")
    seq2 = []
    reporter.identity(seq2, label="list2 hash")
    reporter.size(len(seq), label="list")
