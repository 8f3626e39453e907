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

from typing import List, Optional

from callby.bigint import BigInteger
from callby.demonstrators import deep_copy, pass_through, rebind_demo
from callby.report import Reporter


class SequenceHolder:
    """Owns the demonstrated list and reports its identity when created."""

    def __init__(
        self, reporter: Optional[Reporter] = None, *, progress_bar: bool = False
    ) -> None:
        self._reporter = reporter if reporter is not None else Reporter()
        self._progress_bar = progress_bar
        self._seq: List[BigInteger] = []
        self._reporter.identity(self._seq)

    @property
    def seq(self) -> List[BigInteger]:
        return self._seq

    def call_by_reference(self, seq: List[BigInteger]) -> List[BigInteger]:
        return pass_through(seq, self._reporter)

    def copy(self, seq: List[BigInteger]) -> List[BigInteger]:
        return deep_copy(seq, self._reporter, progress_bar=self._progress_bar)

    def reference_of_value(self, seq: List[BigInteger]) -> None:
        rebind_demo(seq, self._reporter)
