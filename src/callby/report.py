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

import sys
from typing import Any, Optional, TextIO

from callby.identity import IdentityToken, identity_of


class Reporter:
    """Writes the diagnostic lines of the demonstration to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so that a replaced sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def identity(self, reference: Any, label: str = "hash") -> IdentityToken:
        token = identity_of(reference)
        self._print(f"{label}={token}")
        return token

    def memory_used(self, megabytes: int) -> None:
        self._print(f"Memory used by myList: {megabytes} MB")

    def size(self, length: int, label: Optional[str] = None) -> None:
        if label is None:
            self._print(str(length))
        else:
            self._print(f"{label}={length}")

    def _print(self, line: str) -> None:
        print(line, file=self.stream)
