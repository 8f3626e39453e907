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


class BigInteger(int):
    """Arbitrary-precision signed integer that is always a distinct object.

    Plain ints in the small-integer range are shared by the interpreter,
    instances of this subclass never are: every construction, including
    :meth:`from_byte_array`, allocates a new object.
    """

    __slots__ = ()

    @classmethod
    def value_of(cls, value: int) -> BigInteger:
        return cls(value)

    @classmethod
    def from_byte_array(cls, data: bytes) -> BigInteger:
        """Builds the value from big-endian two's-complement bytes."""
        if len(data) == 0:
            raise ValueError("Zero length byte array")
        return cls.from_bytes(data, "big", signed=True)

    def to_byte_array(self) -> bytes:
        """Minimal big-endian two's-complement representation, at least one byte."""
        magnitude = self if self >= 0 else ~self
        length = magnitude.bit_length() // 8 + 1
        return self.to_bytes(length, "big", signed=True)
