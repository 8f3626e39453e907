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
import pytest

from callby.bigint import BigInteger


@pytest.mark.parametrize(
    "value, byte_array",
    [
        (0, b"\x00"),
        (1, b"\x01"),
        (127, b"\x7f"),
        (128, b"\x00\x80"),
        (255, b"\x00\xff"),
        (256, b"\x01\x00"),
        (-1, b"\xff"),
        (-128, b"\x80"),
        (-129, b"\xff\x7f"),
        (1_500_000, b"\x16\xe3\x60"),
        (2**64, b"\x01" + b"\x00" * 8),
    ],
)
def test_byte_array(value: int, byte_array: bytes) -> None:
    assert BigInteger(value).to_byte_array() == byte_array
    restored = BigInteger.from_byte_array(byte_array)
    assert type(restored) is BigInteger
    assert restored == value


def test_from_empty_byte_array() -> None:
    with pytest.raises(ValueError):
        BigInteger.from_byte_array(b"")


def test_small_values_are_distinct_objects() -> None:
    a = BigInteger.value_of(1)
    b = BigInteger.value_of(1)
    assert a == b == 1
    assert a is not b

    c = BigInteger.from_byte_array(a.to_byte_array())
    assert c == a
    assert c is not a


def test_behaves_like_int() -> None:
    value = BigInteger.value_of(1_500_000)
    assert value + 1 == 1_500_001
    assert hash(value) == hash(1_500_000)
    assert str(value) == "1500000"
