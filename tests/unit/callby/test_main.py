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
from unittest.mock import patch

import pytest

from callby.__main__ import main, parse_config
from callby.runner import RunConfig


def test_defaults() -> None:
    assert parse_config([]) == RunConfig(
        variant="object",
        start=1_500_000,
        end=3_000_000,
        sampler="process",
        progress_bar=False,
    )


def test_options() -> None:
    config = parse_config(
        [
            "--variant",
            "functional",
            "--start",
            "1",
            "--end",
            "3",
            "--sampler",
            "traced",
            "--progress-bar",
            "-v",
        ]
    )
    assert config == RunConfig(
        variant="functional", start=1, end=3, sampler="traced", progress_bar=True
    )


def test_end_before_start() -> None:
    with pytest.raises(SystemExit) as e:
        parse_config(["--start", "3", "--end", "1"])
    assert e.value.code == 2


def test_unknown_variant() -> None:
    with pytest.raises(SystemExit) as e:
        parse_config(["--variant", "global"])
    assert e.value.code == 2


def test_main() -> None:
    with patch("callby.__main__.run") as run_mock:
        assert main(["--start", "1", "--end", "3"]) == 0
    run_mock.assert_called_once_with(RunConfig(start=1, end=3))
