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

import argparse
import logging
import sys
from typing import List, Optional

from callby.memory import SAMPLERS
from callby.runner import VARIANTS, VARIANT_OBJECT, RunConfig, run
from callby.sequence import RANGE_END, RANGE_START

LOG = logging.getLogger("callby")
LOG.setLevel(logging.INFO)
handler = logging.StreamHandler(sys.stderr)
handler.setLevel(logging.DEBUG)
formatter = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
handler.setFormatter(formatter)
LOG.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Shows identity and memory of a large list passed by reference and copied.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--variant",
        choices=VARIANTS,
        default=VARIANT_OBJECT,
        help="object holding the list or free functions with an explicit context",
    )
    parser.add_argument(
        "--start", type=int, default=RANGE_START, help="first value to append"
    )
    parser.add_argument(
        "--end", type=int, default=RANGE_END, help="last value to append (inclusive)"
    )
    parser.add_argument(
        "--sampler",
        choices=sorted(SAMPLERS),
        default="process",
        help="how used memory is measured",
    )
    parser.add_argument(
        "--progress-bar",
        action="store_true",
        default=False,
        help="show progress for populating and copying",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", default=False, help="debug logging"
    )
    return parser


def parse_config(argv: Optional[List[str]] = None) -> RunConfig:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.end < args.start:
        parser.error(f"--end ({args.end}) must not be less than --start ({args.start})")
    if args.verbose:
        LOG.setLevel(logging.DEBUG)
    config = RunConfig(
        variant=args.variant,
        start=args.start,
        end=args.end,
        sampler=args.sampler,
        progress_bar=args.progress_bar,
    )
    LOG.debug("Configuration: %s", config)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    run(parse_config(argv))
    return 0


if __name__ == "__main__":
    sys.exit(main())
