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

from dataclasses import dataclass, field
from typing import List

from callby.bigint import BigInteger
from callby.demonstrators import deep_copy, pass_through, rebind_demo
from callby.memory import MemorySampler, megabytes_between
from callby.report import Reporter


@dataclass
class DemoContext:
    """State shared by the free functions, passed explicitly instead of a global."""

    reporter: Reporter
    sampler: MemorySampler
    baseline: int
    progress_bar: bool = False
    seq: List[BigInteger] = field(default_factory=list)


def new_context(
    reporter: Reporter, sampler: MemorySampler, *, progress_bar: bool = False
) -> DemoContext:
    # The baseline is taken before the list exists.
    baseline = sampler.sample()
    return DemoContext(
        reporter=reporter,
        sampler=sampler,
        baseline=baseline,
        progress_bar=progress_bar,
    )


def report_memory(ctx: DemoContext) -> int:
    megabytes = megabytes_between(ctx.baseline, ctx.sampler.sample())
    ctx.reporter.memory_used(megabytes)
    return megabytes


def call_by_reference(ctx: DemoContext) -> List[BigInteger]:
    return pass_through(ctx.seq, ctx.reporter)


def copy(ctx: DemoContext) -> List[BigInteger]:
    return deep_copy(ctx.seq, ctx.reporter, progress_bar=ctx.progress_bar)


def reference_of_value(ctx: DemoContext) -> None:
    rebind_demo(ctx.seq, ctx.reporter)
