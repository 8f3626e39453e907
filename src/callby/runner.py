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
from contextlib import ExitStack, closing
from dataclasses import dataclass
from typing import Optional, Tuple

from callby import functional
from callby.holder import SequenceHolder
from callby.identity import IdentityToken, identity_of
from callby.memory import MemorySampler, create_sampler, megabytes_between
from callby.report import Reporter
from callby.sequence import RANGE_END, RANGE_START, populate

LOG = logging.getLogger(__name__)

VARIANT_OBJECT = "object"
VARIANT_FUNCTIONAL = "functional"
VARIANTS = (VARIANT_OBJECT, VARIANT_FUNCTIONAL)


@dataclass(frozen=True)
class RunConfig:
    variant: str = VARIANT_OBJECT
    start: int = RANGE_START
    end: int = RANGE_END
    sampler: str = "process"
    progress_bar: bool = False


@dataclass(frozen=True)
class RunResult:
    memory_deltas: Tuple[int, int, int]
    created: IdentityToken
    passed: IdentityToken
    copied: IdentityToken
    sequence_length: int
    copy_length: int


def run(
    config: RunConfig,
    reporter: Optional[Reporter] = None,
    sampler: Optional[MemorySampler] = None,
) -> RunResult:
    if config.variant not in VARIANTS:
        raise ValueError(f"Unknown variant: {config.variant}")
    if reporter is None:
        reporter = Reporter()

    LOG.info("Running %s variant", config.variant)
    global_start = time.monotonic()
    with ExitStack() as stack:
        if sampler is None:
            sampler = stack.enter_context(closing(create_sampler(config.sampler)))
        if config.variant == VARIANT_OBJECT:
            result = _run_object(config, reporter, sampler)
        else:
            result = _run_functional(config, reporter, sampler)
    LOG.info("Run finished, took %.2f s", time.monotonic() - global_start)
    return result


def _run_object(
    config: RunConfig, reporter: Reporter, sampler: MemorySampler
) -> RunResult:
    baseline = sampler.sample()

    holder = SequenceHolder(reporter, progress_bar=config.progress_bar)
    seq = holder.seq
    created = reporter.identity(seq)
    populate(seq, config.start, config.end, progress_bar=config.progress_bar)
    after_populate = _report_memory(reporter, sampler, baseline)

    passed = holder.call_by_reference(seq)
    after_pass = _report_memory(reporter, sampler, baseline)

    # Kept alive until sampled, otherwise it is freed right away.
    copied = holder.copy(seq)
    after_copy = _report_memory(reporter, sampler, baseline)

    holder.reference_of_value(seq)

    return RunResult(
        memory_deltas=(after_populate, after_pass, after_copy),
        created=created,
        passed=identity_of(passed),
        copied=identity_of(copied),
        sequence_length=len(seq),
        copy_length=len(copied),
    )


def _run_functional(
    config: RunConfig, reporter: Reporter, sampler: MemorySampler
) -> RunResult:
    ctx = functional.new_context(reporter, sampler, progress_bar=config.progress_bar)
    created = reporter.identity(ctx.seq)
    populate(ctx.seq, config.start, config.end, progress_bar=config.progress_bar)
    after_populate = functional.report_memory(ctx)

    passed = functional.call_by_reference(ctx)
    after_pass = functional.report_memory(ctx)

    copied = functional.copy(ctx)
    after_copy = functional.report_memory(ctx)

    functional.reference_of_value(ctx)
    reporter.size(len(copied))

    return RunResult(
        memory_deltas=(after_populate, after_pass, after_copy),
        created=created,
        passed=identity_of(passed),
        copied=identity_of(copied),
        sequence_length=len(ctx.seq),
        copy_length=len(copied),
    )


def _report_memory(reporter: Reporter, sampler: MemorySampler, baseline: int) -> int:
    megabytes = megabytes_between(baseline, sampler.sample())
    reporter.memory_used(megabytes)
    return megabytes
