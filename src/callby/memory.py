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

import abc
import tracemalloc

import psutil


class MemorySampler(abc.ABC):
    """Reads how many bytes the process uses right now.

    The figure is coarse: garbage collection and allocator caching may run at
    any moment, so consecutive samples aren't guaranteed to be monotonic.
    """

    @abc.abstractmethod
    def sample(self) -> int:
        ...

    def close(self) -> None:
        pass


class ProcessMemorySampler(MemorySampler):
    def __init__(self) -> None:
        self._process = psutil.Process()

    def sample(self) -> int:
        return self._process.memory_info().rss


class TracedMemorySampler(MemorySampler):
    def __init__(self) -> None:
        self._started_tracing = not tracemalloc.is_tracing()
        if self._started_tracing:
            tracemalloc.start()

    def sample(self) -> int:
        current, _ = tracemalloc.get_traced_memory()
        return current

    def close(self) -> None:
        if self._started_tracing and tracemalloc.is_tracing():
            tracemalloc.stop()
        self._started_tracing = False


SAMPLERS = {
    "process": ProcessMemorySampler,
    "traced": TracedMemorySampler,
}


def create_sampler(name: str) -> MemorySampler:
    try:
        sampler_class = SAMPLERS[name]
    except KeyError:
        raise ValueError(f"Unknown memory sampler: {name}") from None
    return sampler_class()


def megabytes_between(before: int, after: int) -> int:
    """Whole megabytes between two samples, truncated toward zero."""
    delta = after - before
    megabytes = abs(delta) // 1024 // 1024
    return megabytes if delta >= 0 else -megabytes
