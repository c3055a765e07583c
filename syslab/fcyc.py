"""Measure the cycles a function takes, using the K-best sampling scheme."""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from syslab.clock import CycleCounter


class Counter(Protocol):
    def start(self) -> None: ...

    def get(self) -> float: ...


@dataclass
class FcycConfig:
    """Parameters of the measurement routine."""

    k: int = 3
    maxsamples: int = 20
    epsilon: float = 0.01
    compensate: bool = False
    clear_cache: bool = False
    cache_bytes: int = 1 << 19
    cache_block: int = 32


class KBestSampler:
    """Keeps the k smallest samples seen, in ascending order."""

    def __init__(self, k: int = 3, epsilon: float = 0.01) -> None:
        self.k = k
        self.epsilon = epsilon
        self._values: list[float] = []
        self.samplecount = 0

    @property
    def values(self) -> list[float]:
        return list(self._values)

    @property
    def best(self) -> float:
        return self._values[0] if self._values else 0.0

    def add_sample(self, val: float) -> None:
        """Record a sample, keeping it if it is among the k best."""
        if self.samplecount < self.k:
            self._values.append(val)
            pos = len(self._values) - 1
        elif val < self._values[self.k - 1]:
            pos = self.k - 1
            self._values[pos] = val
        else:
            pos = 0
        self.samplecount += 1
        while pos > 0 and self._values[pos - 1] > self._values[pos]:
            self._values[pos - 1], self._values[pos] = self._values[pos], self._values[pos - 1]
            pos -= 1

    def has_converged(self) -> bool:
        """True when the k best samples lie within epsilon of each other."""
        return (
            self.samplecount >= self.k
            and (1 + self.epsilon) * self._values[0] >= self._values[self.k - 1]
        )


@functools.lru_cache(maxsize=4)
def _cache_buffer(nbytes: int) -> bytes:
    return bytes(nbytes)


def _clear_cache(config: FcycConfig) -> int:
    buf = _cache_buffer(config.cache_bytes)
    return sum(buf[:: max(config.cache_block, 1)])


def fcyc(
    f: Callable[[Any], Any],
    params: Any = None,
    config: FcycConfig | None = None,
    counter: Counter | None = None,
) -> float:
    """Smallest number of cycles f(params) took over repeated runs."""
    config = config or FcycConfig()
    counter = counter or CycleCounter()
    sampler = KBestSampler(config.k, config.epsilon)
    while True:
        if config.clear_cache:
            _clear_cache(config)
        counter.start()
        f(params)
        cyc = counter.get()
        if cyc > 0.0:
            sampler.add_sample(cyc)
        if sampler.has_converged() or sampler.samplecount >= config.maxsamples:
            break
    return sampler.best