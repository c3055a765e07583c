"""Cycle counting based on the thread CPU clock and the processor clock rate."""

from __future__ import annotations

import re
import sys
import time
from dataclasses import dataclass

CPUINFO_PATH = "/proc/cpuinfo"

_MHZ_RE = re.compile(r"cpu MHz\s*:\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


@dataclass
class _ClockRate:
    ghz: float = 0.0


_rate = _ClockRate()


def core_mhz(verbose: bool = False, cpuinfo: str = CPUINFO_PATH) -> float:
    """Read the processor clock rate in MHz from a cpuinfo file.

    Falls back to 1000 MHz when the file cannot be read or holds no rate.
    """
    _rate.ghz = 0.0
    try:
        with open(cpuinfo, encoding="utf-8", errors="replace") as fp:
            for line in fp:
                if "cpu MHz" in line:
                    match = _MHZ_RE.match(line)
                    cpu_mhz = float(match.group(1)) if match else 0.0
                    _rate.ghz = cpu_mhz / 1000.0
                    break
    except OSError:
        pass
    if _rate.ghz == 0.0:
        print("Can't open /proc/cpuinfo to get clock information", file=sys.stderr)
        _rate.ghz = 1.0
        return _rate.ghz * 1000.0
    if verbose:
        print(f"Processor Clock Rate ~= {_rate.ghz:.4f} GHz (extracted from file)")
    return _rate.ghz * 1000.0


def mhz(verbose: bool = False) -> float:
    """Clock rate of the processor in MHz."""
    return core_mhz(verbose)


class CycleCounter:
    """Simulated cycle counter: thread CPU nanoseconds scaled by the clock rate."""

    def __init__(self, verbose: bool = True) -> None:
        self.verbose = verbose
        self._last_ns: int | None = None

    def start(self) -> None:
        """Record the current time as the counting origin."""
        if _rate.ghz == 0.0:
            mhz(self.verbose)
        self._last_ns = time.thread_time_ns()

    def get(self) -> float:
        """Cycles elapsed since the last call to start()."""
        if self._last_ns is None:
            raise RuntimeError("counter was not started")
        delta_nsecs = float(time.thread_time_ns() - self._last_ns)
        return delta_nsecs * _rate.ghz