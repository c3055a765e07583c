"""Cycles-per-element estimation of functions linear in a count parameter."""

from __future__ import annotations

import enum
import random
import sys
from collections.abc import Callable
from typing import Any, TextIO

from syslab.fcyc import FcycConfig, fcyc
from syslab.lsquare import LsErrorType, ls_error, ls_intercept, ls_slope

_LIM = 1 << 30
_UNROLL = 1
SEED = 31415


class SampleMethod(enum.Enum):
    """How sample counts are chosen between bias*maxcnt and maxcnt."""

    UNI = "uniform"
    RAN = "random"


def get_cnt(
    index: int,
    samples: int,
    maxcnt: int,
    smethod: SampleMethod,
    bias: float,
    rng: random.Random | None = None,
) -> int:
    """Count to use for sample number index."""
    mincnt = int(bias * maxcnt)
    if smethod is SampleMethod.UNI:
        weight = index / (samples - 1)
    elif smethod is SampleMethod.RAN:
        rng = rng or random.Random(SEED)
        weight = rng.randrange(_LIM) / (_LIM - 1)
    else:
        raise ValueError(f"Undefined sampling method {smethod!r}")
    val = int(mincnt + weight * (maxcnt - mincnt))
    return _UNROLL * int(val / _UNROLL)


def measure_function(
    f: Callable[[int], Any], cnt: int, config: FcycConfig | None = None
) -> float:
    """Cycles taken by f(cnt), best of repeated runs."""
    return fcyc(f, cnt, config)


def find_cpe_full(
    f: Callable[[int], Any],
    maxcnt: int,
    samples: int = 100,
    data_file: TextIO | None = None,
    smethod: SampleMethod = SampleMethod.RAN,
    bias: float = 0.3,
    verbose: int = 0,
    config: FcycConfig | None = None,
) -> float:
    """Cycles per element of f, fitted over the given number of samples."""
    rng = random.Random(SEED)
    cnt_val: list[float] = []
    cycle_val: list[float] = []
    for i in range(samples):
        cnt = get_cnt(i, samples, maxcnt, smethod, bias, rng)
        cycles = measure_function(f, cnt, config)
        cnt_val.append(float(cnt))
        cycle_val.append(cycles)
        if cycles < 1.0:
            print(f"Got {cycles:.2f} cycles for count {cnt}", file=sys.stderr)

    cpe = ls_slope(cnt_val, cycle_val)
    overhead = ls_intercept(cnt_val, cycle_val) if data_file else 0.0
    if data_file and verbose > 1:
        data_file.write("Cnt\t0" + "".join(f"\t{x:.0f}" for x in cnt_val) + "\n")
        data_file.write("Cycs.\t" + "".join(f"\t{y:.2f}" for y in cycle_val) + "\n")
        data_file.write(
            f"Interp.\t{overhead:.2f}"
            + "".join(f"\t{cpe * x + overhead:.2f}" for x in cnt_val)
            + "\n"
        )
    if data_file and verbose:
        avg = ls_error(cnt_val, cycle_val, LsErrorType.AVG)
        worst = ls_error(cnt_val, cycle_val, LsErrorType.MAX)
        data_file.write(
            f"cpe\t{cpe:.2f}\tovhd\t{overhead:.2f}\tavgerr\t{avg:.3f}\tmaxerr\t{worst:.3f}\n"
        )
    return cpe


def find_cpe(f: Callable[[int], Any], maxcnt: int) -> float:
    """Cycles per element of f using the default sampling parameters."""
    return find_cpe_full(f, maxcnt, 100, sys.stdout, SampleMethod.RAN, 0.3, 0)