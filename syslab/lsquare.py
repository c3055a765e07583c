"""Least-squares fit of a straight line y = m*x + b to sample points."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple


class LsErrorType(enum.Enum):
    """How the relative errors of a fit are combined."""

    AVG = "avg"
    MAX = "max"


class _Stats(NamedTuple):
    cnt: int
    sum_x: float
    sum_y: float
    sum_xx: float
    sum_xy: float


def _stats(xval: Iterable[float], yval: Iterable[float]) -> _Stats:
    xs = list(xval)
    ys = list(yval)
    if len(xs) != len(ys):
        raise ValueError("x and y sequences differ in length")
    sum_x = sum_y = sum_xx = sum_xy = 0.0
    for x, y in zip(xs, ys):
        sum_x += x
        sum_y += y
        sum_xx += x * x
        sum_xy += x * y
    return _Stats(len(xs), sum_x, sum_y, sum_xx, sum_xy)


def _slope(s: _Stats) -> float:
    return (s.cnt * s.sum_xy - s.sum_x * s.sum_y) / (s.cnt * s.sum_xx - s.sum_x * s.sum_x)


def _intercept(s: _Stats) -> float:
    return (s.sum_xx * s.sum_y - s.sum_xy * s.sum_x) / (s.cnt * s.sum_xx - s.sum_x * s.sum_x)


def ls_slope(xval: Iterable[float], yval: Iterable[float]) -> float:
    """Slope m of the least-squares line through the points."""
    return _slope(_stats(xval, yval))


def ls_intercept(xval: Iterable[float], yval: Iterable[float]) -> float:
    """Intercept b of the least-squares line through the points."""
    return _intercept(_stats(xval, yval))


def _rel_err(x: float, y: float, slope: float, intercept: float) -> float:
    pred_y = slope * x + intercept
    offset = abs(y - pred_y)
    if pred_y == 0:
        return offset
    return offset / pred_y


def ls_error(
    xval: Iterable[float], yval: Iterable[float], etype: LsErrorType
) -> float:
    """Average or maximum relative error of the least-squares fit."""
    if not isinstance(etype, LsErrorType):
        raise ValueError(f"Invalid error type: {etype!r}")
    xs = list(xval)
    ys = list(yval)
    s = _stats(xs, ys)
    slope = _slope(s)
    intercept = _intercept(s)
    errors = [_rel_err(x, y, slope, intercept) for x, y in zip(xs, ys)]
    if etype is LsErrorType.AVG:
        return sum(errors) / len(errors)
    if not errors:
        raise ZeroDivisionError("no data points")
    return max(0.0, max(errors))