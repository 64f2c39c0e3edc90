"""Shape functions for easing sequences.

Every function maps progress in (0, 1] to a coefficient, and every one of
them returns exactly 1.0 at progress 1. Intermediate values are not clamped.
"""
from __future__ import annotations

import math

from easer.types import ShapeFn

_HALF_PI = math.pi / 2


def linear(x: float) -> float:
    return x


def quad_in(x: float) -> float:
    return x * x


def quad_out(x: float) -> float:
    return -(x * (x - 2))


def quad_inout(x: float) -> float:
    if x < 0.5:
        return 2 * x * x
    return (-2 * x * x) + (4 * x) - 1


def cubic_in(x: float) -> float:
    return x * x * x


def cubic_out(x: float) -> float:
    y = x - 1
    return y * y * y + 1


def cubic_inout(x: float) -> float:
    if x < 0.5:
        return 4 * x * x * x
    y = (2 * x) - 2
    return 0.5 * y * y * y + 1


def quartic_in(x: float) -> float:
    return x * x * x * x


def quartic_out(x: float) -> float:
    y = x - 1
    return y * y * y * (1 - x) + 1


def quartic_inout(x: float) -> float:
    if x < 0.5:
        return 8 * x * x * x * x
    y = x - 1
    return -8 * y * y * y * y + 1


def sin_in(x: float) -> float:
    return math.sin((x - 1) * _HALF_PI) + 1


def sin_out(x: float) -> float:
    return math.sin(x * _HALF_PI)


def sin_inout(x: float) -> float:
    # Circular arcs joined at the midpoint.
    if x < 0.5:
        return 0.5 * (1 - math.sqrt(1 - 4 * x * x))
    return 0.5 * (math.sqrt(-((2 * x) - 3) * ((2 * x) - 1)) + 1)


def exp_in(x: float) -> float:
    if x == 0:
        return 0.0
    return 2 ** (10 * (x - 1))


def exp_out(x: float) -> float:
    if x == 1:
        return 1.0
    return 1 - 2 ** (-10 * x)


def exp_inout(x: float) -> float:
    if x == 1:
        return 1.0
    if x == 0:
        return 0.0
    if x < 0.5:
        return 0.5 * 2 ** ((20 * x) - 10)
    return -0.5 * 2 ** ((-20 * x) + 10) + 1


EASINGS: dict[str, ShapeFn] = {
    "linear": linear,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "quad_inout": quad_inout,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_inout": cubic_inout,
    "quartic_in": quartic_in,
    "quartic_out": quartic_out,
    "quartic_inout": quartic_inout,
    "sin_in": sin_in,
    "sin_out": sin_out,
    "sin_inout": sin_inout,
    "exp_in": exp_in,
    "exp_out": exp_out,
    "exp_inout": exp_inout,
}
