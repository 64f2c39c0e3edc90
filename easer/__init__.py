"""easer - Easing curves as finite, stepped value sequences."""
from __future__ import annotations

from easer.curves import (
    cubic_in,
    cubic_inout,
    cubic_out,
    ease,
    exp_in,
    exp_inout,
    exp_out,
    linear,
    quad_in,
    quad_inout,
    quad_out,
    quartic_in,
    quartic_inout,
    quartic_out,
    sin_in,
    sin_inout,
    sin_out,
)
from easer.easing import EASINGS
from easer.sequence import EasingSequence
from easer.types import ShapeFn, UnknownEasingError

__all__ = [
    "EasingSequence",
    "EASINGS",
    "ShapeFn",
    "UnknownEasingError",
    "ease",
    "linear",
    "quad_in",
    "quad_out",
    "quad_inout",
    "cubic_in",
    "cubic_out",
    "cubic_inout",
    "quartic_in",
    "quartic_out",
    "quartic_inout",
    "sin_in",
    "sin_out",
    "sin_inout",
    "exp_in",
    "exp_out",
    "exp_inout",
]
