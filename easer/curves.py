"""Named constructors for easing sequences."""
from __future__ import annotations

import logging

from easer import easing
from easer.easing import EASINGS
from easer.sequence import EasingSequence
from easer.types import UnknownEasingError

logger = logging.getLogger(__name__)


def ease(name: str, start: float, end: float, steps: int) -> EasingSequence:
    """Build a sequence for the easing registered under ``name``.

    Raises UnknownEasingError if no easing has that name.
    """
    shape_fn = EASINGS.get(name)
    if shape_fn is None:
        raise UnknownEasingError(name)
    seq = EasingSequence(start, end, steps, shape_fn)
    logger.debug("Resolved easing '%s' for %d steps", name, steps)
    return seq


def linear(start: float, end: float, steps: int) -> EasingSequence:
    """Evenly spaced values: an arithmetic progression ending at ``end``."""
    return EasingSequence(start, end, steps, easing.linear)


def quad_in(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.quad_in)


def quad_out(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.quad_out)


def quad_inout(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.quad_inout)


def cubic_in(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.cubic_in)


def cubic_out(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.cubic_out)


def cubic_inout(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.cubic_inout)


def quartic_in(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.quartic_in)


def quartic_out(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.quartic_out)


def quartic_inout(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.quartic_inout)


def sin_in(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.sin_in)


def sin_out(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.sin_out)


def sin_inout(start: float, end: float, steps: int) -> EasingSequence:
    """Two circular arcs meeting at the midpoint, despite the name."""
    return EasingSequence(start, end, steps, easing.sin_inout)


def exp_in(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.exp_in)


def exp_out(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.exp_out)


def exp_inout(start: float, end: float, steps: int) -> EasingSequence:
    return EasingSequence(start, end, steps, easing.exp_inout)
