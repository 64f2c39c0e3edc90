"""Stepping iterator shared by every easing curve."""

from __future__ import annotations

import logging
from typing import Iterator

from easer.types import ShapeFn

logger = logging.getLogger(__name__)


class EasingSequence:
    """Finite, forward-only sequence of values from ``start`` to ``end``.

    Step ``i`` (1-based) produces ``shape_fn(i / total_steps) * distance + start``,
    so the last value always corresponds to progress 1 and, for shapes that
    reach 1 there, equals ``end`` exactly. Once all steps are
    produced the sequence stays exhausted; build a new one to start over.
    """

    def __init__(
        self, start: float, end: float, total_steps: int, shape_fn: ShapeFn
    ) -> None:
        if not isinstance(total_steps, int) or total_steps <= 0:
            raise ValueError(
                f"total_steps must be a positive integer, got {total_steps!r}"
            )
        self._start = start
        self._end = end
        self._distance = end - start
        self._total_steps = total_steps
        self._shape_fn = shape_fn
        self._step = 0

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def total_steps(self) -> int:
        return self._total_steps

    @property
    def current_step(self) -> int:
        return self._step

    @property
    def shape_fn(self) -> ShapeFn:
        return self._shape_fn

    @property
    def remaining(self) -> int:
        return max(self._total_steps - self._step, 0)

    @property
    def exhausted(self) -> bool:
        return self._step > self._total_steps

    def advance(self) -> float | None:
        """Produce the next value, or None once every step has been produced."""
        if self._step > self._total_steps:
            return None
        self._step += 1
        if self._step > self._total_steps:
            logger.debug("%r exhausted", self)
            return None
        x = self._step / self._total_steps
        coefficient = self._shape_fn(x)
        if self._step == self._total_steps and coefficient == 1:
            # end - start + start can miss end by one ulp
            return self._end
        return coefficient * self._distance + self._start

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        value = self.advance()
        if value is None:
            raise StopIteration
        return value

    def __length_hint__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        name = getattr(self._shape_fn, "__name__", repr(self._shape_fn))
        return (
            f"EasingSequence({name}, start={self._start!r}, end={self.end!r}, "
            f"step={min(self._step, self._total_steps)}/{self._total_steps})"
        )
