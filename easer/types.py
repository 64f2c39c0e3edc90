"""Shared type aliases and exceptions for easer."""

from __future__ import annotations

from typing import Callable

ShapeFn = Callable[[float], float]


class UnknownEasingError(KeyError):
    """Raised when an easing is looked up by a name that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown easing: '{name}'")
