"""Easing curves for marker interpolation.

Every curve maps ``t`` in ``[0, 1]`` onto ``[0, 1]``, is monotonic, and hits
both endpoints exactly, so a segment always starts at its origin and ends on
its target.
"""
from __future__ import annotations

from typing import Callable

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def smoothstep(t: float) -> float:
    return t * t * (3 - 2 * t)


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "smoothstep": smoothstep,
}


def get_easing(name: str) -> Easing:
    """Look up an easing curve by name.

    Raises ``ValueError`` for unknown names.
    """
    try:
        return EASINGS[name]
    except KeyError:
        known = ", ".join(sorted(EASINGS))
        raise ValueError(f"Unknown easing {name!r}; expected one of: {known}") from None
