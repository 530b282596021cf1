"""Input handling shared by the built-in scorers."""

from __future__ import annotations

import functools
from typing import Optional

from .registry import Scorer


def coerce_text(value) -> Optional[str]:
    """Return `value` as a string, `""` for None, or None if it is not text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return None


def rounded(scorer: Scorer, ndigits: int = 5) -> Scorer:
    """Wrap `scorer` so its output is rounded to `ndigits` decimal places.

    Scores that differ only past the rounding point then compare equal in the
    ranking engine and fall through to the next scorer in the chain.
    """

    @functools.wraps(scorer)
    def _rounded(text_a: str, text_b: str) -> float:
        return round(float(scorer(text_a, text_b)), ndigits)

    return _rounded
