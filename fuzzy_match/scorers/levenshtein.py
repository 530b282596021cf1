"""
Normalized Levenshtein similarity (RapidFuzz).

Summary:
- Counts the minimum number of single-character insertions, deletions and
  substitutions turning one string into the other with
  `rapidfuzz.distance.Levenshtein.distance`, then maps the distance to
  `1 - d / max(len(a), len(b), 1)`.

Pros:
- Distinguishes candidates that share the same bigrams but need a different
  number of edits, which makes it the default tie-breaker after bigram overlap.

Cons:
- Case-sensitive; distance grows with string length, so long keys are
  penalized less per edit.

Score range:
- Returns a float in [0.0, 1.0]. Two empty strings -> 1.0.
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from ._text import coerce_text
from .registry import SCORER_REGISTRY


def levenshtein_distance(text_a: str, text_b: str) -> int:
    """Unit-cost edit distance between two strings, over code points."""
    return Levenshtein.distance(text_a, text_b)


def similarity_edit_distance(text_a: str, text_b: str) -> float:
    a = coerce_text(text_a)
    b = coerce_text(text_b)
    if a is None or b is None:
        return 0.0
    distance = levenshtein_distance(a, b)
    return 1.0 - distance / max(len(a), len(b), 1)


# Register in global registry
SCORER_REGISTRY["levenshtein"] = similarity_edit_distance
