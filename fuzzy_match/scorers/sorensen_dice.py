"""
Bigram overlap similarity (Sorensen-Dice coefficient).

Summary:
- Splits both strings into contiguous character bigrams and returns
  `2 * |A ∩ B| / (|A| + |B|)` over the two bigram multisets.

Normalization:
- Case-insensitive (`str.casefold`). Bigrams that contain whitespace are
  skipped, so "new york" yields the bigrams of "new" and "york" only.

Pros:
- Cheap and tolerant to a single wrong character in the middle of a word.
- Repeated bigrams count as many times as they occur in both strings, so
  "aaaa" is closer to "aaa" than to "a a".

Cons:
- Transpositions and very short strings (< 2 characters) carry little or no
  signal; pair it with an edit-distance scorer to break ties.

Score range:
- Returns a float in [0.0, 1.0]. If neither string has a bigram, returns 1.0
  when the normalized strings are equal and 0.0 otherwise; if exactly one has
  no bigram, returns 0.0.
"""

from __future__ import annotations

from collections import Counter

from ._text import coerce_text
from .registry import SCORER_REGISTRY


def bigrams(text: str) -> Counter:
    """Multiset of whitespace-free bigrams of the casefolded `text`."""
    folded = text.casefold()
    return Counter(
        a + b
        for a, b in zip(folded, folded[1:])
        if not (a.isspace() or b.isspace())
    )


def similarity_bigram(text_a: str, text_b: str) -> float:
    a = coerce_text(text_a)
    b = coerce_text(text_b)
    if a is None or b is None:
        return 0.0

    bigrams_a = bigrams(a)
    bigrams_b = bigrams(b)
    if not bigrams_a and not bigrams_b:
        return 1.0 if a.casefold() == b.casefold() else 0.0
    if not bigrams_a or not bigrams_b:
        return 0.0

    shared = sum((bigrams_a & bigrams_b).values())
    total = sum(bigrams_a.values()) + sum(bigrams_b.values())
    return 2.0 * shared / total


# Register in global registry
SCORER_REGISTRY["sorensen_dice"] = similarity_bigram
