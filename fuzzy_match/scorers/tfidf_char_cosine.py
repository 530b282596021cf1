"""
TF‑IDF character n‑gram cosine similarity.

Summary:
- Builds TF‑IDF vectors over character n‑grams (2–4 by default) of the two
  inputs with L2 normalization and returns their cosine similarity.

Pros:
- Robust to small typos, insertions/deletions and casing changes.
- Weighs rare n‑grams higher than the plain bigram overlap does.

Cons:
- Surface‑form only; the IDF weights come from the two strings alone, so
  scores are not comparable across very different pairs.
- Requires scikit‑learn and is much slower than the pure‑Python scorers.

Score range:
- Returns a float in [0.0, 1.0]. Both blank -> 1.0; exactly one blank -> 0.0.
"""

from __future__ import annotations

from typing import cast

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity

from ._text import coerce_text
from .registry import SCORER_REGISTRY


def score_tfidf_char_cosine(
    text_a: str,
    text_b: str,
    ngram_low: int = 2,
    ngram_high: int = 4,
) -> float:
    """Compute cosine similarity over TF‑IDF character n‑grams.

    Method: Vectorize `text_a` and `text_b` using character n‑gram TF‑IDF
    (`ngram_low`–`ngram_high`) with L2 normalization, then compute the
    cosine similarity between the two vectors.

    Expected I/O:
    - Input: two strings; internally stripped and lowercased.
    - Output: float in [0.0, 1.0]. If both strings normalize to empty, returns
      1.0; if exactly one is empty, returns 0.0. Strings too short to yield a
      single n‑gram are compared for equality.
    """
    a = coerce_text(text_a)
    b = coerce_text(text_b)
    if a is None or b is None:
        return 0.0
    a = a.strip().lower()
    b = b.strip().lower()

    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    if len(a) < ngram_low and len(b) < ngram_low:
        # No vocabulary to fit on.
        return 1.0 if a == b else 0.0

    vec = TfidfVectorizer(
        analyzer="char", ngram_range=(ngram_low, ngram_high), lowercase=True, norm="l2"
    )
    X = vec.fit_transform([a, b])
    sim = cosine_similarity(X[0], X[1])[0, 0]
    # Ensure a plain Python float in [0, 1]
    return float(max(0.0, min(1.0, cast(float, sim))))


# Register in global registry without altering existing code paths.
SCORER_REGISTRY["tfidf_char_cosine"] = score_tfidf_char_cosine
