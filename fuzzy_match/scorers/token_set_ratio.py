"""
Token Set Ratio scorer (RapidFuzz).

Summary:
- Order-insensitive word matching with duplicate handling. Uses
  `rapidfuzz.fuzz.token_set_ratio` and normalizes the percentage to [0, 1].

When to use:
- Multi-word keys whose words may come in any order ("york new" vs
  "new york"). Useful as a first scorer in a chain ahead of the character
  level scorers, or as a tie-breaker after them.

Limitations:
- Purely lexical; a typo inside a word costs more than in the bigram scorer.
- Inputs go through `rapidfuzz.utils.default_process` (lowercase, punctuation
  removed), so keys differing only in punctuation compare equal. When that
  leaves nothing, the original strings are compared for equality instead.

Score range:
- Returns a float in [0.0, 1.0]. Both blank -> 1.0; exactly one blank -> 0.0.
"""

from ._text import coerce_text
from .registry import SCORER_REGISTRY


def score_token_set_ratio(text_a: str, text_b: str) -> float:
    from rapidfuzz import fuzz
    from rapidfuzz import utils as rf_utils

    a = coerce_text(text_a)
    b = coerce_text(text_b)
    if a is None or b is None:
        return 0.0
    a_proc = rf_utils.default_process(a)
    b_proc = rf_utils.default_process(b)
    if not a_proc and not b_proc:
        # Nothing but punctuation/whitespace on both sides.
        return 1.0 if a.strip() == b.strip() else 0.0
    if not a_proc or not b_proc:
        return 0.0
    return fuzz.token_set_ratio(a_proc, b_proc) / 100.0


# Register in global registry
SCORER_REGISTRY["token_set_ratio"] = score_token_set_ratio
