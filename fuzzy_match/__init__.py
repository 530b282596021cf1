"""
Find the closest string in a haystack of ``(key, value)`` pairs.

>>> from fuzzy_match import fuzzy_match
>>> fuzzy_match("bust", [("rust", 0), ("java", 1), ("lisp", 2)])
0
"""

from .errors import FuzzyMatchError, InvalidScorerChainError, UnknownScorerError
from .ranking import RankedMatch, find_best_match, fuzzy_match, rank_matches
from .scorers import (
    SCORER_REGISTRY,
    Scorer,
    get_scorer,
    levenshtein_distance,
    resolve_scorers,
    rounded,
    similarity_bigram,
    similarity_edit_distance,
)

__all__ = [
    "FuzzyMatchError",
    "InvalidScorerChainError",
    "UnknownScorerError",
    "RankedMatch",
    "find_best_match",
    "fuzzy_match",
    "rank_matches",
    "SCORER_REGISTRY",
    "Scorer",
    "get_scorer",
    "levenshtein_distance",
    "resolve_scorers",
    "rounded",
    "similarity_bigram",
    "similarity_edit_distance",
]
