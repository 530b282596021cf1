"""
Ranking engine: pick the haystack entry whose key best matches a query.

Scorers are applied one after another. Each stage keeps only the candidates
that reached the stage's top score, so a later scorer can only decide between
candidates an earlier one left tied. When the whole chain leaves a tie, the
candidate that comes first in the haystack wins.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from .scorers import ScorerLike, resolve_scorers
from .scorers.levenshtein import similarity_edit_distance
from .scorers.sorensen_dice import similarity_bigram

logger = logging.getLogger(__name__)

V = TypeVar("V")

DEFAULT_SCORERS = (similarity_bigram, similarity_edit_distance)


@dataclass(frozen=True)
class RankedMatch(Generic[V]):
    """One candidate with its scores, in scorer-chain order."""

    key: str
    value: V
    scores: Tuple[float, ...]


def _scorer_name(scorer) -> str:
    return getattr(scorer, "__name__", type(scorer).__name__)


def _score(scorer, query: str, key: str) -> float:
    # NaN ranks below every real score.
    score = scorer(query, key)
    if isinstance(score, float) and math.isnan(score):
        return -math.inf
    return score


def find_best_match(
    query: str,
    haystack: Iterable[Tuple[str, V]],
    scorers: Sequence[ScorerLike],
    *,
    threshold: Optional[float] = None,
) -> Optional[V]:
    """Return the value of the candidate whose key best matches `query`.

    Args:
        query: The string to look for.
        haystack: Ordered `(key, value)` pairs. Keys may repeat.
        scorers: Non-empty chain of scorer callables or registered names,
            applied in order to break ties left by the previous one.
        threshold: If set, candidates scoring below it under the first scorer
            are dropped before ranking.

    Returns:
        The winning value, or None if the haystack is empty or no candidate
        reaches `threshold`.

    Raises:
        InvalidScorerChainError: If `scorers` is empty.
    """
    chain = resolve_scorers(scorers)
    remaining = list(haystack)
    if not remaining:
        logger.debug("Empty haystack for query %r", query)
        return None

    for stage, scorer in enumerate(chain):
        scored = [(_score(scorer, query, key), key, value) for key, value in remaining]
        if stage == 0 and threshold is not None:
            scored = [entry for entry in scored if entry[0] >= threshold]
            if not scored:
                logger.debug("No candidate for %r reached threshold %s", query, threshold)
                return None

        best = max(score for score, _key, _value in scored)
        remaining = [(key, value) for score, key, value in scored if score == best]
        logger.debug(
            "Scorer %s kept %d candidate(s) at %r for query %r",
            _scorer_name(scorer), len(remaining), best, query,
        )
        if len(remaining) == 1:
            return remaining[0][1]

    logger.debug(
        "%d candidates still tied for %r after %d scorer(s); taking the first",
        len(remaining), query, len(chain),
    )
    return remaining[0][1]


def rank_matches(
    query: str,
    haystack: Iterable[Tuple[str, V]],
    scorers: Sequence[ScorerLike],
    *,
    limit: Optional[int] = None,
    threshold: Optional[float] = None,
) -> List[RankedMatch[V]]:
    """Score every candidate with every scorer and sort best first.

    Candidates are ordered by their score tuple, compared element by element
    in chain order; equal tuples keep haystack order. The first element holds
    the same value `find_best_match` returns for these arguments.
    """
    chain = resolve_scorers(scorers)
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    ranked = [
        RankedMatch(key, value, tuple(_score(scorer, query, key) for scorer in chain))
        for key, value in haystack
    ]
    if threshold is not None:
        ranked = [match for match in ranked if match.scores[0] >= threshold]
    # sort() is stable, so haystack order survives among equal score tuples.
    ranked.sort(key=lambda match: match.scores, reverse=True)
    return ranked if limit is None else ranked[:limit]


def fuzzy_match(
    query: str,
    haystack: Iterable[Tuple[str, V]],
    *,
    threshold: Optional[float] = None,
) -> Optional[V]:
    """Find the best match using bigram similarity, then edit distance for ties.

    >>> fuzzy_match("bust", [("rust", 0), ("java", 1), ("lisp", 2)])
    0
    """
    return find_best_match(query, haystack, DEFAULT_SCORERS, threshold=threshold)
