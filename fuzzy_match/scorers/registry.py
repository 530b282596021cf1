"""
Global scorer registry.

Exposes `SCORER_REGISTRY`: a mapping from a string key to a callable of the
form `(text_a: str, text_b: str) -> float` where a higher value means more
similar. Built-in scorers return a similarity in the range [0.0, 1.0].

Scorer chains handed to the ranking engine may mix registered names and plain
callables; `resolve_scorers` turns such a chain into callables.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Union

from ..errors import InvalidScorerChainError, UnknownScorerError

Scorer = Callable[[str, str], float]
ScorerLike = Union[str, Scorer]

SCORER_REGISTRY: Dict[str, Scorer] = {}


def get_scorer(name: str) -> Scorer:
    """Return the scorer registered under `name`."""
    try:
        return SCORER_REGISTRY[name]
    except KeyError:
        raise UnknownScorerError(name, SCORER_REGISTRY.keys()) from None


def resolve_scorers(scorers: Sequence[ScorerLike]) -> List[Scorer]:
    """Turn a chain of names and/or callables into a list of callables.

    Raises `InvalidScorerChainError` when the chain is empty or holds an entry
    that is neither a registered name nor callable, and `UnknownScorerError`
    for a name that is not registered.
    """
    if isinstance(scorers, str):
        scorers = [scorers]
    resolved: List[Scorer] = []
    for entry in scorers or ():
        if isinstance(entry, str):
            resolved.append(get_scorer(entry))
        elif callable(entry):
            resolved.append(entry)
        else:
            raise InvalidScorerChainError(
                f"Scorer chain entries must be names or callables, got {type(entry).__name__}"
            )
    if not resolved:
        raise InvalidScorerChainError("Scorer chain must contain at least one scorer")
    return resolved
