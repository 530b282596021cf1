"""
Similarity scorers for the ranking engine.

Re-exports the two default scorers (`similarity_bigram`,
`similarity_edit_distance`), `levenshtein_distance`, the `rounded` wrapper
and the registry helpers. Importing this package fills `SCORER_REGISTRY` with
"sorensen_dice", "levenshtein", "tfidf_char_cosine" and "token_set_ratio".
"""

from .registry import SCORER_REGISTRY, Scorer, ScorerLike, get_scorer, resolve_scorers  # noqa: F401
from ._text import rounded  # noqa: F401

# Import modules that register themselves in the registry on import.
from .sorensen_dice import similarity_bigram  # noqa: F401
from .levenshtein import levenshtein_distance, similarity_edit_distance  # noqa: F401
from . import tfidf_char_cosine  # noqa: F401
from . import token_set_ratio  # noqa: F401  # side-effect: registers 'token_set_ratio'
