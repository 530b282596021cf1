"""Exceptions raised by fuzzy_match."""


class FuzzyMatchError(Exception):
    """Base class for all fuzzy_match errors."""


class InvalidScorerChainError(FuzzyMatchError, ValueError):
    """The scorer chain is empty or holds something that is not a scorer."""


class UnknownScorerError(FuzzyMatchError, KeyError):
    """No scorer is registered under the requested name."""

    def __init__(self, name: str, available):
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown scorer {self.name!r}. Registered scorers: {', '.join(self.available)}"
