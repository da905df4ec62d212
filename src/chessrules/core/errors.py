"""Exceptions raised when a caller breaks the generate/commit contract."""

from __future__ import annotations


class RulesError(ValueError):
    """Base class for rules-engine contract violations."""


class InvalidSourceError(RulesError):
    """The source square is empty or holds a piece of the side not to move."""


class IllegalDestinationError(RulesError):
    """The destination is not among the squares generated for the source."""
