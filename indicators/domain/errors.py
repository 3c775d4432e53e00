"""Error types raised and reported by the indicator document pipeline.

Two disjoint categories exist:

- ``DecodeError``: the input could not be turned into a ``Document``. It is
  raised once and ends the pipeline.
- ``ValidationError``: a single rule violation found in a decoded
  ``Document``. The validator returns these in a list and never raises them.
"""

from __future__ import annotations


class IndicatorDocumentError(Exception):
    """Base class for all indicator document errors."""


class DecodeError(IndicatorDocumentError):
    """Raised when raw input cannot be decoded into a ``Document``."""


class ValidationError(IndicatorDocumentError):
    """One rule violation detected in a decoded ``Document``.

    Validation errors compare and hash by message so callers (and tests) can
    treat a list of them as a collection of human-readable findings.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self) -> str:
        return f"ValidationError({self.message!r})"
