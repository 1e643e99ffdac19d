"""Error types shared across the metadata and resolution layers.

All exceptions raised by localechain derive from LocaleChainError, so callers
can catch the whole family with a single except clause. InvalidLocaleTagError
also derives from ValueError for compatibility with code that treats bad
locale input as a value problem.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "InconsistentChainError",
    "InvalidLocaleTagError",
    "LocaleChainError",
    "SpliceDepthExceededError",
]


class LocaleChainError(Exception):
    """Base exception for all localechain errors."""


class InvalidLocaleTagError(LocaleChainError, ValueError):
    """Raised when a string cannot be parsed as a locale tag.

    Attributes:
        tag: The rejected input string
    """

    def __init__(self, tag: str, reason: str | None = None) -> None:
        """Initialize InvalidLocaleTagError.

        Args:
            tag: The rejected input string
            reason: Optional detail from the underlying parser
        """
        message = f"Invalid locale tag: {tag!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.tag = tag


class InconsistentChainError(LocaleChainError):
    """Raised when a candidate chain violates its structural contract.

    A candidate chain handed to the resolver must be non-empty and end with
    the root locale. Anything else is a programming error in the regular
    chain producer and is never recovered from.

    Attributes:
        chain: The offending chain (as a tuple), or None when not applicable
    """

    def __init__(self, message: str, chain: Sequence[object] | None = None) -> None:
        super().__init__(message)
        self.chain = tuple(chain) if chain is not None else None


class SpliceDepthExceededError(InconsistentChainError):
    """Raised when recursive splicing nests deeper than the configured limit.

    Indicates a cycle in the parent-override table: following irregular
    parents never reaches the root locale.

    Attributes:
        max_depth: The limit that was exceeded
    """

    def __init__(self, max_depth: int) -> None:
        super().__init__(
            f"Candidate chain splicing exceeded maximum depth of {max_depth}; "
            "the parent-override table likely contains a cycle"
        )
        self.max_depth = max_depth
