"""Core utilities shared across the metadata and resolution layers.

This package provides the foundations both layers depend on. Isolating them
here keeps the dependency graph acyclic:

    core <- tags <- metadata <- resolution <- adapter

Exports:
    DepthGuard: Context manager for recursion depth limiting
    LocaleChainError: Base exception for the package
    InvalidLocaleTagError: Raised for unparsable locale tags
    InconsistentChainError: Raised for malformed candidate chains
    SpliceDepthExceededError: Raised when splicing recurses too deeply

Python 3.13+.
"""

from .depth_guard import DepthGuard
from .errors import (
    InconsistentChainError,
    InvalidLocaleTagError,
    LocaleChainError,
    SpliceDepthExceededError,
)

__all__ = [
    "DepthGuard",
    "InconsistentChainError",
    "InvalidLocaleTagError",
    "LocaleChainError",
    "SpliceDepthExceededError",
]
