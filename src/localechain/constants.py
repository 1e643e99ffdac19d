"""Shared constants for localechain.

Centralized configuration constants used across the metadata and resolution
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for candidate-chain splicing
- Cache limits: Memory bounds for memoized tag parsing
- Discovery: Entry point group for extension metadata sources
- Locale identifiers: Spellings of the root locale

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_SPLICE_DEPTH",
    # Cache limits
    "MAX_TAG_CACHE_SIZE",
    # Discovery
    "DEFAULT_ENTRY_POINT_GROUP",
    # Locale identifiers
    "ROOT_IDENTIFIERS",
    "ROOT_LANGUAGE_TAG",
    "ROOT_POSIX_IDENTIFIER",
    "DEFAULT_REGULAR_ANCHORS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum number of nested splices while resolving one candidate chain.
# Each splice follows an irregular parent, and real CLDR data never nests
# more than two or three deep. Reaching this limit means the override table
# contains a cycle.
MAX_SPLICE_DEPTH: int = 32

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Parsed LocaleTag instances kept by parse_tag's LRU cache.
MAX_TAG_CACHE_SIZE: int = 1024

# ============================================================================
# DISCOVERY
# ============================================================================

DEFAULT_ENTRY_POINT_GROUP: str = "localechain.metadata"

# ============================================================================
# LOCALE IDENTIFIERS
# ============================================================================

ROOT_LANGUAGE_TAG: str = "und"
ROOT_POSIX_IDENTIFIER: str = "root"

# Case-insensitive spellings that all denote the root locale.
ROOT_IDENTIFIERS: frozenset[str] = frozenset({"", ROOT_LANGUAGE_TAG, ROOT_POSIX_IDENTIFIER})

# Locales known to have no irregular parent. The parent cache starts with
# these entries so the most common lookups never scan the override table.
DEFAULT_REGULAR_ANCHORS: tuple[str, ...] = (ROOT_LANGUAGE_TAG, "en", "en-US")
