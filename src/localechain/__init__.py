"""localechain - locale fallback chains with CLDR irregular parents.

Resolves, for a requested locale, the ordered chain of locales searched for
locale-specific resources, honoring CLDR's parentLocales overrides, and
computes which locale tags a metadata source supports.

Public API:
    LocaleProviderAdapter - Facade: available locales, candidate chains, support checks
    AdapterConfig - Adapter configuration
    LocaleTag, parse_tag, ROOT - Locale identifiers
    resolve_candidates, regular_candidates - Candidate chain algorithms
    ParentResolver, ParentOverrideTable, ParentCache - Irregular parent lookup
    canonical_equivalent, is_supported - Support checking
    build_tag_set - Tag set construction
    StaticMetadataSource, BabelMetadataSource - Metadata sources

Exceptions:
    LocaleChainError - Base exception class
    InvalidLocaleTagError - Unparsable locale tags
    InconsistentChainError - Malformed candidate chains
    SpliceDepthExceededError - Cyclic override data
"""

from .adapter import LocaleProviderAdapter
from .config import AdapterConfig
from .core.errors import (
    InconsistentChainError,
    InvalidLocaleTagError,
    LocaleChainError,
    SpliceDepthExceededError,
)
from .enums import AdapterType, LocaleCategory, ProviderService
from .metadata import (
    BabelMetadataSource,
    MetadataSource,
    StaticMetadataSource,
    build_tag_set,
    discover_extension_source,
)
from .resolution import (
    ParentCache,
    ParentOverrideTable,
    ParentResolver,
    canonical_equivalent,
    is_supported,
    regular_candidates,
    resolve_candidates,
)
from .tags import ENGLISH, ROOT, US, LocaleTag, parse_tag

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localechain")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ENGLISH",
    "ROOT",
    "US",
    "AdapterConfig",
    "AdapterType",
    "BabelMetadataSource",
    "InconsistentChainError",
    "InvalidLocaleTagError",
    "LocaleCategory",
    "LocaleChainError",
    "LocaleProviderAdapter",
    "LocaleTag",
    "MetadataSource",
    "ParentCache",
    "ParentOverrideTable",
    "ParentResolver",
    "ProviderService",
    "SpliceDepthExceededError",
    "StaticMetadataSource",
    "__version__",
    "build_tag_set",
    "canonical_equivalent",
    "discover_extension_source",
    "is_supported",
    "parse_tag",
    "regular_candidates",
    "resolve_candidates",
]
