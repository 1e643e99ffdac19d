"""Locale metadata: sources, extension discovery, and tag sets.

Submodules:
    sources   - MetadataSource protocol, StaticMetadataSource, BabelMetadataSource
    discovery - Entry-point discovery of an optional extension source
    tagset    - build_tag_set (merge category tag lists into a set)

Python 3.13+.
"""

from localechain.metadata.discovery import discover_extension_source
from localechain.metadata.sources import (
    BabelMetadataSource,
    MetadataSource,
    StaticMetadataSource,
)
from localechain.metadata.tagset import build_tag_set

__all__ = [
    "BabelMetadataSource",
    "MetadataSource",
    "StaticMetadataSource",
    "build_tag_set",
    "discover_extension_source",
]
