"""Configuration for LocaleProviderAdapter.

Provides a single frozen dataclass that encapsulates the adapter's tunable
parameters, validated once at construction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from localechain.constants import (
    DEFAULT_ENTRY_POINT_GROUP,
    DEFAULT_REGULAR_ANCHORS,
    MAX_SPLICE_DEPTH,
)

__all__ = ["AdapterConfig"]


@dataclass(frozen=True, slots=True)
class AdapterConfig:
    """Immutable configuration for LocaleProviderAdapter.

    All fields have sensible defaults; ``AdapterConfig()`` with no arguments
    is the production configuration.

    Attributes:
        discover_extension: Look up an extension metadata source through
            entry points when none is passed explicitly (default: True).
        entry_point_group: Entry point group searched during discovery
            (default: "localechain.metadata").
        max_splice_depth: Maximum nesting of irregular-parent splices while
            resolving one chain (default: 32).
        regular_anchors: Tags the parent cache is seeded with as having no
            irregular parent (default: und, en, en-US).

    Example:
        >>> config = AdapterConfig(discover_extension=False)
        >>> config.entry_point_group
        'localechain.metadata'
    """

    discover_extension: bool = True
    entry_point_group: str = DEFAULT_ENTRY_POINT_GROUP
    max_splice_depth: int = MAX_SPLICE_DEPTH
    regular_anchors: tuple[str, ...] = DEFAULT_REGULAR_ANCHORS

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_splice_depth is not positive or
                entry_point_group is blank.
        """
        if self.max_splice_depth <= 0:
            msg = "max_splice_depth must be positive"
            raise ValueError(msg)
        if not self.entry_point_group.strip():
            msg = "entry_point_group must not be blank"
            raise ValueError(msg)
        object.__setattr__(self, "regular_anchors", tuple(self.regular_anchors))
