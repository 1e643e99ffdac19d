"""Discovery of an optional extension metadata source.

Extension packages register a metadata source under an entry point group
(default "localechain.metadata") in their packaging metadata:

    [project.entry-points."localechain.metadata"]
    extra = "mypackage.locales:ExtraLocaleMetadata"

The entry point may name a class (instantiated with no arguments) or a
ready-made instance. The first source whose adapter_type matches the
requested type wins.

Discovery never fails: any error while loading or constructing a source is
logged and treated as "no extension source", so the base source keeps
working on its own.

Python 3.13+.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import TYPE_CHECKING

from localechain.constants import DEFAULT_ENTRY_POINT_GROUP
from localechain.enums import AdapterType

if TYPE_CHECKING:
    from localechain.metadata.sources import MetadataSource

__all__ = ["discover_extension_source"]

logger = logging.getLogger(__name__)


def _find_source(group: str, adapter_type: AdapterType) -> MetadataSource | None:
    for entry_point in entry_points(group=group):
        loaded = entry_point.load()
        source = loaded() if isinstance(loaded, type) else loaded
        if getattr(source, "adapter_type", None) == adapter_type:
            logger.debug(
                "Using extension metadata source %r from entry point %r",
                source,
                entry_point.name,
            )
            return source
    return None


def discover_extension_source(
    group: str = DEFAULT_ENTRY_POINT_GROUP,
    adapter_type: AdapterType = AdapterType.CLDR,
) -> MetadataSource | None:
    """Find the installed extension metadata source, if any.

    Args:
        group: Entry point group to search
        adapter_type: Only sources describing this kind of data qualify

    Returns:
        The first matching source, or None if there is none or discovery
        failed for any reason
    """
    try:
        return _find_source(group, adapter_type)
    except Exception:  # noqa: BLE001 - discovery failure must never propagate
        logger.warning(
            "Extension metadata discovery failed for group %r; "
            "continuing with the base source only",
            group,
            exc_info=True,
        )
        return None
