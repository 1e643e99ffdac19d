"""Candidate locale chains: regular fallback and irregular-parent splicing.

A candidate chain lists the locales searched for a resource, most specific
first and root last. The regular chain is derived by truncating the tag
(regular_candidates). resolve_candidates then rewrites it to honor irregular
parents from the override table:

    regular:   es-AR -> es -> root
    override:  es-AR falls back to es-419
    resolved:  es-AR -> es-419 -> es -> root

Only the first divergence of a chain is spliced. Everything after it is the
recursively resolved chain of the irregular parent, so overrides further
down are still honored by the recursive call.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeAlias

from localechain.constants import MAX_SPLICE_DEPTH
from localechain.core.depth_guard import DepthGuard
from localechain.core.errors import InconsistentChainError
from localechain.tags import ROOT, LocaleTag

__all__ = [
    "ParentLookup",
    "RegularChainProducer",
    "regular_candidates",
    "resolve_candidates",
]

logger = logging.getLogger(__name__)

ParentLookup: TypeAlias = Callable[[LocaleTag], LocaleTag | None]
"""Returns the irregular parent of a locale, or None."""

RegularChainProducer: TypeAlias = Callable[[str, LocaleTag], Sequence[LocaleTag]]
"""Returns the regular, root-terminated chain for (base_name, locale)."""


def _with_variants(
    language: str, script: str, territory: str, variants: tuple[str, ...]
) -> list[LocaleTag]:
    """Return language-script-territory plus each shrinking variant list, longest first."""
    tags = [
        LocaleTag(language, script, territory, "-".join(variants[:count]))
        for count in range(len(variants), 0, -1)
    ]
    if territory:
        tags.append(LocaleTag(language, script, territory))
    return tags


def regular_candidates(base_name: str, locale: LocaleTag) -> list[LocaleTag]:
    """Return the regular fallback chain for a locale.

    Extensions are dropped. Variants are removed one at a time from the
    end, then the territory, then (for tags with a script) the whole
    script-qualified sequence is repeated without the script. A tag without
    a language (und-US) keeps its own forms and falls back straight to root.

    Args:
        base_name: Resource family name; accepted for interface compatibility
            with custom producers, not used
        locale: Requested locale

    Returns:
        Root-terminated chain without duplicates

    Example:
        >>> from localechain.tags import parse_tag
        >>> [t.to_language_tag() for t in regular_candidates("msgs", parse_tag("zh-Hant-TW"))]
        ['zh-Hant-TW', 'zh-Hant', 'zh-TW', 'zh', 'und']
    """
    del base_name
    tag = locale.strip_extensions()
    if tag.is_root:
        return [ROOT]

    chain: list[LocaleTag] = []
    if tag.script:
        chain.extend(_with_variants(tag.language, tag.script, tag.territory, tag.variants))
        chain.append(LocaleTag(tag.language, tag.script))
    chain.extend(_with_variants(tag.language, "", tag.territory, tag.variants))
    if tag.language:
        chain.append(LocaleTag(tag.language))
    chain.append(ROOT)
    return list(dict.fromkeys(chain))


def _check_chain(chain: Sequence[LocaleTag]) -> None:
    """Validate the root-termination precondition of a candidate chain.

    Raises:
        InconsistentChainError: If chain is empty or does not end with ROOT
    """
    if not chain:
        msg = "Candidate chain is empty; expected at least the root locale"
        raise InconsistentChainError(msg, chain)
    if chain[-1] != ROOT:
        msg = (
            f"Candidate chain must end with the root locale, got "
            f"{[tag.to_language_tag() for tag in chain]}"
        )
        raise InconsistentChainError(msg, chain)


def _resolve(
    base_name: str,
    regular_chain: Sequence[LocaleTag],
    parent_of: ParentLookup,
    regular_chain_for: RegularChainProducer,
    guard: DepthGuard,
) -> list[LocaleTag]:
    """Splice the first irregular parent of regular_chain, recursing under guard."""
    _check_chain(regular_chain)

    for index, locale in enumerate(regular_chain):
        if locale == ROOT:
            continue
        parent = parent_of(locale)
        if parent is None or regular_chain[index + 1] == parent:
            continue

        logger.debug(
            "Splicing irregular parent %s after %s in candidate chain for %r",
            parent,
            locale,
            base_name,
        )
        with guard:
            tail = _resolve(
                base_name,
                regular_chain_for(base_name, parent),
                parent_of,
                regular_chain_for,
                guard,
            )
        return list(dict.fromkeys([*regular_chain[: index + 1], *tail]))

    return list(regular_chain)


def resolve_candidates(
    base_name: str,
    regular_chain: Sequence[LocaleTag],
    *,
    parent_of: ParentLookup,
    regular_chain_for: RegularChainProducer = regular_candidates,
    max_depth: int = MAX_SPLICE_DEPTH,
) -> list[LocaleTag]:
    """Rewrite a regular chain so that it honors irregular parents.

    Walks the chain; at the first non-root locale whose irregular parent p
    is not already the next element, the result is the chain up to and
    including that locale, followed by the resolved chain of p. Without such
    a locale the chain is returned unchanged.

    Args:
        base_name: Resource family name, passed through to regular_chain_for
        regular_chain: Regular chain, most specific first, ending with ROOT
        parent_of: Irregular parent lookup (e.g. a ParentResolver)
        regular_chain_for: Producer of regular chains for irregular parents
        max_depth: Maximum splice nesting before a cycle is assumed

    Returns:
        Resolved, root-terminated chain without duplicates

    Raises:
        InconsistentChainError: If a chain (given or produced) is empty or
            does not end with ROOT
        SpliceDepthExceededError: If splicing nests deeper than max_depth

    Example:
        >>> from localechain.resolution.parents import ParentOverrideTable, ParentResolver
        >>> from localechain.tags import parse_tag
        >>> resolver = ParentResolver(ParentOverrideTable({parse_tag("es-419"): ["es-AR"]}))
        >>> chain = regular_candidates("msgs", parse_tag("es-AR"))
        >>> [t.to_language_tag() for t in resolve_candidates("msgs", chain, parent_of=resolver)]
        ['es-AR', 'es-419', 'es', 'und']
    """
    guard = DepthGuard(max_depth=max_depth)
    return _resolve(base_name, regular_chain, parent_of, regular_chain_for, guard)
