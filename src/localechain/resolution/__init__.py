"""Candidate-chain resolution.

Submodules:
    parents     - ParentOverrideTable, ParentCache, ParentResolver
    candidates  - regular_candidates, resolve_candidates
    equivalence - canonical_equivalent (legacy identifier mapping)
    support     - is_supported

Python 3.13+.
"""

from localechain.resolution.candidates import (
    ParentLookup,
    RegularChainProducer,
    regular_candidates,
    resolve_candidates,
)
from localechain.resolution.equivalence import EQUIVALENT_LOCALES, canonical_equivalent
from localechain.resolution.parents import ParentCache, ParentOverrideTable, ParentResolver
from localechain.resolution.support import is_supported

__all__ = [
    "EQUIVALENT_LOCALES",
    "ParentCache",
    "ParentLookup",
    "ParentOverrideTable",
    "ParentResolver",
    "RegularChainProducer",
    "canonical_equivalent",
    "is_supported",
    "regular_candidates",
    "resolve_candidates",
]
