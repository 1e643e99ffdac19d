"""Pytest configuration for the localechain test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from localechain.config import AdapterConfig
from localechain.metadata.sources import StaticMetadataSource
from localechain.tags import clear_tag_cache

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def no_discovery() -> AdapterConfig:
    """Adapter configuration that never consults installed entry points."""
    return AdapterConfig(discover_extension=False)


@pytest.fixture
def static_source() -> StaticMetadataSource:
    """Small CLDR-like metadata source with a few irregular parents."""
    return StaticMetadataSource(
        tags={
            "AvailableLocales": "en en-US en-GB en-001 en-150 es es-419 es-AR es-MX zh zh-Hant",
            "FormatData": "en es",
        },
        parents={
            "en-001": ["en-150", "en-GB", "en-IN"],
            "es-419": ["es-AR", "es-MX", "es-US"],
            "und": ["zh-Hant"],
        },
    )


@pytest.fixture(autouse=True, scope="module")
def _fresh_tag_cache() -> None:
    """Start every test module with an empty parse_tag cache."""
    clear_tag_cache()
