"""Tests for AdapterConfig validation and DepthGuard behavior.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
import sys

import pytest

from localechain.config import AdapterConfig
from localechain.constants import DEFAULT_ENTRY_POINT_GROUP, MAX_SPLICE_DEPTH
from localechain.core.depth_guard import DepthGuard, depth_clamp
from localechain.core.errors import SpliceDepthExceededError


class TestAdapterConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self) -> None:
        config = AdapterConfig()
        assert config.discover_extension is True
        assert config.entry_point_group == DEFAULT_ENTRY_POINT_GROUP
        assert config.max_splice_depth == MAX_SPLICE_DEPTH
        assert config.regular_anchors == ("und", "en", "en-US")

    def test_frozen(self) -> None:
        config = AdapterConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_splice_depth = 3  # type: ignore[misc]

    @pytest.mark.parametrize("depth", [0, -1])
    def test_non_positive_depth_rejected(self, depth: int) -> None:
        with pytest.raises(ValueError, match="max_splice_depth must be positive"):
            AdapterConfig(max_splice_depth=depth)

    def test_blank_group_rejected(self) -> None:
        with pytest.raises(ValueError, match="entry_point_group"):
            AdapterConfig(entry_point_group="  ")

    def test_anchors_coerced_to_tuple(self) -> None:
        config = AdapterConfig(regular_anchors=["und", "fr"])  # type: ignore[arg-type]
        assert config.regular_anchors == ("und", "fr")


class TestDepthGuard:
    """Test recursion depth tracking."""

    def test_enter_exit(self) -> None:
        guard = DepthGuard(max_depth=2)
        with guard:
            assert guard.current_depth == 1
            with guard:
                assert guard.current_depth == 2
        assert guard.current_depth == 0

    def test_limit(self) -> None:
        guard = DepthGuard(max_depth=1)
        with guard, pytest.raises(SpliceDepthExceededError) as exc_info, guard:
            pass
        assert exc_info.value.max_depth == 1

    def test_failed_enter_leaves_depth_intact(self) -> None:
        guard = DepthGuard(max_depth=1)
        with guard:
            with pytest.raises(SpliceDepthExceededError):
                guard.__enter__()
            assert guard.current_depth == 1
        assert guard.current_depth == 0

    def test_clamp_within_limit(self) -> None:
        assert depth_clamp(5) == 5

    def test_clamp_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        huge = sys.getrecursionlimit() * 10
        with caplog.at_level(logging.WARNING, logger="localechain.core.depth_guard"):
            clamped = depth_clamp(huge)
        assert clamped < huge
        assert "Clamping" in caplog.text
