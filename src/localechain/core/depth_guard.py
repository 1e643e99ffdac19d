"""Depth limiting for recursive candidate-chain splicing.

Each irregular parent discovered while resolving a candidate chain triggers a
recursive resolution of the parent's own chain. Well-formed override data
terminates after a few levels; a cyclic table would recurse forever. The
guard turns that into a clear SpliceDepthExceededError instead of a
RecursionError.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from localechain.constants import MAX_SPLICE_DEPTH
from localechain.core.errors import SpliceDepthExceededError

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard(max_depth=8)
        with guard:
            tail = _resolve(..., guard)

    Mutability Note:
        Intentionally mutable (not frozen=True). The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Thread Safety:
        Each top-level resolution creates its own DepthGuard, so concurrent
        resolutions never share one.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_SPLICE_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_SPLICE_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Checks the limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave the guard
        permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise SpliceDepthExceededError(self.max_depth)
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Every splice level costs a few interpreter frames, so the limit is kept
    well below sys.getrecursionlimit(). Logs a warning if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> depth_clamp(10)
        10
    """
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // 3
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested splice depth %d exceeds what the Python recursion limit (%d) "
            "allows. Clamping to %d.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
