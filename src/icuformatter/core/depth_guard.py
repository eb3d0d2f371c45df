"""Depth limiting for handler-driven recursion.

A handler may hand a case body back to the engine, which may dispatch to
another handler, and so on. DepthGuard bounds that chain so a runaway
handler fails with a clear error instead of a RecursionError.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.11+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from icuformatter.constants import MAX_DEPTH
from icuformatter.diagnostics import DepthLimitExceededError, ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)

# recurse() -> _process() -> handler -> recurse() ...
_FRAMES_PER_LEVEL: int = 4


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard(max_depth=20)
        with guard:
            result = formatter.process(case_body, values)

    Each top-level process() call creates its own guard; the ``recurse``
    callback handed to type handlers enters it once per nested call.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against the Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        The limit is checked before incrementing: __exit__ does not run
        when __enter__ raises, so incrementing first would leave the depth
        permanently elevated.
        """
        self.check()
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

    def check(self) -> None:
        """Raise if entering one more level would exceed the limit.

        Raises:
            DepthLimitExceededError: If depth limit exceeded
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against the Python recursion limit.

    Each nesting level costs several interpreter frames (recurse, process,
    the handler itself), so the limit is divided accordingly.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary
    """
    max_safe_depth = max((sys.getrecursionlimit() - reserve_frames) // _FRAMES_PER_LEVEL, 1)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds what the Python recursion limit (%d) allows. "
            "Clamping to %d to prevent RecursionError.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth

