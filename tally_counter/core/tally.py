"""
================================================================================
Tally - Bounded Count Model
================================================================================

The integer behind the counter. It saturates at both ends instead of
raising: tapping past 999 or dragging below 0 simply does nothing.

Design Philosophy:
    "Simple can be harder than complex." - Steve Jobs
"""

import logging

try:
    from .gesture import CounterAction
    from ..utils.constants import MIN_COUNT, MAX_COUNT
except ImportError:
    from core.gesture import CounterAction
    from utils.constants import MIN_COUNT, MAX_COUNT

logger = logging.getLogger(__name__)


class TallyCounter:
    """
    A count clamped to [MIN_COUNT, MAX_COUNT].

    Every operation returns the resulting count so callers can update
    their display in one step.

    Attributes:
        count: The current value

    Example:
        >>> counter = TallyCounter()
        >>> counter.increase()
        1
        >>> counter.reset()
        0
    """

    def __init__(self, initial: int = MIN_COUNT):
        """
        Initialize the counter.

        Args:
            initial: Starting count (must lie within the count range)
        """
        if not MIN_COUNT <= initial <= MAX_COUNT:
            raise ValueError(
                f"Initial count {initial} out of range ({MIN_COUNT}-{MAX_COUNT})"
            )
        self._count = int(initial)

    def __repr__(self) -> str:
        return f"TallyCounter(count={self._count})"

    @property
    def count(self) -> int:
        """Current count."""
        return self._count

    @property
    def at_maximum(self) -> bool:
        return self._count >= MAX_COUNT

    @property
    def at_minimum(self) -> bool:
        return self._count <= MIN_COUNT

    # =========================================================================
    # Operations
    # =========================================================================

    def increase(self) -> int:
        """Add one, unless already at the maximum."""
        if self._count < MAX_COUNT:
            self._count += 1
        else:
            logger.debug("increase ignored at maximum %d", MAX_COUNT)
        return self._count

    def decrease(self) -> int:
        """Subtract one, unless already at zero."""
        if self._count > MIN_COUNT:
            self._count -= 1
        else:
            logger.debug("decrease ignored at minimum %d", MIN_COUNT)
        return self._count

    def reset(self) -> int:
        """Return to zero unconditionally."""
        self._count = MIN_COUNT
        return self._count

    def apply(self, action: CounterAction) -> int:
        """
        Run the operation a finished gesture asked for.

        Args:
            action: INCREASE, DECREASE or RESET

        Returns:
            The count after the operation
        """
        if action is CounterAction.INCREASE:
            return self.increase()
        if action is CounterAction.DECREASE:
            return self.decrease()
        if action is CounterAction.RESET:
            return self.reset()
        raise ValueError(f"Unknown counter action: {action!r}")
