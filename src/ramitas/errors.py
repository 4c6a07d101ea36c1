"""Exception classes for Ramitas.

Every error is fatal to the render call that raised it. Nothing is
caught inside the package; callers see the original exception and no
partial output.
"""

from __future__ import annotations


class RamitasError(Exception):
    """Base exception for all Ramitas errors.

    Subclass this for specific error categories.
    """

    pass


class EmptyListError(RamitasError):
    """A List node with no children was found during tokenization.

    Empty lists have no head to open a group with, so the tree cannot
    be rendered.
    """

    def __init__(self, position: int | None = None) -> None:
        """Initialize empty list error with optional stream position.

        Args:
            position: Number of instructions emitted before the empty
                list was reached (optional)
        """
        self.position = position

        location = f" (after {position} instructions)" if position is not None else ""
        super().__init__(f"cannot render an empty list{location}")


class LayoutError(RamitasError):
    """Error raised by the layout engine.

    Raised when the engine is driven outside its contract.
    """

    pass


class EngineCapacityExceeded(LayoutError):
    """The engine buffered more instructions than it is allowed to hold.

    Raised before a break decision could be made for the oldest
    buffered instruction.
    """

    def __init__(self, limit: int) -> None:
        """Initialize capacity error.

        Args:
            limit: Configured maximum number of buffered instructions
        """
        self.limit = limit
        super().__init__(f"layout buffer exceeded {limit} pending instructions")


class UnbalancedGroupError(LayoutError):
    """close_group() was called with no open group."""

    def __init__(self, message: str = "close_group() called with no open group") -> None:
        super().__init__(message)
