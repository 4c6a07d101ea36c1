"""Ramitas RenderAccumulator: opt-in profiling for rendering.

This module provides accumulated metrics during rendering:
- Total profiling time
- Instructions replayed
- Characters of output produced

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from ramitas import render
    from ramitas.profiling import profiled_render

    with profiled_render() as metrics:
        text = render(tree)

    print(metrics.summary())
    # {"total_ms": 0.4, "render_calls": 1, "instruction_count": 7, "output_length": 15}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics during rendering.

    Attributes:
        start_time: Profiling start timestamp.
        render_calls: Number of render calls recorded.
        instruction_count: Instructions replayed across all calls.
        output_length: Characters produced across all calls.

    """

    start_time: float = field(default_factory=perf_counter)
    render_calls: int = 0
    instruction_count: int = 0
    output_length: int = 0

    def record_render(self, instruction_count: int, output_length: int) -> None:
        """Record a completed render call."""
        self.render_calls += 1
        self.instruction_count += instruction_count
        self.output_length += output_length

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "render_calls": self.render_calls,
            "instruction_count": self.instruction_count,
            "output_length": self.output_length,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.
    Failed render calls are not recorded.

    Yields:
        RenderAccumulator that will be populated during render calls.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
