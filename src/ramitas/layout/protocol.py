"""LayoutEngine protocol: the primitives a renderer replays against.

Any object implementing these methods can consume an instruction stream.
The built-in ``BoxFormatter`` is the reference implementation; tests use
recording doubles to check the replay order without any line breaking.

Example:
    from ramitas.layout.protocol import LayoutEngine

    def emit_pair(engine: LayoutEngine, key: str, value: str) -> None:
        engine.open_group(2)
        engine.emit_text(key)
        engine.break_point()
        engine.emit_text(value)
        engine.close_group()

"""

from typing import Protocol


class LayoutEngine(Protocol):
    """Protocol for box-model layout engines."""

    def open_group(self, indent: int) -> None:
        """Begin a group; broken lines indent by ``indent`` from its start column."""
        ...

    def close_group(self) -> None:
        """End the innermost open group."""
        ...

    def emit_text(self, s: str) -> None:
        """Emit literal text. Never breaks a line by itself."""
        ...

    def break_point(self) -> None:
        """Emit a single space, or a newline plus the current indent."""
        ...

    def flush(self) -> None:
        """Force out everything buffered."""
        ...

    def getvalue(self) -> str:
        """Return the text emitted so far."""
        ...
