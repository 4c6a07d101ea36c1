"""StringBuilder for O(n) layout output.

The layout engine emits many small fragments (atoms, delimiters, runs of
blanks). Appending to a list and joining once keeps the total cost linear
in the output size.

Thread Safety:
StringBuilder instances are owned by a single layout engine, which is
local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("(dir").blanks(1).append("buy)")
            >>> sb.newline(2).append("(size 1)")
            >>> sb.build()
            '(dir buy)\\n  (size 1)'

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def blanks(self, n: int) -> StringBuilder:
        """Append ``n`` spaces."""
        return self.append(" " * n)

    def newline(self, indent: int = 0) -> StringBuilder:
        """Append a newline followed by ``indent`` spaces."""
        return self.append("\n" + " " * indent)

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts."""
        self._parts.clear()
        self._length = 0
        return self

    def __len__(self) -> int:
        """Return total number of characters appended."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any text has been appended."""
        return self._length > 0
