"""BoxFormatter: compacting-box layout engine.

Line breaking follows the classic Oppen scheme, with the box rules of
OCaml's ``Format`` module:

- Every emitted instruction goes into a queue with a size. Text sizes are
  known immediately. Group and break sizes are resolved later through a
  scan stack: a break is sized when the next break or the enclosing
  group's close arrives, a group when it closes.
- The head of the queue is laid out as soon as its size is known, or as
  soon as the pending width reaches the space left on the line (its size
  is then treated as infinite).
- A group whose whole content fits on the rest of the line is laid out
  flat. Otherwise, at each break point the line is broken if the next
  chunk does not fit, or if breaking would move left of the current
  line's indentation. A break right after a fresh newline stays put.
- Broken lines are indented to the group's opening column plus its
  indent, capped at ``ribbon_width``. Opening a group past
  ``ribbon_width`` first breaks the line of the enclosing group.

Sizes use a negative value to mean "not yet known": an unresolved item
stores ``-right_total`` at enqueue time, and adding the later
``right_total`` yields the width it spans.

Example:
    >>> engine = BoxFormatter()
    >>> engine.open_group(2)
    >>> engine.emit_text("(dir")
    >>> engine.break_point()
    >>> engine.emit_text("buy)")
    >>> engine.close_group()
    >>> engine.flush()
    >>> engine.getvalue()
    '(dir buy)'

Thread Safety:
    Not thread-safe. Create one engine per render call.

"""

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto

from ramitas.config import RenderConfig, get_render_config
from ramitas.errors import EngineCapacityExceeded, UnbalancedGroupError
from ramitas.stringbuilder import StringBuilder
from ramitas.utils.logger import get_logger

logger = get_logger(__name__)

# Size assigned to items forced out before their size was resolved
INFINITY = 1_000_000_010


class BoxType(Enum):
    """Layout policy of an open box."""

    FITS = auto()  # whole content fits: breaks are spaces
    HOV = auto()  # break only when the next chunk does not fit
    BOX = auto()  # HOV, plus break when it moves left of the line indent


class _Kind(Enum):
    TEXT = auto()
    BEGIN = auto()
    END = auto()
    BREAK = auto()


@dataclass(slots=True)
class _QueueItem:
    size: int
    kind: _Kind
    length: int
    text: str = ""
    offset: int = 0  # BEGIN indent / BREAK offset
    blanks: int = 0  # BREAK width when laid out flat
    box: BoxType = BoxType.BOX


@dataclass(slots=True)
class _ScanItem:
    left_total: int
    item: _QueueItem


@dataclass(slots=True)
class _Box:
    box: BoxType
    width: int


class BoxFormatter:
    """Layout engine implementing the LayoutEngine protocol.

    The engine always keeps an implicit outermost box open; user groups
    nest inside it.

    """

    __slots__ = (
        "_margin",
        "_max_indent",
        "_max_buffered",
        "_out",
        "_queue",
        "_scan_stack",
        "_format_stack",
        "_left_total",
        "_right_total",
        "_space_left",
        "_current_indent",
        "_is_new_line",
        "_depth",
    )

    def __init__(self, config: RenderConfig | None = None) -> None:
        config = config or get_render_config()
        self._margin = config.line_width
        self._max_indent = config.ribbon_width
        self._max_buffered = config.max_buffered
        self._out = StringBuilder()
        self._queue: deque[_QueueItem] = deque()
        self._scan_stack: list[_ScanItem] = []
        self._format_stack: list[_Box] = []
        self._reset()

    # -- LayoutEngine protocol -------------------------------------------------

    def open_group(self, indent: int) -> None:
        if indent < 0:
            msg = f"group indent must be non-negative, got {indent}"
            raise ValueError(msg)
        self._open_box(indent, BoxType.BOX)

    def close_group(self) -> None:
        if self._depth <= 1:
            logger.debug("Rejected close_group() with no open group")
            raise UnbalancedGroupError()
        self._enqueue(_QueueItem(size=0, kind=_Kind.END, length=0))
        self._set_size(is_break=True)
        self._set_size(is_break=False)
        self._depth -= 1

    def emit_text(self, s: str) -> None:
        size = len(s)
        self._enqueue(_QueueItem(size=size, kind=_Kind.TEXT, length=size, text=s))
        self._advance_left()

    def break_point(self) -> None:
        self._print_break(1, 0)

    def flush(self) -> None:
        """Close any open groups, emit everything buffered and reset line state."""
        while self._depth > 1:
            self.close_group()
        self._right_total = INFINITY
        self._advance_left()
        self._reset()

    def getvalue(self) -> str:
        return self._out.build()

    # -- Queue management ------------------------------------------------------

    def _reset(self) -> None:
        self._queue.clear()
        self._left_total = 1
        self._right_total = 1
        self._init_scan_stack()
        self._format_stack.clear()
        self._current_indent = 0
        self._depth = 0
        self._space_left = self._margin
        self._is_new_line = True
        self._open_box(0, BoxType.HOV)

    def _init_scan_stack(self) -> None:
        self._scan_stack.clear()
        sentinel = _QueueItem(size=-1, kind=_Kind.TEXT, length=0)
        self._scan_stack.append(_ScanItem(left_total=-1, item=sentinel))

    def _enqueue(self, item: _QueueItem) -> None:
        if len(self._queue) >= self._max_buffered:
            logger.debug("Layout buffer full at %d instructions", len(self._queue))
            raise EngineCapacityExceeded(self._max_buffered)
        self._right_total += item.length
        self._queue.append(item)

    def _advance_left(self) -> None:
        """Lay out queued items whose size is known or can no longer matter."""
        while self._queue:
            item = self._queue[0]
            pending = self._right_total - self._left_total
            if item.size < 0 and pending < self._space_left:
                return
            self._queue.popleft()
            self._format_item(item, item.size if item.size >= 0 else INFINITY)
            self._left_total += item.length

    def _set_size(self, *, is_break: bool) -> None:
        top = self._scan_stack[-1]
        if top.left_total < self._left_total:
            # Everything on the scan stack has already been laid out
            self._init_scan_stack()
            return
        item = top.item
        if item.kind is _Kind.BREAK and is_break:
            item.size += self._right_total
            self._scan_stack.pop()
        elif item.kind is _Kind.BEGIN and not is_break:
            item.size += self._right_total
            self._scan_stack.pop()

    def _scan_push(self, item: _QueueItem, *, is_break: bool) -> None:
        self._enqueue(item)
        if is_break:
            self._set_size(is_break=True)
        self._scan_stack.append(_ScanItem(left_total=self._right_total, item=item))

    def _open_box(self, indent: int, box: BoxType) -> None:
        self._depth += 1
        item = _QueueItem(
            size=-self._right_total, kind=_Kind.BEGIN, length=0, offset=indent, box=box
        )
        self._scan_push(item, is_break=False)

    def _print_break(self, blanks: int, offset: int) -> None:
        item = _QueueItem(
            size=-self._right_total,
            kind=_Kind.BREAK,
            length=blanks,
            offset=offset,
            blanks=blanks,
        )
        self._scan_push(item, is_break=True)

    # -- Output ----------------------------------------------------------------

    def _format_item(self, item: _QueueItem, size: int) -> None:
        match item.kind:
            case _Kind.TEXT:
                self._space_left -= size
                self._out.append(item.text)
                self._is_new_line = False
            case _Kind.BEGIN:
                insertion_point = self._margin - self._space_left
                if insertion_point > self._max_indent:
                    self._force_break_line()
                width = self._space_left - item.offset
                box = item.box if size > self._space_left else BoxType.FITS
                self._format_stack.append(_Box(box, width))
            case _Kind.END:
                if self._format_stack:
                    self._format_stack.pop()
            case _Kind.BREAK:
                if self._format_stack:
                    self._format_break(item, size, self._format_stack[-1])

    def _format_break(self, item: _QueueItem, size: int, top: _Box) -> None:
        match top.box:
            case BoxType.FITS:
                self._break_same_line(item.blanks)
            case BoxType.HOV:
                if size > self._space_left:
                    self._break_new_line(item.offset, top.width)
                else:
                    self._break_same_line(item.blanks)
            case BoxType.BOX:
                if self._is_new_line:
                    self._break_same_line(item.blanks)
                elif size > self._space_left:
                    self._break_new_line(item.offset, top.width)
                elif self._current_indent > self._margin - top.width + item.offset:
                    self._break_new_line(item.offset, top.width)
                else:
                    self._break_same_line(item.blanks)

    def _break_new_line(self, offset: int, width: int) -> None:
        indent = min(self._max_indent, self._margin - width + offset)
        self._out.newline(indent)
        self._current_indent = indent
        self._space_left = self._margin - indent
        self._is_new_line = True

    def _break_same_line(self, blanks: int) -> None:
        self._space_left -= blanks
        self._out.blanks(blanks)

    def _force_break_line(self) -> None:
        if not self._format_stack:
            return
        top = self._format_stack[-1]
        if top.width > self._space_left and top.box is not BoxType.FITS:
            self._break_new_line(0, top.width)
