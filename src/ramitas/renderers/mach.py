"""Machine-oriented renderer: the whole tree on a single line.

Replays the same instruction stream as the human renderer, with every
break point laid out as a single space. Useful for log records, where one
record per line matters more than width.

Example:
    >>> from ramitas.nodes import sexp
    >>> render_mach(sexp(sexp("dir", "buy"), sexp("size", 1)))
    '(((dir buy) (size 1)))'
"""

from ramitas.nodes import Sexp
from ramitas.renderers.hum import CLOSE_DELIMITER, OPEN_DELIMITER
from ramitas.stringbuilder import StringBuilder
from ramitas.tokenizer import tokenize
from ramitas.tokens import InstructionType


class MachRenderer:
    """Render trees to one unbroken line."""

    __slots__ = ()

    def render(self, tree: Sexp) -> str:
        sb = StringBuilder()
        for instruction in tokenize(tree):
            match instruction.type:
                case InstructionType.GROUP_OPEN:
                    sb.append(OPEN_DELIMITER)
                case InstructionType.GROUP_CLOSE:
                    sb.append(CLOSE_DELIMITER)
                case InstructionType.BREAK_POINT:
                    sb.append(" ")
                case InstructionType.TEXT:
                    sb.append(instruction.text)
        return sb.build()


def render_mach(tree: Sexp) -> str:
    """Render a tree to a single line with the same delimiters as render()."""
    return MachRenderer().render(tree)
