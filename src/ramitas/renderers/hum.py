"""Human-readable renderer: width-aware wrapped output.

Tokenizes the tree and replays the instruction stream against a layout
engine. Each group is delimited by parentheses printed inside the group,
so a broken group's closing parenthesis stays on its last line.

Example:
    >>> from ramitas.nodes import sexp
    >>> render(sexp("symbol_id", 1))
    '((symbol_id 1))'

Thread Safety:
    Each render() call builds its own engine. Safe for concurrent use.

"""

from collections.abc import Iterable

from ramitas.config import RenderConfig, get_render_config
from ramitas.layout.engine import BoxFormatter
from ramitas.layout.protocol import LayoutEngine
from ramitas.nodes import Sexp
from ramitas.profiling import get_render_accumulator
from ramitas.tokenizer import tokenize
from ramitas.tokens import Instruction, InstructionType
from ramitas.utils.logger import get_logger

logger = get_logger(__name__)

OPEN_DELIMITER = "("
CLOSE_DELIMITER = ")"


class HumRenderer:
    """Render trees to wrapped text through a BoxFormatter."""

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config

    def render(self, tree: Sexp) -> str:
        """Render a tree, breaking lines to fit the configured width.

        Raises:
            EmptyListError: The tree contains an empty List.
            LayoutError: The engine rejected the instruction stream.

        """
        instructions = tokenize(tree)
        engine = BoxFormatter(self._config or get_render_config())
        self.replay(instructions, engine)
        engine.flush()
        result = engine.getvalue()

        logger.debug(
            "Rendered %d instructions into %d characters", len(instructions), len(result)
        )
        acc = get_render_accumulator()
        if acc is not None:
            acc.record_render(instruction_count=len(instructions), output_length=len(result))
        return result

    def replay(self, instructions: Iterable[Instruction], engine: LayoutEngine) -> None:
        """Drive ``engine`` with each instruction, in stream order."""
        for instruction in instructions:
            match instruction.type:
                case InstructionType.GROUP_OPEN:
                    engine.open_group(instruction.indent)
                    engine.emit_text(OPEN_DELIMITER)
                case InstructionType.GROUP_CLOSE:
                    engine.emit_text(CLOSE_DELIMITER)
                    engine.close_group()
                case InstructionType.BREAK_POINT:
                    engine.break_point()
                case InstructionType.TEXT:
                    engine.emit_text(instruction.text)


def render(tree: Sexp) -> str:
    """Render a tree to wrapped, human-readable text.

    The whole rendering is wrapped in one extra pair of parentheses: an
    Atom renders as ``(text)`` and a List gains an outer pair.

    Args:
        tree: Atom or List to render.

    Returns:
        Rendered text, lines kept within the active RenderConfig width
        wherever the atoms allow it.

    """
    return HumRenderer().render(tree)
