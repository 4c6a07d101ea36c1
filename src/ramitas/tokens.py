"""Instruction and InstructionType definitions for the Ramitas tokenizer.

The tokenizer turns a tree into a flat stream of Instruction objects
that a layout engine replays in order.

Thread Safety:
Instruction is frozen (immutable) and safe to share across threads.
InstructionType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto

# Indent applied to the continuation lines of every broken group
GROUP_INDENT = 2


class InstructionType(Enum):
    """Instruction kinds produced by the tokenizer."""

    GROUP_OPEN = auto()  # begin a layout group
    GROUP_CLOSE = auto()  # end the innermost group
    BREAK_POINT = auto()  # single space, or newline + indent
    TEXT = auto()  # literal text, never split


@dataclass(frozen=True, slots=True)
class Instruction:
    """A single layout instruction.

    Attributes:
        type: The instruction kind
        text: Literal text (TEXT only)
        indent: Continuation indent (GROUP_OPEN only)

    """

    type: InstructionType
    text: str = ""
    indent: int = 0

    def __repr__(self) -> str:
        match self.type:
            case InstructionType.TEXT:
                return f"Instruction(TEXT, {self.text!r})"
            case InstructionType.GROUP_OPEN:
                return f"Instruction(GROUP_OPEN, indent={self.indent})"
            case _:
                return f"Instruction({self.type.name})"


# Shared instances; markers carry no per-use data
GROUP_OPEN = Instruction(InstructionType.GROUP_OPEN, indent=GROUP_INDENT)
GROUP_CLOSE = Instruction(InstructionType.GROUP_CLOSE)
BREAK_POINT = Instruction(InstructionType.BREAK_POINT)


def text(s: str) -> Instruction:
    """Create a TEXT instruction."""
    return Instruction(InstructionType.TEXT, text=s)
