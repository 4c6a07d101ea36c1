"""Tree tokenizer: flattens a tree into a layout instruction stream.

The walk uses an explicit work stack instead of recursion, so tree depth
is bounded only by memory, not by the interpreter recursion limit.

Stream shape for a List with head ``h`` and remaining children
``c1..cn``::

    GROUP_OPEN <h> BREAK_POINT <c1> ... BREAK_POINT <cn> GROUP_CLOSE

The whole stream is additionally wrapped in one GROUP_OPEN/GROUP_CLOSE
pair, so an Atom renders as ``(text)`` and a top-level List gains one
extra pair of delimiters.

Example:
    >>> from ramitas.nodes import sexp
    >>> tokenize(sexp("symbol_id", 1))
    [Instruction(GROUP_OPEN, indent=2), Instruction(GROUP_OPEN, indent=2),
     Instruction(TEXT, 'symbol_id'), Instruction(BREAK_POINT),
     Instruction(TEXT, '1'), Instruction(GROUP_CLOSE), Instruction(GROUP_CLOSE)]

Thread Safety:
    tokenize() is pure. The work stack and output are local to the call.

"""

from ramitas.errors import EmptyListError
from ramitas.nodes import Atom, List, Sexp
from ramitas.tokens import BREAK_POINT, GROUP_CLOSE, GROUP_OPEN, Instruction, text


def tokenize(tree: Sexp) -> list[Instruction]:
    """Convert a tree into an ordered list of layout instructions.

    Args:
        tree: Atom or List to tokenize. Never mutated or retained.

    Returns:
        Instruction list beginning with GROUP_OPEN and ending with the
        matching GROUP_CLOSE.

    Raises:
        EmptyListError: A List with no children appears anywhere in the tree.

    """
    out: list[Instruction] = [GROUP_OPEN]
    stack: list[Sexp | Instruction] = [tree]

    while stack:
        item = stack.pop()
        match item:
            case Atom(text=s):
                out.append(text(s))
            case List(children=children):
                if not children:
                    raise EmptyListError(position=len(out))
                # Pushed in reverse so the pops come out in stream order
                stack.append(GROUP_CLOSE)
                for child in reversed(children[1:]):
                    stack.append(child)
                    stack.append(BREAK_POINT)
                stack.append(children[0])
                stack.append(GROUP_OPEN)
            case Instruction():
                out.append(item)
            case _:
                msg = f"expected Atom or List, got {type(item).__name__}"
                raise TypeError(msg)

    out.append(GROUP_CLOSE)
    return out
