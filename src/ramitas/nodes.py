"""Typed tree nodes for Ramitas.

A tree is either an Atom (literal text) or a List of trees. Both are
frozen dataclasses with slots:
- Immutability: a tree can be shared across threads and render calls
- Structural equality and hashing: two trees are equal iff they have the
  same variant and, for lists, the same children in the same order
- Pattern matching: ``match`` on ``Atom(text=...)`` / ``List(children=...)``

Ordering is structural as well: every Atom sorts before every List,
atoms compare by text and lists compare their children lexicographically.

Example:
    >>> tree = sexp("symbol_id", 1)
    >>> tree
    List(children=(Atom(text='symbol_id'), Atom(text='1')))
    >>> str(tree)
    '((symbol_id 1))'

Note:
    Equality, ordering and ``repr`` recurse into children. Use the
    tokenizer (which is iterative) for trees nested deeper than the
    interpreter recursion limit.

"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, slots=True)
class Atom:
    """Indivisible leaf carrying literal text.

    The text is emitted verbatim; no quoting or escaping is applied.

    """

    text: str

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Atom):
            return self.text < other.text
        if isinstance(other, List):
            return True
        return NotImplemented

    def __str__(self) -> str:
        from ramitas.renderers.hum import render

        return render(self)


@total_ordering
@dataclass(frozen=True, slots=True)
class List:
    """Ordered sequence of trees.

    Rendering requires at least one child. An empty List can be built,
    but tokenizing it raises EmptyListError.

    """

    children: tuple[Sexp, ...]

    def __lt__(self, other: object) -> bool:
        if isinstance(other, List):
            return self.children < other.children
        if isinstance(other, Atom):
            return False
        return NotImplemented

    def __str__(self) -> str:
        from ramitas.renderers.hum import render

        return render(self)


type Sexp = Atom | List


def atom(value: object) -> Atom:
    """Build an Atom from any value via ``str()``.

    Example:
        >>> atom(10)
        Atom(text='10')

    """
    return Atom(str(value))


def sexp(*items: object) -> List:
    """Build a List, wrapping bare values with ``atom()``.

    Example:
        >>> sexp("dir", "buy")
        List(children=(Atom(text='dir'), Atom(text='buy')))
        >>> sexp(sexp("a", 1), "b")
        List(children=(List(children=(Atom(text='a'), Atom(text='1'))), Atom(text='b')))

    """
    return List(tuple(item if isinstance(item, (Atom, List)) else atom(item) for item in items))
