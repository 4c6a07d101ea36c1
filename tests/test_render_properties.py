"""Property-based tests for tokenizing and rendering using Hypothesis.

These tests verify invariants that should hold for any tree:
1. Output is wrapped in one outer pair of delimiters
2. Breaks only change whitespace, never tokens
3. A list of n children contributes exactly n - 1 break points
4. Rendering is deterministic
5. Short trees render on one line, identical to the compact renderer
"""

import string

from hypothesis import given, settings
from hypothesis import strategies as st

from ramitas import Atom, InstructionType, List, Sexp, render, render_mach, tokenize

atoms = st.text(alphabet=string.ascii_letters + string.digits + "_-.:", min_size=1, max_size=12).map(
    Atom
)
trees = st.recursive(
    atoms,
    lambda children: st.lists(children, min_size=1, max_size=6).map(lambda xs: List(tuple(xs))),
    max_leaves=40,
)


def expected_breaks(tree: Sexp) -> int:
    match tree:
        case Atom():
            return 0
        case List(children=children):
            return len(children) - 1 + sum(expected_breaks(c) for c in children)


def flat(tree: Sexp) -> str:
    match tree:
        case Atom(text=s):
            return s
        case List(children=children):
            return "(" + " ".join(flat(c) for c in children) + ")"


class TestStreamProperties:
    @given(tree=trees)
    @settings(max_examples=100)
    def test_stream_balanced_and_wrapped(self, tree: Sexp) -> None:
        stream = tokenize(tree)
        assert stream[0].type is InstructionType.GROUP_OPEN
        assert stream[-1].type is InstructionType.GROUP_CLOSE

        depth = 0
        for i, instruction in enumerate(stream):
            if instruction.type is InstructionType.GROUP_OPEN:
                depth += 1
            elif instruction.type is InstructionType.GROUP_CLOSE:
                depth -= 1
            assert depth >= 0
            # The outer group only closes at the very end
            assert depth > 0 or i == len(stream) - 1
        assert depth == 0

    @given(tree=trees)
    @settings(max_examples=100)
    def test_sibling_separation(self, tree: Sexp) -> None:
        breaks = sum(1 for i in tokenize(tree) if i.type is InstructionType.BREAK_POINT)
        assert breaks == expected_breaks(tree)


class TestRenderProperties:
    @given(tree=trees)
    @settings(max_examples=100)
    def test_wrapped_in_delimiters(self, tree: Sexp) -> None:
        out = render(tree)
        assert out.startswith("(")
        assert out.endswith(")")

    @given(tree=trees)
    @settings(max_examples=100)
    def test_breaks_only_change_whitespace(self, tree: Sexp) -> None:
        assert "".join(render(tree).split()) == "".join(render_mach(tree).split())

    @given(tree=trees)
    @settings(max_examples=50)
    def test_deterministic(self, tree: Sexp) -> None:
        assert render(tree) == render(tree)

    @given(tree=trees)
    @settings(max_examples=100)
    def test_indent_never_exceeds_ribbon(self, tree: Sexp) -> None:
        for line in render(tree).splitlines():
            assert len(line) - len(line.lstrip(" ")) <= 68

    @given(tree=trees)
    @settings(max_examples=100)
    def test_short_trees_stay_on_one_line(self, tree: Sexp) -> None:
        compact = render_mach(tree)
        if len(compact) < 78:
            assert render(tree) == compact

    @given(tree=trees)
    @settings(max_examples=100)
    def test_mach_matches_flat_form(self, tree: Sexp) -> None:
        assert render_mach(tree) == "(" + flat(tree) + ")"
