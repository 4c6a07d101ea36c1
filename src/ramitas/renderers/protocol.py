"""SexpRenderer protocol: stable interface for tree renderers.

Any renderer that implements ``render(tree) -> str`` conforms to this protocol.
The built-in ``HumRenderer`` (wrapped) and ``MachRenderer`` (single line)
both do.

Example:
    from ramitas.renderers.protocol import SexpRenderer

    def dump(renderer: SexpRenderer, tree: Sexp) -> str:
        return renderer.render(tree)

"""

from typing import Protocol

from ramitas.nodes import Sexp


class SexpRenderer(Protocol):
    """Protocol for tree renderers."""

    def render(self, tree: Sexp) -> str:
        """Render a tree to a string.

        Args:
            tree: The Atom or List to render.

        Returns:
            Rendered string output.

        """
        ...
