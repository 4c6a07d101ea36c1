"""Ramitas renderers.

Renderers convert trees into text.

Available Renderers:
- HumRenderer: Wraps lines to the configured width via the layout engine
- MachRenderer: Emits the whole tree on one line

Thread Safety:
All renderers keep their working state local to each render() call.
Safe for concurrent use from multiple threads.

"""

from ramitas.renderers.hum import HumRenderer
from ramitas.renderers.mach import MachRenderer

__all__ = ["HumRenderer", "MachRenderer"]
