"""Ramitas layout engine.

- LayoutEngine: protocol of primitive operations a renderer replays against
- BoxFormatter: compacting-box engine implementing that protocol
"""

from ramitas.layout.engine import BoxFormatter, BoxType
from ramitas.layout.protocol import LayoutEngine

__all__ = ["BoxFormatter", "BoxType", "LayoutEngine"]
