"""
Ramitas: width-aware S-expression pretty printer for Python

Renders nested lists of atoms into deterministic, diff-friendly text.
Groups that fit stay on one line; groups that do not are broken onto
indented lines. Tree depth is limited by memory, not by recursion.

Quick Start:
    >>> from ramitas import render, sexp
    >>> render(sexp("symbol_id", 1))
    '((symbol_id 1))'

    >>> # Single-line output for log records
    >>> from ramitas import render_mach
    >>> render_mach(sexp(sexp("dir", "buy"), sexp("size", 1)))
    '(((dir buy) (size 1)))'

Every rendering is wrapped in one extra pair of parentheses, so an Atom
renders as ``(text)`` and a top-level List gains an outer pair.
"""

from ramitas.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from ramitas.errors import (
    EmptyListError,
    EngineCapacityExceeded,
    LayoutError,
    RamitasError,
    UnbalancedGroupError,
)
from ramitas.layout import BoxFormatter, LayoutEngine
from ramitas.nodes import Atom, List, Sexp, atom, sexp
from ramitas.profiling import RenderAccumulator, get_render_accumulator, profiled_render
from ramitas.renderers.hum import HumRenderer, render
from ramitas.renderers.mach import MachRenderer, render_mach
from ramitas.renderers.protocol import SexpRenderer
from ramitas.tokenizer import tokenize
from ramitas.tokens import Instruction, InstructionType

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Tree model
    "Atom",
    "List",
    "Sexp",
    "atom",
    "sexp",
    # Tokenizer
    "tokenize",
    "Instruction",
    "InstructionType",
    # Rendering
    "render",
    "render_mach",
    "HumRenderer",
    "MachRenderer",
    "SexpRenderer",
    # Layout engine
    "BoxFormatter",
    "LayoutEngine",
    # Errors
    "RamitasError",
    "EmptyListError",
    "LayoutError",
    "EngineCapacityExceeded",
    "UnbalancedGroupError",
    # Profiling
    "RenderAccumulator",
    "profiled_render",
    "get_render_accumulator",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
