"""ContextVar-based render configuration for Ramitas.

The defaults are the renderer's policy constants: 78-column lines, a
10-column minimum space, a 68-column ribbon and at most 100000 buffered
instructions. ``render(tree)`` takes no layout parameters; it reads the
active config from a ContextVar (PEP 567).

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from ramitas import render
    from ramitas.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(line_width=40, ribbon_width=30)):
        text = render(tree)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable layout configuration.

    Attributes:
        line_width: Right margin; lines are broken to stay within it
        min_space: Minimum room kept between the ribbon and the margin
        ribbon_width: Maximum indentation column; also the furthest column
            a group may open at before the enclosing group is broken
        max_buffered: Maximum instructions the engine may hold while a
            break decision is pending

    """

    line_width: int = 78
    min_space: int = 10
    ribbon_width: int = 68
    max_buffered: int = 100_000

    def __post_init__(self) -> None:
        for name in ("line_width", "min_space", "ribbon_width", "max_buffered"):
            if getattr(self, name) < 1:
                msg = f"{name} must be positive, got {getattr(self, name)}"
                raise ValueError(msg)
        if self.ribbon_width > self.line_width - self.min_space:
            msg = (
                f"ribbon_width ({self.ribbon_width}) must not exceed "
                f"line_width - min_space ({self.line_width - self.min_space})"
            )
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> RenderConfig.from_dict({"line_width": 100, "ribbon_width": 80, "x": 1})
            RenderConfig(line_width=100, min_space=10, ribbon_width=80, max_buffered=100000)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: RenderConfig to use within the context.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
