"""Tests for ContextVar-based render configuration.

Validates defaults, validation, context manager behavior and thread
isolation.
"""

from threading import Thread

import pytest

from ramitas import (
    RenderConfig,
    get_render_config,
    render,
    render_config_context,
    reset_render_config,
    sexp,
    set_render_config,
)

NARROW = RenderConfig(line_width=20, min_space=5, ribbon_width=15)
WIDE_TREE = sexp("alpha", "beta", "gamma", "delta")


class TestRenderConfigDataclass:
    """Test RenderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = RenderConfig()
        assert config.line_width == 78
        assert config.min_space == 10
        assert config.ribbon_width == 68
        assert config.max_buffered == 100_000

    def test_immutability(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.line_width = 100  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["line_width", "min_space", "ribbon_width", "max_buffered"])
    def test_rejects_non_positive(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            RenderConfig(**{field: 0})

    def test_ribbon_must_leave_min_space(self) -> None:
        with pytest.raises(ValueError, match="ribbon_width"):
            RenderConfig(line_width=78, min_space=10, ribbon_width=70)

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = RenderConfig.from_dict({"line_width": 100, "ribbon_width": 80, "color": True})
        assert config == RenderConfig(line_width=100, ribbon_width=80)

    def test_from_dict_empty(self) -> None:
        assert RenderConfig.from_dict({}) == RenderConfig()


class TestContextVar:
    def setup_method(self) -> None:
        reset_render_config()

    def teardown_method(self) -> None:
        reset_render_config()

    def test_default_config(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_reset(self) -> None:
        set_render_config(NARROW)
        assert get_render_config() is NARROW
        reset_render_config()
        assert get_render_config() == RenderConfig()

    def test_context_manager_restores(self) -> None:
        with render_config_context(NARROW):
            assert get_render_config() is NARROW
        assert get_render_config() == RenderConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with render_config_context(NARROW):
                raise RuntimeError("boom")
        assert get_render_config() == RenderConfig()

    def test_nested_contexts(self) -> None:
        other = RenderConfig(line_width=40, ribbon_width=30)
        with render_config_context(NARROW):
            with render_config_context(other):
                assert get_render_config() is other
            assert get_render_config() is NARROW

    def test_render_reads_context(self) -> None:
        with render_config_context(NARROW):
            assert "\n" in render(WIDE_TREE)
        assert "\n" not in render(WIDE_TREE)


class TestThreadIsolation:
    def test_config_not_shared_between_threads(self) -> None:
        results: dict[str, str] = {}

        def narrow_worker() -> None:
            set_render_config(NARROW)
            results["narrow"] = render(WIDE_TREE)

        def default_worker() -> None:
            results["default"] = render(WIDE_TREE)

        t1 = Thread(target=narrow_worker)
        t1.start()
        t1.join()
        t2 = Thread(target=default_worker)
        t2.start()
        t2.join()

        assert "\n" in results["narrow"]
        assert "\n" not in results["default"]
        assert get_render_config() == RenderConfig()
