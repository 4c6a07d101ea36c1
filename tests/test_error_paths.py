"""Error construction, hierarchy and logging on failure paths."""

import logging

import pytest

from ramitas import (
    BoxFormatter,
    EmptyListError,
    EngineCapacityExceeded,
    LayoutError,
    List,
    RamitasError,
    UnbalancedGroupError,
    render,
    sexp,
)
from ramitas.utils.logger import get_logger


class TestEmptyListError:
    def test_message_without_position(self) -> None:
        err = EmptyListError()
        assert str(err) == "cannot render an empty list"
        assert err.position is None

    def test_message_with_position(self) -> None:
        err = EmptyListError(position=4)
        assert "after 4 instructions" in str(err)

    def test_is_ramitas_error(self) -> None:
        assert isinstance(EmptyListError(), RamitasError)


class TestLayoutErrors:
    def test_capacity_message(self) -> None:
        err = EngineCapacityExceeded(100)
        assert err.limit == 100
        assert "100" in str(err)
        assert isinstance(err, LayoutError)
        assert isinstance(err, RamitasError)

    def test_unbalanced_default_message(self) -> None:
        assert "no open group" in str(UnbalancedGroupError())

    def test_unbalanced_custom_message(self) -> None:
        assert str(UnbalancedGroupError("stray close")) == "stray close"


class TestNoPartialOutput:
    def test_error_leaves_nothing_behind(self) -> None:
        with pytest.raises(EmptyListError):
            render(sexp("a", List(())))
        # Later calls are unaffected
        assert render(sexp("a")) == "((a))"


class TestLogging:
    def test_logger_prefix(self) -> None:
        assert get_logger("mymodule").name == "ramitas.mymodule"
        assert get_logger("ramitas.layout").name == "ramitas.layout"
        assert get_logger("ramitas").name == "ramitas"

    def test_render_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="ramitas")
        render(sexp("symbol_id", 1))
        assert "Rendered 7 instructions into 15 characters" in caplog.text

    def test_unbalanced_close_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="ramitas")
        with pytest.raises(UnbalancedGroupError):
            BoxFormatter().close_group()
        assert "no open group" in caplog.text
