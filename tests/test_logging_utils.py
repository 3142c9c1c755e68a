import logging

import numpy as np
import pytest

from mondrian_grid.logging_utils import apply_debug_logging, debug_log_call, safe_repr


def test_safe_repr_summarises_large_arrays():
    text = safe_repr(np.arange(100, dtype=float))
    assert "shape=(100,)" in text
    assert "min=0" in text and "max=99" in text


def test_safe_repr_shows_small_arrays_and_truncates_lists():
    assert "values=[1.0, 2.0]" in safe_repr(np.array([1.0, 2.0]))
    assert safe_repr(list(range(10))).endswith("... (10 items)]")


def test_debug_log_call_traces_entry_and_exit(caplog):
    logger = logging.getLogger("tests.tracing")

    @debug_log_call(logger)
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="tests.tracing"):
        assert add(2, b=3) == 5

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "args=[2]" in message for message in messages)
    assert any(message.endswith("-> 5") for message in messages)


def test_debug_log_call_reraises(caplog):
    logger = logging.getLogger("tests.tracing")

    @debug_log_call(logger)
    def boom():
        raise RuntimeError("nope")

    with caplog.at_level(logging.DEBUG, logger="tests.tracing"):
        with pytest.raises(RuntimeError):
            boom()
    assert any("Exception in" in record.getMessage() for record in caplog.records)


def test_apply_debug_logging_wraps_public_functions_once():
    def public():
        return 1

    def _private():
        return 2

    namespace = {"__name__": __name__, "public": public, "_private": _private}
    public.__module__ = __name__
    _private.__module__ = __name__

    apply_debug_logging(namespace, logger=logging.getLogger("tests.tracing"))
    wrapped = namespace["public"]
    apply_debug_logging(namespace, logger=logging.getLogger("tests.tracing"))

    assert getattr(wrapped, "_debug_logging_wrapped", False)
    assert namespace["public"] is wrapped
    assert namespace["_private"] is _private
    assert wrapped() == 1
