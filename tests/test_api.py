"""Tests for the package surface: exports, aliases and logging setup."""

import logging

import pytest

import fuzzymetric as fm


def test_version():
    assert isinstance(fm.__version__, str)
    assert fm.__version__


def test_all_exports_exist():
    for name in fm.__all__:
        assert hasattr(fm, name), name


def test_aliases():
    assert fm.edit_distance("kitten", "sitting") == 3
    assert fm.similarity("martha", "marhta") == fm.jaro_winkler_similarity("martha", "marhta")


def test_library_logger_has_null_handler():
    handlers = logging.getLogger("fuzzymetric").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_batch_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="fuzzymetric"):
        fm.batch.similarity(["a", "b"], "a")
    assert any("scoring 2 strings" in record.getMessage() for record in caplog.records)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
