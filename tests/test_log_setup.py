"""
Tests for ``log_setup`` and the log level held in ``config``.
"""

from __future__ import annotations

import logging

import config
from log_setup import ROOT_NAME, get_logger, setup_logging


def test_log_level_is_a_plain_constant(monkeypatch) -> None:
    monkeypatch.setenv("RETIREMENT_LOG_LEVEL", "DEBUG")
    assert config.LOG_LEVEL == "INFO"


def test_get_logger_is_namespaced() -> None:
    assert get_logger("simulation").name == f"{ROOT_NAME}.simulation"


def test_setup_logging_sets_namespace_level() -> None:
    namespace = logging.getLogger(ROOT_NAME)
    try:
        setup_logging("DEBUG")
        assert namespace.level == logging.DEBUG
    finally:
        setup_logging()
    assert namespace.level == logging.INFO


def test_setup_logging_is_idempotent() -> None:
    setup_logging()
    handlers = list(logging.getLogger().handlers)
    setup_logging()
    assert logging.getLogger().handlers == handlers
