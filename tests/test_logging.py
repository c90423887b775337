"""Tests for the per-module logger."""

import pytest

from brickbreaker.logging import LogLevel, configure_logging, disable_logging, get_logger


@pytest.fixture
def verbose():
    configure_logging(level='DEBUG')
    yield
    disable_logging()


def test_format(verbose, capsys):
    get_logger('tests').info("Stage %d started", 3)
    assert capsys.readouterr().out == "[tests] INFO: Stage 3 started\n"


def test_level_filtering(verbose, capsys):
    log = get_logger('tests')
    log.trace("hidden")
    log.debug("shown")
    assert capsys.readouterr().out == "[tests] DEBUG: shown\n"


def test_module_override(capsys):
    configure_logging(level='WARNING', modules={'physics': 'TRACE'})
    try:
        get_logger('physics').trace("hit")
        get_logger('session').info("ignored")
    finally:
        disable_logging()
    assert capsys.readouterr().out == "[physics] TRACE: hit\n"


def test_bad_format_args_do_not_raise(verbose, capsys):
    get_logger('tests').warning("%d bricks", "many")
    assert capsys.readouterr().out.startswith("[tests] WARN: %d bricks")


def test_disabled(capsys):
    get_logger('tests').error("quiet")
    assert capsys.readouterr().out == ""


def test_loggers_are_cached():
    assert get_logger('session') is get_logger('session')


def test_unknown_level_defaults_to_info():
    configure_logging(level='LOUD')
    try:
        assert get_logger('tests').level == LogLevel.INFO
    finally:
        disable_logging()
