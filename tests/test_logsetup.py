import logging

import pytest

from matugen.logsetup import get_log_level, setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("matugen")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    yield logger
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    logger.handlers[:] = saved[2]


def test_default_level_is_warning():
    assert get_log_level() == logging.WARNING


def test_verbose_wins_over_others():
    assert get_log_level(verbose=True, quiet=True, debug=True) == logging.INFO


def test_quiet_wins_over_debug():
    assert get_log_level(quiet=True, debug=True) > logging.CRITICAL


def test_debug_level():
    assert get_log_level(debug=True) == logging.DEBUG


def test_plain_messages(restore_logger, capsys):
    setup_logging()
    logging.getLogger("matugen.sample").warning("hello")
    logging.getLogger("matugen.sample").info("hidden")
    assert capsys.readouterr().err == "hello\n"


def test_quiet_silences_everything(restore_logger, capsys):
    setup_logging(quiet=True)
    logging.getLogger("matugen.sample").critical("boom")
    assert capsys.readouterr().err == ""


def test_debug_format_has_details(restore_logger, capsys):
    setup_logging(debug=True)
    logging.getLogger("matugen.sample").debug("detail")
    err = capsys.readouterr().err
    assert err.endswith("detail\n")
    assert "DEBUG matugen.sample" in err


def test_repeated_setup_keeps_one_handler(restore_logger, capsys):
    setup_logging()
    logger = setup_logging(verbose=True)
    assert logger.level == logging.INFO
    logging.getLogger("matugen").info("once")
    assert capsys.readouterr().err == "once\n"