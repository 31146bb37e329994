import logging

from setscore import Set
from setscore.utils import setup_logger


def test_mutations_are_logged(caplog):
    caplog.set_level(logging.INFO, logger="setscore")
    match_set = Set("set", 3, ["team1", "team2"], ["team1", "team2"])

    match_set.forfeit("team2")
    match_set.set_goal(4)

    messages = [record.getMessage() for record in caplog.records]
    assert "Set set: team team2 forfeited" in messages
    assert "Set set: goal changed from 3 to 4" in messages


def test_setup_logger_honours_environment(monkeypatch):
    monkeypatch.setenv("SETSCORE_LOG_LEVEL", "debug")
    setup_logger("setscore.tests")
    assert logging.getLogger("setscore").level == logging.DEBUG

    monkeypatch.setenv("SETSCORE_LOG_LEVEL", "nonsense")
    setup_logger("setscore.tests")
    assert logging.getLogger("setscore").level == logging.WARNING


def test_setup_logger_explicit_level_is_per_logger():
    logger = setup_logger("setscore.tests.explicit", level="error")
    assert logger.level == logging.ERROR
