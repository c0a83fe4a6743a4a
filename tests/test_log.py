import logging
import uuid

import pytest

from kdutils.log import get_logger, logger_factory, set_logger_factory


@pytest.fixture(autouse=True)
def reset_factory():
    set_logger_factory(None)
    yield
    set_logger_factory(None)


def unique_name():
    return f"kdutils-test-{uuid.uuid4().hex}"


def test_new_logger_gets_default_level():
    name = unique_name()
    logger = get_logger(name, logging.INFO)
    assert logger.name == name
    assert logger.level == logging.INFO
    assert logger.handlers


def test_default_level_is_warning():
    logger = get_logger(unique_name())
    assert logger.level == logging.WARNING


def test_existing_logger_is_reused():
    name = unique_name()
    first = get_logger(name, logging.DEBUG)
    second = get_logger(name, logging.ERROR)
    assert second is first
    assert second.level == logging.DEBUG
    assert len(second.handlers) == 1


def test_factory_is_used():
    calls = []
    sentinel = logging.getLogger(unique_name())

    def factory(name, level):
        calls.append((name, level))
        return sentinel

    set_logger_factory(factory)
    assert logger_factory() is factory
    assert get_logger("window", logging.INFO) is sentinel
    assert calls == [("window", logging.INFO)]


def test_clearing_factory_restores_default():
    set_logger_factory(lambda name, level: logging.getLogger("other"))
    set_logger_factory(None)
    assert logger_factory() is None
    name = unique_name()
    assert get_logger(name).name == name