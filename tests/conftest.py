"""Pytest configuration and shared fixtures for klaw-loadable tests."""

import logging

import pytest


@pytest.fixture
def sample_success():
    """Settled success value for testing."""
    from klaw_loadable import succeed

    return succeed(42)


@pytest.fixture
def sample_failure():
    """Settled failure value for testing."""
    from klaw_loadable import fail

    return fail('network error')


@pytest.fixture
def fail_if_odd():
    """Fails with the decimal string of odd numbers, succeeds otherwise."""
    from klaw_loadable import fail, succeed

    def f(n: int):
        return fail(str(n)) if n % 2 else succeed(n)

    return f


@pytest.fixture
def reset_logging():
    """Restore the root and klaw_loadable loggers after a test."""
    from klaw_loadable import _logging

    saved = {}
    for name in (None, _logging.LOGGER_NAME):
        logger = logging.getLogger(name)
        saved[name] = (list(logger.handlers), logger.level, logger.propagate)
    yield
    for name, (handlers, level, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate
    _logging._handler = None


@pytest.fixture
def reset_config():
    """Forget the global LoadableConfig before and after a test."""
    from klaw_loadable._config import _reset

    _reset()
    yield
    _reset()
