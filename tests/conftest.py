import logging

import pytest

from fake_storage import MemoryBackend
from gcs_tools.session_tools import Session


@pytest.fixture(autouse=True)
def reset_reporter():
    yield
    logger = logging.getLogger('gcs_tools')
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def backend():
    return MemoryBackend(buckets=['b'])


@pytest.fixture()
def session(backend):
    return Session(backend, 60, started=0.0, clock=lambda: 1.0)
