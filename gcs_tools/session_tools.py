# Session: one storage backend plus the run's deadline
#   Every remote call takes its timeout from Session.remaining()

import logging
import time

from gcs_tools.errors   import StorageConnectionError, StorageError
from gcs_tools.io_tools import connect_gcs

DEFAULT_TIMEOUT_SECS = 60

logger = logging.getLogger(__name__)

def effective_timeout(timeout_secs):

    return timeout_secs if timeout_secs > 0 else DEFAULT_TIMEOUT_SECS

class Session:

    def __init__(self, backend, timeout_secs, started, clock=time.monotonic):
        self.backend = backend
        self.timeout_secs = timeout_secs
        self.clock = clock
        self.deadline = started + timeout_secs
        self.released = False

    def remaining(self):

        left = self.deadline - self.clock()
        if left <= 0:
            raise StorageConnectionError('Deadline of {}s exceeded!'.format(self.timeout_secs))
        return left

    def release(self):

        if self.released: return
        self.released = True
        self.backend.close()
        logger.debug('Storage session released.')

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.release()

def create_session(timeout_secs, public_request, key_path, connect=connect_gcs, clock=time.monotonic):

    timeout_secs = effective_timeout(timeout_secs)
    start = clock()

    try:
        backend = connect(public_request, key_path if not public_request else '')
    except StorageError as exc:
        raise StorageConnectionError('Cannot create new storage client! ({})'.format(exc)) from exc

    session = Session(backend, timeout_secs, start, clock)

    logger.debug('Storage session created (anonymous: %s, timeout: %ss).', public_request, timeout_secs)
    return session
