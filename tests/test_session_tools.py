import pytest

from fake_storage import MemoryBackend, connector
from gcs_tools.errors import StorageConnectionError, StorageError
from gcs_tools.session_tools import DEFAULT_TIMEOUT_SECS, create_session, effective_timeout


class FakeClock:

    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def test_zero_and_sixty_give_the_same_deadline():
    clock = FakeClock()
    zero = create_session(0, False, 'k.json', connector(MemoryBackend()), clock)
    sixty = create_session(60, False, 'k.json', connector(MemoryBackend()), clock)

    assert zero.deadline == sixty.deadline == 100.0 + DEFAULT_TIMEOUT_SECS


def test_effective_timeout():
    assert effective_timeout(0) == 60
    assert effective_timeout(-5) == 60
    assert effective_timeout(5) == 5


def test_deadline_exceeded():
    clock = FakeClock()
    session = create_session(10, False, 'k.json', connector(MemoryBackend()), clock)

    clock.now += 4
    assert session.remaining() == pytest.approx(6)

    clock.now += 6
    with pytest.raises(StorageConnectionError, match='Deadline'):
        session.remaining()


def test_anonymous_session_never_sees_key():
    backend = MemoryBackend()
    create_session(0, True, 'k.json', connector(backend))

    assert backend.connected_with == (True, '')


def test_authenticated_session_uses_key():
    backend = MemoryBackend()
    create_session(0, False, 'k.json', connector(backend))

    assert backend.connected_with == (False, 'k.json')


def test_client_construction_failure():

    def broken(public_request, key_path):
        raise StorageError('malformed key file')

    with pytest.raises(StorageConnectionError, match='Cannot create new storage client'):
        create_session(0, False, 'k.json', broken)


def test_release_happens_once_and_on_errors():
    backend = MemoryBackend()

    with pytest.raises(RuntimeError):
        with create_session(0, False, 'k.json', connector(backend)) as session:
            raise RuntimeError('boom')

    session.release()
    assert backend.close_count == 1
