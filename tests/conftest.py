import itertools

import pytest
from fastapi.testclient import TestClient

from main import create_app
from message_store import MessageStore


class SequentialIdGenerator:
    """Deterministic ids: msg-1, msg-2, ..."""

    def __init__(self):
        self._counter = itertools.count(1)

    def next_id(self):
        return f"msg-{next(self._counter)}"


class TickingClock:
    """Returns a later timestamp, one second apart, on every call."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return f"2024-01-01T00:00:{self.calls:02d}.000Z"


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store(clock):
    """A fresh MessageStore with deterministic ids and timestamps."""
    return MessageStore(id_generator=SequentialIdGenerator(), clock=clock)


@pytest.fixture
def client(store):
    """A TestClient over an app that owns `store`."""
    with TestClient(create_app(store)) as c:
        yield c
