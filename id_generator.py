import threading
import time
from typing import Protocol


class IdGenerator(Protocol):
    def next_id(self) -> str:
        ...


class CounterIdGenerator:
    """Ids of the form "<epoch millis>-<counter>".

    The counter never resets, so two ids issued in the same millisecond
    still differ.
    """

    def __init__(self, start: int = 0):
        self._counter = start
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            counter = self._counter
            self._counter += 1
        return f"{int(time.time() * 1000)}-{counter}"
