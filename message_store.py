import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from id_generator import CounterIdGenerator, IdGenerator
from logging_setup import logger
from Models.Message import Message


INVALID_CONTENT_DETAIL = "Content is required and must be a non-empty string"
NOT_FOUND_DETAIL = "Message not found"


class ValidationError(Exception):
    """Raised when a message body carries unusable content."""

    def __init__(self, detail: str = INVALID_CONTENT_DETAIL):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(Exception):
    """Raised when no message exists for the requested id."""

    def __init__(self, message_id: str, detail: str = NOT_FOUND_DETAIL):
        super().__init__(detail)
        self.message_id = message_id
        self.detail = detail


def utc_now_iso() -> str:
    # millisecond precision, trailing Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def validate_content(content: Any) -> str:
    """Returns `content` unchanged if it is a string with non-blank text."""
    if not isinstance(content, str) or not content.strip():
        raise ValidationError()
    return content


class MessageStore:
    """In-memory message collection keyed by id.

    Every read and write holds the store lock, so each operation is atomic
    with respect to the others. Iteration order is insertion order.
    """

    def __init__(
        self,
        id_generator: Optional[IdGenerator] = None,
        clock: Callable[[], str] = utc_now_iso,
    ):
        self.id_generator = id_generator or CounterIdGenerator()
        self.clock = clock
        self._messages: Dict[str, Message] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def create(self, content: Any) -> Message:
        content = validate_content(content)
        message_id = self.id_generator.next_id()
        timestamp = self.clock()
        message = Message(id=message_id, content=content, created_at=timestamp, updated_at=timestamp)
        with self._lock:
            self._messages[message_id] = message
        logger.info(f"Message created. id: {message_id}")
        return message

    def all(self) -> List[Message]:
        with self._lock:
            return list(self._messages.values())

    def get(self, message_id: str) -> Message:
        with self._lock:
            message = self._messages.get(message_id)
        if message is None:
            raise NotFoundError(message_id)
        return message

    def update(self, message_id: str, content: Any) -> Message:
        # content is checked before the id is looked up
        content = validate_content(content)
        with self._lock:
            current = self._messages.get(message_id)
            if current is None:
                raise NotFoundError(message_id)
            updated = current.model_copy(update={"content": content, "updated_at": self.clock()})
            self._messages[message_id] = updated
        logger.info(f"Message updated. id: {message_id}")
        return updated

    def delete(self, message_id: str) -> None:
        with self._lock:
            if self._messages.pop(message_id, None) is None:
                raise NotFoundError(message_id)
        logger.info(f"Message deleted. id: {message_id}")
