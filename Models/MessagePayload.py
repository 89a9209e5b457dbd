from typing import Any
from pydantic import BaseModel

class MessagePayload(BaseModel):
    """Request body for POST /messages and PUT /messages/{id}.

    `content` is accepted as any JSON value; validate_content() decides
    whether it is usable.
    """
    content: Any = None
