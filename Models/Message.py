from pydantic import BaseModel, ConfigDict, Field

class Message(BaseModel):
    """A single stored message. Serialized with camelCase timestamp keys."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    content: str
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")
