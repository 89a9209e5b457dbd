from pydantic import BaseModel, Field

class ErrorResponse(BaseModel):
    """Body returned for every client error."""
    error: str = Field(..., description="Human readable error message.")
