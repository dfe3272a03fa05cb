"""
Pydantic models for the chat assistant endpoint.
"""

from pydantic import BaseModel, Field
from civic_connect.services.chatbot import Intent


class ChatRequest(BaseModel):
    """One user message sent to the assistant."""
    message: str = Field("", description="Raw user utterance (any length, may be empty)")

    class Config:
        json_schema_extra = {
            "example": {"message": "Take me to the report page"}
        }


class ChatResponse(BaseModel):
    """The assistant's reply and the intent it was routed to."""
    intent: Intent = Field(..., description="Detected intent")
    reply: str = Field(..., description="Assistant reply text")
