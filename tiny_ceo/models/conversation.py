"""Conversation API models."""

from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator


class ConversationMessage(BaseModel):
    """A single chat message."""

    role: Literal["user", "assistant"] = Field(description="Message author")
    content: str = Field(description="Message content")


class MessageResponse(ConversationMessage):
    """Stored message as returned by the API."""

    id: Optional[int] = Field(None, description="Message ID")
    timestamp: datetime = Field(description="Message timestamp")

    class Config:
        json_encoders = {
            datetime: lambda v: v.isoformat()
        }


class SendMessageRequest(BaseModel):
    """Request model for sending a chat message."""

    message: str = Field(description="User message", min_length=1)

    @field_validator("message")
    @classmethod
    def validate_not_blank(cls, v):
        """Reject whitespace-only messages."""
        if not v.strip():
            raise ValueError("Message is required")
        return v


class SendMessageResponse(BaseModel):
    """Response model for a sent message."""

    conversation_id: str = Field(description="Conversation ID")
    message: str = Field(description="Status message")
    response: str = Field(description="Assistant reply")


class ConversationMessagesResponse(BaseModel):
    """Response model for a workspace conversation."""

    workspace_id: str = Field(description="Workspace ID")
    conversation_id: Optional[str] = Field(None, description="Conversation ID, None before the first message")
    messages: List[MessageResponse] = Field(description="Messages, oldest first")
    total: int = Field(description="Total number of messages")
