"""Pydantic models for API request/response."""

from .conversation import (
    ConversationMessage,
    MessageResponse,
    SendMessageRequest,
    SendMessageResponse,
    ConversationMessagesResponse
)
from .analysis import (
    AnalysisMetadata,
    ConversationAnalysis,
    MaturityAssessment,
    ConversationSummary,
    GenerateAgentsResponse
)

__all__ = [
    "ConversationMessage",
    "MessageResponse",
    "SendMessageRequest",
    "SendMessageResponse",
    "ConversationMessagesResponse",
    "AnalysisMetadata",
    "ConversationAnalysis",
    "MaturityAssessment",
    "ConversationSummary",
    "GenerateAgentsResponse",
]
