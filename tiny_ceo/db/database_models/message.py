"""Message database model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class MessageDO:
    """Message data object - maps to messages table."""

    conversation_id: str
    role: str
    content: str
    timestamp: datetime = field(default_factory=datetime.utcnow)
    id: Optional[int] = None
