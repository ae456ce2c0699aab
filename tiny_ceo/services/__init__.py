"""Services package."""

from .reply_generator import ReplyGenerator, ConversationContext

__all__ = ["ReplyGenerator", "ConversationContext"]
