"""Message repository for database operations."""

from typing import List
from .base import BaseRepository
from ..database_models.message import MessageDO

_INSERT = """
    INSERT INTO messages (id, conversation_id, role, content, timestamp)
    VALUES (nextval('messages_id_seq'), ?, ?, ?, ?)
    RETURNING id
"""


class MessageRepository(BaseRepository):
    """Repository for append-only Message storage."""

    def _insert(self, message: MessageDO) -> int:
        result = self.conn.execute(_INSERT, [
            message.conversation_id,
            message.role,
            message.content,
            message.timestamp
        ]).fetchone()
        message.id = result[0]
        return message.id

    def add_pair(self, user_message: MessageDO, assistant_message: MessageDO) -> bool:
        """
        Append a user message and its assistant reply in one transaction.

        Args:
            user_message: The user's message
            assistant_message: The assistant's reply

        Returns:
            True if both were stored, False otherwise (nothing is stored)
        """
        try:
            self.conn.begin()
        except Exception as e:
            self.logger.error(f"Failed to begin transaction: {e}")
            return False

        try:
            self._insert(user_message)
            self._insert(assistant_message)
            self.conn.commit()
            self.logger.debug(f"Added message pair to conversation {user_message.conversation_id}")
            return True
        except Exception as e:
            self.conn.rollback()
            self.logger.error(f"Failed to add message pair: {e}")
            return False

    def get_by_conversation(self, conversation_id: str) -> List[MessageDO]:
        """
        Get messages for a conversation.

        Args:
            conversation_id: Conversation ID

        Returns:
            List of MessageDO instances (append order)
        """
        rows = self._fetch_all("""
            SELECT id, conversation_id, role, content, timestamp
            FROM messages
            WHERE conversation_id = ?
            ORDER BY id ASC
        """, [conversation_id], "get conversation messages")

        return [
            MessageDO(
                id=row[0],
                conversation_id=row[1],
                role=row[2],
                content=row[3],
                timestamp=row[4]
            )
            for row in rows
        ]
