"""Conversation repository for database operations."""

import uuid
from datetime import datetime
from typing import Optional
from .base import BaseRepository
from ..database_models.conversation import ConversationDO

_COLUMNS = "id, workspace_id, created_at"


def _row_to_conversation(row) -> ConversationDO:
    return ConversationDO(id=row[0], workspace_id=row[1], created_at=row[2])


class ConversationRepository(BaseRepository):
    """Repository for Conversation operations."""

    def create(self, conversation: ConversationDO) -> bool:
        """
        Create a new conversation record.

        Args:
            conversation: ConversationDO instance

        Returns:
            True if successful, False otherwise
        """
        try:
            self.conn.execute(f"""
                INSERT INTO conversations ({_COLUMNS})
                VALUES (?, ?, ?)
            """, [conversation.id, conversation.workspace_id, conversation.created_at])
            self.conn.commit()
            self.logger.info(f"Created conversation {conversation.id} for workspace {conversation.workspace_id}")
            return True
        except Exception as e:
            self.logger.error(f"Failed to create conversation: {e}")
            return False

    def get_by_workspace(self, workspace_id: str) -> Optional[ConversationDO]:
        """
        Get the conversation of a workspace.

        Args:
            workspace_id: Workspace ID

        Returns:
            ConversationDO instance or None if the workspace has no conversation yet
        """
        row = self._fetch_one(
            f"SELECT {_COLUMNS} FROM conversations WHERE workspace_id = ?",
            [workspace_id],
            f"get conversation for workspace {workspace_id}"
        )
        return _row_to_conversation(row) if row else None

    def get_or_create(self, workspace_id: str) -> Optional[ConversationDO]:
        """
        Get the workspace conversation, creating it on first use.

        Args:
            workspace_id: Workspace ID

        Returns:
            ConversationDO instance, or None if it could not be created
        """
        existing = self.get_by_workspace(workspace_id)
        if existing:
            return existing

        conversation = ConversationDO(
            id=str(uuid.uuid4()),
            workspace_id=workspace_id,
            created_at=datetime.utcnow()
        )
        if not self.create(conversation):
            # Another request may have created it concurrently
            return self.get_by_workspace(workspace_id)
        return conversation
