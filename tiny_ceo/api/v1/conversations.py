"""Workspace conversation REST API routes - V1."""

from typing import List
from fastapi import APIRouter, HTTPException, Depends

from ...analysis import EmptyConversationError, analyze_conversation, assess_maturity
from ...config import settings
from ...db import DatabaseConnection, ConversationRepository, MessageRepository
from ...db.database_models import MessageDO
from ...models.analysis import ConversationAnalysis, MaturityAssessment
from ...models.conversation import (
    ConversationMessage,
    MessageResponse,
    SendMessageRequest,
    SendMessageResponse,
    ConversationMessagesResponse
)
from ...services import ReplyGenerator, ConversationContext
from ...utils.logger import get_app_logger

router = APIRouter(prefix="/api/v1/workspaces", tags=["Conversations"])

MESSAGE_SENT = "Message sent successfully"

# Database connection (set by main.py)
db_conn: DatabaseConnection = None
# Reply generator for assistant messages (set by main.py)
reply_generator: ReplyGenerator = None


def get_conversation_repo() -> ConversationRepository:
    """Dependency to get conversation repository."""
    if db_conn is None:
        raise HTTPException(status_code=500, detail="Database not initialized")
    return ConversationRepository(db_conn.conn)


def get_message_repo() -> MessageRepository:
    """Dependency to get message repository."""
    if db_conn is None:
        raise HTTPException(status_code=500, detail="Database not initialized")
    return MessageRepository(db_conn.conn)


def get_reply_generator() -> ReplyGenerator:
    """Dependency to get the reply generator."""
    if reply_generator is None:
        raise HTTPException(status_code=500, detail="Reply generator not initialized")
    return reply_generator


def to_conversation_messages(messages: List[MessageDO]) -> List[ConversationMessage]:
    """Convert stored messages into analysis input."""
    return [ConversationMessage(role=m.role, content=m.content) for m in messages]


def load_workspace_messages(
    workspace_id: str,
    conv_repo: ConversationRepository,
    msg_repo: MessageRepository
) -> List[MessageDO]:
    """Load a workspace's messages, empty when it has no conversation yet."""
    conversation = conv_repo.get_by_workspace(workspace_id)
    if not conversation:
        return []
    return msg_repo.get_by_conversation(conversation.id)


@router.get("/{workspace_id}/conversation", response_model=ConversationMessagesResponse)
async def get_messages(
    workspace_id: str,
    conv_repo: ConversationRepository = Depends(get_conversation_repo),
    msg_repo: MessageRepository = Depends(get_message_repo)
):
    """Get the workspace conversation."""
    conversation = conv_repo.get_by_workspace(workspace_id)
    messages = msg_repo.get_by_conversation(conversation.id) if conversation else []

    return ConversationMessagesResponse(
        workspace_id=workspace_id,
        conversation_id=conversation.id if conversation else None,
        messages=[
            MessageResponse(id=m.id, role=m.role, content=m.content, timestamp=m.timestamp)
            for m in messages
        ],
        total=len(messages)
    )


@router.post("/{workspace_id}/conversation", response_model=SendMessageResponse, status_code=201)
async def send_message(
    workspace_id: str,
    request: SendMessageRequest,
    conv_repo: ConversationRepository = Depends(get_conversation_repo),
    msg_repo: MessageRepository = Depends(get_message_repo),
    generator: ReplyGenerator = Depends(get_reply_generator)
):
    """Send a message and get the assistant reply."""
    logger = get_app_logger()

    if len(request.message) > settings.max_message_length:
        raise HTTPException(
            status_code=400,
            detail=f"Message must be less than {settings.max_message_length} characters"
        )

    conversation = conv_repo.get_or_create(workspace_id)
    if not conversation:
        raise HTTPException(status_code=500, detail="Failed to create conversation")

    history = to_conversation_messages(msg_repo.get_by_conversation(conversation.id))
    context = ConversationContext.from_messages(history)
    reply = generator.generate(context)

    stored = msg_repo.add_pair(
        MessageDO(conversation_id=conversation.id, role="user", content=request.message),
        MessageDO(conversation_id=conversation.id, role="assistant", content=reply)
    )
    if not stored:
        raise HTTPException(status_code=500, detail="Failed to store messages")

    logger.info(f"Message sent in workspace {workspace_id} (user message #{context.message_count + 1})")

    return SendMessageResponse(
        conversation_id=conversation.id,
        message=MESSAGE_SENT,
        response=reply
    )


@router.get("/{workspace_id}/conversation/maturity", response_model=MaturityAssessment)
async def get_maturity(
    workspace_id: str,
    conv_repo: ConversationRepository = Depends(get_conversation_repo),
    msg_repo: MessageRepository = Depends(get_message_repo)
):
    """Assess whether the conversation is ready for advisor generation."""
    messages = load_workspace_messages(workspace_id, conv_repo, msg_repo)
    return assess_maturity(to_conversation_messages(messages))


@router.get("/{workspace_id}/conversation/analysis", response_model=ConversationAnalysis)
async def get_analysis(
    workspace_id: str,
    conv_repo: ConversationRepository = Depends(get_conversation_repo),
    msg_repo: MessageRepository = Depends(get_message_repo)
):
    """Analyze the workspace conversation."""
    conversation = conv_repo.get_by_workspace(workspace_id)
    if not conversation:
        raise HTTPException(status_code=404, detail=f"No conversation found for workspace: {workspace_id}")

    messages = msg_repo.get_by_conversation(conversation.id)
    try:
        return analyze_conversation(to_conversation_messages(messages))
    except EmptyConversationError as e:
        raise HTTPException(status_code=400, detail=str(e))
