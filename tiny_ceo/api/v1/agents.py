"""Advisor generation REST API routes - V1.

Generation itself happens in the advisor templates; this router enforces
the maturity gate and hands back the analysis they consume.
"""

from fastapi import APIRouter, HTTPException, Depends

from ...analysis import (
    EmptyConversationError,
    analyze_conversation,
    assess_maturity,
    calculate_opportunity_score,
    generate_summary
)
from ...db import ConversationRepository, MessageRepository
from ...models.analysis import GenerateAgentsResponse
from ...utils.logger import get_app_logger
from .conversations import get_conversation_repo, get_message_repo, load_workspace_messages, to_conversation_messages

router = APIRouter(prefix="/api/v1/workspaces", tags=["Agents"])

NO_CONVERSATION = "No conversation found"
AGENTS_GENERATED = "Agents generated successfully"


@router.post("/{workspace_id}/agents/generate", response_model=GenerateAgentsResponse)
async def generate_agents(
    workspace_id: str,
    conv_repo: ConversationRepository = Depends(get_conversation_repo),
    msg_repo: MessageRepository = Depends(get_message_repo)
):
    """
    Run the maturity gate and analysis for advisor generation.

    Raises:
        HTTPException: 400 if there is no conversation or it is not mature enough
    """
    logger = get_app_logger()

    messages = to_conversation_messages(load_workspace_messages(workspace_id, conv_repo, msg_repo))
    if not messages:
        raise HTTPException(status_code=400, detail=NO_CONVERSATION)

    maturity = assess_maturity(messages)
    if not maturity.is_ready:
        logger.warning(
            f"Conversation not mature enough in workspace {workspace_id} "
            f"(score {maturity.score}/{maturity.max_score})"
        )
        raise HTTPException(
            status_code=400,
            detail=f"Conversation needs more details. {maturity.recommendation}"
        )

    try:
        analysis = analyze_conversation(messages)
    except EmptyConversationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Agents generated for workspace {workspace_id}")

    return GenerateAgentsResponse(
        message=AGENTS_GENERATED,
        status="completed",
        analysis=analysis,
        summary=generate_summary(analysis),
        opportunity_score=calculate_opportunity_score(analysis),
        maturity=maturity
    )
