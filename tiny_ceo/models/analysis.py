"""Conversation analysis value objects."""

from typing import Dict, List
from pydantic import BaseModel, Field


class AnalysisMetadata(BaseModel):
    """Counters describing the analyzed input."""

    message_count: int = Field(description="Number of messages in the conversation")
    word_count: int = Field(description="Words in the combined user text")


class ConversationAnalysis(BaseModel):
    """Structured startup information derived from user messages."""

    full_text: str = Field(description="User message contents joined by blank lines")
    problem: str = Field(description="Best-guess problem statement")
    solution: str = Field(description="Best-guess solution statement")
    target_audience: str = Field(description="Target audience label")
    industry: str = Field(description="Industry label")
    business_model: str = Field(description="Business model label")
    unique_value: str = Field(description="Unique value proposition label")
    keywords: List[str] = Field(default_factory=list, description="Most frequent words")
    metadata: AnalysisMetadata


class MaturityAssessment(BaseModel):
    """Readiness of a conversation for advisor generation."""

    is_ready: bool
    score: int = Field(ge=0, le=6)
    max_score: int = 6
    maturity_percentage: int = Field(ge=0, le=100)
    checks: Dict[str, bool]
    recommendation: str


class ConversationSummary(BaseModel):
    """Short summary assembled from an analysis."""

    one_line_summary: str
    problem_statement: str
    proposed_solution: str
    target_market: str
    business_model: str
    key_differentiator: str


class GenerateAgentsResponse(BaseModel):
    """Response model for advisor generation."""

    message: str
    status: str
    analysis: ConversationAnalysis
    summary: ConversationSummary
    opportunity_score: int = Field(ge=0, le=100)
    maturity: MaturityAssessment
