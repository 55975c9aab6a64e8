"""Pydantic models for aumai-modelrouter."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

__all__ = [
    "Capability",
    "CapabilityVector",
    "Pricing",
    "ModelEntry",
    "TaskPattern",
    "KeywordCue",
    "RoutingConstraints",
    "ScoredCandidate",
    "Recommendation",
    "RecommendationMetadata",
    "RecommendationResponse",
    "CostEstimate",
    "FeedbackRecord",
]


class Capability(str, Enum):
    """Named capability dimensions shared by models, roles and task patterns."""

    # Core dimensions
    REASONING = "reasoning"
    CODING = "coding"
    ANALYSIS = "analysis"
    CREATIVE = "creative"
    MULTIMODAL = "multimodal"
    SPEED = "speed"
    COST = "cost"  # cheapness, higher = cheaper
    CONTEXT = "context"

    # Working style
    SUSTAINED_WORK = "sustained_work"
    COMPLEX_TASKS = "complex_tasks"
    STEERABILITY = "steerability"
    PRECISION = "precision"
    TRANSPARENCY = "transparency"
    STEP_BY_STEP = "step_by_step"
    VERSATILITY = "versatility"
    CONVERSATION = "conversation"
    EFFICIENCY = "efficiency"
    HIGH_VOLUME = "high_volume"
    SAFETY = "safety"

    # Knowledge work
    MATHEMATICS = "mathematics"
    RESEARCH = "research"
    BENCHMARKS = "benchmarks"
    PARALLEL_THINKING = "parallel_thinking"
    FRONTIER_RESEARCH = "frontier_research"
    LONG_CONTEXT = "long_context"
    DOCUMENT_ANALYSIS = "document_analysis"
    XML_PROCESSING = "xml_processing"
    STRUCTURED_OUTPUT = "structured_output"

    # Media generation
    IMAGE_GENERATION = "image_generation"
    TEXT_IN_IMAGES = "text_in_images"
    CONVERSATIONAL_EDITING = "conversational_editing"
    VIDEO_GENERATION = "video_generation"
    CINEMATIC = "cinematic"
    SYNCHRONIZED_AUDIO = "synchronized_audio"
    MUSIC_GENERATION = "music_generation"
    AUDIO_QUALITY = "audio_quality"
    INSTRUMENTAL = "instrumental"


# Sparse: a missing dimension reads as 0.0.
CapabilityVector = dict[Capability, float]


class Pricing(BaseModel):
    """Token pricing in USD per one million tokens."""

    model_config = ConfigDict(frozen=True)

    input: float = Field(..., ge=0.0, description="USD per 1M input tokens")
    output: float = Field(..., ge=0.0, description="USD per 1M output tokens")


class ModelEntry(BaseModel):
    """A model backend in the capability catalog."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_id: str = Field(..., description="Unique catalog identifier, e.g. 'gpt-4o'")
    name: str = Field(..., description="Human-readable model name")
    provider: str = Field(..., description="Vendor offering the model")
    description: str = Field(default="", description="Short description for display")
    capabilities: CapabilityVector = Field(
        default_factory=dict,
        description="Capability strengths in [0, 1]; absent dimensions count as 0",
    )
    pricing: Pricing | None = Field(
        default=None, description="Token pricing; None for media models billed otherwise"
    )
    context_window: int | None = Field(
        default=None, ge=0, description="Maximum context size in tokens, display only"
    )
    open_source: bool = Field(default=False, description="Whether weights are openly available")


class TaskPattern(BaseModel):
    """A keyword-triggered task archetype with its capability weights."""

    model_config = ConfigDict(frozen=True)

    name: str
    keywords: list[str] = Field(default_factory=list)
    weights: CapabilityVector = Field(default_factory=dict)
    boost_keywords: list[str] = Field(
        default_factory=list,
        description="Any hit adds the configured keyword boost to the match count",
    )


class KeywordCue(BaseModel):
    """A regex cue that raises capability floors when it matches task text."""

    model_config = ConfigDict(frozen=True)

    name: str
    pattern: str = Field(..., description="Regular expression searched in lower-cased text")
    floors: CapabilityVector = Field(default_factory=dict)


class RoutingConstraints(BaseModel):
    """Caller preferences that nudge the requirement vector.

    Accepts both camelCase and snake_case keys; unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    max_cost: bool = Field(default=False, validation_alias=AliasChoices("max_cost", "maxCost"))
    prioritize_speed: bool = Field(
        default=False, validation_alias=AliasChoices("prioritize_speed", "prioritizeSpeed")
    )
    require_multimodal: bool = Field(
        default=False, validation_alias=AliasChoices("require_multimodal", "requireMultimodal")
    )
    # Accepted but not used in scoring.
    prefer_open_source: bool = Field(
        default=False, validation_alias=AliasChoices("prefer_open_source", "preferOpenSource")
    )


class ScoredCandidate(BaseModel):
    """A catalog model with its similarity score and relative confidence."""

    model_config = ConfigDict(protected_namespaces=())

    model_id: str
    score: float = Field(..., description="Cosine similarity on shared dimensions")
    confidence: float = Field(..., ge=0.0, le=1.0)


class Recommendation(BaseModel):
    """A candidate enriched with display metadata and a justification."""

    model_config = ConfigDict(protected_namespaces=())

    model_id: str
    model: ModelEntry | None = Field(default=None, description="Catalog entry for display")
    score: float
    confidence: float = Field(..., ge=0.0, le=1.0)
    reasoning: str


class RecommendationMetadata(BaseModel):
    """Request echo and routing summary attached to every response."""

    role: str
    task: str = Field(..., description="Task text, truncated for display")
    constraints: RoutingConstraints = Field(default_factory=RoutingConstraints)
    total_candidates: int = Field(..., ge=0)
    routing_confidence: float = Field(..., ge=0.0, le=1.0)
    fallback: bool = False


class RecommendationResponse(BaseModel):
    """The ranked, explained routing result returned to callers."""

    primary: Recommendation
    alternatives: list[Recommendation] = Field(default_factory=list)
    metadata: RecommendationMetadata


class CostEstimate(BaseModel):
    """Estimated USD cost of a request against a model's token pricing."""

    model_config = ConfigDict(protected_namespaces=())

    model_id: str
    input_cost: float
    output_cost: float
    total_cost: float


class FeedbackRecord(BaseModel):
    """A single user satisfaction report for a routed model."""

    selected_model: str
    satisfaction: float
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
