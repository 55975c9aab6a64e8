"""Static reference data: model catalog, role profiles and task patterns."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from aumai_modelrouter.models import (
    Capability,
    CapabilityVector,
    CostEstimate,
    KeywordCue,
    ModelEntry,
    Pricing,
    TaskPattern,
)

__all__ = [
    "DEFAULT_MODELS",
    "ROLE_PROFILES",
    "GENERIC_ROLE_PROFILE",
    "TASK_PATTERNS",
    "KEYWORD_CUES",
    "FALLBACK_PRIMARY_ID",
    "FALLBACK_ALTERNATIVE_ID",
    "ModelCatalog",
    "default_catalog",
]


def _vec(**values: float) -> CapabilityVector:
    """Build a capability vector from keyword arguments, keeping their order."""
    return {Capability(name): value for name, value in values.items()}


def _model(
    model_id: str,
    name: str,
    provider: str,
    description: str,
    capabilities: CapabilityVector,
    pricing: tuple[float, float] | None = None,
    context_window: int | None = None,
) -> ModelEntry:
    return ModelEntry(
        model_id=model_id,
        name=name,
        provider=provider,
        description=description,
        capabilities=capabilities,
        pricing=Pricing(input=pricing[0], output=pricing[1]) if pricing else None,
        context_window=context_window,
    )


# ---------------------------------------------------------------------------
# Capability catalog
# ---------------------------------------------------------------------------

_MODELS: list[ModelEntry] = [
    # Claude 4 series: flagship coding and reasoning
    _model(
        "claude-4-opus",
        "Claude 4 Opus",
        "Anthropic",
        "Flagship model for sustained, complex coding and reasoning work",
        _vec(
            reasoning=1.0, coding=1.0, analysis=1.0, creative=0.9,
            multimodal=0.8, speed=0.3, cost=0.1, context=0.9,
            sustained_work=1.0, complex_tasks=1.0,
        ),
        pricing=(15.0, 75.0),
        context_window=200_000,
    ),
    _model(
        "claude-4-sonnet",
        "Claude 4 Sonnet",
        "Anthropic",
        "Balanced, highly steerable model with precise instruction following",
        _vec(
            reasoning=0.95, coding=0.95, analysis=0.9, creative=0.9,
            multimodal=0.8, speed=0.6, cost=0.4, context=0.9,
            steerability=1.0, precision=1.0,
        ),
        pricing=(3.0, 15.0),
        context_window=200_000,
    ),
    _model(
        "claude-4-sonnet-thinking",
        "Claude 4 Sonnet Thinking",
        "Anthropic",
        "Extended thinking mode exposing transparent step-by-step reasoning",
        _vec(
            reasoning=0.98, coding=0.9, analysis=0.95, creative=0.8,
            multimodal=0.7, speed=0.4, cost=0.4, context=0.9,
            transparency=1.0, step_by_step=1.0,
        ),
        pricing=(3.0, 15.0),
        context_window=200_000,
    ),
    # OpenAI o-series: advanced reasoning
    _model(
        "o3",
        "o3",
        "OpenAI",
        "Advanced reasoning model strong in mathematics",
        _vec(
            reasoning=0.95, coding=0.9, analysis=0.9, creative=0.7,
            multimodal=0.8, speed=0.3, cost=0.2, context=0.8,
            mathematics=1.0, safety=0.95,
        ),
        pricing=(10.0, 40.0),
        context_window=200_000,
    ),
    _model(
        "o4-mini",
        "o4-mini",
        "OpenAI",
        "Cost-efficient reasoning model",
        _vec(
            reasoning=0.9, coding=0.85, analysis=0.8, creative=0.7,
            multimodal=0.8, speed=0.7, cost=0.8, context=0.8,
            mathematics=0.95, efficiency=0.9,
        ),
        pricing=(1.1, 4.4),
        context_window=200_000,
    ),
    # Gemini 2.5 series: multimodal and context leaders
    _model(
        "gemini-2.5-pro",
        "Gemini 2.5 Pro",
        "Google",
        "Multimodal research model with a very large context window",
        _vec(
            reasoning=0.9, coding=0.85, analysis=0.95, creative=0.8,
            multimodal=1.0, speed=0.7, cost=0.6, context=1.0,
            research=1.0, benchmarks=1.0,
        ),
        pricing=(1.25, 10.0),
        context_window=1_000_000,
    ),
    _model(
        "gemini-2.5-pro-deep-think",
        "Gemini 2.5 Pro Deep Think",
        "Google",
        "Parallel-thinking mode for frontier research problems",
        _vec(
            reasoning=1.0, coding=0.8, analysis=0.95, creative=0.8,
            multimodal=0.9, speed=0.2, cost=0.3, context=1.0,
            parallel_thinking=1.0, frontier_research=1.0,
        ),
        pricing=(1.25, 10.0),
        context_window=1_000_000,
    ),
    _model(
        "gemini-2.5-flash",
        "Gemini 2.5 Flash",
        "Google",
        "Fast, efficient model for high-volume workloads",
        _vec(
            reasoning=0.85, coding=0.8, analysis=0.7, creative=0.7,
            multimodal=0.9, speed=0.9, cost=0.8, context=0.8,
            efficiency=1.0, high_volume=1.0,
        ),
        pricing=(0.3, 2.5),
        context_window=1_000_000,
    ),
    # Specialised creative models
    _model(
        "dall-e-3",
        "DALL-E 3",
        "OpenAI",
        "Image generation with accurate text rendering",
        _vec(
            reasoning=0.2, coding=0.0, analysis=0.2, creative=1.0,
            multimodal=1.0, speed=0.8, cost=0.8, context=0.3,
            image_generation=1.0, text_in_images=1.0,
        ),
    ),
    _model(
        "gpt-image-1",
        "GPT Image 1",
        "OpenAI",
        "Image generation and conversational image editing",
        _vec(
            reasoning=0.2, coding=0.0, analysis=0.2, creative=1.0,
            multimodal=1.0, speed=0.8, cost=0.9, context=0.3,
            image_generation=1.0, text_in_images=1.0, conversational_editing=1.0,
        ),
    ),
    _model(
        "veo-3",
        "Veo 3",
        "Google",
        "Cinematic video generation with synchronized audio",
        _vec(
            reasoning=0.2, coding=0.0, analysis=0.2, creative=1.0,
            multimodal=1.0, speed=0.4, cost=0.7, context=0.3,
            video_generation=1.0, cinematic=1.0, synchronized_audio=1.0,
        ),
    ),
    _model(
        "lyria-2",
        "Lyria 2",
        "Google",
        "High-fidelity instrumental music generation",
        _vec(
            reasoning=0.1, coding=0.0, analysis=0.1, creative=1.0,
            multimodal=0.8, speed=0.8, cost=0.9, context=0.2,
            music_generation=1.0, audio_quality=1.0, instrumental=1.0,
        ),
    ),
    # Established general-purpose models
    _model(
        "claude-3-5-sonnet",
        "Claude 3.5 Sonnet",
        "Anthropic",
        "Capable general-purpose model with strong structured output",
        _vec(
            reasoning=0.9, coding=0.9, analysis=0.85, creative=0.85,
            multimodal=0.7, speed=0.6, cost=0.4, context=0.8,
            xml_processing=1.0, structured_output=0.9,
        ),
        pricing=(3.0, 15.0),
        context_window=200_000,
    ),
    _model(
        "gpt-4o",
        "GPT-4o",
        "OpenAI",
        "Versatile multimodal conversational model",
        _vec(
            reasoning=0.85, coding=0.8, analysis=0.8, creative=0.85,
            multimodal=0.9, speed=0.7, cost=0.3, context=0.7,
            versatility=1.0, conversation=0.9,
        ),
        pricing=(2.5, 10.0),
        context_window=128_000,
    ),
    _model(
        "gemini-1.5-pro",
        "Gemini 1.5 Pro",
        "Google",
        "Long-context model suited to large document analysis",
        _vec(
            reasoning=0.8, coding=0.75, analysis=0.85, creative=0.7,
            multimodal=0.85, speed=0.8, cost=0.7, context=0.95,
            long_context=1.0, document_analysis=0.9,
        ),
        pricing=(1.25, 5.0),
        context_window=2_000_000,
    ),
]

DEFAULT_MODELS: dict[str, ModelEntry] = {entry.model_id: entry for entry in _MODELS}

FALLBACK_PRIMARY_ID = "claude-3-5-sonnet"
FALLBACK_ALTERNATIVE_ID = "gpt-4o"


# ---------------------------------------------------------------------------
# Role profiles
# ---------------------------------------------------------------------------

ROLE_PROFILES: dict[str, CapabilityVector] = {
    "Software Developer": _vec(
        coding=1.0, reasoning=0.9, analysis=0.8, creative=0.3,
        speed=0.7, cost=0.6, sustained_work=0.8,
    ),
    "Data Scientist": _vec(
        reasoning=0.9, analysis=1.0, coding=0.8, creative=0.4,
        mathematics=0.9, context=0.8, research=0.8,
    ),
    "Product Manager": _vec(
        analysis=0.8, creative=0.7, reasoning=0.7, coding=0.2,
        speed=0.8, cost=0.7, versatility=0.9,
    ),
    "Designer": _vec(
        creative=1.0, multimodal=0.9, analysis=0.6, reasoning=0.5,
        image_generation=0.8, speed=0.7, cost=0.6,
    ),
    "Content Creator": _vec(
        creative=1.0, multimodal=0.8, analysis=0.6, reasoning=0.5,
        speed=0.8, cost=0.7, versatility=0.8,
    ),
    "Researcher": _vec(
        reasoning=1.0, analysis=1.0, creative=0.6, coding=0.5,
        context=1.0, research=1.0, benchmarks=0.8,
    ),
    "Business Analyst": _vec(
        analysis=1.0, reasoning=0.8, creative=0.6, coding=0.3,
        context=0.8, speed=0.7, cost=0.8,
    ),
    "Marketing Manager": _vec(
        creative=0.9, analysis=0.7, reasoning=0.6, coding=0.1,
        speed=0.8, cost=0.7, versatility=0.8,
    ),
    "Technical Writer": _vec(
        creative=0.8, analysis=0.7, reasoning=0.7, coding=0.4,
        context=0.8, structured_output=0.9, precision=0.8,
    ),
}

GENERIC_ROLE_PROFILE: CapabilityVector = _vec(
    reasoning=0.7, analysis=0.6, creative=0.5, coding=0.3,
    speed=0.6, cost=0.7, versatility=0.8,
)


# ---------------------------------------------------------------------------
# Task patterns
# ---------------------------------------------------------------------------


def _pattern(
    name: str,
    keywords: list[str],
    weights: CapabilityVector,
    boost_keywords: list[str] | None = None,
) -> TaskPattern:
    return TaskPattern(
        name=name, keywords=keywords, weights=weights, boost_keywords=boost_keywords or []
    )


TASK_PATTERNS: list[TaskPattern] = [
    # Code
    _pattern(
        "code_generation",
        ["generate", "create", "write", "build", "code", "function", "class",
         "script", "component", "typescript", "javascript", "python"],
        _vec(coding=1.0, reasoning=0.8, creative=0.3),
    ),
    _pattern(
        "code_review",
        ["review", "check", "analyze", "audit", "examine", "code", "quality"],
        _vec(coding=0.9, analysis=1.0, reasoning=0.8),
    ),
    _pattern(
        "debugging",
        ["debug", "fix", "error", "bug", "issue", "problem", "troubleshoot"],
        _vec(coding=1.0, analysis=0.9, reasoning=0.9, step_by_step=0.8),
    ),
    _pattern(
        "refactoring",
        ["refactor", "improve", "optimize", "restructure", "clean"],
        _vec(coding=1.0, analysis=0.8, reasoning=0.7),
    ),
    # Analysis
    _pattern(
        "data_analysis",
        ["analyze", "data", "statistics", "trends", "insights", "patterns",
         "statistical", "mathematical"],
        _vec(analysis=1.0, reasoning=0.8, mathematics=0.7),
    ),
    _pattern(
        "document_analysis",
        ["document", "text", "analyze", "summarize", "extract"],
        _vec(analysis=1.0, context=0.9, reasoning=0.7),
    ),
    _pattern(
        "research",
        ["research", "investigate", "study", "explore", "findings"],
        _vec(analysis=0.9, reasoning=0.9, research=1.0, context=0.8),
    ),
    # Creative
    _pattern(
        "content_creation",
        ["create", "write", "content", "article", "blog", "copy"],
        _vec(creative=1.0, analysis=0.5, reasoning=0.5),
    ),
    _pattern(
        "image_generation",
        ["image", "picture", "visual", "generate", "create", "draw", "logo",
         "design", "graphic", "illustration", "photo"],
        _vec(creative=1.0, image_generation=1.0, multimodal=1.0),
        boost_keywords=["logo", "image", "visual"],
    ),
    _pattern(
        "video_creation",
        ["video", "film", "movie", "animation", "create", "promotional", "cinematic"],
        _vec(
            creative=1.0, video_generation=1.0, multimodal=1.0,
            cinematic=0.9, synchronized_audio=0.8,
        ),
        boost_keywords=["video", "promotional"],
    ),
    _pattern(
        "music_creation",
        ["music", "song", "audio", "sound", "compose", "instrumental", "background"],
        _vec(creative=1.0, music_generation=1.0, audio_quality=1.0, instrumental=0.8),
        boost_keywords=["music", "audio"],
    ),
    # Reasoning
    _pattern(
        "problem_solving",
        ["solve", "problem", "solution", "resolve", "figure"],
        _vec(reasoning=1.0, analysis=0.8, step_by_step=0.7),
    ),
    _pattern(
        "strategic_planning",
        ["strategy", "plan", "roadmap", "vision", "goals"],
        _vec(reasoning=0.9, analysis=0.9, creative=0.6),
    ),
    _pattern(
        "decision_making",
        ["decide", "choose", "decision", "options", "recommend"],
        _vec(reasoning=0.9, analysis=0.8, transparency=0.7),
    ),
    # Communication
    _pattern(
        "writing",
        ["write", "draft", "compose", "author", "text"],
        _vec(creative=0.8, reasoning=0.6, precision=0.7),
    ),
    _pattern(
        "summarization",
        ["summarize", "summary", "brief", "overview", "digest"],
        _vec(analysis=0.9, reasoning=0.6, context=0.8),
    ),
    _pattern(
        "translation",
        ["translate", "language", "convert", "localize"],
        _vec(reasoning=0.6, creative=0.5, versatility=0.8),
    ),
    # Multimodal
    _pattern(
        "image_analysis",
        ["analyze", "image", "photo", "visual", "picture"],
        _vec(multimodal=1.0, analysis=0.8, reasoning=0.6),
    ),
    _pattern(
        "document_processing",
        ["process", "document", "file", "pdf", "text"],
        _vec(multimodal=0.7, analysis=1.0, context=0.9),
    ),
    # Performance-sensitive
    _pattern(
        "real_time",
        ["real-time", "live", "instant", "immediate", "fast", "quick"],
        _vec(speed=1.0, efficiency=1.0, cost=0.8),
    ),
    _pattern(
        "batch_processing",
        ["batch", "bulk", "multiple", "many", "process"],
        _vec(efficiency=1.0, cost=0.9, high_volume=1.0),
    ),
    # Complex work
    _pattern(
        "multi_step",
        ["step", "steps", "process", "workflow", "sequence"],
        _vec(reasoning=0.9, step_by_step=1.0, sustained_work=0.8),
    ),
    _pattern(
        "long_form",
        ["long", "detailed", "comprehensive", "extensive", "thorough"],
        _vec(context=1.0, sustained_work=0.9, reasoning=0.7),
    ),
]

KEYWORD_CUES: list[KeywordCue] = [
    KeywordCue(
        name="speed",
        pattern=r"\b(fast|quick|rapid|immediate|urgent|asap)\b",
        floors=_vec(speed=0.8),
    ),
    KeywordCue(
        name="cost",
        pattern=r"\b(cheap|budget|cost-effective|affordable|economical)\b",
        floors=_vec(cost=0.9),
    ),
    KeywordCue(
        name="quality",
        pattern=r"\b(high-quality|professional|premium|best|excellent)\b",
        floors=_vec(reasoning=0.8, analysis=0.8),
    ),
    KeywordCue(
        name="complexity",
        pattern=r"\b(complex|complicated|sophisticated|advanced|detailed)\b",
        floors=_vec(reasoning=0.9, complex_tasks=0.9),
    ),
    KeywordCue(
        name="creativity",
        pattern=r"\b(creative|innovative|original|artistic|design)\b",
        floors=_vec(creative=0.8),
    ),
    KeywordCue(
        name="multimodal",
        pattern=r"\b(image|video|audio|visual|multimodal|media)\b",
        floors=_vec(multimodal=0.8),
    ),
]


# ---------------------------------------------------------------------------
# Catalog wrapper
# ---------------------------------------------------------------------------


class ModelCatalog:
    """Read-only, ordered view over model entries.

    Iteration order is insertion order, which the ranker relies on to break
    score ties deterministically.
    """

    def __init__(self, entries: Mapping[str, ModelEntry] | None = None) -> None:
        self._entries: dict[str, ModelEntry] = dict(
            DEFAULT_MODELS if entries is None else entries
        )

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, object]]) -> ModelCatalog:
        """Build a catalog from raw dicts, validating each as a ModelEntry.

        Raises:
            pydantic.ValidationError: When a record is malformed.
        """
        entries: dict[str, ModelEntry] = {}
        for record in records:
            entry = ModelEntry.model_validate(record)
            entries[entry.model_id] = entry
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._entries

    def items(self) -> list[tuple[str, ModelEntry]]:
        return list(self._entries.items())

    def get(self, model_id: str) -> ModelEntry | None:
        return self._entries.get(model_id)

    def all(self) -> list[ModelEntry]:
        return list(self._entries.values())

    def ids(self) -> list[str]:
        return list(self._entries)

    def providers(self) -> list[str]:
        """Return distinct providers in first-seen order."""
        return list(dict.fromkeys(entry.provider for entry in self._entries.values()))

    def by_provider(self, provider: str) -> list[ModelEntry]:
        wanted = provider.lower()
        return [entry for entry in self._entries.values() if entry.provider.lower() == wanted]

    def estimate_cost(
        self, model_id: str, input_tokens: int, output_tokens: int
    ) -> CostEstimate | None:
        """Estimate the USD cost of a request from per-million-token pricing.

        Args:
            model_id: Catalog identifier.
            input_tokens: Prompt token count.
            output_tokens: Completion token count.

        Returns:
            A :class:`~aumai_modelrouter.models.CostEstimate`, or *None* when the
            model is unknown or has no token pricing.

        Raises:
            ValueError: When a token count is negative.
        """
        if input_tokens < 0 or output_tokens < 0:
            raise ValueError("Token counts must be non-negative")
        entry = self._entries.get(model_id)
        if entry is None or entry.pricing is None:
            return None
        input_cost = input_tokens / 1_000_000 * entry.pricing.input
        output_cost = output_tokens / 1_000_000 * entry.pricing.output
        return CostEstimate(
            model_id=model_id,
            input_cost=input_cost,
            output_cost=output_cost,
            total_cost=input_cost + output_cost,
        )


def default_catalog() -> ModelCatalog:
    """Return a catalog over the built-in model entries."""
    return ModelCatalog(DEFAULT_MODELS)
