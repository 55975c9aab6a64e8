"""Rule-based, human-readable justifications for routed models."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from aumai_modelrouter.config import DEFAULT_SETTINGS, RouterSettings
from aumai_modelrouter.models import Capability, ModelEntry, ScoredCandidate

__all__ = [
    "ReasoningContext",
    "ReasoningRule",
    "DEFAULT_RULES",
    "ReasoningGenerator",
    "confidence_label",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReasoningContext:
    """Everything a rule may inspect about one candidate."""

    role: str
    task_lower: str
    entry: ModelEntry
    top_capabilities: tuple[Capability, ...]

    def capability(self, dimension: Capability) -> float:
        return self.entry.capabilities.get(dimension, 0.0)


@dataclass(frozen=True)
class ReasoningRule:
    """A predicate over a :class:`ReasoningContext` and the text it justifies."""

    name: str
    predicate: Callable[[ReasoningContext], bool]
    template: str

    def render(self, context: ReasoningContext) -> str:
        return self.template.format(role=context.role, model=context.entry.name)


DEFAULT_RULES: tuple[ReasoningRule, ...] = (
    # Role fit
    ReasoningRule(
        name="developer_coding",
        predicate=lambda ctx: "Developer" in ctx.role
        and Capability.CODING in ctx.top_capabilities,
        template="Excellent coding capabilities for {role} tasks",
    ),
    ReasoningRule(
        name="designer_creative",
        predicate=lambda ctx: "Designer" in ctx.role
        and Capability.CREATIVE in ctx.top_capabilities,
        template="Strong creative abilities suited for {role} work",
    ),
    # Task fit
    ReasoningRule(
        name="complex_reasoning",
        predicate=lambda ctx: "complex" in ctx.task_lower
        and ctx.capability(Capability.REASONING) > 0.8,
        template="Advanced reasoning for complex problem solving",
    ),
    ReasoningRule(
        name="fast_response",
        predicate=lambda ctx: "fast" in ctx.task_lower and ctx.capability(Capability.SPEED) > 0.7,
        template="Optimized for speed and quick responses",
    ),
    # Model family
    ReasoningRule(
        name="claude_4_family",
        predicate=lambda ctx: "Claude 4" in ctx.entry.name,
        template="Latest flagship model with sustained performance",
    ),
    ReasoningRule(
        name="gemini_2_5_family",
        predicate=lambda ctx: "Gemini 2.5" in ctx.entry.name,
        template="Advanced multimodal capabilities and large context",
    ),
)


class ReasoningGenerator:
    """Explain a candidate with the first matching rule.

    Rules are evaluated in order; when none fires the explanation falls back
    to the match percentage.  :meth:`explain` never raises.
    """

    def __init__(self, rules: Sequence[ReasoningRule] = DEFAULT_RULES) -> None:
        self._rules: tuple[ReasoningRule, ...] = tuple(rules)

    def explain(
        self, candidate: ScoredCandidate, entry: ModelEntry | None, role: str, task: str
    ) -> str:
        """Return a short justification for recommending *candidate*.

        Args:
            candidate: The scored candidate.
            entry: Its catalog entry, if known.
            role: The caller's professional role.
            task: The original task text.

        Returns:
            The first matching rule's text, or a ``"Score: X% match"`` string.
        """
        default = f"Score: {candidate.score * 100:.1f}% match for your requirements"
        if entry is None:
            return default

        try:
            context = ReasoningContext(
                role=role,
                task_lower=task.lower(),
                entry=entry,
                top_capabilities=self._top_capabilities(entry),
            )
            for rule in self._rules:
                if rule.predicate(context):
                    return rule.render(context)
        except Exception:  # noqa: BLE001
            logger.warning(
                "Reasoning rules failed for model %s", candidate.model_id, exc_info=True
            )
        return default

    @staticmethod
    def _top_capabilities(entry: ModelEntry, count: int = 3) -> tuple[Capability, ...]:
        # sorted() is stable, so equal strengths keep catalog order
        ranked = sorted(entry.capabilities.items(), key=lambda item: item[1], reverse=True)
        return tuple(dimension for dimension, _ in ranked[:count])


def confidence_label(confidence: float, settings: RouterSettings = DEFAULT_SETTINGS) -> str:
    """Map a confidence value onto a display label."""
    if confidence >= settings.high_confidence:
        return "High Confidence"
    if confidence >= settings.medium_confidence:
        return "Medium Confidence"
    return "Low Confidence"
