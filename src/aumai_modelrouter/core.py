"""Core logic for aumai-modelrouter."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np

from aumai_modelrouter.catalog import (
    DEFAULT_MODELS,
    FALLBACK_ALTERNATIVE_ID,
    FALLBACK_PRIMARY_ID,
    GENERIC_ROLE_PROFILE,
    KEYWORD_CUES,
    ROLE_PROFILES,
    TASK_PATTERNS,
    ModelCatalog,
)
from aumai_modelrouter.config import DEFAULT_SETTINGS, RouterSettings
from aumai_modelrouter.feedback import FeedbackStore
from aumai_modelrouter.models import (
    Capability,
    CapabilityVector,
    KeywordCue,
    ModelEntry,
    Recommendation,
    RecommendationMetadata,
    RecommendationResponse,
    RoutingConstraints,
    ScoredCandidate,
    TaskPattern,
)
from aumai_modelrouter.reasoning import ReasoningGenerator

__all__ = [
    "RoutingError",
    "RequirementExtractor",
    "normalize_vector",
    "combine_requirements",
    "apply_constraints",
    "CosineSimilarity",
    "calculate_model_scores",
    "ConfidenceEstimator",
    "rank_models",
    "RoutingResult",
    "SemanticModelRouter",
    "route_to_optimal_model",
]

logger = logging.getLogger(__name__)

ConstraintsInput = RoutingConstraints | Mapping[str, object] | None


class RoutingError(RuntimeError):
    """Raised inside the pipeline when no recommendation can be built."""


# ---------------------------------------------------------------------------
# Requirement extraction
# ---------------------------------------------------------------------------


def normalize_vector(vector: CapabilityVector) -> CapabilityVector:
    """Divide every dimension by the largest value, capping at 1.0.

    An all-zero (or empty) vector is returned unchanged.
    """
    peak = max(vector.values(), default=0.0)
    if peak <= 0:
        return dict(vector)
    return {dimension: min(value / peak, 1.0) for dimension, value in vector.items()}


def combine_requirements(
    role_vector: CapabilityVector,
    task_vector: CapabilityVector,
    role_weight: float = DEFAULT_SETTINGS.role_weight,
    task_weight: float = DEFAULT_SETTINGS.task_weight,
) -> CapabilityVector:
    """Weighted blend over the union of both vectors' dimensions."""
    dimensions = list(dict.fromkeys([*role_vector, *task_vector]))
    return {
        dimension: role_vector.get(dimension, 0.0) * role_weight
        + task_vector.get(dimension, 0.0) * task_weight
        for dimension in dimensions
    }


class RequirementExtractor:
    """Turn a role and free-text task into a capability requirement vector.

    The role contributes a baseline profile; the task contributes the summed,
    match-weighted vectors of every task pattern it resembles, raised by
    keyword cues and normalised to a peak of 1.0.
    """

    def __init__(
        self,
        role_profiles: Mapping[str, CapabilityVector] | None = None,
        task_patterns: Iterable[TaskPattern] | None = None,
        keyword_cues: Iterable[KeywordCue] | None = None,
        settings: RouterSettings = DEFAULT_SETTINGS,
    ) -> None:
        self._role_profiles = dict(ROLE_PROFILES if role_profiles is None else role_profiles)
        self._patterns = list(TASK_PATTERNS if task_patterns is None else task_patterns)
        self._cues = [
            (cue, re.compile(cue.pattern))
            for cue in (KEYWORD_CUES if keyword_cues is None else keyword_cues)
        ]
        self._settings = settings

    def role_profile(self, role: str) -> CapabilityVector:
        """Return the baseline vector for *role*, or the generic profile."""
        profile = self._role_profiles.get(role)
        if profile is None:
            logger.debug("Unknown role %r, using generic profile", role)
            return dict(GENERIC_ROLE_PROFILE)
        return dict(profile)

    def pattern_match(self, task_lower: str, pattern: TaskPattern) -> float:
        """Return the fraction of *pattern* keywords found in the task, in [0, 1]."""
        hits = float(sum(1 for keyword in pattern.keywords if keyword in task_lower))
        if any(keyword in task_lower for keyword in pattern.boost_keywords):
            hits += self._settings.keyword_boost
        return min(hits / max(len(pattern.keywords), 1), 1.0)

    def enhance_with_keywords(self, task_lower: str, requirements: CapabilityVector) -> None:
        """Raise dimension floors in place for every keyword cue that matches."""
        for cue, regex in self._cues:
            if regex.search(task_lower) is None:
                continue
            for dimension, floor in cue.floors.items():
                requirements[dimension] = max(requirements.get(dimension, 0.0), floor)

    def analyze_task(self, task: str) -> CapabilityVector:
        """Compute the normalised task requirement vector for *task*."""
        task_lower = task.lower()

        # Every pattern dimension starts present at 0.0
        requirements: CapabilityVector = {}
        for pattern in self._patterns:
            for dimension in pattern.weights:
                requirements.setdefault(dimension, 0.0)

        for pattern in self._patterns:
            strength = self.pattern_match(task_lower, pattern)
            if strength <= 0:
                continue
            for dimension, weight in pattern.weights.items():
                requirements[dimension] = requirements.get(dimension, 0.0) + strength * weight

        self.enhance_with_keywords(task_lower, requirements)
        return normalize_vector(requirements)

    def combine(self, role_vector: CapabilityVector, task_vector: CapabilityVector) -> CapabilityVector:
        return combine_requirements(
            role_vector, task_vector, self._settings.role_weight, self._settings.task_weight
        )

    def extract(self, role: str, task: str) -> CapabilityVector:
        """Blend the role baseline with the analysed task vector."""
        return self.combine(self.role_profile(role), self.analyze_task(task))


def apply_constraints(
    requirements: CapabilityVector,
    constraints: RoutingConstraints,
    settings: RouterSettings = DEFAULT_SETTINGS,
) -> CapabilityVector:
    """Return a copy of *requirements* with constraint floors applied.

    ``prefer_open_source`` is accepted but has no effect on scoring.
    """
    constrained = dict(requirements)
    floors: list[tuple[bool, Capability, float]] = [
        (constraints.max_cost, Capability.COST, settings.max_cost_floor),
        (constraints.prioritize_speed, Capability.SPEED, settings.prioritize_speed_floor),
        (constraints.require_multimodal, Capability.MULTIMODAL, settings.require_multimodal_floor),
    ]
    for enabled, dimension, floor in floors:
        if enabled:
            constrained[dimension] = max(constrained.get(dimension, 0.0), floor)
    return constrained


# ---------------------------------------------------------------------------
# Scoring and ranking
# ---------------------------------------------------------------------------


class CosineSimilarity:
    """Cosine similarity between sparse capability vectors using numpy."""

    @staticmethod
    def compute(requirements: Mapping[Capability, float], capabilities: Mapping[Capability, float]) -> float:
        """Return the cosine similarity over the dimensions both vectors name.

        Dimensions present on only one side are ignored entirely, on both the
        dot product and the magnitudes.

        Args:
            requirements: Requirement vector.
            capabilities: A model's capability vector.

        Returns:
            The similarity, or 0.0 when no dimension is shared or either side
            has zero magnitude over the shared dimensions.
        """
        shared = [dimension for dimension in requirements if dimension in capabilities]
        if not shared:
            return 0.0

        req = np.array([requirements[d] for d in shared], dtype=np.float64)
        cap = np.array([capabilities[d] for d in shared], dtype=np.float64)

        magnitude = float(np.linalg.norm(req) * np.linalg.norm(cap))
        if magnitude == 0.0:
            return 0.0

        return float(np.dot(req, cap) / magnitude)


def calculate_model_scores(
    requirements: CapabilityVector, catalog: ModelCatalog
) -> dict[str, float]:
    """Score every catalog entry against *requirements*, in catalog order."""
    return {
        model_id: CosineSimilarity.compute(requirements, entry.capabilities)
        for model_id, entry in catalog.items()
    }


class ConfidenceEstimator:
    """Z-score based confidence relative to a whole score distribution.

    ``confidence = clamp((z + 2) / 4, 0, 1)`` with ``z`` computed against the
    population mean and standard deviation; ``z`` is 0 when every score is
    equal.
    """

    def __init__(self, scores: Iterable[float]) -> None:
        values = np.array(list(scores), dtype=np.float64)
        if values.size == 0:
            raise ValueError("Cannot estimate confidence from an empty score set")
        self.mean: float = float(np.mean(values))
        self.std: float = float(np.std(values))

    def z_score(self, score: float) -> float:
        if self.std == 0.0:
            return 0.0
        return (score - self.mean) / self.std

    def confidence(self, score: float) -> float:
        return float(np.clip((self.z_score(score) + 2.0) / 4.0, 0.0, 1.0))


def rank_models(scores: Mapping[str, float], top_k: int = DEFAULT_SETTINGS.top_k) -> list[ScoredCandidate]:
    """Return the *top_k* candidates sorted by descending score.

    Confidence is computed against all scores, not only the kept ones.  The
    sort is stable, so ties keep catalog order.
    """
    if not scores:
        return []

    estimator = ConfidenceEstimator(scores.values())
    candidates = [
        ScoredCandidate(model_id=model_id, score=score, confidence=estimator.confidence(score))
        for model_id, score in scores.items()
    ]
    candidates.sort(key=lambda candidate: candidate.score, reverse=True)
    return candidates[:top_k]


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RoutingResult:
    """Outcome of one pipeline run: a response or the error that stopped it."""

    response: RecommendationResponse | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.response is not None and self.error is None


def _as_text(value: object) -> str:
    return value if isinstance(value, str) else str(value)


def _detached(entry: ModelEntry | None) -> ModelEntry | None:
    # Catalog entries are shared process-wide; responses carry private copies
    return entry.model_copy(deep=True) if entry is not None else None


class SemanticModelRouter:
    """Route a (role, task, constraints) request to a ranked set of models.

    The router holds only read-only tables plus an injected feedback store,
    so :meth:`route_request` is safe to call from several threads.
    """

    def __init__(
        self,
        catalog: ModelCatalog | Mapping[str, ModelEntry] | None = None,
        settings: RouterSettings = DEFAULT_SETTINGS,
        extractor: RequirementExtractor | None = None,
        reasoning: ReasoningGenerator | None = None,
        feedback_store: FeedbackStore | None = None,
    ) -> None:
        if catalog is None:
            catalog = ModelCatalog()
        elif not isinstance(catalog, ModelCatalog):
            catalog = ModelCatalog(catalog)
        self._catalog: ModelCatalog = catalog
        self._settings = settings
        self._extractor = extractor or RequirementExtractor(settings=settings)
        self._reasoning = reasoning or ReasoningGenerator()
        self._feedback = feedback_store if feedback_store is not None else FeedbackStore()

    @property
    def catalog(self) -> ModelCatalog:
        return self._catalog

    @property
    def feedback_store(self) -> FeedbackStore:
        return self._feedback

    # -- pipeline stages ---------------------------------------------------

    def extract_requirements(self, role: str, task: str) -> CapabilityVector:
        return self._extractor.extract(role, task)

    def has_task_signal(self, task: str) -> bool:
        """True when *task* matches at least one pattern or keyword cue."""
        return any(value > 0 for value in self._extractor.analyze_task(task).values())

    def apply_constraints(
        self, requirements: CapabilityVector, constraints: ConstraintsInput
    ) -> CapabilityVector:
        return apply_constraints(requirements, self._coerce_constraints(constraints), self._settings)

    def calculate_model_scores(self, requirements: CapabilityVector) -> dict[str, float]:
        return calculate_model_scores(requirements, self._catalog)

    def rank_models(self, scores: Mapping[str, float]) -> list[ScoredCandidate]:
        return rank_models(scores, self._settings.top_k)

    def build_recommendation_response(
        self,
        ranked: list[ScoredCandidate],
        role: str,
        task: str,
        constraints: ConstraintsInput = None,
        task_signal: bool = True,
    ) -> RecommendationResponse:
        """Assemble the public response from ranked candidates.

        Raises:
            RoutingError: When *ranked* is empty.
        """
        if not ranked:
            raise RoutingError("No candidate models available to recommend")

        primary, *rest = ranked
        alternatives = rest[: self._settings.max_alternatives]

        routing_confidence = primary.confidence
        if not task_signal:
            routing_confidence *= self._settings.no_signal_penalty

        return RecommendationResponse(
            primary=self._recommend(primary, role, task),
            alternatives=[self._recommend(candidate, role, task) for candidate in alternatives],
            metadata=RecommendationMetadata(
                role=role,
                task=self._task_preview(task),
                constraints=self._coerce_constraints(constraints),
                total_candidates=len(ranked),
                routing_confidence=routing_confidence,
            ),
        )

    # -- entry points ------------------------------------------------------

    def try_route(self, role: str, task: str, constraints: ConstraintsInput = None) -> RoutingResult:
        """Run the full pipeline, capturing any failure in the result."""
        try:
            parsed = self._coerce_constraints(constraints)
            requirements = self.extract_requirements(role, task)
            requirements = self.apply_constraints(requirements, parsed)
            logger.debug("Requirement vector for role=%r: %s", role, requirements)

            scores = self.calculate_model_scores(requirements)
            ranked = self.rank_models(scores)
            response = self.build_recommendation_response(
                ranked, role, task, parsed, task_signal=self.has_task_signal(task)
            )
        except Exception as exc:  # noqa: BLE001
            return RoutingResult(error=exc)

        logger.debug(
            "Routed role=%r to %s (score=%.4f, confidence=%.4f)",
            role,
            response.primary.model_id,
            response.primary.score,
            response.primary.confidence,
        )
        return RoutingResult(response=response)

    def route_request(
        self, role: str, task: str, constraints: ConstraintsInput = None
    ) -> RecommendationResponse:
        """Return a recommendation; falls back to a fixed answer on any failure."""
        result = self.try_route(role, task, constraints)
        if result.response is not None:
            return result.response
        logger.error(
            "Model routing failed for role=%r, returning fallback recommendation",
            role,
            exc_info=result.error,
        )
        return self.fallback_recommendation(role, task)

    def fallback_recommendation(self, role: object, task: object) -> RecommendationResponse:
        """The fixed response used whenever routing fails."""
        return RecommendationResponse(
            primary=Recommendation(
                model_id=FALLBACK_PRIMARY_ID,
                model=_detached(DEFAULT_MODELS.get(FALLBACK_PRIMARY_ID)),
                score=0.8,
                confidence=0.6,
                reasoning="Reliable general-purpose model (fallback recommendation)",
            ),
            alternatives=[
                Recommendation(
                    model_id=FALLBACK_ALTERNATIVE_ID,
                    model=_detached(DEFAULT_MODELS.get(FALLBACK_ALTERNATIVE_ID)),
                    score=0.75,
                    confidence=0.6,
                    reasoning="Versatile multimodal alternative",
                )
            ],
            metadata=RecommendationMetadata(
                role=_as_text(role),
                task=self._task_preview(_as_text(task)),
                constraints=RoutingConstraints(),
                total_candidates=2,
                routing_confidence=0.6,
                fallback=True,
            ),
        )

    def record_user_feedback(
        self, role: str, task: str, selected_model: str, satisfaction: float
    ) -> None:
        """Store feedback for later analysis; scoring does not use it."""
        self._feedback.record(role, task, selected_model, satisfaction)
        logger.debug("Recorded feedback for %s (satisfaction=%s)", selected_model, satisfaction)

    # -- helpers -----------------------------------------------------------

    def _recommend(self, candidate: ScoredCandidate, role: str, task: str) -> Recommendation:
        entry = self._catalog.get(candidate.model_id)
        return Recommendation(
            model_id=candidate.model_id,
            model=_detached(entry),
            score=candidate.score,
            confidence=candidate.confidence,
            reasoning=self._reasoning.explain(candidate, entry, role, task),
        )

    def _task_preview(self, task: str) -> str:
        limit = self._settings.task_preview_length
        return task[:limit] + ("..." if len(task) > limit else "")

    @staticmethod
    def _coerce_constraints(constraints: ConstraintsInput) -> RoutingConstraints:
        if constraints is None:
            return RoutingConstraints()
        if isinstance(constraints, RoutingConstraints):
            return constraints
        return RoutingConstraints.model_validate(constraints)


def route_to_optimal_model(
    role: str, task: str, constraints: ConstraintsInput = None
) -> RecommendationResponse:
    """Route with the built-in catalog and default settings.

    Each call uses a fresh router, so no state is shared between callers.
    """
    return SemanticModelRouter().route_request(role, task, constraints)
