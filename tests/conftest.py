"""Shared test fixtures for aumai-modelrouter."""
from __future__ import annotations

import pytest

from aumai_modelrouter.catalog import ModelCatalog
from aumai_modelrouter.core import RequirementExtractor, SemanticModelRouter
from aumai_modelrouter.feedback import FeedbackStore
from aumai_modelrouter.models import Capability, ModelEntry


# ---------------------------------------------------------------------------
# Reusable model entries
# ---------------------------------------------------------------------------


@pytest.fixture()
def coder_model() -> ModelEntry:
    return ModelEntry(
        model_id="coder-1",
        name="Coder One",
        provider="Acme",
        capabilities={
            Capability.CODING: 1.0,
            Capability.REASONING: 0.9,
            Capability.SPEED: 0.3,
            Capability.COST: 0.2,
        },
    )


@pytest.fixture()
def painter_model() -> ModelEntry:
    return ModelEntry(
        model_id="painter-1",
        name="Painter One",
        provider="Acme",
        capabilities={
            Capability.IMAGE_GENERATION: 1.0,
            Capability.TEXT_IN_IMAGES: 1.0,
        },
    )


@pytest.fixture()
def sprinter_model() -> ModelEntry:
    return ModelEntry(
        model_id="sprinter-1",
        name="Sprinter One",
        provider="Other",
        capabilities={
            Capability.CODING: 0.6,
            Capability.REASONING: 0.6,
            Capability.SPEED: 1.0,
            Capability.COST: 0.9,
        },
    )


@pytest.fixture()
def small_catalog(
    coder_model: ModelEntry, painter_model: ModelEntry, sprinter_model: ModelEntry
) -> ModelCatalog:
    return ModelCatalog(
        {model.model_id: model for model in [coder_model, painter_model, sprinter_model]}
    )


@pytest.fixture()
def extractor() -> RequirementExtractor:
    return RequirementExtractor()


@pytest.fixture()
def feedback_store() -> FeedbackStore:
    return FeedbackStore()


@pytest.fixture()
def router(feedback_store: FeedbackStore) -> SemanticModelRouter:
    """Router over the built-in catalog with a fresh feedback store."""
    return SemanticModelRouter(feedback_store=feedback_store)

