"""AumAI Modelrouter — semantic routing of tasks to the best-suited AI model."""

from aumai_modelrouter.catalog import ModelCatalog
from aumai_modelrouter.config import RouterSettings
from aumai_modelrouter.core import (
    CosineSimilarity,
    RequirementExtractor,
    RoutingResult,
    SemanticModelRouter,
    route_to_optimal_model,
)
from aumai_modelrouter.feedback import FeedbackStore
from aumai_modelrouter.models import (
    Capability,
    ModelEntry,
    RecommendationResponse,
    RoutingConstraints,
)

__version__ = "0.1.0"

__all__ = [
    "Capability",
    "CosineSimilarity",
    "FeedbackStore",
    "ModelCatalog",
    "ModelEntry",
    "RecommendationResponse",
    "RequirementExtractor",
    "RouterSettings",
    "RoutingConstraints",
    "RoutingResult",
    "SemanticModelRouter",
    "route_to_optimal_model",
]
