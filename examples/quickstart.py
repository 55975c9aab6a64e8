"""Quickstart examples for aumai-modelrouter.

Demonstrates routing role and task descriptions to models, applying caller
constraints, inspecting the requirement vector, plugging in a custom catalog,
and the fallback guarantee, all without any external services or API keys.

Run this file directly to verify your installation:

    python examples/quickstart.py
"""

from aumai_modelrouter.catalog import ModelCatalog
from aumai_modelrouter.core import SemanticModelRouter, route_to_optimal_model
from aumai_modelrouter.models import Capability, ModelEntry, RecommendationResponse
from aumai_modelrouter.reasoning import confidence_label


def _print_response(title: str, response: RecommendationResponse) -> None:
    primary = response.primary
    print(f"\n=== {title} ===")
    print(
        f"  -> {primary.model_id} (score={primary.score:.3f}, "
        f"confidence={primary.confidence:.2f}, {confidence_label(primary.confidence)})"
    )
    print(f"     {primary.reasoning}")
    for alt in response.alternatives:
        print(f"     alt: {alt.model_id} (score={alt.score:.3f})")
    if response.metadata.fallback:
        print("     [fallback recommendation]")


def demo_basic_routing() -> None:
    response = route_to_optimal_model(
        "Software Developer",
        "Generate a complex React component with TypeScript interfaces "
        "and comprehensive error handling",
    )
    _print_response("Complex coding task", response)

    response = route_to_optimal_model(
        "Designer", "Create a professional logo image with clear text rendering"
    )
    _print_response("Logo design", response)


def demo_constraints() -> None:
    task = "Budget-friendly data analysis for a startup"
    _print_response("Unconstrained", route_to_optimal_model("Data Scientist", task))
    _print_response(
        "With maxCost", route_to_optimal_model("Data Scientist", task, {"maxCost": True})
    )


def demo_requirements() -> None:
    router = SemanticModelRouter()
    vector = router.extract_requirements("Content Creator", "Compose background music")
    strongest = sorted(vector.items(), key=lambda item: item[1], reverse=True)[:5]
    print("\n=== Strongest requirement dimensions ===")
    for dimension, value in strongest:
        print(f"  {dimension.value:<20} {value:.3f}")


def demo_custom_catalog() -> None:
    catalog = ModelCatalog(
        {
            "local-coder": ModelEntry(
                model_id="local-coder",
                name="Local Coder",
                provider="Self-hosted",
                capabilities={Capability.CODING: 0.9, Capability.COST: 1.0},
            ),
            "local-artist": ModelEntry(
                model_id="local-artist",
                name="Local Artist",
                provider="Self-hosted",
                capabilities={Capability.IMAGE_GENERATION: 0.8, Capability.CREATIVE: 0.9},
            ),
        }
    )
    router = SemanticModelRouter(catalog=catalog)
    _print_response("Custom catalog", router.route_request("Designer", "draw a logo"))


def demo_fallback() -> None:
    router = SemanticModelRouter(catalog=ModelCatalog({}))
    _print_response("Empty catalog", router.route_request("Designer", "draw a logo"))


if __name__ == "__main__":
    demo_basic_routing()
    demo_constraints()
    demo_requirements()
    demo_custom_catalog()
    demo_fallback()
