"""CLI entry point for aumai-modelrouter."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from aumai_modelrouter.catalog import ModelCatalog
from aumai_modelrouter.core import SemanticModelRouter
from aumai_modelrouter.models import RecommendationResponse, RoutingConstraints
from aumai_modelrouter.reasoning import confidence_label


def _load_catalog(catalog_file: str | None) -> ModelCatalog:
    """Load a catalog from a JSON list of model entries, or the built-in one."""
    if catalog_file is None:
        return ModelCatalog()
    try:
        raw: list[dict[str, object]] = json.loads(Path(catalog_file).read_text(encoding="utf-8"))
        return ModelCatalog.from_records(raw)
    except (OSError, json.JSONDecodeError, ValidationError, TypeError) as exc:
        raise click.ClickException(f"Could not load catalog {catalog_file}: {exc}") from exc


def _echo_response(response: RecommendationResponse) -> None:
    primary = response.primary
    name = primary.model.name if primary.model else primary.model_id
    meta = response.metadata
    heading = "Recommended model" + (" (fallback)" if meta.fallback else "")
    click.echo(f"{heading}: {name} [{primary.model_id}]")
    click.echo(
        f"  score={primary.score:.4f}  confidence={primary.confidence:.2f} "
        f"({confidence_label(primary.confidence)})"
    )
    click.echo(f"  {primary.reasoning}")
    if response.alternatives:
        click.echo("Alternatives:")
        for rank, alt in enumerate(response.alternatives, start=1):
            alt_name = alt.model.name if alt.model else alt.model_id
            click.echo(f"  [{rank}] {alt_name} (score={alt.score:.4f}) - {alt.reasoning}")
    click.echo(f"Routing confidence: {meta.routing_confidence:.2f}")


@click.group()
@click.version_option(package_name="aumai-modelrouter")
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """AumAI Modelrouter — semantic routing of tasks to AI models."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s"
        )


@main.command("route")
@click.option("--role", required=True, help="Professional role, e.g. 'Software Developer'.")
@click.option("--task", required=True, help="Free-text task description.")
@click.option("--max-cost", is_flag=True, help="Prefer cheaper models.")
@click.option("--prioritize-speed", is_flag=True, help="Prefer faster models.")
@click.option("--require-multimodal", is_flag=True, help="Prefer multimodal models.")
@click.option(
    "--prefer-open-source", is_flag=True, help="Accepted for compatibility; not used in scoring."
)
@click.option(
    "--catalog",
    "catalog_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with a list of model entries replacing the built-in catalog.",
)
@click.option(
    "--output-format",
    default="text",
    type=click.Choice(["text", "json"]),
    show_default=True,
)
def route_cmd(
    role: str,
    task: str,
    max_cost: bool,
    prioritize_speed: bool,
    require_multimodal: bool,
    prefer_open_source: bool,
    catalog_file: str | None,
    output_format: str,
) -> None:
    """Recommend the best model for ROLE and TASK."""
    router = SemanticModelRouter(catalog=_load_catalog(catalog_file))
    constraints = RoutingConstraints(
        max_cost=max_cost,
        prioritize_speed=prioritize_speed,
        require_multimodal=require_multimodal,
        prefer_open_source=prefer_open_source,
    )
    response = router.route_request(role, task, constraints)

    if output_format == "json":
        click.echo(json.dumps(response.model_dump(mode="json"), indent=2))
    else:
        _echo_response(response)


@main.command("models")
@click.option("--provider", default=None, help="Only list models from this provider.")
@click.option(
    "--output-format",
    default="text",
    type=click.Choice(["text", "json"]),
    show_default=True,
)
def models_cmd(provider: str | None, output_format: str) -> None:
    """List the models in the built-in catalog."""
    catalog = ModelCatalog()
    entries = catalog.by_provider(provider) if provider else catalog.all()

    if not entries:
        click.echo("No models found.")
        return

    if output_format == "json":
        data = [
            {
                "model_id": entry.model_id,
                "name": entry.name,
                "provider": entry.provider,
                "context_window": entry.context_window,
                "open_source": entry.open_source,
            }
            for entry in entries
        ]
        click.echo(json.dumps(data, indent=2))
    else:
        for entry in entries:
            click.echo(f"  {entry.model_id:<28} {entry.name} ({entry.provider})")


@main.command("cost")
@click.option("--model", "model_id", required=True, help="Catalog model id.")
@click.option("--input-tokens", required=True, type=click.IntRange(min=0))
@click.option("--output-tokens", required=True, type=click.IntRange(min=0))
def cost_cmd(model_id: str, input_tokens: int, output_tokens: int) -> None:
    """Estimate the USD cost of a request against MODEL's token pricing."""
    estimate = ModelCatalog().estimate_cost(model_id, input_tokens, output_tokens)
    if estimate is None:
        raise click.ClickException(f"No token pricing available for model '{model_id}'.")
    click.echo(
        f"{model_id}: input ${estimate.input_cost:.6f} + output ${estimate.output_cost:.6f} "
        f"= ${estimate.total_cost:.6f}"
    )


if __name__ == "__main__":
    main()
