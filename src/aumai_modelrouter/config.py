"""Tunable constants for the routing engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["RouterSettings", "DEFAULT_SETTINGS"]


class RouterSettings(BaseModel):
    """Hand-tuned routing constants, injectable per router.

    The defaults reproduce the production behaviour.  None of them are
    derived from data, so treat them as configuration rather than truth.
    """

    model_config = ConfigDict(frozen=True)

    role_weight: float = Field(default=0.4, ge=0.0, description="Blend weight of the role baseline")
    task_weight: float = Field(default=0.6, ge=0.0, description="Blend weight of the task signal")
    keyword_boost: float = Field(
        default=3.0, ge=0.0, description="Added to a pattern's hit count on a boost keyword"
    )

    max_cost_floor: float = Field(default=0.8, ge=0.0, le=1.0)
    prioritize_speed_floor: float = Field(default=0.9, ge=0.0, le=1.0)
    require_multimodal_floor: float = Field(default=0.8, ge=0.0, le=1.0)

    top_k: int = Field(default=5, ge=1, description="Number of ranked candidates kept")
    max_alternatives: int = Field(default=3, ge=0)
    task_preview_length: int = Field(default=100, ge=1)

    no_signal_penalty: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Multiplier on routing confidence when the task text carries no signal",
    )
    high_confidence: float = Field(default=0.8, ge=0.0, le=1.0)
    medium_confidence: float = Field(default=0.6, ge=0.0, le=1.0)


DEFAULT_SETTINGS = RouterSettings()
