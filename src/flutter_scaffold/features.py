"""Feature model: a user-declared vertical slice of the generated app."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "AUTH_SUB_FEATURES",
    "AUTH_TOKEN",
    "DEFAULT_LAYERS",
    "Feature",
    "Layer",
    "expand_feature_entry",
]


class Layer(str, Enum):
    """Architectural layers created for every feature."""

    DATA = "data"
    PRESENTATION = "presentation"
    DOMAIN = "domain"
    LOGIC = "logic"


DEFAULT_LAYERS: Tuple[Layer, ...] = (Layer.DATA, Layer.PRESENTATION, Layer.DOMAIN, Layer.LOGIC)

AUTH_TOKEN = "auth"
AUTH_SUB_FEATURES: Tuple[str, ...] = ("login", "register", "forgot_password")


class Feature(BaseModel):
    """A feature directory under ``lib/features/<name>``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Feature name exactly as entered by the user.")
    layers: Tuple[Layer, ...] = Field(default=DEFAULT_LAYERS, description="Layer directories of the feature.")

    @field_validator("layers")
    @classmethod
    def _fixed_layers(cls, value: Tuple[Layer, ...]) -> Tuple[Layer, ...]:
        if tuple(value) != DEFAULT_LAYERS:
            raise ValueError("every feature has exactly the data, presentation, domain and logic layers")
        return value

    @classmethod
    def of(cls, name: str) -> "Feature":
        return cls(name=name)

    def directories(self) -> list[str]:
        """Return the layer directories relative to the feature root."""

        directories = [layer.value for layer in self.layers]
        directories.append(f"{Layer.PRESENTATION.value}/widgets")
        return directories


def expand_feature_entry(raw: str) -> list[Feature]:
    """Turn one answer of the feature prompt into features.

    Blank answers yield nothing. ``auth`` (in any case) is replaced by the
    login, register and forgot-password features; anything else is kept
    verbatim.
    """

    if not raw.strip():
        return []
    if raw.lower() == AUTH_TOKEN:
        return [Feature.of(name) for name in AUTH_SUB_FEATURES]
    return [Feature.of(raw)]
