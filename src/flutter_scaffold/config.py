"""Configuration records shared by the scaffolder, the driver and the CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .features import Feature

__all__ = [
    "DEFAULT_PACKAGE_NAME",
    "DEFAULT_PROJECT_NAME",
    "FLUTTER_ENV_VAR",
    "ProjectSpec",
    "ToolchainConfig",
]


DEFAULT_PROJECT_NAME = "my_flutter_app"
DEFAULT_PACKAGE_NAME = "com.example.my_flutter_app"
FLUTTER_ENV_VAR = "FLUTTER_SCAFFOLD_FLUTTER"


class ProjectSpec(BaseModel):
    """Everything the user decided about the project to generate.

    Attributes
    ----------
    project_name:
        Directory name of the project and the Dart package used in
        ``package:`` imports.
    package_name:
        Reverse-DNS organization passed to ``flutter create --org``.
    features:
        Features in the order they were entered. Duplicates are kept.
    use_state_mgmt:
        Generate Riverpod controllers and the routing provider, and install
        the Riverpod packages.
    use_backend:
        Generate the Supabase auth service, its provider and the ``.env`` file,
        and install ``supabase_flutter``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., min_length=1, description="Project directory and Dart package name.")
    package_name: str = Field(default=DEFAULT_PACKAGE_NAME, description="Organization identifier.")
    features: Tuple[Feature, ...] = Field(default=(), description="Declared features in entry order.")
    use_state_mgmt: bool = Field(default=True, description="Use Riverpod for state management.")
    use_backend: bool = Field(default=False, description="Integrate Supabase.")

    @field_validator("project_name")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be empty")
        return value

    @classmethod
    def from_answers(
        cls,
        project_name: str,
        package_name: str = DEFAULT_PACKAGE_NAME,
        *,
        features: Iterable[Feature | str] = (),
        use_state_mgmt: bool = True,
        use_backend: bool = False,
    ) -> "ProjectSpec":
        """Build a :class:`ProjectSpec` from prompt answers.

        ``features`` may mix :class:`Feature` instances and plain names; names
        are wrapped with :meth:`Feature.of` without any expansion.
        """

        resolved = tuple(item if isinstance(item, Feature) else Feature.of(item) for item in features)
        return cls(
            project_name=project_name,
            package_name=package_name,
            features=resolved,
            use_state_mgmt=use_state_mgmt,
            use_backend=use_backend,
        )

    @property
    def feature_names(self) -> list[str]:
        return [feature.name for feature in self.features]

    def context(self) -> Mapping[str, Any]:
        """Return a dictionary compatible with the templating helpers."""

        return {"project_name": self.project_name}


@dataclass(slots=True)
class ToolchainConfig:
    """Location of the external ``flutter`` tool."""

    flutter_executable: str = "flutter"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ToolchainConfig":
        environ = os.environ if environ is None else environ
        executable = environ.get(FLUTTER_ENV_VAR, "").strip()
        return cls(flutter_executable=executable or "flutter")
