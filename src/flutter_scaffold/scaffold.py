"""Project scaffolding: materialize a plan on disk and run the interactive session."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .catalog import TemplateCatalog
from .config import DEFAULT_PACKAGE_NAME, DEFAULT_PROJECT_NAME, ProjectSpec
from .driver import FlutterDriver
from .errors import PromptError
from .features import AUTH_TOKEN, Feature, expand_feature_entry
from .layout import LayoutPlan, plan_layout
from .prompts import Prompter, echo_status

__all__ = ["ProjectScaffolder", "ScaffoldResult", "ScaffoldSession"]


LOGGER = logging.getLogger(__name__)

PROJECT_NAME_PROMPT = "What is your project name?"
PACKAGE_NAME_PROMPT = "What is your package name?"
FEATURE_PROMPT = "Enter feature name (or press enter to finish):"
STATE_MGMT_PROMPT = "Do you want to use Riverpod for state management?"
BACKEND_PROMPT = "Do you want to use Supabase?"


@dataclass(slots=True)
class ProjectScaffolder:
    """Write the planned Flutter project structure."""

    catalog: TemplateCatalog

    def __init__(self, catalog: TemplateCatalog | None = None) -> None:
        self.catalog = catalog or TemplateCatalog()

    def plan(self, spec: ProjectSpec) -> LayoutPlan:
        return plan_layout(spec, self.catalog)

    def materialize(self, spec: ProjectSpec, project_dir: str | Path) -> LayoutPlan:
        """Create directories and write every applicable template under ``project_dir``."""

        plan = self.plan(spec)
        plan.apply(project_dir)
        LOGGER.info("wrote %d files into %s", len(plan.files), project_dir)
        return plan


@dataclass(slots=True)
class ScaffoldResult:
    spec: ProjectSpec
    project_dir: Path
    plan: LayoutPlan


class ScaffoldSession:
    """The full interactive run: questions, ``flutter create``, templates, packages."""

    def __init__(
        self,
        prompter: Prompter,
        driver: FlutterDriver,
        scaffolder: ProjectScaffolder | None = None,
        echo: Callable[[str], None] = echo_status,
    ) -> None:
        self.prompter = prompter
        self.driver = driver
        self.scaffolder = scaffolder or ProjectScaffolder()
        self.echo = echo

    def collect_features(self) -> list[Feature]:
        """Ask for feature names until an empty answer."""

        features: list[Feature] = []
        while True:
            entry = self.prompter.text(FEATURE_PROMPT)
            expanded = expand_feature_entry(entry)
            if not expanded:
                return features
            if entry.lower() == AUTH_TOKEN:
                self.echo("Adding auth-related features...")
            features.extend(expanded)
            self.echo(f"Added feature: {entry}")

    def run(self, name: str | None = None, directory: str | Path | None = None) -> ScaffoldResult:
        parent = Path.cwd() if directory is None else Path(directory)

        project_name = name if name and name.strip() else self.prompter.text(PROJECT_NAME_PROMPT, DEFAULT_PROJECT_NAME)
        if not project_name.strip():
            raise PromptError("project name must not be empty")
        package_name = self.prompter.text(PACKAGE_NAME_PROMPT, DEFAULT_PACKAGE_NAME)
        identity = ProjectSpec.from_answers(project_name, package_name)

        self.echo("Creating Flutter project...")
        project_dir = self.driver.create_project(identity, parent)

        features = self.collect_features()
        use_state_mgmt = self.prompter.confirm(STATE_MGMT_PROMPT, True)
        use_backend = self.prompter.confirm(BACKEND_PROMPT, False)
        spec = identity.model_copy(
            update={
                "features": tuple(features),
                "use_state_mgmt": use_state_mgmt,
                "use_backend": use_backend,
            }
        )
        LOGGER.info("scaffolding %s with features %s", spec.project_name, spec.feature_names)

        plan = self.scaffolder.materialize(spec, project_dir)
        self.driver.add_dependencies(spec, project_dir)
        self.driver.add_dev_dependencies(project_dir)

        self.echo("Project structure created successfully!")
        return ScaffoldResult(spec=spec, project_dir=project_dir, plan=plan)
