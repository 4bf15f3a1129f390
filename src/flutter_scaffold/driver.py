"""Invocation of the ``flutter`` command line tool."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Any, Callable, Sequence

from .config import ProjectSpec
from .errors import SpawnError

__all__ = [
    "BACKEND_DEPENDENCIES",
    "BASE_DEPENDENCIES",
    "DEV_DEPENDENCIES",
    "FlutterDriver",
    "STATE_DEPENDENCIES",
    "create_command",
    "dependency_command",
    "dev_dependency_command",
]


LOGGER = logging.getLogger(__name__)

PLATFORMS = "android,ios"

BASE_DEPENDENCIES: tuple[str, ...] = (
    "connectivity_plus",
    "device_info_plus",
    "flutter_background_service",
    "flutter_dotenv",
    "flutter_launcher_icons",
    "flutter_native_splash",
    "go_router",
    "logging",
    "path",
    "permission_handler",
    "shadcn_ui",
    "share_plus",
    "simple_circular_progress_bar",
    "sqflite",
)
STATE_DEPENDENCIES: tuple[str, ...] = (
    "hooks_riverpod",
    "riverpod_annotation",
    "flutter_riverpod",
    "flutter_hooks",
)
BACKEND_DEPENDENCIES: tuple[str, ...] = ("supabase_flutter",)
DEV_DEPENDENCIES: tuple[str, ...] = (
    "build_runner",
    "flutter_lints",
    "riverpod_generator",
    "very_good_analysis",
)

Runner = Callable[..., Any]


def create_command(spec: ProjectSpec, executable: str = "flutter") -> list[str]:
    return [
        executable,
        "create",
        spec.project_name,
        "--org",
        spec.package_name,
        "--platforms",
        PLATFORMS,
        "--no-pub",
    ]


def dependency_command(spec: ProjectSpec, executable: str = "flutter") -> list[str]:
    packages = list(BASE_DEPENDENCIES)
    if spec.use_state_mgmt:
        packages.extend(STATE_DEPENDENCIES)
    if spec.use_backend:
        packages.extend(BACKEND_DEPENDENCIES)
    return [executable, "pub", "add", *dict.fromkeys(packages)]


def dev_dependency_command(executable: str = "flutter") -> list[str]:
    return [executable, "pub", "add", "--dev", *DEV_DEPENDENCIES]


class FlutterDriver:
    """Run ``flutter create`` and ``flutter pub add`` in order.

    ``runner`` defaults to :func:`subprocess.run`; it receives the argv list
    and a ``cwd`` keyword and must return an object with a ``returncode``.
    Output of the child process goes straight to the terminal.
    """

    def __init__(self, executable: str = "flutter", runner: Runner | None = None) -> None:
        self.executable = executable
        self.runner = runner or subprocess.run

    def _run(self, argv: Sequence[str], cwd: Path) -> None:
        LOGGER.debug("running %s in %s", argv, cwd)
        try:
            completed = self.runner(list(argv), cwd=cwd)
        except OSError as exc:
            raise SpawnError(argv, reason=exc.strerror or str(exc)) from exc
        if completed.returncode != 0:
            raise SpawnError(argv, completed.returncode)

    def create_project(self, spec: ProjectSpec, parent: str | Path) -> Path:
        """Run ``flutter create`` inside ``parent`` and return the project directory."""

        parent = Path(parent)
        self._run(create_command(spec, self.executable), parent)
        return parent / spec.project_name

    def add_dependencies(self, spec: ProjectSpec, project_dir: str | Path) -> None:
        self._run(dependency_command(spec, self.executable), Path(project_dir))

    def add_dev_dependencies(self, project_dir: str | Path) -> None:
        self._run(dev_dependency_command(self.executable), Path(project_dir))
