"""Plan the directories and files of a generated project before touching disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from .catalog import RenderedFile, TemplateCatalog
from .config import ProjectSpec
from .errors import WriteError

__all__ = ["BASE_DIRECTORIES", "LayoutPlan", "plan_layout"]


LOGGER = logging.getLogger(__name__)

BASE_DIRECTORIES: tuple[str, ...] = (
    "app",
    "core/constants",
    "core/utilities",
    "core/services",
    "core/widgets",
    "state",
    "theme",
)


@dataclass(frozen=True, slots=True)
class LayoutPlan:
    """Directories to create followed by files to write.

    Paths are POSIX strings relative to the project root. Every directory is
    created before the first file is written.
    """

    directories: tuple[str, ...]
    files: tuple[RenderedFile, ...]

    def file_paths(self) -> list[str]:
        return [item.path for item in self.files]

    def apply(self, root: str | Path) -> Path:
        """Create the planned tree under ``root`` and return ``root``."""

        root = Path(root)
        for directory in self.directories:
            destination = root / directory
            LOGGER.debug("mkdir %s", destination)
            try:
                destination.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise WriteError(destination, exc.strerror or str(exc)) from exc

        for item in self.files:
            destination = root / item.path
            LOGGER.debug("write %s (%d bytes)", destination, len(item.content))
            try:
                destination.write_text(item.content, encoding="utf-8", newline="\n")
            except OSError as exc:
                raise WriteError(destination, exc.strerror or str(exc)) from exc
        return root


def _covered(directory: PurePosixPath, planned: list[str]) -> bool:
    # mkdir(parents=True) on a planned directory creates all its ancestors too.
    return any(directory == candidate or directory in candidate.parents for candidate in map(PurePosixPath, planned))


def plan_layout(spec: ProjectSpec, catalog: TemplateCatalog | None = None) -> LayoutPlan:
    """Return the :class:`LayoutPlan` for ``spec``."""

    catalog = catalog or TemplateCatalog()

    directories = [f"lib/{directory}" for directory in BASE_DIRECTORIES]
    for feature in spec.features:
        directories.extend(f"lib/features/{feature.name}/{directory}" for directory in feature.directories())

    files = catalog.render(spec)
    for item in files:
        parent = PurePosixPath(item.path).parent
        if parent == PurePosixPath(".") or _covered(parent, directories):
            continue
        directories.append(str(parent))

    plan = LayoutPlan(directories=tuple(dict.fromkeys(directories)), files=tuple(files))
    LOGGER.debug("planned %d directories and %d files", len(plan.directories), len(plan.files))
    return plan
