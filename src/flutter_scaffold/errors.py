"""Exception types raised while scaffolding a Flutter project."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

__all__ = ["ScaffoldError", "PromptError", "SpawnError", "WriteError"]


class ScaffoldError(RuntimeError):
    """Base class for every fatal scaffolding failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PromptError(ScaffoldError):
    """Raised when an interactive answer cannot be read."""


class SpawnError(ScaffoldError):
    """Raised when an external tool is missing or exits unsuccessfully."""

    def __init__(self, argv: Sequence[str], returncode: int | None = None, *, reason: str | None = None) -> None:
        self.argv = tuple(argv)
        self.returncode = returncode
        command = " ".join(self.argv)
        if reason is not None:
            message = f"could not run '{command}': {reason}"
        else:
            message = f"'{command}' exited with status {returncode}"
        super().__init__(message)


class WriteError(ScaffoldError):
    """Raised when a directory or file of the generated project cannot be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"could not write {self.path}: {reason}")
