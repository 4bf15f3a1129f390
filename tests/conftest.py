from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from flutter_scaffold.errors import PromptError  # noqa: E402


@dataclass
class Completed:
    returncode: int = 0


@dataclass
class RecordingRunner:
    """Stand-in for :func:`subprocess.run` that remembers every call.

    ``flutter create`` calls create the project directory the way the real
    tool would, so later writes land in an existing tree.
    """

    returncodes: dict[str, int] = field(default_factory=dict)
    calls: list[tuple[list[str], Path]] = field(default_factory=list)

    def __call__(self, argv: list[str], *, cwd: Path) -> Completed:
        self.calls.append((list(argv), Path(cwd)))
        key = "dev" if "--dev" in argv else argv[1]
        returncode = self.returncodes.get(key, 0)
        if argv[1] == "create" and returncode == 0:
            (Path(cwd) / argv[2] / "lib").mkdir(parents=True, exist_ok=True)
        return Completed(returncode)

    @property
    def argvs(self) -> list[list[str]]:
        return [argv for argv, _ in self.calls]


class ScriptedPrompter:
    """Answer prompts from fixed lists; running out behaves like a closed stdin."""

    def __init__(self, texts: Iterable[str] = (), confirms: Iterable[bool | None] = ()) -> None:
        self.texts = list(texts)
        self.confirms = list(confirms)
        self.asked: list[str] = []

    def text(self, message: str, default: str | None = None) -> str:
        self.asked.append(message)
        if not self.texts:
            raise PromptError(f"no answer to '{message}'")
        answer = self.texts.pop(0)
        if answer == "" and default is not None:
            return default
        return answer

    def confirm(self, message: str, default: bool) -> bool:
        self.asked.append(message)
        if not self.confirms:
            raise PromptError(f"no answer to '{message}'")
        answer = self.confirms.pop(0)
        return default if answer is None else answer


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def echoed() -> list[str]:
    return []


@pytest.fixture()
def scripted() -> type[ScriptedPrompter]:
    return ScriptedPrompter
