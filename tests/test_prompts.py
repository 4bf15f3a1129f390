from __future__ import annotations

import io

import pytest

from flutter_scaffold.errors import PromptError
from flutter_scaffold.prompts import ClickPrompter, echo_status


@pytest.fixture()
def stdin(monkeypatch: pytest.MonkeyPatch):
    def feed(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return feed


def test_text_returns_answer(stdin):
    stdin("demo\n")
    assert ClickPrompter().text("What is your project name?", "my_flutter_app") == "demo"


def test_text_uses_default_on_empty_line(stdin):
    stdin("\n")
    assert ClickPrompter().text("What is your project name?", "my_flutter_app") == "my_flutter_app"


def test_text_without_default_allows_empty_answer(stdin):
    stdin("\n")
    assert ClickPrompter().text("Enter feature name (or press enter to finish):") == ""


def test_confirm(stdin):
    stdin("n\n\n")
    prompter = ClickPrompter()
    assert prompter.confirm("Do you want to use Riverpod for state management?", True) is False
    assert prompter.confirm("Do you want to use Supabase?", True) is True


def test_closed_stdin_raises_prompt_error(stdin):
    stdin("")
    with pytest.raises(PromptError):
        ClickPrompter().text("What is your package name?", "com.example.my_flutter_app")
    with pytest.raises(PromptError):
        ClickPrompter().confirm("Do you want to use Supabase?", False)


def test_echo_status(capsys):
    echo_status("Creating Flutter project...")
    assert capsys.readouterr().out == "Creating Flutter project...\n"
