"""
pytest configuration and shared fixtures for sprout tests.

Fixtures defined here are automatically available to all tests.

Fixtures
--------
make_template : Callable
    Write a template tree (relative path -> content) under tmp_path.

scenario_template : Path
    The team-project template: one required text parameter and one enum.

output_console : Console
    A rich Console writing to an in-memory buffer.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest
from rich.console import Console

from sprout.prompts import Validator


SCENARIO_CONFIG = """\
version: "1"
description: Team project skeleton
params:
  - name: project
    required: true
    prompt: Project name
  - name: license
    kind: enum
    prompt: License
    enum: [MIT, Apache-2.0]
"""


class ScriptedPrompter:
    """
    Prompter answering from a fixed mapping.

    Records every call so tests can assert on prompt order and labels.
    Does not validate on its own; the collector is expected to.
    """

    def __init__(self, answers: Mapping[str, str]) -> None:
        self.answers = dict(answers)
        self.calls: list[tuple[str, str, str]] = []

    def text(self, name: str, label: str, validate: Validator) -> str:
        self.calls.append(("text", name, label))
        return self.answers[name]

    def select(self, name: str, label: str, choices: Sequence[str]) -> str:
        self.calls.append(("select", name, label))
        return self.answers[name]


@pytest.fixture
def make_template(tmp_path: Path) -> Callable[[Mapping[str, str | None]], Path]:
    """
    Build a template tree under ``tmp_path / "tpl"``.

    Keys are paths relative to the template root. A ``None`` value creates
    an empty directory; a string creates a file with that content.
    """

    def build(files: Mapping[str, str | None]) -> Path:
        root = tmp_path / "tpl"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            if content is None:
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
        return root

    return build


@pytest.fixture
def scenario_template(make_template: Callable[[Mapping[str, str | None]], Path]) -> Path:
    """The template used by the end-to-end scenarios."""
    return make_template({
        ".new.yml": SCENARIO_CONFIG,
        "{{ params.project }}/README.md": "# {{ params.project }} ({{ params.license }})\n",
    })


@pytest.fixture
def scripted_prompter() -> Callable[[Mapping[str, str]], ScriptedPrompter]:
    """Factory for ``ScriptedPrompter`` instances."""
    return ScriptedPrompter


@pytest.fixture
def output_console() -> Console:
    """A Console whose output can be read back with ``.file.getvalue()``."""
    return Console(file=io.StringIO(), width=200, color_system=None)

