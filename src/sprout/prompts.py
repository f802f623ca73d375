"""
sprout.prompts - Interactive Prompt Boundary
============================================

The collector never talks to the terminal directly. It asks a ``Prompter``
for each value:

    text(name, label, validate) -> str
    select(name, label, choices) -> str

Both raise ``CollectionAborted`` when the user cancels (Ctrl-C, Esc).

Implementations
---------------
QuestionaryPrompter
    Interactive prompts built on questionary. ``.ask()`` returns ``None``
    when the user cancels, which is translated to ``CollectionAborted``.

PresetPrompter
    Answers from a mapping of pre-supplied values (``--param`` on the CLI)
    and defers anything missing to a fallback prompter.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Protocol

import questionary

from sprout.errors import CollectionAborted, ValidationError


# A validator raises ValidationError to reject a value
Validator = Callable[[str], None]


class Prompter(Protocol):
    """Source of parameter values."""

    def text(self, name: str, label: str, validate: Validator) -> str:
        """Ask for a line of text accepted by ``validate``."""
        ...

    def select(self, name: str, label: str, choices: Sequence[str]) -> str:
        """Ask for exactly one of ``choices``."""
        ...


class QuestionaryPrompter:
    """
    Prompt the user in the terminal with questionary.

    Free-text prompts re-ask until ``validate`` accepts the input; the
    rejection message is shown inline by questionary.
    """

    def text(self, name: str, label: str, validate: Validator) -> str:
        def check(value: str) -> bool | str:
            try:
                validate(value)
            except ValidationError as e:
                return str(e)
            return True

        result = questionary.text(label, validate=check).ask()

        if result is None:
            raise CollectionAborted(f"Prompt for '{name}' was cancelled")

        return result

    def select(self, name: str, label: str, choices: Sequence[str]) -> str:
        result = questionary.select(label, choices=list(choices)).ask()

        if result is None:
            raise CollectionAborted(f"Prompt for '{name}' was cancelled")

        return result


class PresetPrompter:
    """
    Answer prompts from pre-supplied values.

    Parameters
    ----------
    answers : Mapping[str, str]
        Values keyed by parameter name.

    fallback : Prompter | None
        Asked for parameters missing from ``answers``. Without a fallback a
        missing answer aborts collection.

    Examples
    --------
    >>> prompter = PresetPrompter({"license": "MIT"})
    >>> prompter.select("license", "License", ["MIT", "Apache-2.0"])
    'MIT'
    """

    def __init__(
        self,
        answers: Mapping[str, str],
        fallback: Prompter | None = None,
    ) -> None:
        self.answers = dict(answers)
        self.fallback = fallback

    def text(self, name: str, label: str, validate: Validator) -> str:
        if name not in self.answers:
            return self._ask_fallback(name).text(name, label, validate)

        value = self.answers[name]
        validate(value)
        return value

    def select(self, name: str, label: str, choices: Sequence[str]) -> str:
        if name not in self.answers:
            return self._ask_fallback(name).select(name, label, choices)

        value = self.answers[name]
        if value not in choices:
            valid = ", ".join(choices)
            raise ValidationError(
                name, f"Invalid value '{value}' for {name}. Valid: {valid}"
            )
        return value

    def _ask_fallback(self, name: str) -> Prompter:
        if self.fallback is None:
            raise CollectionAborted(f"No value supplied for '{name}'")
        return self.fallback
