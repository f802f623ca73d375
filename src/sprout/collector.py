"""
sprout.collector - Parameter Collection
=======================================

Turns a ``TemplateConfig`` into a ``RenderContext`` by asking a ``Prompter``
for each declared parameter, in declaration order.

The parameter kind is dispatched here and nowhere else:

- ``ParamKind.ENUM``: single choice among the declared ``enum`` values. The
  prompter guarantees the result is one of them.
- ``ParamKind.TEXT``: a line of text, rejected when empty if ``required``.

Collection is all-or-nothing: a cancelled prompt or a rejected value
propagates and no partial context is returned.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from sprout.errors import InvalidParameterError, ValidationError
from sprout.models import ParamKind, RenderContext, TemplateConfig, TemplateParam
from sprout.prompts import Prompter, Validator


# Console for rich output
console = Console()


def required_validator(param: TemplateParam) -> Validator:
    """
    Build the free-text validation rule for a parameter.

    Parameters
    ----------
    param : TemplateParam
        The parameter being collected.

    Returns
    -------
    Validator
        Callable raising ``ValidationError`` naming the parameter when it is
        required and the value is empty.
    """

    def validate(value: str) -> None:
        if param.required and len(value) == 0:
            raise ValidationError(param.name)

    return validate


def collect_param(param: TemplateParam, prompter: Prompter) -> str:
    """
    Obtain the value of a single parameter.

    Raises
    ------
    InvalidParameterError
        If an enum parameter declares no choices.
    ValidationError
        If the value returned for a free-text parameter is rejected.
    CollectionAborted
        If the user cancels the prompt.
    """
    if param.kind is ParamKind.ENUM:
        if not param.enum:
            raise InvalidParameterError(
                f"Parameter '{param.name}' is an enum but declares no choices"
            )
        return prompter.select(param.name, param.label, param.enum)

    validate = required_validator(param)
    value = prompter.text(param.name, param.label, validate)
    validate(value)
    return value


def build_context(
    config: TemplateConfig,
    prompter: Prompter,
    *,
    console: Console = console,
) -> RenderContext:
    """
    Resolve every declared parameter into a render context.

    If the config has a description it is printed once, before the first
    prompt.

    Parameters
    ----------
    config : TemplateConfig
        Parsed template config.

    prompter : Prompter
        Source of parameter values.

    console : Console
        Where the description is printed.

    Returns
    -------
    RenderContext
        One entry per declared parameter, keyed by name.
    """
    if config.description:
        console.print(f"\n{escape(config.description)}\n")

    values: dict[str, str] = {}
    for param in config.params:
        values[param.name] = collect_param(param, prompter)

    return RenderContext(values)
