"""
sprout.models - Template Schema and Render Context
==================================================

This module defines the data carried through a scaffolding run:

    TemplateConfig (parsed from the config file)
    ├── version: str
    ├── description: str
    └── params: list[TemplateParam]
        ├── name: str
        ├── required: bool
        ├── kind: ParamKind (enum | text)
        ├── prompt: str
        └── enum: list[str]

    RenderContext (built by the collector)
    └── params: name -> value (read-only)

The config models use Pydantic so that malformed config files are rejected
with a precise message (wrong types, missing names). The render context is a
frozen dataclass: it is built once and only read afterwards.

Usage Example
-------------
>>> from sprout.models import TemplateConfig
>>> config = TemplateConfig.model_validate({
...     "description": "Team project",
...     "params": [{"name": "project", "required": True, "prompt": "Name?"}],
... })
>>> config.params[0].kind
<ParamKind.TEXT: 'text'>
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Enumerations
# =============================================================================

class ParamKind(str, Enum):
    """
    How a parameter value is obtained from the user.

    Attributes
    ----------
    ENUM : str
        Single choice from the declared ``enum`` list.

    TEXT : str
        A line of free text, optionally required to be non-empty. Any kind
        other than ``"enum"`` (including a missing one) means free text.
    """

    ENUM = "enum"
    TEXT = "text"


class TemplateState(str, Enum):
    """Lifecycle of a ``Template`` instance."""

    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    RENDERED = "rendered"


# =============================================================================
# Config Models
# =============================================================================

class TemplateParam(BaseModel):
    """
    A single user-defined parameter declared in the template config.

    Attributes
    ----------
    name : str
        Key under which the value is exposed to templates. Names should be
        unique within a config; later duplicates overwrite earlier values.

    required : bool
        Reject empty input. Only meaningful for free-text parameters.

    kind : ParamKind
        ``enum`` for a single choice, free text otherwise.

    prompt : str
        Label shown to the user. Falls back to ``name`` when empty.

    enum : list[str]
        Ordered choices for ``enum`` parameters. Not checked at load time;
        an empty list is reported when the parameter is collected.
    """

    name: str = Field(
        description="Parameter name used as the substitution key",
        min_length=1,
    )
    required: bool = Field(
        default=False,
        description="Whether an empty value is rejected",
    )
    kind: ParamKind = Field(
        default=ParamKind.TEXT,
        description="Parameter kind: 'enum' or free text",
    )
    prompt: str = Field(
        default="",
        description="Prompt shown to the user",
    )
    enum: list[str] = Field(
        default_factory=list,
        description="Allowed choices for enum parameters",
    )

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: Any) -> ParamKind:
        """Map anything that is not exactly ``"enum"`` to free text."""
        if isinstance(v, ParamKind):
            return v
        if v == ParamKind.ENUM.value:
            return ParamKind.ENUM
        return ParamKind.TEXT

    @property
    def label(self) -> str:
        """Text to present when asking for this parameter."""
        return self.prompt or self.name


class TemplateConfig(BaseModel):
    """
    Parsed template config file.

    Attributes
    ----------
    version : str
        Free-form template version.

    description : str
        Shown once to the user before any parameter is prompted.

    params : list[TemplateParam]
        Parameters in declaration order, which is also prompt order.
    """

    version: str = Field(
        default="",
        description="Template version",
    )
    description: str = Field(
        default="",
        description="Template description shown before prompting",
    )
    params: list[TemplateParam] = Field(
        default_factory=list,
        description="Ordered parameter declarations",
    )

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        # YAML reads `version: 1.0` as a float
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(v)
        return v


# =============================================================================
# Render Context
# =============================================================================

class ParamNamespace:
    """
    Read-only view of parameter values as seen by templates.

    Jinja2 resolves ``params.name`` by attribute first and item second, so a
    plain mapping would answer ``params.items`` with its ``items`` method.
    This class has no public attributes: both ``params.name`` and
    ``params["name"]`` read the parameter value.

    Examples
    --------
    >>> ns = ParamNamespace({"items": "A"})
    >>> ns.items
    'A'
    >>> ns["items"]
    'A'
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str]) -> None:
        object.__setattr__(self, "_values", values)

    def __getattr__(self, name: str) -> str:
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("template parameters are read-only")

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParamNamespace({dict(self._values)!r})"


@dataclass(frozen=True)
class RenderContext:
    """
    Resolved parameter values shared by every render in one run.

    The mapping is wrapped in a read-only proxy at construction, so neither
    the caller's dict nor later code can change what templates see.

    Examples
    --------
    >>> ctx = RenderContext({"project": "widget"})
    >>> ctx["project"]
    'widget'
    >>> ctx.template_vars()["params"]["project"]
    'widget'
    """

    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __getitem__(self, name: str) -> str:
        return self.params[name]

    def __contains__(self, name: object) -> bool:
        return name in self.params

    def __len__(self) -> int:
        return len(self.params)

    def template_vars(self) -> dict[str, ParamNamespace]:
        """
        Variables handed to the template engine.

        ``Params`` is an alias of ``params`` so both spellings resolve
        identically in filenames and file contents.
        """
        namespace = ParamNamespace(self.params)
        return {"params": namespace, "Params": namespace}
