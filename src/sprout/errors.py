"""
sprout.errors - Error Hierarchy
===============================

Every failure sprout can report derives from ``SproutError``. Lower-level
exceptions (``OSError``, ``yaml.YAMLError``, pydantic and Jinja2 errors) are
re-raised as one of these types with the original chained as ``__cause__``,
so callers only need to catch ``SproutError``.

Hierarchy
---------

    SproutError
    ├── ConfigError
    │   ├── ConfigNotFound
    │   ├── ConfigParseError
    │   └── InvalidParameterError
    ├── CollectionError
    │   ├── ValidationError
    │   └── CollectionAborted
    ├── RenderingError
    │   ├── TemplateParseError
    │   └── TemplateExecError
    │       └── UnresolvedReference
    ├── FilesystemError
    └── WalkError

Nothing here is retried. A scaffolding run is one-shot, so the first error
terminates it and the CLI reports the message.
"""

from __future__ import annotations


class SproutError(Exception):
    """Base class for all sprout errors."""


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigError(SproutError):
    """Problem with the template config file or its contents."""


class ConfigNotFound(ConfigError):
    """The config file is missing from the template root or unreadable."""


class ConfigParseError(ConfigError):
    """The config file does not deserialize into the parameter schema."""


class InvalidParameterError(ConfigError):
    """
    A parameter declaration cannot be collected.

    Raised at collection time, e.g. an ``enum`` parameter with no choices.
    """


# =============================================================================
# Collection Errors
# =============================================================================

class CollectionError(SproutError):
    """Failure while gathering parameter values from the user."""


class ValidationError(CollectionError):
    """
    A parameter value was rejected.

    Attributes
    ----------
    param_name : str
        Name of the parameter whose value failed validation.
    """

    def __init__(self, param_name: str, message: str | None = None) -> None:
        self.param_name = param_name
        super().__init__(message or f"{param_name} is required")


class CollectionAborted(CollectionError):
    """The user cancelled an interactive prompt."""


# =============================================================================
# Rendering Errors
# =============================================================================

class RenderingError(SproutError):
    """Failure while rendering a filename or file content template."""


class TemplateParseError(RenderingError):
    """The template source is not syntactically valid."""


class TemplateExecError(RenderingError):
    """The template failed while executing against the render context."""


class UnresolvedReference(TemplateExecError):
    """The template referenced a key missing from the render context."""


# =============================================================================
# Filesystem Errors
# =============================================================================

class FilesystemError(SproutError):
    """Creating a directory or reading/writing a file failed."""


class WalkError(SproutError):
    """Traversing the template source tree failed."""
