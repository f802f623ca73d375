"""
sprout.engine - Template Rendering
==================================

One Jinja2 environment renders both template path strings ("filename mode")
and template file contents ("content mode"), so a reference such as
``{{ params.project }}`` resolves the same way wherever it is written.

The environment is configured with:
- ``StrictUndefined``: referencing a missing parameter is an error instead
  of silently rendering an empty string
- Autoescaping disabled (we're generating code, not HTML)
- Trim blocks and lstrip_blocks for cleaner output around control tags
- ``keep_trailing_newline`` so rendered files end the way templates do

Jinja2 exceptions are translated to sprout errors:

    TemplateSyntaxError  -> TemplateParseError
    UndefinedError       -> UnresolvedReference
    other runtime errors -> TemplateExecError
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    Environment,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateSyntaxError,
    UndefinedError,
)

from sprout.errors import (
    FilesystemError,
    TemplateExecError,
    TemplateParseError,
    UnresolvedReference,
)
from sprout.models import RenderContext


# Python errors a template expression can raise mid-render (bad filter
# arguments, arithmetic on strings, ...)
_EXPRESSION_ERRORS = (TypeError, ValueError, ArithmeticError, LookupError)


def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment shared by both rendering modes.

    Returns
    -------
    Environment
        Environment with strict undefined handling and no autoescaping.
    """
    env = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

    return env


class TemplateEngine:
    """
    Render templates against a ``RenderContext``.

    Parameters
    ----------
    env : Environment | None
        Jinja2 environment to use. Defaults to ``create_jinja_env()``.

    Examples
    --------
    >>> engine = TemplateEngine()
    >>> engine.render_string("src/{{ params.name }}", RenderContext({"name": "acme"}))
    'src/acme'
    """

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env or create_jinja_env()

    def compile(self, source: str, name: str) -> Template:
        """
        Parse template source.

        Raises
        ------
        TemplateParseError
            If the source is not valid template syntax.
        """
        try:
            return self.env.from_string(source)
        except TemplateSyntaxError as e:
            raise TemplateParseError(
                f"Template syntax error in {name} (line {e.lineno}): {e.message}"
            ) from e

    def render_string(
        self,
        source: str,
        context: RenderContext,
        *,
        name: str = "<string>",
    ) -> str:
        """
        Render a template string, e.g. a path inside the template tree.

        Parameters
        ----------
        source : str
            Template text.

        context : RenderContext
            Substitution environment.

        name : str
            Used in error messages.

        Returns
        -------
        str
            The rendered text.
        """
        template = self.compile(source, name)
        try:
            return template.render(context.template_vars())
        except UndefinedError as e:
            raise UnresolvedReference(f"Unresolved reference in {name}: {e.message}") from e
        except TemplateError as e:
            raise TemplateExecError(f"Failed to render {name}: {e}") from e
        except _EXPRESSION_ERRORS as e:
            raise TemplateExecError(f"Failed to render {name}: {e}") from e

    def render_file(
        self,
        source_path: str | Path,
        destination_path: str | Path,
        context: RenderContext,
    ) -> None:
        """
        Render a template file into a destination file.

        The template is read and parsed before the destination is touched.
        The destination is then created (or truncated, silently replacing an
        existing file) and the output is streamed into it. A failure during
        execution leaves whatever was already streamed on disk.

        Parameters
        ----------
        source_path : str | Path
            Template file to read.

        destination_path : str | Path
            File to create or overwrite.

        context : RenderContext
            Substitution environment.

        Raises
        ------
        FilesystemError
            If reading the template or writing the destination fails.
        TemplateParseError
            If the template is not valid syntax or not UTF-8 text.
        UnresolvedReference
            If the template references a missing parameter.
        TemplateExecError
            If execution fails for any other reason.
        """
        name = str(source_path)

        try:
            source = Path(source_path).read_bytes()
        except OSError as e:
            raise FilesystemError(f"Failed to read template {name}: {e}") from e

        try:
            text = source.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TemplateParseError(f"Template {name} is not UTF-8 text: {e}") from e

        template = self.compile(text, name)

        try:
            with open(destination_path, "w", encoding="utf-8", newline="") as fout:
                template.stream(context.template_vars()).dump(fout)
        except UndefinedError as e:
            raise UnresolvedReference(f"Unresolved reference in {name}: {e.message}") from e
        except TemplateError as e:
            raise TemplateExecError(f"Failed to render {name}: {e}") from e
        except OSError as e:
            raise FilesystemError(f"Failed to write {destination_path}: {e}") from e
        except _EXPRESSION_ERRORS as e:
            raise TemplateExecError(f"Failed to render {name}: {e}") from e
