"""
sprout.template - Template Resolution and Tree Rendering
========================================================

``Template`` ties the pieces together. A template is a directory holding a
config file plus the files and directories to copy; any of their names and
file contents may contain substitution markers.

Lifecycle
---------

    UNRESOLVED --resolve()--> RESOLVED --render()--> RENDERED

- ``resolve()`` loads the config and collects parameter values. Every call
  reloads and re-prompts.
- ``render()`` resolves first if needed, then walks the template tree and
  writes the destination tree. Rendering again re-walks the tree with the
  same context.

Rendering Pipeline
------------------
For every entry below the template root (directories before their
children, siblings in sorted order):

    1. Skip the config file
    2. Render the entry's full path as a template
    3. Map the rendered path into the destination tree
    4. Create the directory, or render the file's content into place

The first failure aborts the walk. Output written before the failure is left
in place and existing destination files are overwritten without warning.

Usage Example
-------------
>>> from sprout import Template
>>> template = Template("templates/team-project", "out")
>>> template.render()
Rendering out/widget
Rendering out/widget/README.md
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from sprout.collector import build_context
from sprout.config import DEFAULT_CONFIG_FILENAME, load_template_config
from sprout.engine import TemplateEngine
from sprout.errors import FilesystemError, WalkError
from sprout.models import RenderContext, TemplateConfig, TemplateState
from sprout.paths import resolve_destination_path
from sprout.prompts import Prompter, QuestionaryPrompter


def walk_template_tree(root: str, skip_name: str) -> Iterator[tuple[str, bool]]:
    """
    Yield ``(path, is_dir)`` for every entry below ``root``, depth first.

    A directory is yielded before its children and siblings come in sorted
    order. Entries named ``skip_name`` are not yielded; a directory with
    that name is skipped along with its contents.

    Raises
    ------
    WalkError
        If a directory cannot be listed.
    """
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise WalkError(f"Failed to read directory {root}: {e}") from e

    for entry in entries:
        if entry.name == skip_name:
            continue

        path = os.path.join(root, entry.name)
        try:
            is_dir = entry.is_dir()
        except OSError as e:
            raise WalkError(f"Failed to stat {path}: {e}") from e

        yield path, is_dir

        if is_dir:
            yield from walk_template_tree(path, skip_name)


class Template:
    """
    A template directory to be rendered into a destination directory.

    Parameters
    ----------
    source_path : str | PathLike
        Root of the template tree. Must contain the config file.

    destination_path : str | PathLike
        Root of the tree to create. Created if missing.

    prompter : Prompter | None
        Source of parameter values. Defaults to interactive questionary
        prompts.

    config_filename : str
        Name of the config file at the template root. Files with this name
        are never copied, at any depth.

    console : Console | None
        Where the description and progress lines are printed.

    engine : TemplateEngine | None
        Engine used for both filenames and file contents.
    """

    def __init__(
        self,
        source_path: str | os.PathLike[str],
        destination_path: str | os.PathLike[str],
        *,
        prompter: Prompter | None = None,
        config_filename: str = DEFAULT_CONFIG_FILENAME,
        console: Console | None = None,
        engine: TemplateEngine | None = None,
    ) -> None:
        self._source_path = os.fspath(source_path)
        self._destination_path = os.fspath(destination_path)
        self.prompter = prompter or QuestionaryPrompter()
        self.config_filename = config_filename
        self.console = console or Console()
        self.engine = engine or TemplateEngine()

        self._config: TemplateConfig | None = None
        self._context: RenderContext | None = None
        self._state = TemplateState.UNRESOLVED

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def source_path(self) -> str:
        return self._source_path

    @property
    def destination_path(self) -> str:
        return self._destination_path

    @property
    def config(self) -> TemplateConfig | None:
        """The parsed config, or None before resolution."""
        return self._config

    @property
    def context(self) -> RenderContext | None:
        """The resolved render context, or None before resolution."""
        return self._context

    @property
    def state(self) -> TemplateState:
        return self._state

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def resolve(self) -> None:
        """
        Load the template config and collect its parameter values.

        Each call reloads the config and prompts again. On failure the
        previous config and context (if any) are kept untouched.

        Raises
        ------
        ConfigNotFound, ConfigParseError, InvalidParameterError
            If the config cannot be loaded or a parameter is malformed.
        ValidationError, CollectionAborted
            If collection fails.
        """
        self._resolve()

    def _resolve(self) -> RenderContext:
        config = load_template_config(self._source_path, self.config_filename)
        context = build_context(config, self.prompter, console=self.console)

        self._config = config
        self._context = context
        self._state = TemplateState.RESOLVED
        return context

    def render(self, *, dry_run: bool = False) -> None:
        """
        Render the template tree into the destination directory.

        Parameters
        ----------
        dry_run : bool, default=False
            Report destination paths without creating anything. Filenames
            are still rendered, so unresolved references still fail. A dry
            run never moves the template to ``RENDERED``.

        Raises
        ------
        SproutError
            The first failure encountered. Anything written before it stays
            on disk.
        """
        context = self._context
        if self._state is TemplateState.UNRESOLVED or context is None:
            context = self._resolve()

        if not dry_run:
            self._make_dirs(self._destination_path)

        for path, is_dir in walk_template_tree(self._source_path, self.config_filename):
            self._render_entry(path, is_dir, context, dry_run=dry_run)

        if not dry_run:
            self._state = TemplateState.RENDERED

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _render_entry(
        self,
        path: str,
        is_dir: bool,
        context: RenderContext,
        *,
        dry_run: bool,
    ) -> None:
        filename = self.engine.render_string(path, context, name=path)
        destination = resolve_destination_path(
            self._source_path, self._destination_path, filename
        )

        self.console.print(f"Rendering {escape(destination)}", highlight=False)

        if dry_run:
            return

        if is_dir:
            self._make_dirs(destination)
        else:
            self.engine.render_file(path, destination, context)

    @staticmethod
    def _make_dirs(path: str) -> None:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"Failed to create directory {path}: {e}") from e
