"""
sprout - Render Project Trees from Templates
============================================

A CLI tool and library that turns a template directory into a new project
tree, substituting user-supplied parameters into file names, directory
names and file contents.

Features
--------
- **Declarative Parameters**: A ``.new.yml`` file at the template root
  declares what to ask for (free text or a fixed list of choices)
- **One Syntax Everywhere**: Jinja2 markers work identically in paths and
  file contents
- **Scriptable**: Pre-answer parameters with ``--param`` for CI usage

Quick Start
-----------
```bash
# Render a template into the current directory
sprout templates/team-project

# Render into ./out, answering the prompts up front
sprout templates/team-project out -p project=widget -p license=MIT
```

Example
-------
>>> from sprout import PresetPrompter, Template
>>> template = Template(
...     "templates/team-project",
...     "out",
...     prompter=PresetPrompter({"project": "widget", "license": "MIT"}),
... )
>>> template.render()
Rendering out/widget
Rendering out/widget/README.md

Architecture
------------
The package is organized into these main modules:

- ``cli``: Typer-based command line interface
- ``config``: Locates and parses the template config file
- ``collector``: Collects parameter values into a render context
- ``prompts``: Interactive (questionary) and preset prompters
- ``paths``: Maps template paths to destination paths
- ``engine``: Jinja2 rendering of filenames and file contents
- ``template``: The ``Template`` lifecycle and tree walk
- ``models``: Pydantic models for the config schema
- ``errors``: Error hierarchy

License
-------
MIT License.
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__author__ = "Technical-1"
__email__ = "jacobkanfer8@gmail.com"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from sprout.config import DEFAULT_CONFIG_FILENAME, load_template_config
from sprout.errors import SproutError
from sprout.models import ParamKind, RenderContext, TemplateConfig, TemplateParam, TemplateState
from sprout.prompts import PresetPrompter, Prompter, QuestionaryPrompter
from sprout.template import Template


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "ParamKind",
    "PresetPrompter",
    "Prompter",
    "QuestionaryPrompter",
    "RenderContext",
    "SproutError",
    "Template",
    "TemplateConfig",
    "TemplateParam",
    "TemplateState",
    "__author__",
    "__version__",
    "load_template_config",
]
