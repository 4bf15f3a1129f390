"""Scaffold Flutter projects with a feature-first layout.

The package models the user's answers as an immutable :class:`ProjectSpec`,
plans the generated tree from a catalog of Dart templates, synthesizes the
``go_router`` configuration from the declared features and drives the
``flutter`` tool to create the project and install its packages.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .catalog import TemplateCatalog, TemplateEntry
from .config import ProjectSpec, ToolchainConfig
from .driver import FlutterDriver
from .errors import PromptError, ScaffoldError, SpawnError, WriteError
from .features import Feature, Layer, expand_feature_entry
from .layout import LayoutPlan, plan_layout
from .naming import camel_case, pascal_case
from .router import synthesize_router
from .scaffold import ProjectScaffolder, ScaffoldSession
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "Feature",
    "FlutterDriver",
    "Layer",
    "LayoutPlan",
    "ProjectScaffolder",
    "ProjectSpec",
    "PromptError",
    "ScaffoldError",
    "ScaffoldSession",
    "SpawnError",
    "TemplateCatalog",
    "TemplateEntry",
    "TemplateRenderer",
    "TemplateRenderingError",
    "ToolchainConfig",
    "WriteError",
    "camel_case",
    "expand_feature_entry",
    "pascal_case",
    "plan_layout",
    "synthesize_router",
]
