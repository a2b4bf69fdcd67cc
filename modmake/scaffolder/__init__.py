"""modmake scaffolder -- generates module artifacts from stubs.

This package takes a module name and a set of flags and writes migrations,
models, controllers and routes files into ``app/Modules/<Module>/``.

Quick usage::

    from pathlib import Path

    from modmake.config import Config
    from modmake.scaffolder import ModuleScaffolder, ScaffoldFlags

    scaffolder = ModuleScaffolder(Config(base_path=Path("/srv/shop")))
    report = scaffolder.run("Blog/Post", ScaffoldFlags(controller=True, api=True))
"""

from modmake.scaffolder.generator import ModuleScaffolder, ScaffoldFlags
from modmake.scaffolder.results import (
    ArtifactKind,
    ArtifactOutcome,
    ArtifactStatus,
    GenerationResult,
    ScaffoldReport,
)
from modmake.scaffolder.stubs import StubRepository, publish_stubs
from modmake.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactKind",
    "ArtifactOutcome",
    "ArtifactStatus",
    "GenerationResult",
    "ModuleScaffolder",
    "ScaffoldFlags",
    "ScaffoldReport",
    "StubRepository",
    "TemplateRenderer",
    "publish_stubs",
]
