"""Shared pytest fixtures for the modmake test suite.

Provides reusable fixtures for:
- A temporary project root with the bundled stubs published
- A ``Config`` pointing at that root
- A ``ModuleScaffolder`` with a frozen migration clock
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from modmake.config import Config
from modmake.scaffolder import ModuleScaffolder, TemplateRenderer, publish_stubs
from modmake.scaffolder.migration_gen import MigrationGenerator

FROZEN_NOW = datetime(2024, 1, 31, 12, 0, 0)


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary application root (auto-cleanup)."""
    root = tmp_path / "shop"
    root.mkdir()
    yield root


@pytest.fixture
def config(project_root: Path) -> Config:
    """Default configuration rooted at ``project_root``."""
    return Config(base_path=project_root)


@pytest.fixture
def stubs_dir(config: Config) -> Path:
    """The project's stubs directory, populated with the bundled stubs."""
    publish_stubs(config.stubs_path)
    return config.stubs_path


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def scaffolder(config: Config, stubs_dir: Path, renderer: TemplateRenderer) -> ModuleScaffolder:
    """Scaffolder with published stubs and a migration clock fixed at ``FROZEN_NOW``."""
    migrations = MigrationGenerator(renderer, config.extension, clock=lambda: FROZEN_NOW)
    return ModuleScaffolder(config, renderer=renderer, migrations=migrations)


@pytest.fixture
def bare_scaffolder(config: Config, renderer: TemplateRenderer) -> ModuleScaffolder:
    """Scaffolder whose stubs directory does not exist."""
    migrations = MigrationGenerator(renderer, config.extension, clock=lambda: FROZEN_NOW)
    return ModuleScaffolder(config, renderer=renderer, migrations=migrations)
