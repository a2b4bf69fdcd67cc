"""modmake configuration.

Typed configuration for the module scaffolder. The namespace and path
fragments are plain strings that are concatenated into namespaces and file
paths; they are not interpreted beyond separator normalisation. A ``Config``
is built once by the CLI entry point (or a test) and injected into
``ModuleScaffolder``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from modmake.naming import module_segments


class PathConfig(BaseModel):
    """Namespace fragments for modules and the artifacts inside them.

    Backslashes separate namespace parts; the same fragments with slashes
    give the directory layout under ``app_dir``.
    """

    app_dir: str = Field(default="app", description="Application source directory")
    root_namespace: str = Field(default="App\\", description="Root namespace of app_dir")
    module: str = Field(default="Modules\\")
    controllers: str = Field(default="\\Controllers")
    models: str = Field(default="\\Models")
    migrations: str = Field(default="\\Database\\Migrations")


class Config(BaseModel):
    """Scaffolder configuration.

    Holds the project root, where stubs are looked up, the extension of
    generated source files and the namespace/path fragments.
    """

    base_path: Path = Field(default=Path("."))
    stubs_dir: str = Field(default="resources/stubs")
    extension: str = Field(default="php", min_length=1)
    paths: PathConfig = Field(default_factory=PathConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def app_path(self) -> Path:
        """Root of the application sources, ``<base>/app`` by default."""
        return self.base_path / self.paths.app_dir

    @property
    def stubs_path(self) -> Path:
        """Directory that holds the ``*.stub`` templates."""
        return self.base_path / self.stubs_dir

    # ------------------------------------------------------------------
    # Namespaces
    # ------------------------------------------------------------------

    def module_namespace(self, name: str) -> str:
        """``App\\Modules\\Blog\\Post`` for ``Blog/Post``."""
        return self.paths.root_namespace + self.paths.module + "\\".join(module_segments(name))

    def controller_namespace(self, name: str, is_api: bool = False) -> str:
        namespace = self.module_namespace(name) + self.paths.controllers
        return namespace + "\\Api" if is_api else namespace

    def model_namespace(self, name: str) -> str:
        return self.module_namespace(name) + self.paths.models

    # ------------------------------------------------------------------
    # File-system paths
    # ------------------------------------------------------------------

    def module_path(self, name: str) -> Path:
        """Directory of the module, ``<base>/app/Modules/Blog/Post``."""
        return self.app_path / _as_path(self.paths.module) / "/".join(module_segments(name))

    def controller_path(self, name: str, controller: str, is_api: bool = False) -> Path:
        directory = self.module_path(name) / _as_path(self.paths.controllers)
        if is_api:
            directory = directory / "Api"
        return directory / f"{controller}Controller.{self.extension}"

    def routes_path(self, name: str, is_api: bool = False) -> Path:
        filename = ("api" if is_api else "web") + f".{self.extension}"
        return self.module_path(name) / "Routes" / filename

    def models_path(self, name: str) -> Path:
        return self.module_path(name) / _as_path(self.paths.models)

    def migrations_path(self, name: str) -> Path:
        return self.module_path(name) / _as_path(self.paths.migrations)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MODMAKE_BASE_PATH, MODMAKE_STUBS_DIR, MODMAKE_EXTENSION,
            MODMAKE_APP_DIR, MODMAKE_ROOT_NAMESPACE.
        """
        path_kwargs: dict[str, Any] = {}
        if os.environ.get("MODMAKE_APP_DIR"):
            path_kwargs["app_dir"] = os.environ["MODMAKE_APP_DIR"]
        if os.environ.get("MODMAKE_ROOT_NAMESPACE"):
            path_kwargs["root_namespace"] = os.environ["MODMAKE_ROOT_NAMESPACE"]

        kwargs: dict[str, Any] = {}
        if os.environ.get("MODMAKE_STUBS_DIR"):
            kwargs["stubs_dir"] = os.environ["MODMAKE_STUBS_DIR"]
        if os.environ.get("MODMAKE_EXTENSION"):
            kwargs["extension"] = os.environ["MODMAKE_EXTENSION"]

        return cls(
            base_path=Path(os.environ.get("MODMAKE_BASE_PATH", ".")),
            paths=PathConfig(**path_kwargs),
            **kwargs,
        )


def _as_path(fragment: str) -> str:
    """Turn a namespace fragment such as ``\\Database\\Migrations`` into ``Database/Migrations``."""
    return fragment.replace("\\", "/").strip("/")
