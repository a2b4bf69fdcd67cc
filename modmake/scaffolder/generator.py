"""Module scaffolding orchestrator.

Takes a module name and a set of flags and generates the requested
artifacts inside ``app/Modules/<Module>/``: a migration, a model, web and/or
API controllers, and the matching routes files.

Every artifact is independent. A target that already exists is reported and
left alone, a missing stub means nothing is written, and a failed migration
is reported without stopping the run.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, Field

from modmake.config import Config
from modmake.naming import DerivedNames, derive_names
from modmake.utils import ensure_parent_dir, print_error, print_success, write_text

from .migration_gen import MigrationGenerator
from .model_gen import ModelGenerator
from .results import ArtifactKind, ArtifactOutcome, ArtifactStatus, ScaffoldReport
from .stubs import CONTROLLER_STUB, StubRepository, replace_placeholders, routes_stub_name
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

ARTIFACT_FLAGS: tuple[str, ...] = ("migration", "vue", "view", "controller", "model", "api")


class ScaffoldFlags(BaseModel):
    """Which artifacts to generate. ``all`` switches on every other flag."""

    all: bool = Field(default=False)
    migration: bool = Field(default=False)
    vue: bool = Field(default=False, description="Accepted, generates nothing")
    view: bool = Field(default=False, description="Accepted, generates nothing")
    controller: bool = Field(default=False, description="Web controller and web routes")
    model: bool = Field(default=False)
    api: bool = Field(default=False, description="API controller and API routes")

    def expanded(self) -> "ScaffoldFlags":
        """Return the flags with ``all`` applied."""
        if not self.all:
            return self
        return self.model_copy(update={flag: True for flag in ARTIFACT_FLAGS})


Handler = Callable[[str, DerivedNames, ScaffoldReport], None]


# ---------------------------------------------------------------------------
# Main scaffolder
# ---------------------------------------------------------------------------


class ModuleScaffolder:
    """Generates module artifacts from stubs and built-in templates.

    Collaborators are injected so tests can swap them:
    - ``stubs``: where ``controller.model.api`` and ``routes.*`` stubs are read
    - ``migrations`` / ``models``: the built-in migration and model generators
    """

    def __init__(
        self,
        config: Config,
        stubs: StubRepository | None = None,
        renderer: TemplateRenderer | None = None,
        migrations: MigrationGenerator | None = None,
        models: ModelGenerator | None = None,
    ) -> None:
        self.config = config
        self.stubs = stubs or StubRepository(config.stubs_path)
        self.renderer = renderer or TemplateRenderer()
        self.migrations = migrations or MigrationGenerator(self.renderer, config.extension)
        self.models = models or ModelGenerator(self.renderer, config.extension)

    # -- Public API --------------------------------------------------------

    def run(self, name: str, flags: ScaffoldFlags | None = None) -> ScaffoldReport:
        """Generate every artifact selected by *flags* for module *name*.

        Returns:
            A report with one outcome per attempted artifact, in the order
            they were processed.
        """
        enabled = (flags or ScaffoldFlags()).expanded().model_dump()
        names = derive_names(name)
        report = ScaffoldReport(module=name)

        for flag, handler in self._handlers():
            if enabled[flag]:
                handler(name, names, report)

        return report

    def _handlers(self) -> list[tuple[str, Handler]]:
        return [
            ("migration", self.create_migration),
            ("vue", self.create_vue_component),
            ("view", self.create_view),
            ("controller", self.create_web_controller),
            ("model", self.create_model),
            ("api", self.create_api_controller),
        ]

    # -- Migration & model -------------------------------------------------

    def create_migration(self, name: str, names: DerivedNames, report: ScaffoldReport) -> None:
        table = names.table_plural
        result = self.migrations.generate(
            f"create_{table}_table", table, self.config.migrations_path(name)
        )
        if result.ok:
            print_success(result.message)
            status = ArtifactStatus.WRITTEN
        else:
            print_error(result.message)
            status = ArtifactStatus.ERRORED
        report.add(ArtifactOutcome(
            kind=ArtifactKind.MIGRATION, status=status, path=result.path, message=result.message,
        ))

    def create_model(self, name: str, names: DerivedNames, report: ScaffoldReport) -> None:
        result = self.models.generate(
            self.config.model_namespace(name), names.model, self.config.models_path(name)
        )
        if result.ok:
            print_success(result.message)
            status = ArtifactStatus.WRITTEN
        else:
            print_error(result.message)
            status = ArtifactStatus.SKIPPED_EXISTS
        report.add(ArtifactOutcome(
            kind=ArtifactKind.MODEL, status=status, path=result.path, message=result.message,
        ))

    # -- Front-end artifacts -----------------------------------------------

    def create_vue_component(self, name: str, names: DerivedNames, report: ScaffoldReport) -> None:
        """The ``vue`` flag is accepted but generates nothing yet."""

    def create_view(self, name: str, names: DerivedNames, report: ScaffoldReport) -> None:
        """The ``view`` flag is accepted but generates nothing yet."""

    # -- Controllers -------------------------------------------------------

    def create_web_controller(self, name: str, names: DerivedNames, report: ScaffoldReport) -> None:
        self.create_controller(name, names, report, is_api=False)

    def create_api_controller(self, name: str, names: DerivedNames, report: ScaffoldReport) -> None:
        self.create_controller(name, names, report, is_api=True)

    def create_controller(
        self, name: str, names: DerivedNames, report: ScaffoldReport, is_api: bool
    ) -> None:
        """Write the controller from the ``controller.model.api`` stub, then its routes.

        An existing controller aborts this artifact, including its routes.
        """
        kind = ArtifactKind.API_CONTROLLER if is_api else ArtifactKind.CONTROLLER
        path = self.config.controller_path(name, names.controller, is_api)
        if path.is_file():
            print_error("Controller already exists")
            report.add(ArtifactOutcome(
                kind=kind, status=ArtifactStatus.SKIPPED_EXISTS, path=path,
                message="Controller already exists",
            ))
            return

        stub = self._prepare(path, CONTROLLER_STUB)
        if stub:
            content = replace_placeholders(stub, self.controller_replacements(name, names, is_api))
            write_text(path, content)
            message = ("API " if is_api else "") + "Controller created successfully"
            print_success(message)
            report.add(ArtifactOutcome(
                kind=kind, status=ArtifactStatus.WRITTEN, path=path, message=message,
            ))
        else:
            report.add(ArtifactOutcome(
                kind=kind, status=ArtifactStatus.SKIPPED_EMPTY_STUB, path=path,
            ))

        self.create_routes(name, names, report, is_api)

    def controller_replacements(
        self, name: str, names: DerivedNames, is_api: bool
    ) -> dict[str, str]:
        """Values for the controller stub tokens, in substitution order."""
        return {
            "DummyNamespace": self.config.controller_namespace(name, is_api),
            "DummyRootNamespace": self.config.paths.root_namespace,
            "DummyClass": f"{names.controller}Controller",
            "DummyFullModelClass": f"{self.config.model_namespace(name)}\\{names.model}",
            "DummyModelClass": names.model,
            "DummyModelVariable": names.model_var,
        }

    # -- Routes ------------------------------------------------------------

    def create_routes(
        self, name: str, names: DerivedNames, report: ScaffoldReport, is_api: bool
    ) -> None:
        kind = ArtifactKind.API_ROUTES if is_api else ArtifactKind.ROUTES
        path = self.config.routes_path(name, is_api)
        if path.is_file():
            print_error("Routes already exists!")
            report.add(ArtifactOutcome(
                kind=kind, status=ArtifactStatus.SKIPPED_EXISTS, path=path,
                message="Routes already exists!",
            ))
            return

        stub = self._prepare(path, routes_stub_name(is_api))
        if not stub:
            report.add(ArtifactOutcome(
                kind=kind, status=ArtifactStatus.SKIPPED_EMPTY_STUB, path=path,
            ))
            return

        content = replace_placeholders(stub, self.routes_replacements(names, is_api))
        write_text(path, content)
        message = ("API " if is_api else "") + "Routes created successfully!"
        print_success(message)
        report.add(ArtifactOutcome(
            kind=kind, status=ArtifactStatus.WRITTEN, path=path, message=message,
        ))

    def routes_replacements(self, names: DerivedNames, is_api: bool) -> dict[str, str]:
        """Values for the routes stub tokens, in substitution order."""
        return {
            "DummyClass": ("Api\\" if is_api else "") + f"{names.controller}Controller",
            "DummyRoutePrefix": names.route_slug,
            "DummyModelVariable": names.model_var,
        }

    # -- Helpers -----------------------------------------------------------

    def _prepare(self, path: Path, stub_name: str) -> str:
        """Create the target's directory and return the stub text (``""`` if missing)."""
        ensure_parent_dir(path)
        return self.stubs.get(stub_name)
