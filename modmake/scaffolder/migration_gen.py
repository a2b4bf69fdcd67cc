"""Migration file generation.

Writes a timestamped ``create_<table>_table`` migration into the module's
migrations directory using the ``migration.create.php.j2`` template.
Failures are returned as a ``GenerationResult`` rather than raised, so the
orchestrator can report them and carry on with the remaining artifacts.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from jinja2 import TemplateError

from modmake.naming import studly

from .results import GenerationResult
from .templates import TemplateRenderer


class MigrationGenerator:
    """Generates table-creation migrations."""

    template = "migration.create.php.j2"

    def __init__(
        self,
        renderer: TemplateRenderer,
        extension: str = "php",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.renderer = renderer
        self.extension = extension
        self.clock = clock or datetime.now

    def filename(self, name: str) -> str:
        """``2024_01_31_120000_create_posts_table.php`` for the current time."""
        return f"{self.clock():%Y_%m_%d_%H%M%S}_{name}.{self.extension}"

    def find_existing(self, name: str, directory: Path) -> Path | None:
        """Return an existing migration with the same name, if there is one."""
        if not directory.is_dir():
            return None
        matches = sorted(directory.glob(f"*_{name}.{self.extension}"))
        return matches[0] if matches else None

    def generate(self, name: str, table: str, path: str | Path) -> GenerationResult:
        """Write the migration *name* creating *table* into directory *path*.

        Returns:
            ``ok=False`` when a migration with the same class name already
            exists in *path*, the template failed to render, or the file
            could not be written.
        """
        directory = Path(path)
        existing = self.find_existing(name, directory)
        if existing is not None:
            return GenerationResult(
                ok=False,
                path=existing,
                message=f"A {studly(name)} class already exists.",
            )

        target = directory / self.filename(name)
        try:
            self.renderer.render_to_file(self.template, target, {"name": name, "table": table})
        except (OSError, TemplateError) as exc:
            return GenerationResult(ok=False, path=target, message=str(exc))

        return GenerationResult(ok=True, path=target, message=f"Migration [{target}] created successfully.")
