"""Model class generation.

Renders ``model.php.j2`` into the module's models directory. An existing
model file is reported, not overwritten; any other failure propagates to
the caller.
"""

from __future__ import annotations

from pathlib import Path

from .results import GenerationResult
from .templates import TemplateRenderer


class ModelGenerator:
    """Generates model classes."""

    template = "model.php.j2"

    def __init__(self, renderer: TemplateRenderer, extension: str = "php") -> None:
        self.renderer = renderer
        self.extension = extension

    def generate(self, namespace: str, model: str, path: str | Path) -> GenerationResult:
        """Write class *model* in *namespace* to ``<path>/<model>.<ext>``."""
        target = Path(path) / f"{model}.{self.extension}"
        if target.is_file():
            return GenerationResult(ok=False, path=target, message="Model already exists.")

        self.renderer.render_to_file(
            self.template, target, {"namespace": namespace, "model": model}
        )
        return GenerationResult(ok=True, path=target, message=f"Model [{target}] created successfully.")
