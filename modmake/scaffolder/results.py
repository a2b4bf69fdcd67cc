"""Outcome models for a scaffolding run.

Provides Pydantic v2 models for what happened to each requested artifact,
the result returned by the built-in generators, and the per-run report.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, computed_field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArtifactKind(str, Enum):
    """A kind of generated file."""
    MIGRATION = "migration"
    MODEL = "model"
    CONTROLLER = "controller"
    API_CONTROLLER = "api_controller"
    ROUTES = "routes"
    API_ROUTES = "api_routes"


class ArtifactStatus(str, Enum):
    """Terminal state of one artifact request."""
    WRITTEN = "written"
    SKIPPED_EXISTS = "skipped_exists"
    SKIPPED_EMPTY_STUB = "skipped_empty_stub"
    ERRORED = "errored"


# ---------------------------------------------------------------------------
# Generator result
# ---------------------------------------------------------------------------

class GenerationResult(BaseModel):
    """Success or failure of a migration/model generator call."""

    ok: bool = Field(..., description="Whether the file was generated")
    path: Optional[Path] = Field(default=None, description="Generated (or conflicting) file")
    message: str = Field(default="", description="Human-readable outcome")


# ---------------------------------------------------------------------------
# Artifact outcome & run report
# ---------------------------------------------------------------------------

class ArtifactOutcome(BaseModel):
    """What happened to a single requested artifact."""

    kind: ArtifactKind
    status: ArtifactStatus
    path: Optional[Path] = Field(default=None)
    message: str = Field(default="")


class ScaffoldReport(BaseModel):
    """Every artifact outcome of one ``ModuleScaffolder.run`` call, in order."""

    module: str = Field(..., description="Module name as given by the caller")
    outcomes: list[ArtifactOutcome] = Field(default_factory=list)

    @computed_field  # type: ignore[misc]
    @property
    def has_errors(self) -> bool:
        """True when any artifact ended in the ``errored`` state."""
        return any(o.status == ArtifactStatus.ERRORED for o in self.outcomes)

    def add(self, outcome: ArtifactOutcome) -> ArtifactOutcome:
        self.outcomes.append(outcome)
        return outcome

    def by_kind(self, kind: ArtifactKind) -> list[ArtifactOutcome]:
        return [o for o in self.outcomes if o.kind == kind]

    def written(self) -> list[Path]:
        """Paths of every file written during the run."""
        return [
            o.path for o in self.outcomes
            if o.status == ArtifactStatus.WRITTEN and o.path is not None
        ]
