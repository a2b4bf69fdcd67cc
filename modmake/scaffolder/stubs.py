"""Stub lookup and placeholder substitution.

Stubs are plain text files named ``<kind>.stub`` that live in the project's
stubs directory (``resources/stubs`` by default). They contain literal
placeholder tokens such as ``DummyClass``; substitution is a straight
find-and-replace with no escaping, loops or expressions.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from modmake.utils import read_text_or_empty

# ---------------------------------------------------------------------------
# Stub names and placeholder tokens
# ---------------------------------------------------------------------------

CONTROLLER_STUB = "controller.model.api"
API_ROUTES_STUB = "routes.api"
WEB_ROUTES_STUB = "routes.web"

CONTROLLER_TOKENS: tuple[str, ...] = (
    "DummyNamespace",
    "DummyRootNamespace",
    "DummyClass",
    "DummyFullModelClass",
    "DummyModelClass",
    "DummyModelVariable",
)

ROUTES_TOKENS: tuple[str, ...] = (
    "DummyClass",
    "DummyRoutePrefix",
    "DummyModelVariable",
)

_BUNDLED_STUBS_DIR = Path(__file__).parent / "stubs"


def routes_stub_name(is_api: bool) -> str:
    return API_ROUTES_STUB if is_api else WEB_ROUTES_STUB


def replace_placeholders(stub: str, replacements: dict[str, str]) -> str:
    """Replace every token in *replacements* with its value.

    Tokens are replaced in the mapping's order, each one everywhere it
    occurs.
    """
    for token, value in replacements.items():
        stub = stub.replace(token, value)
    return stub


# ---------------------------------------------------------------------------
# StubRepository
# ---------------------------------------------------------------------------


class StubRepository:
    """Read-only access to ``*.stub`` files in a directory.

    A stub that does not exist reads as the empty string; callers treat
    empty content as "nothing to generate".
    """

    def __init__(self, stubs_dir: str | Path) -> None:
        self.stubs_dir = Path(stubs_dir)

    def path_for(self, name: str) -> Path:
        return self.stubs_dir / f"{name}.stub"

    def get(self, name: str) -> str:
        """Return the stub text for *name*, or ``""`` when it is missing."""
        return read_text_or_empty(self.path_for(name))

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def list(self) -> list[str]:
        """Return the sorted names of all stubs in the directory."""
        if not self.stubs_dir.is_dir():
            return []
        return sorted(p.name[: -len(".stub")] for p in self.stubs_dir.glob("*.stub"))


def bundled_stubs() -> StubRepository:
    """Repository over the default stubs shipped with modmake."""
    return StubRepository(_BUNDLED_STUBS_DIR)


def publish_stubs(target_dir: str | Path, force: bool = False) -> list[Path]:
    """Copy the bundled stubs into *target_dir*.

    Existing files are left alone unless *force* is set.

    Returns:
        The paths that were written.
    """
    source = bundled_stubs()
    target = Path(target_dir)
    target.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for name in source.list():
        destination = target / f"{name}.stub"
        if destination.exists() and not force:
            continue
        shutil.copyfile(source.path_for(name), destination)
        written.append(destination)
    return written
