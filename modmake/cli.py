"""modmake command-line entry point.

Usage::

    modmake Blog/Post --all
    modmake Blog/Post --controller --api --base-path ./shop
    python -m modmake Shop/Order --model --migration
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from modmake.config import Config
from modmake.scaffolder import ModuleScaffolder, ScaffoldFlags, ScaffoldReport, publish_stubs
from modmake.utils import console, print_success, print_summary_table, print_warning

_STATUS_STYLES: dict[str, str] = {
    "written": "[green]written[/green]",
    "skipped_exists": "[yellow]exists[/yellow]",
    "skipped_empty_stub": "[dim]no stub[/dim]",
    "errored": "[red]error[/red]",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modmake",
        description="Generate controllers, models, migrations and routes for an app module",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  modmake Blog/Post --all\n"
            "  modmake Blog/Post --controller --api\n"
            "  modmake Shop/Order --model --migration --base-path ./shop\n"
        ),
    )

    parser.add_argument("name", help="Module name, e.g. Blog/Post")
    parser.add_argument("--all", action="store_true", help="Generate every artifact")
    parser.add_argument("--migration", action="store_true", help="Create a table migration")
    parser.add_argument("--vue", action="store_true", help="Accepted; generates nothing")
    parser.add_argument("--view", action="store_true", help="Accepted; generates nothing")
    parser.add_argument("--controller", action="store_true", help="Create a web controller and web routes")
    parser.add_argument("--model", action="store_true", help="Create a model class")
    parser.add_argument("--api", action="store_true", help="Create an API controller and API routes")

    parser.add_argument(
        "--base-path",
        default=None,
        help="Project root (default: $MODMAKE_BASE_PATH or the current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file written by Config.save",
    )
    parser.add_argument(
        "--stubs-dir",
        default=None,
        help="Stubs directory relative to the project root (default: resources/stubs)",
    )
    parser.add_argument(
        "--publish-stubs",
        action="store_true",
        help="Copy the bundled stubs into the stubs directory before generating",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="With --publish-stubs, overwrite stubs that already exist",
    )
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build the ``Config`` from ``--config`` (or the environment) plus CLI overrides."""
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    updates: dict[str, object] = {}
    if args.base_path:
        updates["base_path"] = Path(args.base_path)
    if args.stubs_dir:
        updates["stubs_dir"] = args.stubs_dir
    return config.model_copy(update=updates) if updates else config


def flags_from_args(args: argparse.Namespace) -> ScaffoldFlags:
    return ScaffoldFlags(
        all=args.all,
        migration=args.migration,
        vue=args.vue,
        view=args.view,
        controller=args.controller,
        model=args.model,
        api=args.api,
    )


def print_report(report: ScaffoldReport) -> None:
    if not report.outcomes:
        return
    rows = [
        (
            outcome.kind.value,
            _STATUS_STYLES[outcome.status.value],
            str(outcome.path) if outcome.path else "",
        )
        for outcome in report.outcomes
    ]
    console.print()
    print_summary_table(rows, title=f"Module {report.module}")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``modmake`` and ``python -m modmake``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.name.strip():
        console.print("[bold red]Error:[/bold red] Module name must not be empty")
        sys.exit(1)

    try:
        config = load_config(args)
    except (OSError, ValidationError) as exc:
        console.print(f"[bold red]Error:[/bold red] Could not load configuration: {escape(str(exc))}")
        sys.exit(1)

    if args.publish_stubs:
        published = publish_stubs(config.stubs_path, force=args.force)
        for path in published:
            print_success(f"Stub [{path}] published.")
        if not published:
            print_warning(f"Stubs already present in [{config.stubs_path}], use --force to overwrite.")

    scaffolder = ModuleScaffolder(config)
    report = scaffolder.run(args.name, flags_from_args(args))
    print_report(report)


if __name__ == "__main__":
    main()
