"""Command-line entry point for el-scaffold.

Collects a ``ScaffoldConfig`` from flags, environment defaults and, where a
flag was not given, interactive Rich prompts, then runs the generator.

Usage::

    el-scaffold x-foo
    el-scaffold x-foo paper-button iron-icon --docs --path foo/bar
    python -m el_scaffold.cli x-foo --import --test TDD
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Protocol

from jinja2 import TemplateError
from rich.prompt import Confirm, Prompt

from el_scaffold.config import (
    ScaffoldConfig,
    ScaffoldDefaults,
    TestKind,
    validate_element_name,
)
from el_scaffold.errors import ScaffoldError
from el_scaffold.scaffolder import ElementGenerator, resolve_paths
from el_scaffold.utils import (
    console,
    print_action,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

IMPORT_QUESTION = "Would you like to include an import in your elements.html file?"
TEST_QUESTION = "What type of test would you like to create?"


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------


class Prompter(Protocol):
    """Source of answers for choices not supplied on the command line."""

    def confirm(self, message: str, default: bool) -> bool: ...

    def choose(self, message: str, choices: list[str], default: str) -> str: ...


class RichPrompter:
    """Asks on the terminal with Rich prompts."""

    def confirm(self, message: str, default: bool) -> bool:
        return Confirm.ask(message, default=default, console=console)

    def choose(self, message: str, choices: list[str], default: str) -> str:
        return Prompt.ask(message, choices=choices, default=default, console=console)


class StaticPrompter:
    """Answers from a fixed mapping of message -> answer, else the default.

    Used for non-interactive runs and in tests.
    """

    def __init__(self, answers: dict[str, bool | str] | None = None) -> None:
        self.answers = answers or {}
        self.asked: list[str] = []

    def confirm(self, message: str, default: bool) -> bool:
        self.asked.append(message)
        return bool(self.answers.get(message, default))

    def choose(self, message: str, choices: list[str], default: str) -> str:
        self.asked.append(message)
        answer = str(self.answers.get(message, default))
        if answer not in choices:
            raise ValueError(f"{answer!r} is not one of {choices}")
        return answer


# ---------------------------------------------------------------------------
# Config collection
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``el-scaffold`` command."""
    parser = argparse.ArgumentParser(
        prog="el-scaffold",
        description="Scaffold a custom element into an existing web project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  el-scaffold x-foo\n"
            "  el-scaffold x-foo paper-button --docs\n"
            "  el-scaffold x-foo --path foo/bar/baz --import --test BDD\n"
        ),
    )

    parser.add_argument("element_name", help="Tag name of the element to generate")
    parser.add_argument(
        "dependencies",
        nargs="*",
        help="Elements to import from the dependency cache",
    )
    parser.add_argument(
        "--docs",
        action="store_true",
        help="Also generate an iron-component-page docs page and a demo page",
    )
    parser.add_argument(
        "--path",
        default=None,
        help="Place the element under this path inside the elements directory",
    )
    parser.add_argument("--app", default=None, help="App directory (default: app)")
    parser.add_argument(
        "--elements",
        default=None,
        help="Elements directory, relative to the app directory (default: elements)",
    )
    parser.add_argument(
        "--bower",
        dest="dep_cache",
        default=None,
        help="Dependency cache, relative to the app directory (default: bower_components)",
    )
    parser.add_argument(
        "--import",
        dest="include_import",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Append an import to elements.html (asked interactively if omitted)",
    )
    parser.add_argument(
        "--test",
        choices=[kind.value for kind in TestKind],
        default=None,
        help="Test stub style (asked interactively if omitted)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be written without touching any file",
    )
    return parser


def collect_config(
    args: argparse.Namespace,
    cwd: Path,
    prompter: Prompter,
    defaults: ScaffoldDefaults | None = None,
) -> ScaffoldConfig:
    """Turn parsed arguments plus prompt answers into a ``ScaffoldConfig``.

    The element name is validated before anything is asked.  The test-style
    question is only asked when the project already has a test harness.
    """
    validate_element_name(args.element_name)
    defaults = defaults or ScaffoldDefaults()

    config = ScaffoldConfig(
        element_name=args.element_name,
        dependencies=tuple(args.dependencies),
        app_root=args.app or defaults.app_root,
        elements_root=args.elements or defaults.elements_root,
        dep_cache_root=args.dep_cache or defaults.dep_cache_root,
        nested_path=args.path,
        include_docs=args.docs,
    )

    include_import = args.include_import
    if include_import is None:
        include_import = prompter.confirm(IMPORT_QUESTION, default=False)

    harness = resolve_paths(config, cwd).harness_path
    if args.test is not None:
        test_kind = TestKind(args.test)
    elif harness.exists():
        choices = [kind.value for kind in TestKind]
        test_kind = TestKind(prompter.choose(TEST_QUESTION, choices, TestKind.TDD.value))
    else:
        print_warning(f"No test harness at {harness}, skipping test generation")
        test_kind = TestKind.NONE

    return config.model_copy(update={"include_import": include_import, "test_kind": test_kind})


def _display_path(path: Path, cwd: Path) -> str:
    try:
        return str(path.relative_to(cwd))
    except ValueError:
        return str(path)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None, prompter: Prompter | None = None) -> None:
    """CLI entry point for ``el-scaffold`` and ``python -m el_scaffold.cli``."""
    args = build_parser().parse_args(argv)
    cwd = Path.cwd()

    try:
        config = collect_config(
            args, cwd, prompter or RichPrompter(), ScaffoldDefaults.from_env()
        )
        written = ElementGenerator(config, cwd).generate(dry_run=args.dry_run)
    except (ScaffoldError, OSError, TemplateError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if args.dry_run:
        print_summary_table(
            {_display_path(f.path, cwd): f.kind for f in written},
            title="Dry run",
        )
        return

    for generated in written:
        action = "update" if generated.existed else "create"
        print_action(action, _display_path(generated.path, cwd))
    print_success(f"Scaffolded <{config.element_name}>")


if __name__ == "__main__":
    main()
