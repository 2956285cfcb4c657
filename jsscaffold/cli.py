"""Command-line entry point: ``jsscaffold [project-name] [-t TYPE] [-l LANG]``.

Values missing from the command line are asked for interactively with
``rich.prompt`` unless ``--no-interactive`` is given (or
``JSSCAFFOLD_INTERACTIVE=0``), in which case the configured defaults apply.
"""

from __future__ import annotations

import argparse
import asyncio
import re
import sys

from pydantic import ValidationError
from rich.markup import escape
from rich.prompt import Prompt

from . import __version__
from .config import Config
from .errors import ScaffoldError
from .models import PROJECT_NAME_PATTERN, ArchetypeId, Language, ProjectDescriptor
from .scaffolder import ProjectGenerator
from .utils import (
    console,
    print_error,
    print_next_steps,
    print_success,
    print_summary_table,
)


INVALID_NAME_MESSAGE = (
    "Project name can only contain letters, numbers, hyphens, and underscores"
)


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def prompt_project_name() -> str:
    """Ask for a project name until a valid one is entered."""
    while True:
        name = Prompt.ask("What is your project name?", console=console).strip()
        if not name:
            print_error("Project name is required")
        elif not re.match(PROJECT_NAME_PATTERN, name):
            print_error(INVALID_NAME_MESSAGE)
        else:
            return name


def prompt_archetype(default: ArchetypeId | None = None) -> ArchetypeId:
    for archetype in ArchetypeId:
        console.print(f"  [cyan]{archetype.value:<14}[/cyan] {archetype.display_name}")
    extra = {"default": default.value} if default is not None else {}
    answer = Prompt.ask(
        "What type of project do you want to create?",
        choices=[archetype.value for archetype in ArchetypeId],
        console=console,
        **extra,
    )
    return ArchetypeId.parse(answer)


def prompt_language(default: Language = Language.JS) -> Language:
    answer = Prompt.ask(
        "What language do you want to use?",
        choices=[language.value for language in Language],
        default=default.value,
        console=console,
    )
    return Language.parse(answer)


# ---------------------------------------------------------------------------
# Argument resolution
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsscaffold",
        description="Create JavaScript/TypeScript project structures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  jsscaffold my-api -t express -l ts\n"
            "  jsscaffold my-site --type nextjs\n"
            "  jsscaffold\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        metavar="project-name",
        help="Name of the project",
    )
    parser.add_argument(
        "--type", "-t",
        default=None,
        help="Project type (" + ", ".join(a.value for a in ArchetypeId) + ")",
    )
    parser.add_argument(
        "--language", "-l",
        default=None,
        help="Language (js, ts)",
    )
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Never prompt; fail if a required value is missing",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def resolve_descriptor(args: argparse.Namespace, config: Config) -> ProjectDescriptor:
    """Fill in missing values from prompts or configuration.

    Raises:
        ScaffoldError: an unknown type or language was given.
        ValueError: a required value is missing in non-interactive mode.
        ValidationError: the project name is invalid.
    """
    interactive = config.interactive and not args.no_interactive

    name = args.project_name
    if not name:
        if not interactive:
            raise ValueError("Project name is required")
        name = prompt_project_name()

    if args.type:
        archetype = ArchetypeId.parse(args.type)
    elif interactive:
        archetype = prompt_archetype(config.default_archetype)
    elif config.default_archetype is not None:
        archetype = config.default_archetype
    else:
        raise ValueError("Project type is required (use --type)")

    if args.language:
        language = Language.parse(args.language)
    elif interactive:
        language = prompt_language(config.default_language)
    else:
        language = config.default_language

    return ProjectDescriptor(name=name, archetype=archetype, language=language)


def _validation_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    if errors[0]["type"] == "string_pattern_mismatch":
        return INVALID_NAME_MESSAGE
    return errors[0]["msg"]


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``jsscaffold`` / ``python -m jsscaffold.cli``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
        descriptor = resolve_descriptor(args, config)
    except ValidationError as exc:
        print_error(f"Error: {escape(_validation_message(exc))}")
        sys.exit(1)
    except (ScaffoldError, ValueError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    print_summary_table(
        {
            "Project": descriptor.name,
            "Type": descriptor.archetype.display_name,
            "Language": descriptor.language.display_name,
        },
        title="Creating project",
    )

    generator = ProjectGenerator(config)
    try:
        asyncio.run(generator.generate_descriptor(descriptor))
    except (ScaffoldError, OSError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    print_success(f'Project "{descriptor.name}" created successfully!')
    print_next_steps(descriptor.name, descriptor.archetype)


if __name__ == "__main__":
    main()
