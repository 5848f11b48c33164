"""Command-line front end.

Reads JSON from a file or stdin, generates classes for the chosen language
and prints them (syntax highlighted by Rich) or writes them to a file.

Usage::

    python -m jsonclass data.json --language go
    cat data.json | jsonclass -l typescript --accessors
    jsonclass data.json -l java -o Model.java
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from jsonclass.config import Config
from jsonclass.engine.discovery import NameCollisionPolicy
from jsonclass.engine.transformer import generate, is_error_output
from jsonclass.log import configure_logging
from jsonclass.profiles.registry import PROFILES, get_profile, supported_languages
from jsonclass.utils import (
    print_code,
    print_error,
    print_languages_table,
    print_success,
    print_warning,
    read_json_text,
    write_text,
)

EXIT_OK = 0
EXIT_GENERATION_ERROR = 1
EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonclass",
        description="Generate class definitions from a sample JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  jsonclass data.json --language go\n"
            "  cat data.json | jsonclass -l typescript --accessors\n"
            "  jsonclass data.json -l java -o Model.java\n"
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Path to the JSON file, or '-' for stdin (default: stdin)",
    )
    parser.add_argument(
        "--language", "-l",
        choices=supported_languages(),
        default=None,
        help="Target language (default: python, or $JSONCLASS_LANGUAGE)",
    )
    parser.add_argument(
        "--accessors", "-a",
        action="store_true",
        default=None,
        help="Store properties privately and generate getters/setters",
    )
    parser.add_argument(
        "--root-class",
        default=None,
        help="Class name for the top-level object (default: MainClass)",
    )
    parser.add_argument(
        "--collisions",
        choices=[policy.value for policy in NameCollisionPolicy],
        default=None,
        help="How to name nested classes whose names collide (default: qualify)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the generated code to this file instead of stdout",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Load settings from a JSON file saved by Config.save()",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print without syntax highlighting",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log discovery details to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``python -m jsonclass`` and the ``jsonclass`` script."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.list_languages:
        print_languages_table(
            {
                language.value: ", ".join(
                    filter(None, (profile.types.STRING, profile.types.INTEGER, profile.types.DATE))
                ) or "(untyped)"
                for language, profile in PROFILES.items()
            }
        )
        return EXIT_OK

    try:
        base = Config.load(args.config) if args.config else Config.from_env()
        config = base.with_overrides(
            language=args.language,
            use_accessors=args.accessors,
            root_class_name=args.root_class,
            collision_policy=args.collisions,
            highlight=False if args.plain else None,
        )
    except OSError as exc:
        print_error(str(exc))
        return EXIT_USAGE_ERROR
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        return EXIT_USAGE_ERROR

    try:
        json_text = read_json_text(args.input)
    except OSError as exc:
        print_error(str(exc))
        return EXIT_USAGE_ERROR

    code = generate(json_text, config)
    failed = is_error_output(code, get_profile(config.language))

    if args.output and not failed:
        path = write_text(args.output, code + "\n")
        print_success(f"Wrote {config.language.value} classes to {path}")
        return EXIT_OK

    if args.output:
        print_warning(f"Generation failed; {args.output} was not written")
    print_code(code, config.language.value, highlight=config.highlight)

    return EXIT_GENERATION_ERROR if failed else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
