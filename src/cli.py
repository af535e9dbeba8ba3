"""Command-line interface for symbolguard."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import orjson

from registry.cache import discover_symbols
from rules.config import ConfigError, load_config
from suggest.suggestions import suggest
from validation.validator import validate

if TYPE_CHECKING:
    from healing.controller import Generator
    from registry.registry import SymbolRegistry
    from rules.config import SymbolGuardConfig
    from validation.errors import ValidationErrorSet


def _add_root(parser: argparse.ArgumentParser, *, positional: bool = False) -> None:
    if positional:
        parser.add_argument(
            "root",
            nargs="?",
            default=".",
            help="Project root (default: .)",
        )
    else:
        parser.add_argument("--root", default=".", help="Project root (default: .)")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="symbolguard")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log discovery and healing details",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    discover_parser = subparsers.add_parser("discover", help="List discovered symbols")
    _add_root(discover_parser, positional=True)
    discover_parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON record per line",
    )

    validate_parser = subparsers.add_parser("validate", help="Validate a generated file")
    validate_parser.add_argument("file", help="File to validate")
    _add_root(validate_parser)

    suggest_parser = subparsers.add_parser("suggest", help="Suggest a known symbol")
    suggest_parser.add_argument("name", help="Unknown symbol name")
    _add_root(suggest_parser)

    heal_parser = subparsers.add_parser("heal", help="Repair a generated file")
    heal_parser.add_argument("file", help="File holding the initial generated code")
    heal_parser.add_argument(
        "--model",
        required=True,
        help="Language model for regeneration (e.g. openai/gpt-4o-mini)",
    )
    _add_root(heal_parser)
    heal_parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Attempt budget including the initial code (default: config max_attempts)",
    )
    heal_parser.add_argument(
        "--out",
        default=None,
        help="Write the resulting code here instead of stdout",
    )

    return parser


def _build_generator(model: str) -> Generator:
    from generation.dspy_generator import build_generator

    return build_generator(model)


def _load(root: Path) -> tuple[SymbolGuardConfig, SymbolRegistry]:
    config = load_config(root)
    return config, discover_symbols(config, root)


def _write_errors(errors: ValidationErrorSet) -> None:
    for label, messages in (
        ("syntax", errors.syntax_errors),
        ("pattern", errors.pattern_errors),
        ("import", errors.import_errors),
    ):
        for message in messages:
            sys.stderr.write(f"{label}: {message}\n")


def _handle_discover(root: Path, as_json: bool) -> int:
    _, registry = _load(root)
    for record in registry.symbols():
        if as_json:
            line = orjson.dumps(record.model_dump(mode="json")).decode("utf-8")
        else:
            line = "\t".join(
                (record.name, record.category, record.source_kind.value, record.source_path)
            )
        sys.stdout.write(line + "\n")
    return 0


def _handle_validate(root: Path, file_path: Path) -> int:
    config, registry = _load(root)
    errors = validate(
        file_path.read_text(encoding="utf-8"),
        registry,
        import_path=config.import_path,
        framework=config.framework,
        component_prefix=config.component_prefix,
    )
    if not errors.is_valid:
        _write_errors(errors)
        return 1
    return 0


def _handle_suggest(root: Path, name: str) -> int:
    _, registry = _load(root)
    suggestion = suggest(name, registry.ordered_names)
    if suggestion is None:
        sys.stderr.write(f"No suggestion for {name}\n")
        return 1
    sys.stdout.write(suggestion + "\n")
    return 0


def _handle_heal(
    root: Path,
    file_path: Path,
    model: str,
    max_attempts: int | None,
    out: str | None,
) -> int:
    from healing.controller import heal

    config, registry = _load(root)
    result = asyncio.run(
        heal(
            file_path.read_text(encoding="utf-8"),
            registry,
            max_attempts if max_attempts is not None else config.max_attempts,
            _build_generator(model),
            import_path=config.import_path,
            framework=config.framework,
            component_prefix=config.component_prefix,
            known_names_sample=config.known_names_sample,
        )
    )

    if out is None:
        sys.stdout.write(result.code.rstrip("\n") + "\n")
    else:
        Path(out).expanduser().write_text(result.code, encoding="utf-8")

    sys.stderr.write(f"attempts: {result.attempts} ({result.stop_reason})\n")
    if result.generator_error:
        sys.stderr.write(f"generator: {result.generator_error}\n")
    if result.check_error:
        sys.stderr.write(f"check: {result.check_error}\n")
    if not result.success:
        _write_errors(result.final_errors)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = Path(args.root).expanduser().resolve()

    try:
        if args.command == "discover":
            return _handle_discover(root, args.json)

        if args.command == "suggest":
            return _handle_suggest(root, args.name)

        file_path = Path(args.file).expanduser()
        if args.command == "validate":
            return _handle_validate(root, file_path)

        if args.command == "heal":
            if args.max_attempts is not None and args.max_attempts < 1:
                parser.error("--max-attempts must be at least 1")
            return _handle_heal(root, file_path, args.model, args.max_attempts, args.out)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    except (FileNotFoundError, IsADirectoryError, UnicodeDecodeError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    parser.error(f"unknown command {args.command!r}")


if __name__ == "__main__":
    raise SystemExit(main())
