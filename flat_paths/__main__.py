"""Interface for ``python -m flat_paths``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, BooleanOptionalAction
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ._version import version
from .key_mapping import PathConfig, PathConfigError, flatten, unflatten


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]


_DELIMITER_OPTIONS = ("prefix", "suffix", "prefix-list", "suffix-list")
_END_OPTIONS = ("suffix-end", "suffix-list-end")


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="flat-paths", description="Flatten or unflatten JSON documents.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--debug", action="store_true", help="enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    for command, help_text in (
        ("flatten", "encode a nested JSON document as path keys"),
        ("unflatten", "rebuild a nested JSON document from path keys"),
    ):
        sub = commands.add_parser(command, help=help_text)
        for option in _DELIMITER_OPTIONS:
            _ = sub.add_argument(f"--{option}", default=None)
        for option in _END_OPTIONS:
            _ = sub.add_argument(f"--{option}", action=BooleanOptionalAction, default=None)
        _ = sub.add_argument("--start", default="", help="literal prefix of every path key")
        _ = sub.add_argument("--indent", type=int, default=None)
        _ = sub.add_argument("input", nargs="?", default="-", help="JSON file to read, or - for stdin")
    return parser


def _options(namespace: Any) -> dict[str, Any]:
    options: dict[str, Any] = {}
    for option in (*_DELIMITER_OPTIONS, *_END_OPTIONS):
        value = getattr(namespace, option.replace("-", "_"))
        if value is not None:
            options[option] = value
    return options


def _read_input(source: str) -> str:
    # stdin stays open so main can be called again in the same process
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = _build_parser()
    namespace = parser.parse_args(args)
    logging.basicConfig(level=logging.DEBUG if namespace.debug else logging.WARNING)

    try:
        config = PathConfig.from_options(_options(namespace))
    except PathConfigError as exc:
        parser.error(str(exc))

    try:
        document = json.loads(_read_input(namespace.input))
    except OSError as exc:
        parser.error(f"cannot read input: {exc}")
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        parser.error(f"invalid JSON input: {exc}")

    if namespace.command == "flatten":
        result = flatten(document, config=config, start=namespace.start)
    else:
        if not isinstance(document, dict):
            parser.error("unflatten expects a JSON object")
        result = unflatten(document, config=config, start=namespace.start)

    _ = sys.stdout.write(json.dumps(result, indent=namespace.indent) + "\n")


if __name__ == "__main__":
    main()
