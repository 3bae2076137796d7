"""Command-line interface for calclex."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from calclex.errors import LexError
from calclex.tokens import Number, Token, kind_name

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")
DEFAULT_FILENAME = "<input>"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    expression: str | None
    input_file: Path | None
    output_format: str
    filename: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="calclex",
        description="Tokenize an integer arithmetic expression",
    )
    source = p.add_mutually_exclusive_group()
    source.add_argument(
        "expression", nargs="?", help="Expression to tokenize (default: read input)"
    )
    source.add_argument(
        "-f",
        "--file",
        metavar="FILE",
        help="Read the expression from FILE ('-' for stdin)",
    )
    p.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover calclex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens and debug logs to stderr")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / "calclex.toml"

    if not path.is_file():
        return {}

    logger.debug("loading config from %s", path)
    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, search_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir if search_dir is not None else Path("."))

    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in OUTPUT_FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r}"
                )
            output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    filename = DEFAULT_FILENAME
    cfg_diag = config.get("diagnostics")
    if isinstance(cfg_diag, dict):
        cfg_filename = cfg_diag.get("filename")
        if isinstance(cfg_filename, str):
            filename = cfg_filename

    input_file = Path(args.file) if args.file is not None else None
    if input_file is not None and args.file != "-":
        filename = str(input_file)

    return CliOptions(
        expression=args.expression,
        input_file=input_file,
        output_format=output_format,
        filename=filename,
        debug=args.debug,
    )


def read_source(options: CliOptions) -> str:
    """Return the expression text named by the options."""
    if options.expression is not None:
        return options.expression
    if options.input_file is None or str(options.input_file) == "-":
        logger.debug("reading expression from stdin")
        return sys.stdin.read()
    logger.debug("reading expression from %s", options.input_file)
    return options.input_file.read_text(encoding="utf-8")


def format_tokens(tokens: list[Token], output_format: str) -> str:
    """Render tokens as text lines or a JSON array."""
    if output_format == "json":
        return json.dumps([_token_to_dict(t) for t in tokens]) + "\n"
    lines = []
    for tok in tokens:
        line = f"{tok.span.start}-{tok.span.end} {kind_name(tok.value)}"
        if isinstance(tok.value, Number):
            line += f" {tok.value.value}"
        lines.append(line + "\n")
    return "".join(lines)


def _token_to_dict(tok: Token) -> dict[str, Any]:
    kind = tok.value
    value = kind.value
    return {
        "kind": kind_name(kind),
        "value": value,
        "start": tok.span.start,
        "end": tok.span.end,
    }


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    from calclex.debug import dump_tokens
    from calclex.lexer import lex

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    try:
        source = read_source(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        tokens = lex(source)
    except LexError as exc:
        print(exc.format(options.filename), file=sys.stderr)
        return 1

    if options.debug:
        dump_tokens(tokens, source, file=sys.stderr)

    sys.stdout.write(format_tokens(tokens, options.output_format))
    return 0
