"""Command-line interface for the MathLang scanner."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mathlang.errors import MalformedInputError
from mathlang.tokens import Token

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    spans: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="mathlang",
        description="Tokenize MathLang source and print the token stream",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--spans",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include source positions in the output (--no-spans turns them off)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover mathlang.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file.

    A missing auto-discovered mathlang.toml means an empty config; a missing
    file named explicitly with --config is an error.
    """
    if config_path is not None and not config_path.is_file():
        raise argparse.ArgumentTypeError(f"config file not found: {config_path}")

    path = config_path if config_path is not None else input_dir / "mathlang.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    fmt = "text"
    spans = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config (expected one of {', '.join(FORMATS)}): "
                    f"{cfg_format}"
                )
            fmt = cfg_format
        cfg_spans = cfg_output.get("spans")
        if isinstance(cfg_spans, bool):
            spans = cfg_spans

    if args.format is not None:
        fmt = args.format
    if args.spans is not None:
        spans = args.spans

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        spans=spans,
        debug=args.debug,
    )


def scan_file(options: CliOptions) -> list[Token]:
    """Read and tokenize the input file."""
    from mathlang.debug import dump_tokens
    from mathlang.lexer import tokenize

    source = options.input_file.read_text(encoding="utf-8")
    tokens = tokenize(source)

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    return tokens


def render_tokens(tokens: list[Token], fmt: str, spans: bool = False) -> str:
    """Render a token list in the requested output format."""
    from mathlang.debug import format_token

    if fmt == "json":
        items = []
        for tok in tokens:
            item: dict[str, Any] = {"type": tok.type.name, "value": tok.value, "raw": tok.raw}
            if spans:
                item["start"] = [tok.span.start.line, tok.span.start.column]
                item["end"] = [tok.span.end.line, tok.span.end.column]
            items.append(item)
        return json.dumps(items, indent=2) + "\n"

    return "".join(format_token(tok, spans=spans) + "\n" for tok in tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        tokens = scan_file(options)
    except MalformedInputError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {options.input_file}: {exc}", file=sys.stderr)
        return 2

    output = render_tokens(tokens, options.format, options.spans)
    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
