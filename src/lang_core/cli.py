"""Command-line interface (``lang-core`` / ``python -m lang_core.cli``)."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO, Sequence

from .decoder import decode, decode_table, to_python
from .errors import LangCoreError
from .loader import aggregate, load_file
from .settings import LangSettings
from .typegen import generate_typescript_defs
from .values import AggregatedTable, Value, VArray, VScalar


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VArray):
        return "[" + ", ".join(f'"{v}"' for v in value.items) + "]"
    if isinstance(value, VScalar):
        return json.dumps(value.value, ensure_ascii=False)
    return repr(value)


def _fmt_table(name: str, entries: dict[str, Value]) -> str:
    if not entries:
        return f"{name} {{}}"
    width = max(len(k) for k in entries)
    lines = [f"{name} {{"]
    for key, value in entries.items():
        lines.append(f"  {key:<{width}}: {_fmt_inline(value)}")
    lines.append("}")
    return "\n".join(lines)


def _show_langs(langs: AggregatedTable, dest: IO[str], as_json: bool = False) -> None:
    if as_json:
        data = {
            name: {k: to_python(v) for k, v in decode_table(entries).items()}
            for name, entries in sorted(langs.items())
        }
        print(json.dumps(data, ensure_ascii=False, indent=2), file=dest)
        return
    if not langs:
        print("  (no resources found)", file=dest)
        return
    for name in sorted(langs):
        print(_fmt_table(name, decode_table(langs[name])), file=dest)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _cmd_load(args: argparse.Namespace, settings: LangSettings, dest: IO[str]) -> int:
    _show_langs(aggregate(args.directory, settings=settings), dest, args.json)
    return 0


def _cmd_file(args: argparse.Namespace, settings: LangSettings, dest: IO[str]) -> int:
    table = load_file(args.path, settings=settings)
    if args.key is None:
        print(_fmt_table(args.path, decode_table(table)), file=dest)
        return 0
    if args.key not in table:
        print(f"error: key '{args.key}' not found in {args.path}", file=sys.stderr)
        return 1
    print(_fmt_inline(decode(table[args.key])), file=dest)
    return 0


def _cmd_typegen(args: argparse.Namespace, settings: LangSettings, dest: IO[str]) -> int:
    out = generate_typescript_defs(
        args.directory, args.output, args.placeholders or None, settings=settings
    )
    print(f"TypeScript definitions generated: {out}", file=dest)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lang-core", description="Inspect .lang resource files."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--extension", help="resource file suffix (default: .lang)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("load", help="load every resource file of a directory")
    p.add_argument("directory")
    p.add_argument("--json", action="store_true", help="print JSON instead of tables")
    p.set_defaults(func=_cmd_load)

    p = sub.add_parser("file", help="parse a single resource file")
    p.add_argument("path")
    p.add_argument("key", nargs="?")
    p.set_defaults(func=_cmd_file)

    p = sub.add_parser("typegen", help="write TypeScript declarations")
    p.add_argument("directory")
    p.add_argument("output")
    p.add_argument("--placeholders", action="store_true",
                   help="render {placeholder} keys as functions")
    p.set_defaults(func=_cmd_typegen)
    return parser


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None, dest: IO[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    overrides = {"extension": args.extension} if args.extension else {}
    settings = LangSettings(**overrides)
    try:
        return args.func(args, settings, dest or sys.stdout)
    except LangCoreError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
