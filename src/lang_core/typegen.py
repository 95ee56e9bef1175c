"""TypeScript declaration generator.

The ``Lang`` interface is built from one resource (the first in sorted
order); every other resource is assumed to share its keys and shapes.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .decoder import decode
from .errors import LangIOError
from .loader import aggregate
from .settings import LangSettings
from .typedef import FieldDescriptor, FieldShape
from .values import AggregatedTable, RawTable, VArray

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{([a-zA-Z0-9_]+)\}")

HEADER = (
    "// THIS FILE WAS GENERATED BY LANG-CORE\n"
    "// DO NOT EDIT MANUALLY OR ELSE IT WILL BE OVERWRITTEN\n\n"
    "/* eslint-disable */\n"
)


def find_placeholders(text: str) -> list[str]:
    """Distinct ``{name}`` tokens of *text*, first occurrence first."""
    names: list[str] = []
    for name in PLACEHOLDER_RE.findall(text):
        if name not in names:
            names.append(name)
    return names


def describe_fields(table: RawTable, gen_placeholder: bool = False) -> list[FieldDescriptor]:
    fields: list[FieldDescriptor] = []
    for key, raw in table.items():
        is_array = isinstance(decode(raw), VArray)
        placeholders = [] if is_array else find_placeholders(raw)
        if is_array:
            shape = FieldShape.ARRAY
        elif placeholders and gen_placeholder:
            shape = FieldShape.TEMPLATE
        else:
            shape = FieldShape.SCALAR
        fields.append(FieldDescriptor(
            key=key,
            shape=shape,
            doc_lines=raw.split("\n"),
            placeholders=placeholders,
        ))
    return fields


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _quote_key(key: str) -> str:
    return "'" + key.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _render_doc(lines: list[str]) -> list[str]:
    lines = [line.replace("*/", "*\\/") for line in lines]
    if len(lines) == 1:
        return [f"    /** {lines[0]} */"]
    return ["    /**", *(f"     * {line}" for line in lines), "     */"]


def _render_field(fd: FieldDescriptor) -> str:
    key = _quote_key(fd.key)
    if fd.shape is FieldShape.TEMPLATE:
        args = ", ".join(f"{name}: string" for name in fd.placeholders)
        return f"    {key}: (args: {{ {args} }}) => string;"
    if fd.shape is FieldShape.ARRAY:
        return f"    {key}: string[];"
    return f"    {key}: string;"


def describe(table: AggregatedTable, gen_placeholder: bool = False) -> str:
    """Render the ``Lang`` / ``Langs`` declarations for *table*."""
    names = sorted(table)
    out = [HEADER + "export interface Lang {"]
    if names:
        for fd in describe_fields(table[names[0]], gen_placeholder):
            out.extend(_render_doc(fd.doc_lines))
            out.append(_render_field(fd))
    out.append("}\n")
    out.append("export interface Langs {")
    out.extend(f"    {_quote_key(name)}: Lang;" for name in names)
    out.append("}\n")
    out.append("export const langs: Langs;\n")
    return "\n".join(out)


def write_description(table: AggregatedTable, output: str | Path,
                      gen_placeholder: bool = False) -> Path:
    output = Path(output)
    try:
        output.write_text(describe(table, gen_placeholder), encoding="utf-8")
    except OSError as exc:
        raise LangIOError(
            f"Failed to write TypeScript definitions to '{output}': {exc}", output
        ) from exc
    logger.info("TypeScript definitions written to %s", output)
    return output


def generate_typescript_defs(
    directory: str | Path,
    output: str | Path,
    gen_placeholder: bool | None = None,
    *,
    settings: LangSettings | None = None,
) -> Path:
    """Aggregate *directory* and write its declarations to *output*."""
    settings = settings or LangSettings()
    if gen_placeholder is None:
        gen_placeholder = settings.gen_placeholder
    return write_description(aggregate(directory, settings=settings), output, gen_placeholder)
