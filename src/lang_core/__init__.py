"""lang_core — parser, loader, cache and type generator for .lang files."""

from .cache import LangCache, RWLock
from .decoder import decode, decode_all, decode_table, to_python
from .errors import LangCoreError, LangIOError, NotADirError, NotAFileError
from .loader import LoadReport, aggregate, list_resource_files, load_file
from .reader import ParseStats, parse, parse_file
from .settings import LangSettings
from .typedef import FieldDescriptor, FieldShape
from .typegen import describe, describe_fields, generate_typescript_defs, write_description
from .values import AggregatedTable, RawTable, Value, VArray, VScalar

__all__ = [
    "parse",
    "parse_file",
    "ParseStats",
    "decode",
    "decode_table",
    "decode_all",
    "to_python",
    "aggregate",
    "load_file",
    "list_resource_files",
    "LoadReport",
    "LangCache",
    "RWLock",
    "describe",
    "describe_fields",
    "write_description",
    "generate_typescript_defs",
    "FieldDescriptor",
    "FieldShape",
    "LangSettings",
    "LangCoreError",
    "LangIOError",
    "NotADirError",
    "NotAFileError",
    "RawTable",
    "AggregatedTable",
    "Value",
    "VScalar",
    "VArray",
]
