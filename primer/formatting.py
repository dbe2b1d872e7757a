"""Format any value as a short string without inspecting its structure."""

from __future__ import annotations

import types
from typing import Any

from primer.servers import _quote

_REFERENCE_TYPES = (
    list,
    dict,
    set,
    bytearray,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.GeneratorType,
)


def _type_name(value: Any) -> str:
    return type(value).__qualname__


def format_atom(value: Any) -> str:
    """Format ``value`` without looking inside it.

    None is "invalid"; booleans, integers and strings are written out;
    mutable containers and callables show their type and identity; any
    other value shows its type followed by "value".
    """
    if value is None:
        return "invalid"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, _REFERENCE_TYPES):
        return f"{_type_name(value)} 0x{id(value):x}"
    return f"{_type_name(value)} value"


def format_any(value: Any) -> str:
    """Format any value as a string."""
    return format_atom(value)