"""Populate dataclass fields from HTTP request parameters."""

from __future__ import annotations

import dataclasses
import json
import re
import typing
from collections.abc import Mapping, Sequence
from urllib.parse import unquote

_INT = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCALARS: dict[str, type] = {"str": str, "int": int, "bool": bool}
_LIST_TEXT = re.compile(r"(?:typing\.)?(?:list|List)(?:\[\s*([\w.]+)\s*\])?")


class ParamError(ValueError):
    """A request parameter could not be parsed or stored."""


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _unescape(text: str) -> str:
    bad = _BAD_ESCAPE.search(text)
    if bad is not None:
        raise ParamError(f"invalid URL escape {_quote(text[bad.start():bad.start() + 3])}")
    return unquote(text.replace("+", " "))


def _parse_query(query: str) -> dict[str, list[str]]:
    form: dict[str, list[str]] = {}
    error: ParamError | None = None
    for part in query.split("&"):
        if not part:
            continue
        if ";" in part:
            error = error or ParamError("invalid semicolon separator in query")
            continue
        key, _, value = part.partition("=")
        try:
            key, value = _unescape(key), _unescape(value)
        except ParamError as exc:
            error = error or exc
            continue
        form.setdefault(key, []).append(value)
    if error is not None:
        raise error
    return form


def _parse_int(value: str) -> int:
    if not _INT.fullmatch(value):
        raise ValueError(f"strconv.ParseInt: parsing {_quote(value)}: invalid syntax")
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"strconv.ParseInt: parsing {_quote(value)}: value out of range")
    return number


def _parse_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"strconv.ParseBool: parsing {_quote(value)}: invalid syntax")


def _field_kind(field: dataclasses.Field) -> tuple[bool, object]:
    """Return (is_list, element_or_value_type) for a dataclass field.

    Annotations kept as text are resolved for the simple types this module
    supports; anything else stays as its text and is reported as unsupported.
    """
    tp = field.type
    if isinstance(tp, str):
        text = tp.strip()
        match = _LIST_TEXT.fullmatch(text)
        if match:
            elem = match.group(1)
            if elem is None:
                return True, object
            return True, _SCALARS.get(elem, elem)
        return False, _SCALARS.get(text, text)
    if typing.get_origin(tp) is list or tp is list:
        args = typing.get_args(tp)
        return True, args[0] if args else object
    return False, tp


def _convert(tp: object, value: str) -> object:
    if tp is str:
        return value
    if tp is bool:
        return _parse_bool(value)
    if tp is int:
        return _parse_int(value)
    name = tp if isinstance(tp, str) else getattr(tp, "__name__", repr(tp))
    raise ValueError(f"unsupported kind {name}")


def unpack(form: str | Mapping[str, Sequence[str]], obj: object) -> None:
    """Set fields of the dataclass instance ``obj`` from request parameters.

    ``form`` is a raw query string or a mapping from names to values. A field
    is named by its ``http`` metadata entry, else by its lower-cased name.
    List fields collect every value; other fields take the last. Unknown
    parameters are ignored. Raises ParamError on malformed input.
    """
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError("unpack needs a dataclass instance")
    params = _parse_query(form) if isinstance(form, str) else form

    fields = {f.metadata.get("http") or f.name.lower(): f for f in dataclasses.fields(obj)}

    for name, values in params.items():
        target = fields.get(name)
        if target is None:
            continue
        if isinstance(values, str):
            values = [values]
        is_list, tp = _field_kind(target)
        for value in values:
            try:
                if is_list:
                    item = _convert(tp, value)
                    setattr(obj, target.name, [*getattr(obj, target.name), item])
                else:
                    setattr(obj, target.name, _convert(tp, value))
            except ValueError as exc:
                raise ParamError(f"{name}: {exc}") from exc