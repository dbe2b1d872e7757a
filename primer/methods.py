"""List the methods of any value."""

from __future__ import annotations

import inspect
import sys
import types
from typing import Any, Callable, TextIO

_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08
_UNKNOWN = "(...)"


def _annotation_text(annotation: object) -> str:
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, types.GenericAlias):
        return str(annotation)
    if getattr(annotation, "__module__", None) == "typing":
        return repr(annotation).replace("typing.", "")
    if isinstance(annotation, type):
        if annotation.__module__ == "builtins":
            return annotation.__qualname__
        return f"{annotation.__module__}.{annotation.__qualname__}"
    if annotation is None:
        return "None"
    return repr(annotation)


def _parameter(name: str, annotations: dict, default: object = inspect.Parameter.empty,
               prefix: str = "") -> str:
    text = prefix + name
    has_default = default is not inspect.Parameter.empty
    if name in annotations:
        text += ": " + _annotation_text(annotations[name])
        if has_default:
            text += " = " + repr(default)
    elif has_default:
        text += "=" + repr(default)
    return text


def _code_signature(func: Any, skip_first: bool) -> str:
    code = func.__code__
    names = code.co_varnames
    pos_count = code.co_argcount
    kw_count = code.co_kwonlyargcount
    positional = list(names[:pos_count])
    kwonly = list(names[pos_count:pos_count + kw_count])
    index = pos_count + kw_count
    varargs = None
    if code.co_flags & _CO_VARARGS:
        varargs = names[index]
        index += 1
    varkw = names[index] if code.co_flags & _CO_VARKEYWORDS else None

    defaults = func.__defaults__ or ()
    kwdefaults = func.__kwdefaults__ or {}
    annotations = getattr(func, "__annotations__", None) or {}
    first_default = pos_count - len(defaults)
    posonly = code.co_posonlyargcount

    entries = []
    for position, name in enumerate(positional):
        default = (
            defaults[position - first_default]
            if position >= first_default
            else inspect.Parameter.empty
        )
        entries.append(_parameter(name, annotations, default))
    if skip_first and entries:
        entries = entries[1:]
        posonly = max(posonly - 1, 0)
    parts = entries[:posonly] + (["/"] if posonly else []) + entries[posonly:]

    if varargs is not None:
        parts.append(_parameter(varargs, annotations, prefix="*"))
    elif kwonly:
        parts.append("*")
    parts.extend(
        _parameter(name, annotations, kwdefaults.get(name, inspect.Parameter.empty))
        for name in kwonly
    )
    if varkw is not None:
        parts.append(_parameter(varkw, annotations, prefix="**"))

    text = "(" + ", ".join(parts) + ")"
    if "return" in annotations:
        text += " -> " + _annotation_text(annotations["return"])
    return text


def _text_signature(text: str) -> str:
    inner = text.strip()
    if not (inner.startswith("(") and inner.endswith(")")):
        return _UNKNOWN
    parts = [part.strip() for part in inner[1:-1].split(",") if part.strip()]
    dropped_self = bool(parts) and parts[0].startswith("$")
    parts = [part for part in parts if not part.startswith("$")]
    if dropped_self and parts and parts[0] == "/":
        parts = parts[1:]
    return "(" + ", ".join(parts) + ")"


def _signature(method: Callable[..., Any]) -> str:
    if inspect.ismethod(method):
        func = method.__func__
        if hasattr(func, "__code__"):
            return _code_signature(func, skip_first=True)
    elif inspect.isfunction(method):
        return _code_signature(method, skip_first=False)
    text = getattr(method, "__text_signature__", None)
    if isinstance(text, str):
        return _text_signature(text)
    return _UNKNOWN


def method_signatures(x: Any) -> list[str]:
    """Return one line per public method of ``x``, sorted by method name."""
    cls = type(x)
    name = cls.__qualname__
    lines = []
    for attr in sorted(dir(cls)):
        if attr.startswith("_"):
            continue
        try:
            member = inspect.getattr_static(cls, attr)
        except AttributeError:
            continue
        if isinstance(member, property):
            continue
        bound = getattr(x, attr, None)
        if bound is None or not inspect.isroutine(bound):
            continue
        lines.append(f"func ({name}) {attr}{_signature(bound)}")
    return lines


def print_methods(x: Any, out: TextIO | None = None) -> None:
    """Write the type of ``x`` and then its method set to ``out``."""
    stream = sys.stdout if out is None else out
    stream.write(f"type {type(x).__qualname__}\n")
    for line in method_signatures(x):
        stream.write(line + "\n")