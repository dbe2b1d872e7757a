"""A deep equivalence relation for arbitrary values."""

from __future__ import annotations

import dataclasses
import functools
import types
from typing import Any

_ATOMS = (bool, int, float, complex, str, bytes)
_CALLABLES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    functools.partial,
)


def _equal(x: Any, y: Any, seen: set[tuple[int, int]]) -> bool:
    if x is None or y is None:
        return x is y
    if type(x) is not type(y):
        return False
    if isinstance(x, _ATOMS):
        return x == y
    if isinstance(x, _CALLABLES):
        return x is y
    if x is y:
        return True
    key = (id(x), id(y))
    if key in seen:
        return True
    seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(_equal(a, b, seen) for a, b in zip(x, y))
    if isinstance(x, dict):
        return len(x) == len(y) and all(
            k in y and _equal(v, y[k], seen) for k, v in x.items()
        )
    if isinstance(x, (set, frozenset)):
        return x == y
    if dataclasses.is_dataclass(x) and not isinstance(x, type):
        return all(
            _equal(getattr(x, f.name), getattr(y, f.name), seen)
            for f in dataclasses.fields(x)
        )
    state = getattr(x, "__dict__", None)
    if isinstance(state, dict):
        return _equal(state, vars(y), seen)
    return x == y


def equal(x: Any, y: Any) -> bool:
    """Report whether ``x`` and ``y`` are deeply equal.

    Values of different types are never equal. Containers and object
    attributes are compared recursively, cycles included; functions are
    equal only to themselves. Dict keys are compared with ==, not deeply.
    """
    return _equal(x, y, set())