"""Plain-data helpers: JSON copies, to_json-aware serialization, strict deep equality.

Plain data here means what JSON can carry: None, bool, int, float, str,
lists and str-keyed dicts. Tuples are accepted on the way into json.dumps
but compare as their own kind in deep_equal. Floats must be finite:
JSON has no NaN or Infinity, so serializing one raises ValueError.
"""

import json
import math
from collections.abc import Mapping
from typing import Any


def json_copy(value: Any) -> Any:
    """Return a structurally identical, reference-distinct copy via a JSON round-trip."""
    return json.loads(json.dumps(value, allow_nan=False))


def to_plain(value: Any) -> Any:
    """Replace every object exposing to_json() with its result, recursively.

    Runs before json.dumps so that subclasses of tuple, dict, str or int
    (a NamedTuple value class, say) are serialized through to_json() too.
    """
    to_json = getattr(value, 'to_json', None)
    if callable(to_json):
        result = to_json()
        if result is value:
            raise TypeError(f'{type(value).__name__}.to_json() returned the instance itself')
        return to_plain(result)
    if isinstance(value, Mapping):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


def dumps(value: Any) -> str:
    """Serialize value, calling to_json() on any nested object that has one."""
    return json.dumps(to_plain(value), allow_nan=False)


def json_round_trip(value: Any) -> Any:
    """Equivalent of JSON.parse(JSON.stringify(value))."""
    return json.loads(dumps(value))


def _kind(value: Any) -> str:
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'bool'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'str'
    if isinstance(value, list):
        return 'list'
    if isinstance(value, tuple):
        return 'tuple'
    if isinstance(value, Mapping):
        return 'mapping'
    return 'object'


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality that keeps JSON kinds apart (True != 1, [] != {})."""
    kind = _kind(a)
    if kind != _kind(b):
        return False
    if kind in ('list', 'tuple'):
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b))
    if kind == 'mapping':
        if set(a.keys()) != set(b.keys()):
            return False
        return all(deep_equal(a[k], b[k]) for k in a)
    if kind == 'number' and math.isnan(a) and math.isnan(b):
        return True
    return a == b


def own_fields(obj: Any) -> dict[str, Any]:
    """Snapshot of an object's own fields as a plain dict.

    Uses the instance __dict__ when there is one, then adds any filled
    __slots__ declared along the MRO.
    """
    fields: dict[str, Any] = dict(getattr(obj, '__dict__', {}))
    for klass in type(obj).__mro__:
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ('__dict__', '__weakref__') or slot in fields:
                continue
            try:
                fields[slot] = object.__getattribute__(obj, slot)
            except AttributeError:
                continue
    return fields
