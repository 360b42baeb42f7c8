# src/cache/entry.py — v1
"""Single-use cache entry for handing server-rendered data to the client.

An entry holds data computed during server-side rendering, keyed by the
request parameter that produced it. The first fetch() returns the data and
clears it, so the client can hydrate its first render from it but never
shows the snapshot again once it re-renders or asks for other parameters.

States: Loaded (data present) -> Drained (after the first fetch()).
Drained is terminal. matches() works in both states and changes nothing.

One reader per entry: fetch() is a plain read-then-clear, not atomic.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

P = TypeVar("P")
D = TypeVar("D")

Matcher = Callable[[Any, Any], bool]


def _present_fields(param: Any) -> Mapping[str, Any] | None:
    """Fields set on a structured param, or None for a scalar."""
    if isinstance(param, Mapping):
        return param
    if isinstance(param, BaseModel):
        return {name: getattr(param, name) for name in param.model_fields_set}
    return None


def _stored_field(stored: Any, name: str) -> Any:
    if isinstance(stored, Mapping):
        return stored.get(name)
    if isinstance(stored, BaseModel) and name not in type(stored).model_fields:
        for field_name, field in type(stored).model_fields.items():
            if field.alias == name:
                return getattr(stored, field_name)
    return getattr(stored, name, None)


def shallow_match(stored: Any, candidate: Any) -> bool:
    """Compare a candidate param against the one an entry was stored under.

    For a mapping or pydantic model, each field present on the candidate must
    equal the stored param's field of the same name; fields the candidate
    leaves out are not compared. Otherwise the two are compared with ==.

    Only direct fields are compared, so this is only reliable for params
    whose fields are scalars.
    """
    fields = _present_fields(candidate)
    if fields is None:
        return candidate == stored
    return all(_stored_field(stored, name) == value for name, value in fields.items())


def always_match(stored: Any, candidate: Any = None) -> bool:
    return True


class CacheEntry(Generic[P, D]):
    """Data for one operation, readable exactly once."""

    __slots__ = ("_param", "_data", "_matcher", "_drained")

    def __init__(self, param: P, data: D, matcher: Matcher = shallow_match) -> None:
        self._param = param
        self._data: D | None = data
        self._matcher = matcher
        self._drained = False

    @classmethod
    def no_param(cls, data: D) -> CacheEntry[None, D]:
        """Entry for an operation that takes no parameter; it matches anything."""
        return cls(None, data, matcher=always_match)

    @property
    def param(self) -> P:
        return self._param

    @property
    def is_drained(self) -> bool:
        return self._drained

    def fetch(self) -> D | None:
        """Return the data and clear it. Later calls return None."""
        data = self._data
        self._data = None
        self._drained = True
        return data

    def matches(self, param: Any = None) -> bool:
        """Whether this entry was stored for the given request param."""
        return self._matcher(self._param, param)

    def __repr__(self) -> str:
        state = "drained" if self.is_drained else "loaded"
        return f"CacheEntry(param={self._param!r}, {state})"


def no_param_cache_entry(data: D) -> CacheEntry[None, D]:
    """Shorthand for CacheEntry.no_param()."""
    return CacheEntry.no_param(data)
