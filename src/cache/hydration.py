# src/cache/hydration.py — v1
"""Per-request map from API operation name to its single-use cache entry.

The server fills it while rendering; the client consults it before each
live call and drains the entry that matches.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, get_args

from forumwire.cache.entry import CacheEntry

logger = logging.getLogger(__name__)

Operation = Literal["getDiscussions", "getDiscussion", "getUserActivity", "getUsers"]

OPERATIONS: tuple[str, ...] = get_args(Operation)


class UnknownOperationError(ValueError):
    """Raised for an operation name the hydration cache does not know."""


def _check_operation(operation: str) -> None:
    if operation not in OPERATIONS:
        raise UnknownOperationError(
            f"Unknown operation: {operation!r}. Expected one of {list(OPERATIONS)}"
        )


class HydrationCache:
    """Optional CacheEntry per operation, for one render pass."""

    def __init__(self, entries: dict[str, CacheEntry[Any, Any]] | None = None) -> None:
        self._entries: dict[str, CacheEntry[Any, Any]] = {}
        for operation, entry in (entries or {}).items():
            self.put(operation, entry)

    def put(self, operation: str, entry: CacheEntry[Any, Any]) -> None:
        """Store the entry for an operation, replacing any previous one."""
        _check_operation(operation)
        self._entries[operation] = entry

    def get(self, operation: str) -> CacheEntry[Any, Any] | None:
        _check_operation(operation)
        return self._entries.get(operation)

    def take(self, operation: str, param: Any = None) -> Any | None:
        """Drain the entry for operation if it matches param.

        Returns:
            The cached data, or None when there is no entry, the entry was
            stored for other params, or it has already been drained. None
            means the caller must go to the live data source.
        """
        entry = self.get(operation)
        if entry is None:
            return None
        if not entry.matches(param):
            logger.debug("Cache entry for %s does not match %r", operation, param)
            return None
        data = entry.fetch()
        if data is None:
            logger.debug("Cache entry for %s already drained", operation)
        return data

    def operations(self) -> list[str]:
        """Operations that have an entry, drained or not."""
        return list(self._entries)

    def __contains__(self, operation: object) -> bool:
        return operation in self._entries

    def __len__(self) -> int:
        return len(self._entries)
