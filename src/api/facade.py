# src/api/facade.py — v1
"""Server-render to client-hydration handoff.

Usage (server, one render pass):
    cache = await prerender(source, "getDiscussions", options)
    # render the page, then hand `cache` to the client-side app

Usage (client):
    api = HydratingClient(ForumClient(source), cache)
    page = await api.get_discussions(options)   # served from cache, once
    page = await api.get_discussions(options)   # live call
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from pydantic import BaseModel

from forumwire.api.client import ForumClient, WireSource
from forumwire.api.models import (
    DiscussionOptions,
    DiscussionsOptions,
    UserActivityOptions,
)
from forumwire.cache.entry import CacheEntry
from forumwire.cache.hydration import HydrationCache
from forumwire.config.settings import Settings
from forumwire.core.models import Discussion, Discussions, UserActivity, UserSummary
from forumwire.logging.context import set_operation_context, set_request_context

logger = logging.getLogger(__name__)

# Operations whose entries carry no param and match any request.
_NO_PARAM_OPERATIONS = frozenset({"getUsers"})


async def prerender(
    source: WireSource,
    operation: str,
    param: Any = None,
    settings: Settings | None = None,
    request_id: str | None = None,
) -> HydrationCache:
    """Fetch the data for one page render and wrap it for hydration.

    Args:
        source: Data source the page's data is read from.
        operation: Read operation the page needs, e.g. "getDiscussions".
        param: Request params of that operation (None for "getUsers").
        settings: Global settings. Loaded from .env if None.
        request_id: Id for log context. Generated if None.

    Returns:
        A HydrationCache with one entry for operation, or an empty one when
        HYDRATION_ENABLED is false.

    Raises:
        UnknownOperationError: If operation is not a read operation.
    """
    settings = settings or Settings()
    set_request_context(request_id or uuid.uuid4().hex[:12])

    cache = HydrationCache()
    if not settings.hydration_enabled:
        logger.debug("Hydration disabled, skipping prerender of %s", operation)
        return cache

    client = ForumClient(source, settings)
    data = await client.call(operation, param)

    if operation in _NO_PARAM_OPERATIONS:
        entry: CacheEntry[Any, Any] = CacheEntry.no_param(data)
    else:
        entry = CacheEntry(_served_param(operation, param, data), data)
    cache.put(operation, entry)

    logger.info("Prerendered %s for hydration", operation)
    return cache


def _served_param(operation: str, param: Any, data: Any) -> Any:
    """The request as the source served it.

    Fields the caller left unset are filled from the range of the response,
    so a later request that spells out the defaults still matches.
    """
    if param is None and operation == "getDiscussions":
        param = DiscussionsOptions()
    if not isinstance(param, BaseModel):
        return param
    served = {"sort": data.range.sort, "page": data.range.page_number}
    if isinstance(param, DiscussionsOptions):
        served["pagesize"] = data.range.page_size
    update = {
        name: value for name, value in served.items() if getattr(param, name) is None
    }
    return param.model_copy(update=update)


class HydratingClient:
    """ForumClient front that serves the first matching call from the cache.

    Each cached entry is used at most once; everything else, including a
    repeat of the same request, goes to the live client.
    """

    def __init__(self, client: ForumClient, cache: HydrationCache | None = None) -> None:
        self._client = client
        self._cache = cache

    async def get_discussions(self, options: DiscussionsOptions) -> Discussions:
        return await self._fetch("getDiscussions", options)

    async def get_discussion(self, options: DiscussionOptions) -> Discussion:
        return await self._fetch("getDiscussion", options)

    async def get_user_activity(self, options: UserActivityOptions) -> UserActivity:
        return await self._fetch("getUserActivity", options)

    async def get_users(self) -> list[UserSummary]:
        return await self._fetch("getUsers", None)

    async def _fetch(self, operation: str, param: Any) -> Any:
        if self._cache is not None:
            data = self._cache.take(operation, param)
            if data is not None:
                set_operation_context(operation)
                logger.debug("Hydrated %s from server-rendered data", operation)
                return data
        return await self._client.call(operation, param)
