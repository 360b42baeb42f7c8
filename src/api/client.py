# src/api/client.py — v1
"""Live client: fetch wire payloads from the data source and denormalize them.

The data source is a black box behind WireSource (HTTP, an in-memory mock,
a database adapter). It returns decoded JSON in the wire shape; this client
parses it, applies WIRE_VALIDATION and returns domain objects.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from forumwire.api.models import (
    DiscussionOptions,
    DiscussionsOptions,
    UserActivityOptions,
)
from forumwire.cache.hydration import OPERATIONS, UnknownOperationError
from forumwire.config.settings import Settings
from forumwire.core.models import Discussion, Discussions, UserActivity, UserSummary
from forumwire.logging.context import set_operation_context
from forumwire.wire.denormalizer import (
    denormalize_discussion,
    denormalize_discussions,
    denormalize_user_activity,
)
from forumwire.wire.models import WireDiscussion, WireDiscussions, WireUserActivity
from forumwire.wire.validation import WireContractError, WirePayload, check_payload

logger = logging.getLogger(__name__)

JsonObject = Mapping[str, Any]


class WireSource(Protocol):
    """Where wire payloads come from."""

    async def get_discussions(self, options: DiscussionsOptions) -> JsonObject: ...

    async def get_discussion(self, options: DiscussionOptions) -> JsonObject: ...

    async def get_user_activity(self, options: UserActivityOptions) -> JsonObject: ...

    async def get_users(self) -> Sequence[JsonObject]: ...


class ForumClient:
    """Read operations returning fully-linked domain objects.

    Raises pydantic.ValidationError if the source returns a payload that is
    not in the wire shape, and WireContractError for users-table violations
    when WIRE_VALIDATION=strict.
    """

    def __init__(self, source: WireSource, settings: Settings | None = None) -> None:
        self._source = source
        self._settings = settings or Settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    async def get_discussions(self, options: DiscussionsOptions) -> Discussions:
        set_operation_context("getDiscussions")
        wire = WireDiscussions.model_validate(
            await self._source.get_discussions(options)
        )
        self._check("getDiscussions", wire)
        return denormalize_discussions(wire)

    async def get_discussion(self, options: DiscussionOptions) -> Discussion:
        set_operation_context("getDiscussion")
        wire = WireDiscussion.model_validate(await self._source.get_discussion(options))
        self._check("getDiscussion", wire)
        return denormalize_discussion(wire)

    async def get_user_activity(self, options: UserActivityOptions) -> UserActivity:
        set_operation_context("getUserActivity")
        wire = WireUserActivity.model_validate(
            await self._source.get_user_activity(options)
        )
        self._check("getUserActivity", wire)
        return denormalize_user_activity(wire)

    async def get_users(self) -> list[UserSummary]:
        set_operation_context("getUsers")
        return [UserSummary.model_validate(user) for user in await self._source.get_users()]

    async def call(self, operation: str, param: Any = None) -> Any:
        """Dispatch by operation name, as used by prerender().

        Raises:
            UnknownOperationError: If operation is not a read operation.
        """
        if operation == "getDiscussions":
            return await self.get_discussions(param or DiscussionsOptions())
        if operation == "getDiscussion":
            return await self.get_discussion(param)
        if operation == "getUserActivity":
            return await self.get_user_activity(param)
        if operation == "getUsers":
            return await self.get_users()
        raise UnknownOperationError(
            f"Unknown operation: {operation!r}. Expected one of {list(OPERATIONS)}"
        )

    def _check(self, operation: str, wire: WirePayload) -> None:
        mode = self._settings.wire_validation
        if mode == "off":
            return
        report = check_payload(wire)
        if report.is_clean:
            return
        if mode == "strict":
            raise WireContractError(f"{operation}: {report.describe()}")
        logger.warning(
            "%s payload breaks the users-table contract: %s",
            operation, report.describe(),
            extra={"data": report.model_dump()},
        )
