# src/api/models.py — v1
"""API-level models: the request parameters of each read operation.

These are the params a HydrationCache entry is keyed by. Like the domain
models they accept camelCase keys (userTabType) as well as field names.
Cache matching compares their direct fields only, so nested values
(IdName) are compared with plain model equality.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from forumwire.core.models import ForumModel, IdName


class DiscussionsOptions(ForumModel):
    """Discussion list: sort tab and page."""

    sort: Literal["Active", "Newest"] | None = None
    pagesize: Literal[15, 30, 50] | None = None
    page: int | None = Field(default=None, ge=1)


class DiscussionOptions(ForumModel):
    """A single discussion: which one, answer order and page."""

    discussion: IdName
    sort: Literal["Oldest", "Newest"] | None = None
    page: int | None = Field(default=None, ge=1)


class UserActivityOptions(ForumModel):
    """Activity tab of a user's profile."""

    user: IdName
    user_tab_type: Literal["Activity"] = "Activity"
    sort: Literal["Oldest", "Newest"] | None = None
    page: int | None = Field(default=None, ge=1)
