# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

These are the fully-linked shapes handed to the rendering layer: every user
reference is an embedded UserSummary, never a bare id. Wire shapes live in
wire.models and are converted by wire.denormalizer.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)
from pydantic.alias_generators import to_camel


class ForumModel(BaseModel):
    """Base model: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# === IDENTIFIERS ===


class IdName(ForumModel):
    """Numeric id plus display name (users, discussions, images)."""

    id: int
    name: str


class Key(ForumModel):
    """Tag key as it appears in a discussion's tag list."""

    key: str

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_key(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"key": data}
        return data


# === USERS & TAGS ===


class UserSummary(ForumModel):
    """Public summary of a user. Immutable once emitted by the data source."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int
    name: str
    gravatar_hash: str = ""
    location: str | None = None


class TagCount(ForumModel):
    """A tag key with its usage count and optional summary."""

    key: str
    summary: str | None = None
    count: int


# === RANGES ===


class _Range(ForumModel):
    """Pagination window of an unlimited-length list."""

    n_total: int
    page_size: int
    page_number: int  # 1-based


class DiscussionsRange(_Range):
    sort: Literal["Active", "Newest"]


class DiscussionRange(_Range):
    sort: Literal["Oldest", "Newest"]


class ActivityRange(_Range):
    sort: Literal["Oldest", "Newest"]


# === DISCUSSIONS ===

EXCERPT_ALIASES = AliasChoices("messageExcerpt", "messageExerpt", "message_excerpt")


class MessageSummary(ForumModel):
    """Author, excerpt and timestamp of the message a summary points at.

    user_summary is None when the wire record referenced a user missing
    from its payload's users table.
    """

    user_summary: UserSummary | None
    message_excerpt: str = Field(
        validation_alias=EXCERPT_ALIASES, serialization_alias="messageExcerpt"
    )
    date_time: str


class DiscussionSummary(ForumModel):
    """One row of a discussion list."""

    id: int
    name: str
    tags: list[Key] = Field(default_factory=list)
    message_summary: MessageSummary
    n_answers: int


class Message(ForumModel):
    """A full message inside a discussion.

    message_id is carried over from the wire so the message can be compacted
    again; it is None for messages built without one.
    """

    message_id: int | None = None
    user_summary: UserSummary | None
    markdown: str
    date_time: str


class Discussion(ForumModel):
    """A discussion with its first message and one page of answers."""

    id: int
    name: str
    tags: list[Key] = Field(default_factory=list)
    first: Message
    range: DiscussionRange
    messages: list[Message] = Field(default_factory=list)

    @property
    def owner(self) -> UserSummary | None:
        """The user who started the discussion."""
        return self.first.user_summary


class Discussions(ForumModel):
    """One page of discussion summaries."""

    range: DiscussionsRange
    summaries: list[DiscussionSummary] = Field(default_factory=list)


# === USER ACTIVITY ===


class UserActivity(ForumModel):
    """A user's recent discussions and tag usage.

    Fetched separately from the user profile because it can be long.
    """

    summary: UserSummary | None
    range: ActivityRange
    summaries: list[DiscussionSummary] = Field(default_factory=list)
    tag_counts: list[TagCount] = Field(default_factory=list)
