# src/wire/models.py — v1
"""Wire models: the compacted shapes in which forum data leaves the server.

Records reference users by userId instead of embedding them, so a user who
authored many items is sent only once, in the payload's users table.
"""

from __future__ import annotations

from pydantic import Field

from forumwire.core.models import (
    EXCERPT_ALIASES,
    ActivityRange,
    DiscussionRange,
    DiscussionsRange,
    ForumModel,
    Key,
    TagCount,
    UserSummary,
)


class WireDiscussionSummaryRecord(ForumModel):
    """A discussion summary with its author replaced by userId."""

    id: int
    name: str
    tags: list[Key] = Field(default_factory=list)
    user_id: int
    message_excerpt: str = Field(
        validation_alias=EXCERPT_ALIASES, serialization_alias="messageExcerpt"
    )
    date_time: str
    n_answers: int


class WireSummaries(ForumModel):
    users: list[UserSummary] = Field(default_factory=list)
    discussions: list[WireDiscussionSummaryRecord] = Field(default_factory=list)


class WireDiscussions(WireSummaries):
    range: DiscussionsRange


class WireMessage(ForumModel):
    message_id: int
    user_id: int
    markdown: str
    date_time: str


class WireDiscussion(ForumModel):
    """A discussion page; users holds every author of first and messages."""

    id: int
    name: str
    tags: list[Key] = Field(default_factory=list)
    users: list[UserSummary] = Field(default_factory=list)
    first: WireMessage
    range: DiscussionRange
    messages: list[WireMessage] = Field(default_factory=list)


class WireUserActivity(WireSummaries):
    """Activity of one user. The owner is users[0]."""

    range: ActivityRange
    tag_counts: list[TagCount] = Field(default_factory=list)
