# src/wire/denormalizer.py — v1
"""Wire to domain conversion.

Each function builds an id-indexed user table once per payload and resolves
every userId against it. A userId missing from the table resolves to None
instead of raising: the rendering layer then shows a message without an
author rather than an error page. Whether the producer may ever emit such a
payload is unresolved; wire.validation can report it.

All functions are pure. They do not log and never reorder sequences.
"""

from __future__ import annotations

from collections.abc import Iterable

from forumwire.core.models import (
    Discussion,
    Discussions,
    DiscussionSummary,
    Message,
    MessageSummary,
    UserActivity,
    UserSummary,
)
from forumwire.wire.models import (
    WireDiscussion,
    WireDiscussions,
    WireDiscussionSummaryRecord,
    WireMessage,
    WireSummaries,
    WireUserActivity,
)

UserTable = dict[int, UserSummary]


def resolve_user_table(users: Iterable[UserSummary]) -> UserTable:
    """Index users by id. If two entries share an id, the later one wins."""
    return {user.id: user for user in users}


def denormalize_summaries(
    table: UserTable,
    wire_summaries: Iterable[WireDiscussionSummaryRecord],
) -> list[DiscussionSummary]:
    """Resolve each record's userId into an embedded UserSummary.

    Args:
        table: Lookup built by resolve_user_table().
        wire_summaries: Records in display order.

    Returns:
        One DiscussionSummary per record, in input order. user_summary is
        None for a record whose userId is not in the table.
    """
    return [
        DiscussionSummary(
            id=wire.id,
            name=wire.name,
            tags=list(wire.tags),
            message_summary=MessageSummary(
                user_summary=table.get(wire.user_id),
                message_excerpt=wire.message_excerpt,
                date_time=wire.date_time,
            ),
            n_answers=wire.n_answers,
        )
        for wire in wire_summaries
    ]


def _denormalize_message(table: UserTable, wire: WireMessage) -> Message:
    return Message(
        message_id=wire.message_id,
        user_summary=table.get(wire.user_id),
        markdown=wire.markdown,
        date_time=wire.date_time,
    )


def _summaries_of(wire: WireSummaries) -> list[DiscussionSummary]:
    return denormalize_summaries(resolve_user_table(wire.users), wire.discussions)


def denormalize_discussions(wire: WireDiscussions) -> Discussions:
    """Convert one page of a discussion list."""
    return Discussions(range=wire.range, summaries=_summaries_of(wire))


def denormalize_discussion(wire: WireDiscussion) -> Discussion:
    """Convert a discussion page, resolving first and every answer."""
    table = resolve_user_table(wire.users)
    return Discussion(
        id=wire.id,
        name=wire.name,
        tags=list(wire.tags),
        first=_denormalize_message(table, wire.first),
        range=wire.range,
        messages=[_denormalize_message(table, message) for message in wire.messages],
    )


def denormalize_user_activity(wire: WireUserActivity) -> UserActivity:
    """Convert a user-activity payload.

    The activity's owner is taken to be the first user in the payload's
    table; the producer guarantees this ordering and it is not checked here.
    summary is None only when the table is empty.
    """
    return UserActivity(
        summary=wire.users[0] if wire.users else None,
        range=wire.range,
        summaries=_summaries_of(wire),
        tag_counts=list(wire.tag_counts),
    )
