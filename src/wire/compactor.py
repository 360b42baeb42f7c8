# src/wire/compactor.py — v1
"""Domain to wire compaction, used on the producing side.

Replaces each embedded UserSummary with its id and collects the users into a
table that lists each of them once, in the order they are first referenced.
"""

from __future__ import annotations

from collections.abc import Iterable

from forumwire.core.models import (
    Discussion,
    Discussions,
    DiscussionSummary,
    Message,
    UserActivity,
    UserSummary,
)
from forumwire.wire.models import (
    WireDiscussion,
    WireDiscussions,
    WireDiscussionSummaryRecord,
    WireMessage,
    WireUserActivity,
)
from forumwire.wire.validation import WireContractError


def compact_summaries(
    summaries: Iterable[DiscussionSummary],
) -> tuple[list[UserSummary], list[WireDiscussionSummaryRecord]]:
    """Split summaries into a deduplicated users table and wire records.

    Raises:
        WireContractError: If a summary has no user to reference.
    """
    users: dict[int, UserSummary] = {}
    records: list[WireDiscussionSummaryRecord] = []
    for summary in summaries:
        user = summary.message_summary.user_summary
        if user is None:
            raise WireContractError(f"discussion {summary.id} has no user")
        users.setdefault(user.id, user)
        records.append(
            WireDiscussionSummaryRecord(
                id=summary.id,
                name=summary.name,
                tags=list(summary.tags),
                user_id=user.id,
                message_excerpt=summary.message_summary.message_excerpt,
                date_time=summary.message_summary.date_time,
                n_answers=summary.n_answers,
            )
        )
    return list(users.values()), records


def compact_discussions(discussions: Discussions) -> WireDiscussions:
    users, records = compact_summaries(discussions.summaries)
    return WireDiscussions(users=users, discussions=records, range=discussions.range)


def compact_user_activity(activity: UserActivity) -> WireUserActivity:
    """Compact a user's activity, keeping the owner at the head of the table.

    Raises:
        WireContractError: If the activity has no owner or a summary has no user.
    """
    if activity.summary is None:
        raise WireContractError("user activity has no owner")
    owner = activity.summary
    users, records = compact_summaries(activity.summaries)
    table = [owner] + [user for user in users if user.id != owner.id]
    return WireUserActivity(
        users=table,
        discussions=records,
        range=activity.range,
        tag_counts=list(activity.tag_counts),
    )


def _compact_message(
    discussion_id: int, message: Message, users: dict[int, UserSummary]
) -> WireMessage:
    if message.user_summary is None:
        raise WireContractError(f"discussion {discussion_id}: a message has no user")
    if message.message_id is None:
        raise WireContractError(f"discussion {discussion_id}: a message has no id")
    users.setdefault(message.user_summary.id, message.user_summary)
    return WireMessage(
        message_id=message.message_id,
        user_id=message.user_summary.id,
        markdown=message.markdown,
        date_time=message.date_time,
    )


def compact_discussion(discussion: Discussion) -> WireDiscussion:
    """Compact a discussion page; its author comes first in the users table.

    Raises:
        WireContractError: If first or an answer has no user or no message id.
    """
    users: dict[int, UserSummary] = {}
    first = _compact_message(discussion.id, discussion.first, users)
    messages = [
        _compact_message(discussion.id, message, users)
        for message in discussion.messages
    ]
    return WireDiscussion(
        id=discussion.id,
        name=discussion.name,
        tags=list(discussion.tags),
        users=list(users.values()),
        first=first,
        range=discussion.range,
        messages=messages,
    )
