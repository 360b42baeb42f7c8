# src/wire/validation.py — v1
"""Checks for the users-table contract of wire payloads.

A well-formed payload lists every referenced user exactly once and lists no
one it does not reference. The denormalizer tolerates violations; these
helpers let callers detect them and decide whether to warn or refuse.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from pydantic import BaseModel, Field

from forumwire.core.models import UserSummary
from forumwire.wire.models import WireDiscussion, WireSummaries, WireUserActivity

WirePayload = WireSummaries | WireDiscussion


class WireContractError(ValueError):
    """Raised when a wire payload breaks the users-table contract."""


class WirePayloadReport(BaseModel):
    """Result of check_payload()."""

    duplicate_user_ids: list[int] = Field(default_factory=list)
    dangling_user_ids: list[int] = Field(default_factory=list)
    unreferenced_user_ids: list[int] = Field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (
            self.duplicate_user_ids
            or self.dangling_user_ids
            or self.unreferenced_user_ids
        )

    def describe(self) -> str:
        """One-line summary of the violations, empty when clean."""
        parts: list[str] = []
        if self.duplicate_user_ids:
            parts.append(f"duplicate users {self.duplicate_user_ids}")
        if self.dangling_user_ids:
            parts.append(f"missing users {self.dangling_user_ids}")
        if self.unreferenced_user_ids:
            parts.append(f"unreferenced users {self.unreferenced_user_ids}")
        return "; ".join(parts)


def referenced_user_ids(wire: WirePayload) -> list[int]:
    """Distinct userIds referenced by the payload's records, first-seen order."""
    if isinstance(wire, WireDiscussion):
        refs = [wire.first.user_id] + [m.user_id for m in wire.messages]
    else:
        refs = [d.user_id for d in wire.discussions]
    return list(dict.fromkeys(refs))


def find_duplicate_user_ids(users: Iterable[UserSummary]) -> list[int]:
    """Ids listed more than once in a users table."""
    counts = Counter(user.id for user in users)
    return [user_id for user_id, n in counts.items() if n > 1]


def find_dangling_user_ids(wire: WirePayload) -> list[int]:
    """Referenced userIds with no entry in the payload's users table."""
    known = {user.id for user in wire.users}
    return [user_id for user_id in referenced_user_ids(wire) if user_id not in known]


def find_unreferenced_user_ids(wire: WirePayload) -> list[int]:
    """Users in the table that no record references.

    For a user-activity payload the owner (users[0]) is exempt: it is there
    to identify whose activity this is, whether or not it authored a record.
    """
    users = list(wire.users)
    if isinstance(wire, WireUserActivity) and users:
        users = users[1:]
    referenced = set(referenced_user_ids(wire))
    return list(
        dict.fromkeys(user.id for user in users if user.id not in referenced)
    )


def check_payload(wire: WirePayload) -> WirePayloadReport:
    """Run every users-table check on a payload."""
    return WirePayloadReport(
        duplicate_user_ids=find_duplicate_user_ids(wire.users),
        dangling_user_ids=find_dangling_user_ids(wire),
        unreferenced_user_ids=find_unreferenced_user_ids(wire),
    )


def ensure_payload(wire: WirePayload) -> WirePayloadReport:
    """Like check_payload(), but raise if the payload is not clean.

    Raises:
        WireContractError: If any check fails.
    """
    report = check_payload(wire)
    if not report.is_clean:
        raise WireContractError(report.describe())
    return report
