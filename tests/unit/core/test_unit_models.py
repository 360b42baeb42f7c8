# tests/unit/core/test_unit_models.py — v1
"""Tests for core/models.py — domain model construction and aliases."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from forumwire.core.models import (
    Discussion,
    DiscussionRange,
    Key,
    Message,
    MessageSummary,
    TagCount,
    UserSummary,
)


class TestKey:
    def test_from_dict(self):
        assert Key.model_validate({"key": "python"}).key == "python"

    def test_from_bare_string(self):
        assert Key.model_validate("python").key == "python"


class TestUserSummary:
    def test_aliases(self):
        u = UserSummary.model_validate({"id": 1, "name": "Alice", "gravatarHash": "ff"})
        assert u.gravatar_hash == "ff"
        assert u.location is None

    def test_frozen(self):
        u = UserSummary(id=1, name="Alice")
        with pytest.raises(ValidationError):
            u.name = "Mallory"

    def test_extra_fields_kept(self):
        u = UserSummary.model_validate({"id": 1, "name": "Alice", "tags": [{"key": "x"}]})
        assert u.model_dump(by_alias=True)["tags"] == [{"key": "x"}]


class TestMessageSummary:
    def test_user_may_be_absent(self):
        m = MessageSummary(user_summary=None, message_excerpt="e", date_time="t")
        assert m.user_summary is None
        assert m.model_dump(by_alias=True)["userSummary"] is None


class TestDiscussion:
    def test_owner_is_first_author(self):
        alice = UserSummary(id=1, name="Alice")
        d = Discussion(
            id=1, name="Q",
            first=Message(user_summary=alice, markdown="m", date_time="t"),
            range=DiscussionRange(n_total=0, sort="Oldest", page_size=30, page_number=1),
        )
        assert d.owner == alice
        assert d.messages == []
        assert d.tags == []


class TestTagCount:
    def test_optional_summary(self):
        t = TagCount(key="python", count=3)
        assert t.summary is None
