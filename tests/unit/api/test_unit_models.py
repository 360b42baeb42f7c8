# tests/unit/api/test_unit_models.py — v1
"""Tests for api/models.py — request option models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from forumwire.api.models import DiscussionOptions, DiscussionsOptions, UserActivityOptions
from forumwire.core.models import IdName


class TestDiscussionsOptions:
    def test_defaults(self):
        o = DiscussionsOptions()
        assert o.sort is None
        assert o.pagesize is None
        assert o.model_fields_set == set()

    def test_pagesize_restricted(self):
        assert DiscussionsOptions(pagesize=30).pagesize == 30
        with pytest.raises(ValidationError):
            DiscussionsOptions(pagesize=20)

    def test_page_is_one_based(self):
        with pytest.raises(ValidationError):
            DiscussionsOptions(page=0)


class TestDiscussionOptions:
    def test_requires_discussion(self):
        with pytest.raises(ValidationError):
            DiscussionOptions()

    def test_sort(self):
        o = DiscussionOptions(discussion=IdName(id=1, name="Q"), sort="Newest")
        assert o.sort == "Newest"


class TestUserActivityOptions:
    def test_tab_type_fixed(self):
        o = UserActivityOptions(user=IdName(id=1, name="A"))
        assert o.user_tab_type == "Activity"
        with pytest.raises(ValidationError):
            UserActivityOptions(user=IdName(id=1, name="A"), user_tab_type="Profile")

    def test_camel_case_keys(self):
        o = UserActivityOptions.model_validate(
            {"user": {"id": 3, "name": "Carol"}, "userTabType": "Activity", "sort": "Newest"}
        )
        assert o.user_tab_type == "Activity"
        assert o.model_dump(by_alias=True)["userTabType"] == "Activity"
