# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides raw wire payloads (as decoded JSON), their parsed wire models and a
mock data source. No external dependencies — all I/O is mocked.
"""

from __future__ import annotations

import copy
from typing import Any
from unittest.mock import AsyncMock

import pytest

from forumwire.config.settings import Settings
from forumwire.wire.models import WireDiscussion, WireDiscussions, WireUserActivity


# === FIXTURES: Users ===


@pytest.fixture
def raw_users() -> list[dict[str, Any]]:
    """Three users as sent in a wire users table."""
    return [
        {"id": 1, "name": "Alice", "gravatarHash": "aa11", "location": "Paris"},
        {"id": 2, "name": "Bob", "gravatarHash": "bb22"},
        {"id": 3, "name": "Carol", "gravatarHash": "cc33"},
    ]


# === FIXTURES: Raw wire payloads ===


@pytest.fixture
def raw_discussions(raw_users: list[dict[str, Any]]) -> dict[str, Any]:
    """A discussion list page where Alice authored two of three rows."""
    return {
        "users": [raw_users[0], raw_users[1]],
        "discussions": [
            {
                "id": 10, "name": "How do I parse JSON?", "tags": [{"key": "python"}],
                "userId": 1, "messageExcerpt": "I have a string...",
                "dateTime": "2026-01-01T10:00:00Z", "nAnswers": 2,
            },
            {
                "id": 11, "name": "Sorting dicts", "tags": [{"key": "python"}, {"key": "dict"}],
                "userId": 2, "messageExcerpt": "What is the fastest way",
                "dateTime": "2026-01-02T10:00:00Z", "nAnswers": 0,
            },
            {
                "id": 12, "name": "Async generators", "tags": [],
                "userId": 1, "messageExcerpt": "When should I",
                "dateTime": "2026-01-03T10:00:00Z", "nAnswers": 5,
            },
        ],
        "range": {"nTotal": 3, "sort": "Newest", "pageSize": 15, "pageNumber": 1},
    }


@pytest.fixture
def raw_discussion(raw_users: list[dict[str, Any]]) -> dict[str, Any]:
    """A discussion started by Alice, answered by Bob then Alice."""
    return {
        "id": 10,
        "name": "How do I parse JSON?",
        "tags": [{"key": "python"}, {"key": "json"}],
        "users": [raw_users[0], raw_users[1]],
        "first": {
            "messageId": 100, "userId": 1,
            "markdown": "I have a string and want a dict.", "dateTime": "t0",
        },
        "range": {"nTotal": 2, "sort": "Oldest", "pageSize": 30, "pageNumber": 1},
        "messages": [
            {"messageId": 101, "userId": 2, "markdown": "Use `json.loads`.", "dateTime": "t1"},
            {"messageId": 102, "userId": 1, "markdown": "Thanks!", "dateTime": "t2"},
        ],
    }


@pytest.fixture
def raw_user_activity(raw_users: list[dict[str, Any]]) -> dict[str, Any]:
    """Carol's activity: she answered discussions started by Alice and Bob."""
    return {
        "users": [raw_users[2], raw_users[0], raw_users[1]],
        "discussions": [
            {
                "id": 20, "name": "Packaging", "tags": ["packaging"],
                "userId": 3, "messageExcerpt": "pyproject all the way",
                "dateTime": "t5", "nAnswers": 1,
            },
            {
                "id": 10, "name": "How do I parse JSON?", "tags": ["python"],
                "userId": 1, "messageExcerpt": "I have a string...",
                "dateTime": "t0", "nAnswers": 2,
            },
            {
                "id": 11, "name": "Sorting dicts", "tags": ["python"],
                "userId": 2, "messageExcerpt": "What is the fastest way",
                "dateTime": "t1", "nAnswers": 0,
            },
        ],
        "range": {"nTotal": 3, "sort": "Newest", "pageSize": 30, "pageNumber": 1},
        "tagCounts": [{"key": "python", "count": 2}, {"key": "packaging", "count": 1}],
    }


# === FIXTURES: Parsed wire models ===


@pytest.fixture
def wire_discussions(raw_discussions: dict[str, Any]) -> WireDiscussions:
    return WireDiscussions.model_validate(raw_discussions)


@pytest.fixture
def wire_discussion(raw_discussion: dict[str, Any]) -> WireDiscussion:
    return WireDiscussion.model_validate(raw_discussion)


@pytest.fixture
def wire_user_activity(raw_user_activity: dict[str, Any]) -> WireUserActivity:
    return WireUserActivity.model_validate(raw_user_activity)


# === FIXTURES: Data source & settings ===


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def mock_source(
    raw_users: list[dict[str, Any]],
    raw_discussions: dict[str, Any],
    raw_discussion: dict[str, Any],
    raw_user_activity: dict[str, Any],
) -> AsyncMock:
    """Mock WireSource returning the raw payloads above (fresh copies per call)."""
    source = AsyncMock()
    source.get_discussions = AsyncMock(side_effect=lambda *_: copy.deepcopy(raw_discussions))
    source.get_discussion = AsyncMock(side_effect=lambda *_: copy.deepcopy(raw_discussion))
    source.get_user_activity = AsyncMock(
        side_effect=lambda *_: copy.deepcopy(raw_user_activity)
    )
    source.get_users = AsyncMock(side_effect=lambda *_: copy.deepcopy(raw_users))
    return source
