"""
Shared pytest fixtures for the goji test suite.

Fixture Categories:
- Transport: a mocked aiohttp session and a Jira client bound to it
- Responses: realistic Jira API payloads
"""

from __future__ import annotations

import json
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from goji import BasicCredentials, Jira


HOST = "https://h"


def make_response(status: int = 200, body: Any = b"") -> MagicMock:
    """
    Build a stand-in for an aiohttp ClientResponse.

    ``body`` may be raw bytes or any JSON-serializable value.
    """
    raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=raw)
    response.release = MagicMock()
    return response


# =============================================================================
# Transport
# =============================================================================


@pytest.fixture
def session() -> MagicMock:
    """A mocked aiohttp.ClientSession answering 200 with an empty object."""
    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    session.request = AsyncMock(return_value=make_response(200, {}))
    return session


@pytest.fixture
def respond(session: MagicMock) -> Callable[[int, Any], MagicMock]:
    """Set the next response returned by the mocked session."""

    def _respond(status: int = 200, body: Any = b"") -> MagicMock:
        response = make_response(status, body)
        session.request.return_value = response
        return response

    return _respond


@pytest.fixture
def credentials() -> BasicCredentials:
    return BasicCredentials("u", "p")


@pytest.fixture
def jira(session: MagicMock, credentials: BasicCredentials) -> Jira:
    """A Jira client whose requests go to the mocked session."""
    return Jira.from_session(HOST, credentials, session)


@pytest.fixture
def sent(session: MagicMock) -> Callable[[], tuple[str, str, dict[str, Any]]]:
    """Method, URL and keyword arguments of the last request."""

    def _sent() -> tuple[str, str, dict[str, Any]]:
        args, kwargs = session.request.call_args
        return args[0], args[1], kwargs

    return _sent


# =============================================================================
# Responses
# =============================================================================


@pytest.fixture
def user_response() -> dict:
    return {
        "self": "https://h/rest/api/2/user?username=doug",
        "name": "doug",
        "key": "doug",
        "displayName": "Doug Tangren",
        "emailAddress": "doug@example.com",
        "active": True,
        "timeZone": "America/New_York",
        "avatarUrls": {"48x48": "https://h/avatar/48"},
    }


@pytest.fixture
def status_response() -> dict:
    return {
        "self": "https://h/rest/api/2/status/3",
        "id": "3",
        "name": "In Progress",
        "description": "Work has started",
        "iconUrl": "https://h/images/inprogress.png",
        "statusCategory": {
            "self": "https://h/rest/api/2/statuscategory/4",
            "id": 4,
            "key": "indeterminate",
            "colorName": "yellow",
            "name": "In Progress",
        },
    }


@pytest.fixture
def issue_response(user_response: dict, status_response: dict) -> dict:
    """Mock response for the issue GET endpoint."""
    return {
        "self": "https://h/rest/api/2/issue/10001",
        "key": "ABC-1",
        "id": "10001",
        "expand": "renderedFields,names",
        "fields": {
            "summary": "Sample issue",
            "description": "Description here",
            "status": status_response,
            "reporter": user_response,
            "assignee": None,
            "labels": ["backend", "triaged"],
            "priority": {
                "self": "https://h/rest/api/2/priority/3",
                "id": "3",
                "name": "Major",
                "iconUrl": "https://h/images/major.svg",
            },
            "issuetype": {
                "self": "https://h/rest/api/2/issuetype/1",
                "id": "1",
                "name": "Bug",
                "subtask": False,
            },
            "project": {
                "self": "https://h/rest/api/2/project/10000",
                "id": "10000",
                "key": "ABC",
                "name": "Alphabet",
            },
            "fixVersions": [
                {"self": "https://h/rest/api/2/version/1", "id": "1", "name": "1.0", "released": True}
            ],
            "created": "2024-01-15T10:00:00.000+0000",
            "comment": {
                "comments": [
                    {
                        "self": "https://h/rest/api/2/issue/10001/comment/1",
                        "id": "1",
                        "body": "Looks good",
                        "author": user_response,
                        "created": "2024-01-16T10:00:00.000+0000",
                    }
                ],
                "total": 1,
                "maxResults": 50,
                "startAt": 0,
            },
        },
    }


@pytest.fixture
def issue_results_response(issue_response: dict) -> dict:
    """Mock response for the board issues endpoint."""
    return {
        "expand": "names,schema",
        "startAt": 0,
        "maxResults": 50,
        "total": 1,
        "issues": [issue_response],
    }


@pytest.fixture
def transitions_response() -> dict:
    """Mock response for available transitions."""
    return {
        "transitions": [
            {
                "id": "4",
                "name": "Start Progress",
                "to": {"id": "3", "name": "In Progress"},
                "fields": {},
            },
            {
                "id": "5",
                "name": "Resolve",
                "to": {"id": "5", "name": "Resolved"},
                "fields": {
                    "resolution": {
                        "required": True,
                        "name": "Resolution",
                        "schema": {"type": "resolution", "system": "resolution"},
                        "allowedValues": [{"name": "Fixed"}, {"name": "Won't Fix"}],
                    }
                },
            },
        ]
    }


@pytest.fixture
def create_issue_response() -> dict:
    return {
        "id": "10099",
        "key": "ABC-99",
        "self": "https://h/rest/api/2/issue/10099",
    }


@pytest.fixture
def board_response() -> dict:
    return {
        "self": "https://h/rest/agile/1.0/board/7",
        "id": 7,
        "name": "ABC board",
        "type": "scrum",
    }


@pytest.fixture
def sprint_response() -> dict:
    return {
        "self": "https://h/rest/agile/1.0/sprint/12",
        "id": 12,
        "name": "Sprint 12",
        "state": "active",
        "startDate": "2024-01-01T09:00:00.000Z",
        "endDate": "2024-01-14T17:00:00.000Z",
        "originBoardId": 7,
        "goal": "Ship it",
    }


@pytest.fixture
def errors_response() -> dict:
    return {
        "errorMessages": ["Field 'priority' is required"],
        "errors": {"summary": "You must specify a summary of the issue."},
    }
