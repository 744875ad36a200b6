"""
Tests for the Transitions interface.
"""

import json

import pytest

from goji import DeserializationError, JiraError, NotFoundError, TransitionTriggerOptions


class TestListTransitions:
    @pytest.mark.asyncio
    async def test_list(self, jira, respond, sent, transitions_response):
        respond(200, transitions_response)

        options = await jira.transitions("ABC-1").list()

        method, url, _ = sent()
        assert method == "GET"
        assert url == "https://h/rest/api/latest/issue/ABC-1/transitions?expand=transitions.fields"
        assert [o.name for o in options] == ["Start Progress", "Resolve"]
        assert options[1].to.name == "Resolved"
        assert options[1].fields["resolution"].required is True

    @pytest.mark.asyncio
    async def test_list_missing_issue(self, jira, respond):
        respond(404, b"")

        with pytest.raises(NotFoundError):
            await jira.transitions("ABC-404").list()


class TestTriggerTransition:
    @pytest.mark.asyncio
    async def test_trigger_empty_body(self, jira, respond, sent):
        respond(204, b"")

        result = await jira.transitions("ABC-1").trigger(TransitionTriggerOptions.new("5"))

        method, url, kwargs = sent()
        assert result is None
        assert (method, url) == ("POST", "https://h/rest/api/latest/issue/ABC-1/transitions")
        assert json.loads(kwargs["data"]) == {"transition": {"id": "5"}, "fields": {}}

    @pytest.mark.asyncio
    async def test_trigger_empty_object(self, jira, respond):
        respond(200, {})

        assert await jira.transitions("ABC-1").trigger(TransitionTriggerOptions.new("5")) is None

    @pytest.mark.asyncio
    async def test_trigger_with_resolution(self, jira, respond, sent):
        respond(204, b"")
        options = TransitionTriggerOptions.builder("5").resolution("Fixed").build()

        await jira.transitions("ABC-1").trigger(options)

        _, _, kwargs = sent()
        assert json.loads(kwargs["data"]) == {
            "transition": {"id": "5"},
            "fields": {"resolution": {"name": "Fixed"}},
        }

    @pytest.mark.asyncio
    async def test_trigger_malformed_body_still_fails(self, jira, respond):
        respond(200, b"<html>proxy error</html>")

        with pytest.raises(DeserializationError):
            await jira.transitions("ABC-1").trigger(TransitionTriggerOptions.new("5"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 403, 409])
    async def test_trigger_empty_error_response_fails(self, jira, respond, status):
        respond(status, b"")

        with pytest.raises(JiraError) as exc_info:
            await jira.transitions("ABC-1").trigger(TransitionTriggerOptions.new("5"))

        assert exc_info.value.status == status
