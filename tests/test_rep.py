"""
Tests for resource representations.
"""

import pytest

from goji import (
    CreateResponse,
    DeserializationError,
    Errors,
    Issue,
    IssueLink,
    Sprint,
    Status,
    TransitionOption,
    User,
)


class TestIssue:
    """Tests for issue field accessors."""

    @pytest.fixture
    def issue(self, issue_response) -> Issue:
        return Issue.from_dict(issue_response)

    def test_identity(self, issue):
        assert issue.self_link == "https://h/rest/api/2/issue/10001"
        assert issue.key == "ABC-1"
        assert issue.id == "10001"
        assert issue.expand == "renderedFields,names"

    def test_string_fields(self, issue):
        assert issue.summary == "Sample issue"
        assert issue.description == "Description here"
        assert issue.created == "2024-01-15T10:00:00.000+0000"
        assert issue.updated is None
        assert issue.labels == ["backend", "triaged"]

    def test_status(self, issue):
        status = issue.status

        assert status.name == "In Progress"
        assert status.icon_url == "https://h/images/inprogress.png"
        assert status.status_category.color_name == "yellow"
        assert status.status_category.id == 4

    def test_users(self, issue):
        assert issue.reporter.display_name == "Doug Tangren"
        assert issue.reporter.email_address == "doug@example.com"
        assert issue.assignee is None
        assert issue.creator is None

    def test_typed_fields(self, issue):
        assert issue.priority.name == "Major"
        assert issue.issue_type.name == "Bug"
        assert issue.issue_type.subtask is False
        assert issue.project.key == "ABC"
        assert [v.name for v in issue.fix_versions] == ["1.0"]
        assert issue.fix_versions[0].released is True
        assert issue.affects_versions == []
        assert issue.components == []
        assert issue.resolution is None

    def test_comments(self, issue):
        comments = issue.comments

        assert comments.total == 1
        assert comments.comments[0].body == "Looks good"
        assert comments.comments[0].author.name == "doug"

    def test_custom_field(self, issue_response):
        issue_response["fields"]["customfield_10014"] = 5

        issue = Issue.from_dict(issue_response)

        assert issue.field("customfield_10014", int) == 5
        assert issue.field("customfield_99999", int) is None

    def test_links(self, issue_response):
        issue_response["fields"]["issuelinks"] = [
            {
                "id": "100",
                "type": {"id": "1", "name": "Blocks", "inward": "is blocked by", "outward": "blocks"},
                "outwardIssue": {"self": "https://h/rest/api/2/issue/2", "key": "ABC-2", "id": "2"},
            }
        ]

        links = Issue.from_dict(issue_response).links

        assert len(links) == 1
        assert isinstance(links[0], IssueLink)
        assert links[0].link_type.outward == "blocks"
        assert links[0].outward_issue.key == "ABC-2"
        assert links[0].inward_issue is None

    def test_parent_and_timetracking(self, issue_response):
        issue_response["fields"]["parent"] = {"self": "https://h/x", "key": "ABC-0", "id": "1"}
        issue_response["fields"]["timetracking"] = {
            "originalEstimate": "1d",
            "timeSpentSeconds": 3600,
        }

        issue = Issue.from_dict(issue_response)

        assert issue.parent.key == "ABC-0"
        assert issue.timetracking.original_estimate == "1d"
        assert issue.timetracking.time_spent_seconds == 3600

    def test_attachments(self, issue_response):
        issue_response["fields"]["attachment"] = [
            {
                "self": "https://h/rest/api/2/attachment/5",
                "id": "5",
                "filename": "log.txt",
                "content": "https://h/secure/attachment/5/log.txt",
                "size": 42,
                "mimeType": "text/plain",
            }
        ]

        attachment = Issue.from_dict(issue_response).attachments[0]

        assert attachment.filename == "log.txt"
        assert attachment.size == 42
        assert attachment.mime_type == "text/plain"

    @pytest.mark.parametrize("host", ["https://h", "https://h/"])
    def test_permalink(self, issue, host):
        assert issue.permalink(host) == "https://h/browse/ABC-1"

    def test_missing_fields_default_empty(self):
        issue = Issue.from_dict({"self": "https://h/x", "key": "ABC-1", "id": "1"})

        assert issue.fields == {}
        assert issue.summary is None
        assert issue.labels == []

    def test_partial_user_field_raises_deserialization_error(self):
        issue = Issue.from_dict({
            "self": "https://h/x",
            "key": "ABC-1",
            "id": "1",
            "fields": {"reporter": {"name": "doug", "key": "doug"}},
        })

        with pytest.raises(DeserializationError, match="reporter") as exc_info:
            issue.reporter

        assert isinstance(exc_info.value.cause, KeyError)

    def test_malformed_list_field_raises_deserialization_error(self):
        issue = Issue.from_dict({
            "self": "https://h/x",
            "key": "ABC-1",
            "id": "1",
            "fields": {"components": [{"name": "api"}]},
        })

        with pytest.raises(DeserializationError, match="components"):
            issue.components

    @pytest.mark.parametrize("missing", ["self", "key", "id"])
    def test_required_keys(self, issue_response, missing):
        del issue_response[missing]

        with pytest.raises(KeyError):
            Issue.from_dict(issue_response)


class TestRenamedKeys:
    """Wire names map to attribute names."""

    def test_create_response_self(self, create_issue_response):
        created = CreateResponse.from_dict(create_issue_response)

        assert created.url == "https://h/rest/api/2/issue/10099"
        assert created.to_dict() == create_issue_response

    def test_errors(self, errors_response):
        errors = Errors.from_dict(errors_response)

        assert errors.messages() == [
            "Field 'priority' is required",
            "summary: You must specify a summary of the issue.",
        ]
        assert errors.to_dict() == errors_response

    def test_user_optional_keys(self):
        user = User.from_dict({"self": "https://h/u", "displayName": "Ann", "accountId": "abc"})

        assert user.account_id == "abc"
        assert user.name is None
        assert user.active is True

    def test_status_without_category(self):
        status = Status.from_dict({"self": "https://h/s", "id": "1", "name": "Open"})

        assert status.status_category is None
        assert status.to_dict() == {
            "self": "https://h/s",
            "id": "1",
            "name": "Open",
            "description": "",
            "iconUrl": "",
        }

    def test_sprint_dates(self, sprint_response):
        sprint = Sprint.from_dict(sprint_response)

        assert sprint.start_date == "2024-01-01T09:00:00.000Z"
        assert sprint.to_dict() == sprint_response

    def test_transition_without_fields(self):
        option = TransitionOption.from_dict(
            {"id": "4", "name": "Start", "to": {"id": "3", "name": "In Progress"}}
        )

        assert option.fields == {}
        assert option.to.id == "3"
