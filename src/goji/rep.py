"""
Representations of Jira REST resources.

These mirror the JSON documents Jira returns. Wire names are camelCase and
the ``self`` link is exposed as ``self_link`` (``url`` on CreateResponse).
Required keys raise KeyError when absent, which the client reports as a
DeserializationError; optional keys fall back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeVar

from .errors import DeserializationError


T = TypeVar("T")


def _optional(data: dict[str, Any], key: str, parser: Callable[[Any], T]) -> Optional[T]:
    value = data.get(key)
    if value is None:
        return None
    return parser(value)


def _many(data: dict[str, Any], key: str, parser: Callable[[Any], T]) -> list[T]:
    return [parser(item) for item in data.get(key) or []]


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


# -------------------------------------------------------------------------
# Errors
# -------------------------------------------------------------------------


@dataclass
class Errors:
    """Error body returned by Jira for client errors."""

    error_messages: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Errors:
        return cls(
            error_messages=list(data["errorMessages"]),
            errors=dict(data["errors"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"errorMessages": list(self.error_messages), "errors": dict(self.errors)}

    def messages(self) -> list[str]:
        """Flatten into human-readable messages."""
        return list(self.error_messages) + [f"{k}: {v}" for k, v in self.errors.items()]


# -------------------------------------------------------------------------
# Issue field values
# -------------------------------------------------------------------------


@dataclass
class StatusCategory:
    self_link: str
    id: int
    key: str
    color_name: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StatusCategory:
        return cls(
            self_link=data["self"],
            id=int(data["id"]),
            key=data["key"],
            color_name=data["colorName"],
            name=data["name"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "self": self.self_link,
            "id": self.id,
            "key": self.key,
            "colorName": self.color_name,
            "name": self.name,
        }


@dataclass
class Status:
    self_link: str
    id: str
    name: str
    description: str = ""
    icon_url: str = ""
    status_category: Optional[StatusCategory] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Status:
        return cls(
            self_link=data["self"],
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            icon_url=data.get("iconUrl", ""),
            status_category=_optional(data, "statusCategory", StatusCategory.from_dict),
        )

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "self": self.self_link,
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "iconUrl": self.icon_url,
            "statusCategory": self.status_category.to_dict() if self.status_category else None,
        })


@dataclass
class User:
    self_link: str
    display_name: str
    active: bool = True
    name: Optional[str] = None
    key: Optional[str] = None
    account_id: Optional[str] = None
    email_address: Optional[str] = None
    time_zone: Optional[str] = None
    avatar_urls: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(
            self_link=data["self"],
            display_name=data["displayName"],
            active=bool(data.get("active", True)),
            name=data.get("name"),
            key=data.get("key"),
            account_id=data.get("accountId"),
            email_address=data.get("emailAddress"),
            time_zone=data.get("timeZone"),
            avatar_urls=dict(data.get("avatarUrls") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "self": self.self_link,
            "displayName": self.display_name,
            "active": self.active,
            "name": self.name,
            "key": self.key,
            "accountId": self.account_id,
            "emailAddress": self.email_address,
            "timeZone": self.time_zone,
            "avatarUrls": dict(self.avatar_urls),
        })


@dataclass
class Priority:
    self_link: str
    id: str
    name: str
    icon_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Priority:
        return cls(
            self_link=data["self"],
            id=data["id"],
            name=data["name"],
            icon_url=data.get("iconUrl", ""),
        )


@dataclass
class IssueType:
    self_link: str
    id: str
    name: str
    description: str = ""
    icon_url: str = ""
    subtask: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IssueType:
        return cls(
            self_link=data["self"],
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            icon_url=data.get("iconUrl", ""),
            subtask=bool(data.get("subtask", False)),
        )


@dataclass
class Project:
    self_link: str
    id: str
    key: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        return cls(
            self_link=data["self"],
            id=data["id"],
            key=data["key"],
            name=data["name"],
        )


@dataclass
class Component:
    self_link: str
    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Component:
        return cls(self_link=data["self"], id=data["id"], name=data["name"])


@dataclass
class Version:
    self_link: str
    id: str
    name: str
    archived: bool = False
    released: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Version:
        return cls(
            self_link=data["self"],
            id=data["id"],
            name=data["name"],
            archived=bool(data.get("archived", False)),
            released=bool(data.get("released", False)),
        )


@dataclass
class Resolution:
    self_link: str
    id: str
    name: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Resolution:
        return cls(
            self_link=data["self"],
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
        )


@dataclass
class Comment:
    self_link: str
    id: str
    body: Any
    author: Optional[User] = None
    update_author: Optional[User] = None
    created: Optional[str] = None
    updated: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Comment:
        return cls(
            self_link=data["self"],
            id=data["id"],
            body=data["body"],
            author=_optional(data, "author", User.from_dict),
            update_author=_optional(data, "updateAuthor", User.from_dict),
            created=data.get("created"),
            updated=data.get("updated"),
        )


@dataclass
class Comments:
    comments: list[Comment] = field(default_factory=list)
    total: int = 0
    max_results: int = 0
    start_at: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Comments:
        return cls(
            comments=_many(data, "comments", Comment.from_dict),
            total=int(data.get("total", 0)),
            max_results=int(data.get("maxResults", 0)),
            start_at=int(data.get("startAt", 0)),
        )


@dataclass
class Attachment:
    self_link: str
    id: str
    filename: str
    content: str
    size: int = 0
    mime_type: Optional[str] = None
    author: Optional[User] = None
    created: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Attachment:
        return cls(
            self_link=data["self"],
            id=data["id"],
            filename=data["filename"],
            content=data["content"],
            size=int(data.get("size", 0)),
            mime_type=data.get("mimeType"),
            author=_optional(data, "author", User.from_dict),
            created=data.get("created"),
        )


@dataclass
class LinkType:
    id: str
    name: str
    inward: str
    outward: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LinkType:
        return cls(
            id=data["id"],
            name=data["name"],
            inward=data["inward"],
            outward=data["outward"],
        )


@dataclass
class IssueLink:
    id: str
    link_type: LinkType
    inward_issue: Optional[Issue] = None
    outward_issue: Optional[Issue] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IssueLink:
        return cls(
            id=data["id"],
            link_type=LinkType.from_dict(data["type"]),
            inward_issue=_optional(data, "inwardIssue", Issue.from_dict),
            outward_issue=_optional(data, "outwardIssue", Issue.from_dict),
        )


@dataclass
class TimeTracking:
    original_estimate: Optional[str] = None
    remaining_estimate: Optional[str] = None
    time_spent: Optional[str] = None
    original_estimate_seconds: Optional[int] = None
    remaining_estimate_seconds: Optional[int] = None
    time_spent_seconds: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TimeTracking:
        return cls(
            original_estimate=data.get("originalEstimate"),
            remaining_estimate=data.get("remainingEstimate"),
            time_spent=data.get("timeSpent"),
            original_estimate_seconds=data.get("originalEstimateSeconds"),
            remaining_estimate_seconds=data.get("remainingEstimateSeconds"),
            time_spent_seconds=data.get("timeSpentSeconds"),
        )


# -------------------------------------------------------------------------
# Issues
# -------------------------------------------------------------------------


@dataclass
class Issue:
    """
    A Jira issue.

    Field values are kept as raw JSON in ``fields`` since their shape depends
    on the instance configuration; the accessors below parse the standard
    fields on demand and return None when a field is absent or null.
    """

    self_link: str
    key: str
    id: str
    fields: dict[str, Any] = field(default_factory=dict)
    expand: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Issue:
        return cls(
            self_link=data["self"],
            key=data["key"],
            id=data["id"],
            fields=dict(data.get("fields") or {}),
            expand=data.get("expand"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "self": self.self_link,
            "key": self.key,
            "id": self.id,
            "fields": dict(self.fields),
            "expand": self.expand,
        })

    def field(self, name: str, parser: Callable[[Any], T]) -> Optional[T]:
        """
        Parse a named field with ``parser``, or None when it is unset.

        Raises:
            DeserializationError: When the field is present but does not parse.
        """
        try:
            return _optional(self.fields, name, parser)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DeserializationError(
                f"Field {name!r} of {self.key} does not parse: {e!r}",
                body=json.dumps(self.fields.get(name), default=str).encode("utf-8"),
                cause=e,
            ) from e

    def permalink(self, host: str) -> str:
        """Browser link to this issue on ``host``."""
        return f"{host.rstrip('/')}/browse/{self.key}"

    def _string(self, name: str) -> Optional[str]:
        return self.field(name, str)

    def _items(self, name: str, parser: Callable[[Any], T]) -> list[T]:
        return self.field(name, lambda items: [parser(item) for item in items]) or []

    @property
    def summary(self) -> Optional[str]:
        return self._string("summary")

    @property
    def description(self) -> Optional[Any]:
        # Cloud returns ADF documents, Server returns wiki markup strings
        return self.fields.get("description")

    @property
    def environment(self) -> Optional[str]:
        return self._string("environment")

    @property
    def created(self) -> Optional[str]:
        return self._string("created")

    @property
    def updated(self) -> Optional[str]:
        return self._string("updated")

    @property
    def resolution_date(self) -> Optional[str]:
        return self._string("resolutiondate")

    @property
    def due_date(self) -> Optional[str]:
        return self._string("duedate")

    @property
    def labels(self) -> list[str]:
        return list(self.fields.get("labels") or [])

    @property
    def status(self) -> Optional[Status]:
        return self.field("status", Status.from_dict)

    @property
    def priority(self) -> Optional[Priority]:
        return self.field("priority", Priority.from_dict)

    @property
    def issue_type(self) -> Optional[IssueType]:
        return self.field("issuetype", IssueType.from_dict)

    @property
    def reporter(self) -> Optional[User]:
        return self.field("reporter", User.from_dict)

    @property
    def assignee(self) -> Optional[User]:
        return self.field("assignee", User.from_dict)

    @property
    def creator(self) -> Optional[User]:
        return self.field("creator", User.from_dict)

    @property
    def resolution(self) -> Optional[Resolution]:
        return self.field("resolution", Resolution.from_dict)

    @property
    def project(self) -> Optional[Project]:
        return self.field("project", Project.from_dict)

    @property
    def parent(self) -> Optional[Issue]:
        return self.field("parent", Issue.from_dict)

    @property
    def timetracking(self) -> Optional[TimeTracking]:
        return self.field("timetracking", TimeTracking.from_dict)

    @property
    def comments(self) -> Optional[Comments]:
        return self.field("comment", Comments.from_dict)

    @property
    def components(self) -> list[Component]:
        return self._items("components", Component.from_dict)

    @property
    def fix_versions(self) -> list[Version]:
        return self._items("fixVersions", Version.from_dict)

    @property
    def affects_versions(self) -> list[Version]:
        return self._items("versions", Version.from_dict)

    @property
    def attachments(self) -> list[Attachment]:
        return self._items("attachment", Attachment.from_dict)

    @property
    def links(self) -> list[IssueLink]:
        return self._items("issuelinks", IssueLink.from_dict)


@dataclass
class IssueResults:
    """A single page of issues for a board."""

    expand: str
    max_results: int
    start_at: int
    total: int
    issues: list[Issue] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IssueResults:
        return cls(
            expand=data["expand"],
            max_results=int(data["maxResults"]),
            start_at=int(data["startAt"]),
            total=int(data["total"]),
            issues=[Issue.from_dict(i) for i in data["issues"]],
        )


@dataclass
class SearchResults:
    """A single page of JQL search results."""

    total: int
    max_results: int
    start_at: int
    issues: list[Issue] = field(default_factory=list)
    expand: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchResults:
        return cls(
            total=int(data["total"]),
            max_results=int(data["maxResults"]),
            start_at=int(data["startAt"]),
            issues=[Issue.from_dict(i) for i in data["issues"]],
            expand=data.get("expand"),
        )


@dataclass
class CreateResponse:
    id: str
    key: str
    url: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CreateResponse:
        return cls(id=data["id"], key=data["key"], url=data["self"])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "key": self.key, "self": self.url}


# -------------------------------------------------------------------------
# Transitions
# -------------------------------------------------------------------------


@dataclass
class TransitionTo:
    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransitionTo:
        return cls(id=data["id"], name=data["name"])


@dataclass
class TransitionField:
    required: bool
    name: Optional[str] = None
    schema: dict[str, Any] = field(default_factory=dict)
    allowed_values: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransitionField:
        return cls(
            required=bool(data["required"]),
            name=data.get("name"),
            schema=dict(data.get("schema") or {}),
            allowed_values=list(data.get("allowedValues") or []),
        )


@dataclass
class TransitionOption:
    """A transition that can be applied to an issue."""

    id: str
    name: str
    to: TransitionTo
    fields: dict[str, TransitionField] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransitionOption:
        return cls(
            id=data["id"],
            name=data["name"],
            to=TransitionTo.from_dict(data["to"]),
            fields={
                name: TransitionField.from_dict(value)
                for name, value in (data.get("fields") or {}).items()
            },
        )


@dataclass
class TransitionOptions:
    transitions: list[TransitionOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransitionOptions:
        return cls(transitions=[TransitionOption.from_dict(t) for t in data["transitions"]])


# -------------------------------------------------------------------------
# Edit metadata
# -------------------------------------------------------------------------


@dataclass
class EditMetaField:
    required: bool
    name: str
    schema: dict[str, Any] = field(default_factory=dict)
    key: Optional[str] = None
    operations: list[str] = field(default_factory=list)
    allowed_values: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EditMetaField:
        return cls(
            required=bool(data["required"]),
            name=data["name"],
            schema=dict(data.get("schema") or {}),
            key=data.get("key"),
            operations=list(data.get("operations") or []),
            allowed_values=list(data.get("allowedValues") or []),
        )


@dataclass
class EditMeta:
    """Fields of an issue that the current user may edit."""

    fields: dict[str, EditMetaField] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EditMeta:
        return cls(
            fields={name: EditMetaField.from_dict(value) for name, value in data["fields"].items()}
        )


# -------------------------------------------------------------------------
# Agile
# -------------------------------------------------------------------------


@dataclass
class Board:
    self_link: str
    id: int
    name: str
    type: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Board:
        return cls(
            self_link=data["self"],
            id=int(data["id"]),
            name=data["name"],
            type=data["type"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"self": self.self_link, "id": self.id, "name": self.name, "type": self.type}


@dataclass
class BoardResults:
    max_results: int
    start_at: int
    is_last: bool
    values: list[Board] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoardResults:
        return cls(
            max_results=int(data["maxResults"]),
            start_at=int(data["startAt"]),
            is_last=bool(data["isLast"]),
            values=[Board.from_dict(b) for b in data["values"]],
        )


@dataclass
class Sprint:
    self_link: str
    id: int
    name: str
    state: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    complete_date: Optional[str] = None
    origin_board_id: Optional[int] = None
    goal: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Sprint:
        return cls(
            self_link=data["self"],
            id=int(data["id"]),
            name=data["name"],
            state=data.get("state"),
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            complete_date=data.get("completeDate"),
            origin_board_id=data.get("originBoardId"),
            goal=data.get("goal"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "self": self.self_link,
            "id": self.id,
            "name": self.name,
            "state": self.state,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "completeDate": self.complete_date,
            "originBoardId": self.origin_board_id,
            "goal": self.goal,
        })


@dataclass
class SprintResults:
    max_results: int
    start_at: int
    is_last: bool
    values: list[Sprint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SprintResults:
        return cls(
            max_results=int(data["maxResults"]),
            start_at=int(data["startAt"]),
            is_last=bool(data["isLast"]),
            values=[Sprint.from_dict(s) for s in data["values"]],
        )
