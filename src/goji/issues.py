"""
Interfaces for accessing and managing issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Union

from .builder import SearchOptions
from .client import AGILE, API, EmptyResponse
from .rep import Board, CreateResponse, EditMeta, Issue, IssueResults


if TYPE_CHECKING:
    from .client import Jira


# -------------------------------------------------------------------------
# Request bodies
# -------------------------------------------------------------------------


@dataclass
class UserRef:
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass
class IssueTypeRef:
    id: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id}


@dataclass
class PriorityRef:
    id: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id}


@dataclass
class ProjectRef:
    key: str

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key}


@dataclass
class ComponentRef:
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass
class Fields:
    """
    Field values for a new issue.

    Unset optional fields are left out of the request so Jira applies its
    defaults. Custom fields go in ``extra`` keyed by their field id.
    """

    project: ProjectRef
    issuetype: IssueTypeRef
    summary: str
    description: Optional[str] = None
    environment: Optional[str] = None
    assignee: Optional[UserRef] = None
    reporter: Optional[UserRef] = None
    priority: Optional[PriorityRef] = None
    components: list[ComponentRef] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "project": self.project.to_dict(),
            "issuetype": self.issuetype.to_dict(),
            "summary": self.summary,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.environment is not None:
            data["environment"] = self.environment
        if self.assignee is not None:
            data["assignee"] = self.assignee.to_dict()
        if self.reporter is not None:
            data["reporter"] = self.reporter.to_dict()
        if self.priority is not None:
            data["priority"] = self.priority.to_dict()
        if self.components:
            data["components"] = [c.to_dict() for c in self.components]
        if self.labels:
            data["labels"] = list(self.labels)
        data.update(self.extra)
        return data


@dataclass
class CreateIssue:
    fields: Fields

    def to_dict(self) -> dict[str, Any]:
        return {"fields": self.fields.to_dict()}


@dataclass
class UpdateIssue:
    """
    Changes to an existing issue.

    ``fields`` replaces values outright; ``update`` holds operation lists
    such as ``{"labels": [{"add": "triaged"}]}``.
    """

    fields: dict[str, Any] = field(default_factory=dict)
    update: dict[str, list[dict[str, Any]]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.fields:
            data["fields"] = {
                k: v.to_dict() if hasattr(v, "to_dict") else v for k, v in self.fields.items()
            }
        if self.update:
            data["update"] = self.update
        return data


# -------------------------------------------------------------------------
# Interface
# -------------------------------------------------------------------------


class Issues:
    """Issue operations."""

    def __init__(self, jira: Jira):
        self.jira = jira

    async def get(self, id: str) -> Issue:
        return await self.jira.get(API, f"/issue/{id}", Issue)

    async def create(self, data: CreateIssue) -> CreateResponse:
        return await self.jira.post(API, "/issue", CreateResponse, data)

    async def update(self, id: str, data: UpdateIssue) -> None:
        # Jira answers a successful edit with 204 No Content
        await self.jira.accept_empty(self.jira.put(API, f"/issue/{id}", EmptyResponse, data))

    async def edit_meta(self, id: str) -> EditMeta:
        """Fields of the issue the caller is allowed to edit."""
        return await self.jira.get(API, f"/issue/{id}/editmeta", EditMeta)

    async def list(
        self, board: Union[Board, int], options: Optional[SearchOptions] = None
    ) -> IssueResults:
        """
        Return a single page of issues for a board.

        https://docs.atlassian.com/jira-software/REST/latest/#agile/1.0/board-getIssuesForBoard
        """
        board_id = board.id if isinstance(board, Board) else board
        path = f"/board/{board_id}/issue"
        query = options.serialize() if options else None
        if query:
            path = f"{path}?{query}"
        return await self.jira.get(AGILE, path, IssueResults)
