"""
Interfaces for agile sprints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Union

from .builder import SearchOptions
from .client import AGILE, EmptyResponse
from .rep import Board, Sprint, SprintResults


if TYPE_CHECKING:
    from .client import Jira


class Sprints:
    """Sprint operations."""

    def __init__(self, jira: Jira):
        self.jira = jira

    async def get(self, id: int) -> Sprint:
        return await self.jira.get(AGILE, f"/sprint/{id}", Sprint)

    async def list(
        self, board: Union[Board, int], options: Optional[SearchOptions] = None
    ) -> SprintResults:
        """
        Return a single page of sprints for a board.

        https://docs.atlassian.com/jira-software/REST/latest/#agile/1.0/board-getAllSprints
        """
        board_id = board.id if isinstance(board, Board) else board
        path = f"/board/{board_id}/sprint"
        query = options.serialize() if options else None
        if query:
            path = f"{path}?{query}"
        return await self.jira.get(AGILE, path, SprintResults)

    async def move_issues(self, sprint_id: int, issues: Iterable[str]) -> None:
        """
        Move issues into a sprint.

        https://docs.atlassian.com/jira-software/REST/latest/#agile/1.0/sprint-moveIssuesToSprint
        """
        payload = {"issues": list(issues)}
        await self.jira.accept_empty(
            self.jira.post(AGILE, f"/sprint/{sprint_id}/issue", EmptyResponse, payload)
        )
