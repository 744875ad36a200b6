"""
Interfaces for agile boards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .builder import SearchOptions
from .client import AGILE
from .rep import Board, BoardResults


if TYPE_CHECKING:
    from .client import Jira


class Boards:
    """Board operations."""

    def __init__(self, jira: Jira):
        self.jira = jira

    async def get(self, id: int) -> Board:
        return await self.jira.get(AGILE, f"/board/{id}", Board)

    async def list(self, options: Optional[SearchOptions] = None) -> BoardResults:
        """
        Return a single page of boards.

        https://docs.atlassian.com/jira-software/REST/latest/#agile/1.0/board-getAllBoards
        """
        path = "/board"
        query = options.serialize() if options else None
        if query:
            path = f"{path}?{query}"
        return await self.jira.get(AGILE, path, BoardResults)
