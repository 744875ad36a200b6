"""
Interfaces for accessing and managing transitions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .builder import TransitionTriggerOptions
from .client import API, EmptyResponse
from .rep import TransitionOption, TransitionOptions


if TYPE_CHECKING:
    from .client import Jira


class Transitions:
    """Issue transition interface, bound to a single issue key."""

    def __init__(self, jira: Jira, key: str):
        self.jira = jira
        self.key = key

    async def list(self) -> list[TransitionOption]:
        """Return the transitions available for this issue."""
        options = await self.jira.get(
            API, f"/issue/{self.key}/transitions?expand=transitions.fields", TransitionOptions
        )
        return options.transitions

    async def trigger(self, trans: TransitionTriggerOptions) -> None:
        """
        Trigger an issue transition.

        To transition with a resolution use
        ``TransitionTriggerOptions.builder(id).resolution(name).build()``.
        Jira replies with an empty body on success, which is not an error.
        """
        await self.jira.accept_empty(
            self.jira.post(API, f"/issue/{self.key}/transitions", EmptyResponse, trans)
        )
