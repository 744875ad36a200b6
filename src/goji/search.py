"""
Interface for JQL search.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .builder import SearchOptions
from .client import API
from .errors import SerializationError
from .rep import SearchResults


if TYPE_CHECKING:
    from .client import Jira


# option keys sent as JSON body members; values are converted from their query form
_BODY_KEYS = {
    "startAt": int,
    "maxResults": int,
    "fields": lambda v: v.split(",") if v else [],
    "expand": lambda v: v.split(",") if v else [],
    "validateQuery": lambda v: v == "true",
}


def search_body(jql: str, options: Optional[SearchOptions] = None) -> dict[str, Any]:
    """
    Build the POST /search body from a query and search options.

    Raises:
        SerializationError: When a numeric option does not hold a number.
    """
    body: dict[str, Any] = {"jql": jql}
    if options:
        for key, value in options.params.items():
            convert = _BODY_KEYS.get(key)
            if convert is None:
                continue
            try:
                body[key] = convert(value)
            except ValueError as e:
                raise SerializationError(f"Invalid {key} search option: {value!r}", cause=e) from e
    return body


class Search:
    """Issue search interface."""

    def __init__(self, jira: Jira):
        self.jira = jira

    async def list(self, jql: str, options: Optional[SearchOptions] = None) -> SearchResults:
        """
        Return a single page of issues matching ``jql``.

        https://docs.atlassian.com/jira/REST/latest/#api/2/search-searchUsingSearchRequest
        """
        return await self.jira.post(API, "/search", SearchResults, search_body(jql, options))
