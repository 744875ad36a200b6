"""
Builders for request options.

SearchOptions are serialized as URL query parameters for listing endpoints
(and as a JSON body for search); TransitionTriggerOptions is the body posted
to trigger a transition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional
from urllib.parse import urlencode

from .resolution import ResolutionRef


@dataclass
class SearchOptions:
    """Options common to search and listing interfaces."""

    params: dict[str, str] = field(default_factory=dict)

    @classmethod
    def builder(cls) -> SearchOptionsBuilder:
        return SearchOptionsBuilder()

    def as_builder(self) -> SearchOptionsBuilder:
        """A builder seeded with these options."""
        return SearchOptionsBuilder(dict(self.params))

    def serialize(self) -> Optional[str]:
        """Form-encoded query string, or None when no option is set."""
        if not self.params:
            return None
        return urlencode(list(self.params.items()))

    def get(self, key: str) -> Optional[str]:
        return self.params.get(key)


class SearchOptionsBuilder:
    """
    Fluent builder for SearchOptions.

    Parameters are emitted in the order they were first set.
    """

    def __init__(self, params: Optional[dict[str, str]] = None):
        self._params: dict[str, str] = dict(params or {})

    def _set(self, key: str, value: str) -> SearchOptionsBuilder:
        self._params[key] = value
        return self

    def start_at(self, start: int) -> SearchOptionsBuilder:
        return self._set("startAt", str(start))

    def max_results(self, max_results: int) -> SearchOptionsBuilder:
        return self._set("maxResults", str(max_results))

    def fields(self, fields: Iterable[str]) -> SearchOptionsBuilder:
        return self._set("fields", ",".join(fields))

    def validate(self, validate: bool) -> SearchOptionsBuilder:
        return self._set("validateQuery", "true" if validate else "false")

    def expand(self, expand: Iterable[str]) -> SearchOptionsBuilder:
        return self._set("expand", ",".join(expand))

    def jql(self, jql: str) -> SearchOptionsBuilder:
        return self._set("jql", jql)

    def state(self, state: str) -> SearchOptionsBuilder:
        # sprint state filter: future, active, closed
        return self._set("state", state)

    def type(self, board_type: str) -> SearchOptionsBuilder:
        # board type filter: scrum, kanban
        return self._set("type", board_type)

    def name(self, name: str) -> SearchOptionsBuilder:
        return self._set("name", name)

    def project_key_or_id(self, project: str) -> SearchOptionsBuilder:
        return self._set("projectKeyOrId", project)

    def build(self) -> SearchOptions:
        return SearchOptions(dict(self._params))


@dataclass
class TransitionTriggerOptions:
    """
    Body for triggering an issue transition.

    To transition with a resolution use
    ``TransitionTriggerOptions.builder(id).resolution(name).build()``.
    """

    transition_id: str
    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def new(cls, transition_id: str) -> TransitionTriggerOptions:
        return cls(transition_id)

    @classmethod
    def builder(cls, transition_id: str) -> TransitionTriggerOptionsBuilder:
        return TransitionTriggerOptionsBuilder(transition_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "transition": {"id": self.transition_id},
            "fields": dict(self.fields),
        }


class TransitionTriggerOptionsBuilder:
    """Builder for TransitionTriggerOptions."""

    def __init__(self, transition_id: str):
        self._transition_id = transition_id
        self._fields: dict[str, Any] = {}

    def field(self, name: str, value: Any) -> TransitionTriggerOptionsBuilder:
        """Set a field value to accompany the transition."""
        self._fields[name] = value
        return self

    def resolution(self, name: str) -> TransitionTriggerOptionsBuilder:
        """Resolve the issue with the named resolution."""
        return self.field("resolution", ResolutionRef(name).to_dict())

    def build(self) -> TransitionTriggerOptions:
        return TransitionTriggerOptions(self._transition_id, dict(self._fields))
