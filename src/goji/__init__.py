"""
goji - An async client for the Jira REST API.

Usage::

    from goji import BasicCredentials, Jira

    async with Jira("https://jira.example.com", BasicCredentials("user", "pass")) as jira:
        issue = await jira.issues().get("ABC-1")
        for option in await jira.transitions("ABC-1").list():
            print(option.name, "->", option.to.name)
"""

from .boards import Boards
from .builder import (
    SearchOptions,
    SearchOptionsBuilder,
    TransitionTriggerOptions,
    TransitionTriggerOptionsBuilder,
)
from .client import (
    AGILE,
    API,
    EmptyResponse,
    Jira,
    RawResponse,
    classify_response,
    deserialize,
    serialize,
)
from .config import ConfigError, JiraConfig
from .credentials import BasicCredentials, Credentials
from .errors import (
    DeserializationError,
    FaultError,
    HttpError,
    JiraError,
    MethodNotAllowedError,
    NotFoundError,
    SerializationError,
    TransportError,
    UnauthorizedError,
)
from .issues import (
    ComponentRef,
    CreateIssue,
    Fields,
    Issues,
    IssueTypeRef,
    PriorityRef,
    ProjectRef,
    UpdateIssue,
    UserRef,
)
from .rep import (
    Attachment,
    Board,
    BoardResults,
    Comment,
    Comments,
    Component,
    CreateResponse,
    EditMeta,
    EditMetaField,
    Errors,
    Issue,
    IssueLink,
    IssueResults,
    IssueType,
    LinkType,
    Priority,
    Project,
    Resolution,
    SearchResults,
    Sprint,
    SprintResults,
    Status,
    StatusCategory,
    TimeTracking,
    TransitionField,
    TransitionOption,
    TransitionOptions,
    TransitionTo,
    User,
    Version,
)
from .resolution import ResolutionRef
from .search import Search
from .sprints import Sprints
from .transitions import Transitions


__version__ = "0.3.0"

__all__ = [
    # Client
    "Jira",
    "Credentials",
    "BasicCredentials",
    "JiraConfig",
    "RawResponse",
    "EmptyResponse",
    "API",
    "AGILE",
    "classify_response",
    "serialize",
    "deserialize",
    # Interfaces
    "Issues",
    "Transitions",
    "Search",
    "Boards",
    "Sprints",
    # Options
    "SearchOptions",
    "SearchOptionsBuilder",
    "TransitionTriggerOptions",
    "TransitionTriggerOptionsBuilder",
    # Request bodies
    "CreateIssue",
    "UpdateIssue",
    "Fields",
    "UserRef",
    "IssueTypeRef",
    "PriorityRef",
    "ProjectRef",
    "ComponentRef",
    "ResolutionRef",
    # Representations
    "Attachment",
    "Board",
    "BoardResults",
    "Comment",
    "Comments",
    "Component",
    "CreateResponse",
    "EditMeta",
    "EditMetaField",
    "Errors",
    "Issue",
    "IssueLink",
    "IssueResults",
    "IssueType",
    "LinkType",
    "Priority",
    "Project",
    "Resolution",
    "SearchResults",
    "Sprint",
    "SprintResults",
    "Status",
    "StatusCategory",
    "TimeTracking",
    "TransitionField",
    "TransitionOption",
    "TransitionOptions",
    "TransitionTo",
    "User",
    "Version",
    # Errors
    "JiraError",
    "HttpError",
    "UnauthorizedError",
    "MethodNotAllowedError",
    "NotFoundError",
    "FaultError",
    "TransportError",
    "SerializationError",
    "DeserializationError",
    "ConfigError",
]
