"""
Jira API Client - Transport core for the Jira REST API.

This handles the raw HTTP communication with Jira. Resource interfaces
(issues, transitions, search, boards, sprints) share one Jira instance and
delegate every call to ``Jira.request``, so status handling is uniform.

https://docs.atlassian.com/jira/REST/latest/
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Optional, Protocol, TypeVar

import aiohttp

from .credentials import BasicCredentials, Credentials
from .errors import (
    DeserializationError,
    FaultError,
    MethodNotAllowedError,
    NotFoundError,
    SerializationError,
    TransportError,
    UnauthorizedError,
)
from .rep import Errors


if TYPE_CHECKING:
    from .boards import Boards
    from .config import JiraConfig
    from .issues import Issues
    from .search import Search
    from .sprints import Sprints
    from .transitions import Transitions


T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

API = "api"
AGILE = "agile"


class Deserializable(Protocol[T_co]):
    """Anything that can be built from a decoded JSON document."""

    @classmethod
    def from_dict(cls, data: Any) -> T_co:
        ...


class EmptyResponse:
    """Target for calls that expect no meaningful content."""

    @classmethod
    def from_dict(cls, data: Any) -> EmptyResponse:
        return cls()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EmptyResponse)

    def __repr__(self) -> str:
        return "EmptyResponse()"


@dataclass(frozen=True)
class RawResponse:
    """Status and fully-read body of a completed HTTP exchange."""

    status: int
    body: bytes
    url: str = ""


# -------------------------------------------------------------------------
# JSON codec
# -------------------------------------------------------------------------


def serialize(payload: Any) -> bytes:
    """
    Encode a request payload as JSON bytes.

    Objects exposing ``to_dict`` are converted before encoding.

    Raises:
        SerializationError: If the payload cannot be represented as JSON.
    """
    data = payload.to_dict() if hasattr(payload, "to_dict") else payload
    try:
        return json.dumps(data).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not encode request body: {e}", cause=e) from e


def deserialize(body: bytes, target: type[Deserializable[T]]) -> T:
    """
    Decode a response body into ``target``.

    Raises:
        DeserializationError: On invalid JSON or a schema mismatch.
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DeserializationError(
            f"Response is not valid JSON: {e}", body=body, cause=e
        ) from e

    try:
        return target.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DeserializationError(
            f"Response does not match {target.__name__}: {e!r}", body=body, cause=e
        ) from e


def classify_response(status: int, body: bytes, target: type[Deserializable[T]]) -> T:
    """
    Map an HTTP status and body to a typed result or a typed error.

    Raises:
        UnauthorizedError: On 401.
        MethodNotAllowedError: On 405.
        NotFoundError: On 404.
        FaultError: On any other 4xx, with the decoded error body.
        DeserializationError: When the body does not decode.
    """
    if status == 401:
        raise UnauthorizedError()
    if status == 405:
        raise MethodNotAllowedError()
    if status == 404:
        raise NotFoundError()
    try:
        if 400 <= status < 500:
            raise FaultError(status, deserialize(body, Errors))
        return deserialize(body, target)
    except DeserializationError as e:
        e.status = status
        raise


# -------------------------------------------------------------------------
# Transport core
# -------------------------------------------------------------------------


class Jira:
    """
    Entrypoint into the client interface.

    Holds the host, credentials and a shared aiohttp session. Resource
    interfaces returned by ``issues()``, ``transitions()`` and friends reuse
    this instance; they never open connections of their own.

    Usage::

        async with Jira("https://jira.example.com", BasicCredentials(user, pw)) as jira:
            issue = await jira.issues().get("ABC-1")
    """

    def __init__(
        self,
        host: str,
        credentials: Credentials,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: Optional[aiohttp.ClientTimeout] = None,
    ):
        """
        Initialize the Jira client.

        Args:
            host: Jira instance URL (e.g., https://jira.example.com)
            credentials: Credentials attached to every request
            session: Existing session to share. When omitted one is created
                lazily on first use and closed by ``close()``.
            timeout: Passed through to the session this client creates
        """
        self.host = host.rstrip("/")
        self.credentials = credentials
        self.timeout = timeout
        self.logger = logging.getLogger("Jira")

        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_session(
        cls, host: str, credentials: Credentials, session: aiohttp.ClientSession
    ) -> Jira:
        """Create a client that uses a caller-managed session."""
        return cls(host, credentials, session=session)

    @classmethod
    def from_config(cls, config: JiraConfig) -> Jira:
        """Create a client from loaded configuration."""
        timeout = aiohttp.ClientTimeout(total=config.timeout) if config.timeout else None
        return cls(
            config.host,
            BasicCredentials(config.username, config.password),
            timeout=timeout,
        )

    def __repr__(self) -> str:
        return f"Jira(host={self.host!r}, credentials={self.credentials!r})"

    # -------------------------------------------------------------------------
    # Session Lifecycle
    # -------------------------------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            if not self._owns_session:
                raise TransportError("The shared session has been closed")
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def __aenter__(self) -> Jira:
        await self._get_session()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Resource Interfaces
    # -------------------------------------------------------------------------

    def issues(self) -> Issues:
        from .issues import Issues

        return Issues(self)

    def transitions(self, key: str) -> Transitions:
        from .transitions import Transitions

        return Transitions(self, key)

    def search(self) -> Search:
        from .search import Search

        return Search(self)

    def boards(self) -> Boards:
        from .boards import Boards

        return Boards(self)

    def sprints(self) -> Sprints:
        from .sprints import Sprints

        return Sprints(self)

    # -------------------------------------------------------------------------
    # Core Request Methods
    # -------------------------------------------------------------------------

    def url(self, api_name: str, endpoint: str) -> str:
        """Full URL for an endpoint within an API namespace."""
        if not endpoint.startswith("/"):
            raise ValueError(f"Endpoint must start with '/': {endpoint!r}")
        return f"{self.host}/rest/{api_name}/latest{endpoint}"

    async def execute(
        self,
        method: str,
        api_name: str,
        endpoint: str,
        body: Optional[bytes] = None,
    ) -> RawResponse:
        """
        Send a single authenticated request and read the full response.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            api_name: API namespace, ``api`` or ``agile``
            endpoint: Path below ``/rest/<api_name>/latest``, starting with '/'
            body: Raw request body

        Returns:
            The response status and body

        Raises:
            TransportError: If the request could not be completed
        """
        url = self.url(api_name, endpoint)
        self.logger.debug(f"url -> {url}")

        headers = {
            "Accept": "application/json",
            "Authorization": self.credentials.authorization_header(),
        }
        if body is not None:
            headers["Content-Type"] = "application/json"

        session = await self._get_session()
        try:
            response = await session.request(method, url, data=body, headers=headers)
            try:
                payload = await response.read()
            finally:
                response.release()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {url} failed: {e!r}", cause=e) from e

        self.logger.debug(f"{method} {url} -> {response.status}")
        return RawResponse(status=response.status, body=payload, url=url)

    async def request(
        self,
        method: str,
        api_name: str,
        endpoint: str,
        target: type[Deserializable[T]],
        body: Optional[bytes] = None,
    ) -> T:
        """
        Execute a request and decode the response into ``target``.

        See ``classify_response`` for the status handling.
        """
        response = await self.execute(method, api_name, endpoint, body)
        return classify_response(response.status, response.body, target)

    async def get(self, api_name: str, endpoint: str, target: type[Deserializable[T]]) -> T:
        return await self.request("GET", api_name, endpoint, target)

    async def delete(self, api_name: str, endpoint: str, target: type[Deserializable[T]]) -> T:
        return await self.request("DELETE", api_name, endpoint, target)

    async def post(
        self,
        api_name: str,
        endpoint: str,
        target: type[Deserializable[T]],
        payload: Any,
    ) -> T:
        data = serialize(payload)
        self.logger.debug(f"Json request: {data.decode('utf-8')}")
        return await self.request("POST", api_name, endpoint, target, data)

    async def put(
        self,
        api_name: str,
        endpoint: str,
        target: type[Deserializable[T]],
        payload: Any,
    ) -> T:
        data = serialize(payload)
        self.logger.debug(f"Json request: {data.decode('utf-8')}")
        return await self.request("PUT", api_name, endpoint, target, data)

    async def accept_empty(self, call: Awaitable[Any]) -> None:
        """
        Await a call whose success response carries no content.

        Jira answers some writes with an empty 2xx body, which cannot be
        decoded. Only that case counts as success; an empty error response or
        any other undecodable body is still raised.
        """
        try:
            await call
        except DeserializationError as e:
            if not e.is_empty_success:
                raise
            self.logger.debug("Empty response body treated as success")
