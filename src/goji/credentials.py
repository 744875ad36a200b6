"""
Authentication credentials attached to every request.
"""

import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Credentials(ABC):
    """Types of authentication credentials."""

    @abstractmethod
    def authorization_header(self) -> str:
        """Value for the HTTP Authorization header."""
        ...


@dataclass(frozen=True)
class BasicCredentials(Credentials):
    """Username and password credentials (HTTP Basic auth)."""

    username: str
    password: str = field(repr=False)

    def authorization_header(self) -> str:
        token = base64.b64encode(f"{self.username}:{self.password}".encode()).decode()
        return f"Basic {token}"
