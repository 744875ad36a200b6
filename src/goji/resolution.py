"""
Resolution references used when resolving issues.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ResolutionRef:
    """Names a resolution in request bodies."""

    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}
