"""
Client configuration.

Settings can come from:
- Environment variables (JIRA_HOST, JIRA_USER, JIRA_PASS, JIRA_TIMEOUT)
- A YAML file with a ``jira:`` section
- A TOML file with a ``[jira]`` table, or ``[tool.goji.jira]`` in pyproject.toml

Environment variables override file values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml


try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for older Python

from .errors import JiraError


logger = logging.getLogger("JiraConfig")

ENV_KEYS = {
    "host": "JIRA_HOST",
    "username": "JIRA_USER",
    "password": "JIRA_PASS",
    "timeout": "JIRA_TIMEOUT",
}


class ConfigError(JiraError):
    """Configuration could not be read or is malformed."""
    pass


def _parse_timeout(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout: {value!r}", cause=e) from e
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive: {value!r}")
    return timeout


@dataclass
class JiraConfig:
    """Connection settings for a Jira instance."""

    host: str = ""
    username: str = ""
    password: str = ""
    timeout: Optional[float] = None  # seconds, None leaves aiohttp's default

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.host:
            errors.append("Missing Jira host (JIRA_HOST)")
        elif not self.host.startswith(("http://", "https://")):
            errors.append(f"Jira host must be an http(s) URL: {self.host}")
        if not self.username:
            errors.append("Missing Jira username (JIRA_USER)")
        if not self.password:
            errors.append("Missing Jira password (JIRA_PASS)")

        return errors

    def is_valid(self) -> bool:
        return not self.validate()

    def merged(self, overrides: Mapping[str, Any]) -> JiraConfig:
        """Copy of this config with non-empty ``overrides`` applied."""
        values = {
            "host": self.host,
            "username": self.username,
            "password": self.password,
            "timeout": self.timeout,
        }
        for key, value in overrides.items():
            if key in values and value not in (None, ""):
                values[key] = value
        values["timeout"] = _parse_timeout(values["timeout"])
        return JiraConfig(**values)

    # -------------------------------------------------------------------------
    # Loaders
    # -------------------------------------------------------------------------

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> JiraConfig:
        """Load settings from environment variables."""
        env = os.environ if environ is None else environ
        return cls().merged({key: env.get(name) for key, name in ENV_KEYS.items()})

    @classmethod
    def from_file(cls, path: Path | str) -> JiraConfig:
        """
        Load settings from a YAML or TOML file.

        Raises:
            ConfigError: If the file is missing or cannot be parsed
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")

        if path.suffix in (".yaml", ".yml"):
            try:
                data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}", cause=e) from e
        elif path.suffix == ".toml":
            try:
                data = tomllib.loads(path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {path}: {e}", cause=e) from e
            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("goji", {})
        else:
            raise ConfigError(f"Unsupported config format: {path.suffix or path.name}")

        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping: {path}")
        section = data.get("jira", {})
        if not isinstance(section, dict):
            raise ConfigError(f"'jira' section must be a mapping: {path}")

        logger.debug(f"Loaded config from {path}")
        return cls().merged(section)

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> JiraConfig:
        """Load file settings (when given) and apply environment overrides."""
        config = cls.from_file(path) if path is not None else cls()
        env = os.environ if environ is None else environ
        return config.merged({key: env.get(name) for key, name in ENV_KEYS.items()})
