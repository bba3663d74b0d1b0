"""
Client configuration.

ClientConfig can be built directly or from NEIS_* environment variables.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://open.neis.go.kr"
DEFAULT_PAGE_SIZE = 1000
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "neis-client-python/0.3.0"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class ClientConfig:
    """
    Configuration for the NEIS API client.

    ``debug`` sets the ``neis_client`` logger to DEBUG for the whole process,
    so every client and fetch logs its pages; it is not reset on close.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    debug: bool = False
    strict_results: bool = False

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("api_key must not be empty")
        if self.page_size <= 0:
            raise ConfigurationError(f"page_size must be positive, got {self.page_size}")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build a config from environment variables.

        Reads NEIS_API_KEY (required), NEIS_BASE_URL, NEIS_PAGE_SIZE,
        NEIS_TIMEOUT and NEIS_STRICT_RESULTS.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ConfigurationError: If the key is missing or a value does not parse
        """
        env = os.environ if environ is None else environ

        api_key = env.get("NEIS_API_KEY")
        if not api_key:
            raise ConfigurationError("Environment variable NEIS_API_KEY is not set.")

        return cls(
            api_key=api_key,
            base_url=env.get("NEIS_BASE_URL", DEFAULT_BASE_URL),
            page_size=_parse_number(env, "NEIS_PAGE_SIZE", int, DEFAULT_PAGE_SIZE),
            timeout=_parse_number(env, "NEIS_TIMEOUT", float, DEFAULT_TIMEOUT),
            strict_results=_parse_bool(env, "NEIS_STRICT_RESULTS"),
        )


def _parse_number(env: Mapping[str, str], name: str, kind, default):
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} is not a valid {kind.__name__}: {raw!r}", cause=e) from e


def _parse_bool(env: Mapping[str, str], name: str) -> bool:
    raw = env.get(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} is not a boolean: {raw!r}")
