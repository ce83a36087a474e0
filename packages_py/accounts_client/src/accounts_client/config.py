"""
Configuration for accounts_client.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import invalid_configuration

logger = logging.getLogger("accounts_client.config")

SERVICE_PATH = "v1/organisation/accounts"
JSON_CONTENT_TYPE = "application/json"


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 5.0
    read: float = 30.0
    write: float = 10.0


@dataclass
class ClientConfig:
    """Client configuration."""

    base_url: str
    timeout: Union[TimeoutConfig, float, None] = None
    headers: Dict[str, str] = field(default_factory=dict)
    content_type: str = JSON_CONTENT_TYPE


# Default values
DEFAULT_TIMEOUT = TimeoutConfig()


class AccountsClientSettings(BaseSettings):
    """Client settings loaded from ``ACCOUNTS_SERVICE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNTS_SERVICE_",
        extra="ignore",
        case_sensitive=False,
    )

    base_url: str = Field(
        default="http://localhost:8080",
        min_length=1,
        description="Base address of the accounts service.",
    )
    connect_timeout: float = Field(default=DEFAULT_TIMEOUT.connect, gt=0)
    read_timeout: float = Field(default=DEFAULT_TIMEOUT.read, gt=0)
    write_timeout: float = Field(default=DEFAULT_TIMEOUT.write, gt=0)

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(
            base_url=self.base_url,
            timeout=TimeoutConfig(
                connect=self.connect_timeout,
                read=self.read_timeout,
                write=self.write_timeout,
            ),
        )


class DefaultSerializer:
    """Default JSON serializer."""

    def serialize(self, data: Any) -> bytes:
        """Serialize data to UTF-8 JSON bytes."""
        return json.dumps(data).encode("utf-8")


default_serializer = DefaultSerializer()


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        return DEFAULT_TIMEOUT
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout)
    return timeout


def validate_base_url(base_url: Optional[str]) -> None:
    """Raise InvalidConfiguration unless base_url is an absolute URL."""
    if not base_url or not isinstance(base_url, str):
        raise invalid_configuration()

    try:
        parsed = urlparse(base_url)
    except ValueError as e:
        raise invalid_configuration(e) from e

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        logger.debug(f"validate_base_url: rejected base_url={base_url!r}")
        raise invalid_configuration()


@dataclass
class ResolvedConfig:
    """Resolved client configuration with defaults applied."""

    base_url: str
    timeout: TimeoutConfig
    headers: Dict[str, str]
    content_type: str


def resolve_config(config: ClientConfig) -> ResolvedConfig:
    """Resolve client configuration with defaults."""
    validate_base_url(config.base_url)

    return ResolvedConfig(
        base_url=config.base_url.rstrip("/"),
        timeout=normalize_timeout(config.timeout),
        headers=dict(config.headers),
        content_type=config.content_type or JSON_CONTENT_TYPE,
    )
