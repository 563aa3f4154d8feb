"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.notion.com/v1"
DEFAULT_API_VERSION = "2022-06-28"
DEFAULT_USER_AGENT = "saabel-notion"


@dataclass(frozen=True)
class NotionConfig:
    """Connection settings for one API integration.

    The token is always passed explicitly; see ``saabel.notion.bootstrap``
    for reading it from the environment.

    Attributes:
        token: Integration token sent as a bearer credential
        base_url: API root, without trailing slash
        api_version: Value of the ``Notion-Version`` header
        user_agent: Value of the ``User-Agent`` header
        request_timeout: Total seconds allowed per transport call
        connect_timeout: Seconds allowed to establish a connection
    """

    token: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = 30.0
    connect_timeout: float = 10.0

    def __post_init__(self) -> None:
        if not self.token or not self.token.strip():
            raise ValueError("token must be a non-empty string")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be positive")

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Notion-Version": self.api_version,
            "User-Agent": self.user_agent,
            "Content-Type": "application/json",
        }

    def __repr__(self) -> str:
        return (
            f"NotionConfig(token='***', base_url={self.base_url!r}, "
            f"api_version={self.api_version!r})"
        )
