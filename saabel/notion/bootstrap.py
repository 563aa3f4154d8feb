"""Environment-sourced configuration.

The only place the library reads the process environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from .config import DEFAULT_API_VERSION, DEFAULT_BASE_URL, NotionConfig

TOKEN_VAR = "NOTION_API_TOKEN"
BASE_URL_VAR = "NOTION_BASE_URL"
API_VERSION_VAR = "NOTION_API_VERSION"


def config_from_env(environ: Mapping[str, str] | None = None) -> NotionConfig:
    """Build a NotionConfig from environment variables.

    Raises:
        ValueError: NOTION_API_TOKEN is missing or blank
    """
    env = os.environ if environ is None else environ
    token = env.get(TOKEN_VAR, "").strip()
    if not token:
        raise ValueError(f"{TOKEN_VAR} is not set")
    return NotionConfig(
        token=token,
        base_url=env.get(BASE_URL_VAR) or DEFAULT_BASE_URL,
        api_version=env.get(API_VERSION_VAR) or DEFAULT_API_VERSION,
    )
