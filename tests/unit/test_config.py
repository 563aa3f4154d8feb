"""Unit tests for NotionConfig and environment bootstrap."""

import pytest

from saabel.notion import NotionConfig, config_from_env


class TestNotionConfig:
    """Test NotionConfig."""

    def test_defaults(self):
        """Test NotionConfig defaults."""
        config = NotionConfig(token="secret")
        assert config.base_url == "https://api.notion.com/v1"
        assert config.api_version == "2022-06-28"
        assert config.request_timeout == 30.0
        assert config.connect_timeout == 10.0

    def test_headers(self):
        """Test auth, version and content headers."""
        headers = NotionConfig(token="secret", api_version="2025-09-03").headers()
        assert headers["Authorization"] == "Bearer secret"
        assert headers["Notion-Version"] == "2025-09-03"
        assert headers["Content-Type"] == "application/json"

    def test_repr_hides_token(self):
        """Test repr masks the token."""
        assert "secret" not in repr(NotionConfig(token="secret"))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"token": ""},
            {"token": "   "},
            {"token": "t", "base_url": "api.notion.com"},
            {"token": "t", "request_timeout": 0},
            {"token": "t", "connect_timeout": -1},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test invalid settings raise ValueError."""
        with pytest.raises(ValueError):
            NotionConfig(**kwargs)


class TestConfigFromEnv:
    """Test config_from_env."""

    def test_reads_token_and_overrides(self):
        """Test config_from_env reads the token and overrides."""
        config = config_from_env(
            {
                "NOTION_API_TOKEN": " secret ",
                "NOTION_BASE_URL": "http://localhost:8080/v1",
                "NOTION_API_VERSION": "2025-09-03",
            }
        )
        assert config.token == "secret"
        assert config.base_url == "http://localhost:8080/v1"
        assert config.api_version == "2025-09-03"

    def test_defaults_when_optional_missing(self):
        """Test optional variables fall back to defaults."""
        config = config_from_env({"NOTION_API_TOKEN": "secret"})
        assert config.base_url == "https://api.notion.com/v1"

    def test_missing_token(self):
        """Test a missing token raises ValueError."""
        with pytest.raises(ValueError, match="NOTION_API_TOKEN"):
            config_from_env({})

    def test_process_environment(self, monkeypatch):
        """Test config_from_env reads os.environ by default."""
        monkeypatch.setenv("NOTION_API_TOKEN", "from-env")
        assert config_from_env().token == "from-env"
