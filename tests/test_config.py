"""Tests for configuration loading."""

import logging

from cssfirst.config import CACHE_TTL_SECONDS, EngineConfig, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self, tmp_path):
        """Without overrides the defaults apply."""
        config = load_config(str(tmp_path / "missing.env"))
        assert config.cache.ttl_seconds == CACHE_TTL_SECONDS == 3600
        assert config.max_results == 5
        assert config.docs.enabled is True
        assert config.ranking.intent_match == 10

    def test_environment_overrides(self, monkeypatch, tmp_path):
        """CSSFIRST_* variables override defaults."""
        monkeypatch.setenv("CSSFIRST_CACHE_TTL", "60")
        monkeypatch.setenv("CSSFIRST_MAX_RESULTS", "3")
        monkeypatch.setenv("CSSFIRST_MDN_BASE_URL", "https://mirror.test/css/")
        monkeypatch.setenv("CSSFIRST_OFFLINE", "yes")
        config = load_config(str(tmp_path / "missing.env"))
        assert config.cache.ttl_seconds == 60
        assert config.max_results == 3
        assert config.docs.mdn_base_url == "https://mirror.test/css"
        assert config.docs.enabled is False

    def test_malformed_number_is_ignored(self, monkeypatch, tmp_path, caplog):
        """A malformed number keeps the default and logs a warning."""
        monkeypatch.setenv("CSSFIRST_DOCS_TIMEOUT", "soon")
        with caplog.at_level(logging.WARNING, logger="cssfirst.config"):
            config = load_config(str(tmp_path / "missing.env"))
        assert config.docs.timeout_seconds == 10
        assert "CSSFIRST_DOCS_TIMEOUT" in caplog.text

    def test_dotenv_file(self, tmp_path):
        """Values can come from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("CSSFIRST_MAX_RESULTS=7\n")
        assert load_config(str(env_file)).max_results == 7

    def test_configs_do_not_share_state(self):
        """Nested defaults are independent per instance."""
        first, second = EngineConfig(), EngineConfig()
        first.docs.enabled = False
        assert second.docs.enabled is True
