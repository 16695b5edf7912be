"""Tests for adaptive_chunking.config."""

import json

import pytest

from adaptive_chunking.config import ChunkingServiceConfig, load_chunking_config
from adaptive_chunking.exceptions import ConfigurationError


class TestLoadChunkingConfig:
    def test_bare_object(self, tmp_path):
        path = tmp_path / "chunking.json"
        path.write_text(json.dumps({"targets": {"baseline": 2000}}), encoding="utf-8")

        config = load_chunking_config(path)

        assert config.targets.baseline == 2000
        assert config.targets.dense_min == 1400

    def test_wrapped_settings_tree(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "chunking": {
                "enabled": False,
                "flush": {"minFillFactor": 0.5},
            }
        }), encoding="utf-8")

        config = load_chunking_config(str(path))

        assert config.enabled is False
        assert config.flush.min_fill_factor == 0.5

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigurationError) as exc_info:
            load_chunking_config(path)
        assert exc_info.value.path == str(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_chunking_config(path)

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_chunking_config(path)

    def test_inverted_bounds_rejected_at_load(self, tmp_path):
        path = tmp_path / "inverted.json"
        path.write_text(
            json.dumps({"targets": {"absoluteMin": 5000, "absoluteMax": 3800}}),
            encoding="utf-8",
        )
        with pytest.raises(ConfigurationError, match="failed validation") as exc_info:
            load_chunking_config(path)
        assert "absolute_min" in str(exc_info.value)
        assert exc_info.value.original_error is not None


class TestServiceConfigFromEnv:
    def test_defaults(self, clean_env):
        config = ChunkingServiceConfig.from_env()
        assert config.chunking.enabled is True
        assert config.log_level == "INFO"
        assert config.placeholder_page_text == ""

    def test_enabled_override(self, clean_env):
        clean_env.setenv("CHUNKING_ENABLED", "false")
        assert ChunkingServiceConfig.from_env().chunking.enabled is False

    def test_invalid_boolean(self, clean_env):
        clean_env.setenv("CHUNKING_ENABLED", "maybe")
        with pytest.raises(ConfigurationError, match="CHUNKING_ENABLED"):
            ChunkingServiceConfig.from_env()

    def test_config_path(self, clean_env, tmp_path):
        path = tmp_path / "chunking.json"
        path.write_text(json.dumps({"merge": {"smallSectionThreshold": 50}}), encoding="utf-8")
        clean_env.setenv("CHUNKING_CONFIG_PATH", str(path))

        config = ChunkingServiceConfig.from_env()

        assert config.chunking.merge.small_section_threshold == 50

    def test_enabled_override_applies_to_file_config(self, clean_env, tmp_path):
        path = tmp_path / "chunking.json"
        path.write_text(json.dumps({"enabled": True, "targets": {"baseline": 2000}}), encoding="utf-8")
        clean_env.setenv("CHUNKING_CONFIG_PATH", str(path))
        clean_env.setenv("CHUNKING_ENABLED", "0")

        config = ChunkingServiceConfig.from_env()

        assert config.chunking.enabled is False
        assert config.chunking.targets.baseline == 2000

    def test_log_level(self, clean_env):
        clean_env.setenv("CHUNKING_LOG_LEVEL", "debug")
        assert ChunkingServiceConfig.from_env().log_level == "DEBUG"

    def test_unknown_log_level(self, clean_env):
        clean_env.setenv("CHUNKING_LOG_LEVEL", "chatty")
        with pytest.raises(ConfigurationError, match="CHUNKING_LOG_LEVEL"):
            ChunkingServiceConfig.from_env()

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("CHUNKING_ENABLED=no\nCHUNKING_LOG_LEVEL=WARNING\n", encoding="utf-8")

        config = ChunkingServiceConfig.from_env(env_file)

        assert config.chunking.enabled is False
        assert config.log_level == "WARNING"
