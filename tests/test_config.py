"""Tests for config loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from imv.config import load_config
from imv.schemas.config import ImvConfig
from imv.schemas.exports import PlatformId


class TestImvConfig:
    """Test the ImvConfig Pydantic model directly."""

    def test_defaults(self) -> None:
        cfg = ImvConfig()
        assert cfg.model == "gpt-4o"
        assert cfg.max_tokens == 2000
        assert cfg.temperature == 0.7
        assert cfg.platforms == list(PlatformId)
        assert cfg.history_limit == 10
        assert cfg.output_directory == "./output"

    def test_requires_at_least_one_platform(self) -> None:
        with pytest.raises(ValidationError, match="platform"):
            ImvConfig(platforms=[])

    def test_unknown_platform_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ImvConfig(platforms=["myspace"])

    def test_temperature_range(self) -> None:
        with pytest.raises(ValidationError):
            ImvConfig(temperature=1.5)

    def test_max_tokens_positive(self) -> None:
        with pytest.raises(ValidationError):
            ImvConfig(max_tokens=0)


class TestLoadConfig:
    """Test YAML file loading."""

    def test_load_valid_file(self, tmp_config: Path) -> None:
        cfg = load_config(tmp_config)
        assert cfg.model == "gpt-4o-mini"
        assert cfg.platforms == [PlatformId.CHATGPT, PlatformId.GENERIC]

    def test_file_not_found(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("just a string")
        with pytest.raises(ValueError, match="YAML mapping"):
            load_config(bad)

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.yml"
        empty.write_text("")
        assert load_config(empty) == ImvConfig()

    def test_null_platforms_use_default(self, tmp_path: Path) -> None:
        """A platforms key with only commented-out items loads as None."""
        cfg_file = tmp_path / "config.yml"
        cfg_file.write_text(
            """\
model: "gpt-4o"
platforms:
  # - copilot
"""
        )
        cfg = load_config(cfg_file)
        assert cfg.platforms == list(PlatformId)
