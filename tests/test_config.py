"""Tests for provider configuration."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from augury.config import DEFAULT_API_URL, ConfigError, ProviderConfig, mask_secret


class TestProviderConfig:
    def test_simulate_url(self) -> None:
        config = ProviderConfig(slug="acme", access_key="k", project_id="proj")
        assert config.simulate_url == f"{DEFAULT_API_URL}/account/acme/project/proj/simulate"

    def test_repr_hides_access_key(self) -> None:
        config = ProviderConfig(slug="acme", access_key="super-secret", project_id="proj")
        assert "super-secret" not in repr(config)

    def test_missing_fields(self) -> None:
        with pytest.raises(ConfigError, match="access_key, project_id"):
            ProviderConfig(slug="acme", access_key="", project_id="")

    def test_immutable(self) -> None:
        config = ProviderConfig(slug="acme", access_key="k", project_id="proj")
        with pytest.raises(AttributeError):
            config.slug = "other"  # type: ignore[misc]


class TestFromEnv:
    def test_environment(self, tmp_path: Path) -> None:
        env = {
            "TENDERLY_ACCOUNT_SLUG": "acme",
            "TENDERLY_ACCESS_KEY": "k",
            "TENDERLY_PROJECT_ID": "proj",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ProviderConfig.from_env(tmp_path / ".env")
        assert (config.slug, config.access_key, config.project_id) == ("acme", "k", "proj")
        assert config.api_url == DEFAULT_API_URL

    def test_env_file(self, tmp_path: Path) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text(
            "TENDERLY_ACCOUNT_SLUG=filed\nTENDERLY_ACCESS_KEY=fk\nTENDERLY_PROJECT_ID=fp\n",
            encoding="utf-8",
        )
        with patch.dict(os.environ, {"TENDERLY_ACCOUNT_SLUG": "from-env"}, clear=True):
            config = ProviderConfig.from_env(env_path)
        # environment wins over the file
        assert config.slug == "from-env"
        assert config.project_id == "fp"

    def test_incomplete(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ConfigError):
                ProviderConfig.from_env(tmp_path / ".env")


def test_mask_secret() -> None:
    assert mask_secret("abcdefgh") == "****efgh"
    assert mask_secret("abc") == "***"
