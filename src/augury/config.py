"""
Provider configuration for the Tenderly simulation API.

Settings are supplied once by the host and never mutated. The CLI loads
them from the environment, falling back to ~/.augury/.env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Default config directory
AUGURY_DIR = Path.home() / ".augury"
AUGURY_ENV = AUGURY_DIR / ".env"

DEFAULT_API_URL = "https://api.tenderly.co/api/v1"

ENV_SLUG = "TENDERLY_ACCOUNT_SLUG"
ENV_ACCESS_KEY = "TENDERLY_ACCESS_KEY"
ENV_PROJECT_ID = "TENDERLY_PROJECT_ID"
ENV_API_URL = "TENDERLY_API_URL"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ProviderConfig:
    slug: str
    access_key: str = field(repr=False)
    project_id: str
    api_url: str = DEFAULT_API_URL

    def __post_init__(self) -> None:
        missing = [
            name
            for name, value in (
                ("slug", self.slug),
                ("access_key", self.access_key),
                ("project_id", self.project_id),
            )
            if not value
        ]
        if missing:
            raise ConfigError(f"Missing Tenderly settings: {', '.join(missing)}")

    @property
    def simulate_url(self) -> str:
        base = self.api_url.rstrip("/")
        return f"{base}/account/{self.slug}/project/{self.project_id}/simulate"

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "ProviderConfig":
        """
        Build a config from TENDERLY_* environment variables.

        Args:
            env_path: Path to .env file (default: ~/.augury/.env).
                      Variables already set in the environment win.

        Raises:
            ConfigError: If any of slug, access key or project id is missing
        """
        load_env(env_path)
        return cls(
            slug=os.environ.get(ENV_SLUG, ""),
            access_key=os.environ.get(ENV_ACCESS_KEY, ""),
            project_id=os.environ.get(ENV_PROJECT_ID, ""),
            api_url=os.environ.get(ENV_API_URL) or DEFAULT_API_URL,
        )


def load_env(env_path: Optional[Path] = None) -> None:
    """Load ~/.augury/.env (if present) without overriding the environment."""
    env_path = env_path or AUGURY_ENV
    if env_path.exists():
        load_dotenv(env_path, override=False)


def mask_secret(value: str, visible: int = 4) -> str:
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
