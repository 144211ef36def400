"""Configuration loaded once at process start."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

WEBHOOK_URL_ENV = "DISCORD_WEBHOOK_URL"


class ConfigError(Exception):
    """Raised when required configuration is missing"""
    pass


@dataclass(frozen=True)
class WebhookConfig:
    """Typed configuration for the webhook server."""

    webhook_url: str

    @classmethod
    def from_env(cls) -> "WebhookConfig":
        """Create WebhookConfig from environment variables."""
        url = os.getenv(WEBHOOK_URL_ENV, "").strip()
        if not url:
            raise ConfigError(
                f"{WEBHOOK_URL_ENV} environment variable is not set\n"
                f"Please set {WEBHOOK_URL_ENV} before running this server"
            )
        return cls(webhook_url=url.rstrip("/"))
