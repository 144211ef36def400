"""Global state for the MCP server: configuration and webhook client."""

from __future__ import annotations

import sys
from typing import Optional

from discord_webhook.adapters.webhook_client import DiscordWebhookClient
from discord_webhook.config import WebhookConfig
from discord_webhook.ports.outbound import WebhookPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class AppState:
    """Holds the immutable config and the client built from it."""

    def __init__(self, config: WebhookConfig, client: Optional[WebhookPort] = None):
        self.config = config
        if client is None:
            client = DiscordWebhookClient(config.webhook_url)
        self.client: WebhookPort = client
        _log("Discord webhook MCP state initialized.")


# Module-level singleton
_state: Optional[AppState] = None


def get_state() -> AppState:
    """Return the shared state, reading the environment on first use.

    Raises ConfigError when DISCORD_WEBHOOK_URL is missing.
    """
    global _state
    if _state is None:
        _state = AppState(WebhookConfig.from_env())
    return _state


def set_state(state: Optional[AppState]) -> None:
    global _state
    _state = state
