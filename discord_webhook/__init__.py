"""Discord webhook messaging: validation, payloads and transport."""

from discord_webhook.config import ConfigError, WebhookConfig
from discord_webhook.adapters.webhook_client import DiscordWebhookClient
from discord_webhook.messages import delete_message, edit_message, send_message
from discord_webhook.ports.outbound import MessageOutcome

__all__ = [
    "ConfigError",
    "WebhookConfig",
    "DiscordWebhookClient",
    "MessageOutcome",
    "send_message",
    "edit_message",
    "delete_message",
]
