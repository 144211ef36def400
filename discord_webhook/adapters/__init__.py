"""Adapters for external systems."""

from discord_webhook.adapters.webhook_client import DiscordWebhookClient

__all__ = ["DiscordWebhookClient"]
