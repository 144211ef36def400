"""Port interfaces (Hexagonal Architecture)."""

from discord_webhook.ports.outbound import MessageOutcome, WebhookPort

__all__ = [
    "MessageOutcome",
    "WebhookPort",
]
