"""Domain layer: schemas, payload rules and the error taxonomy."""

from discord_webhook.domain.errors import (
    DiscordWebhookError,
    InvalidParams,
    UnknownFailure,
    ValidationFailure,
    WebhookHTTPError,
    format_error,
)
from discord_webhook.domain.payload import (
    WebhookRequest,
    build_edit_request,
    build_send_request,
)
from discord_webhook.domain.schemas import (
    AllowedMentions,
    DeleteMessageParams,
    EditMessageParams,
    Embed,
    SendMessageParams,
)

__all__ = [
    "DiscordWebhookError",
    "InvalidParams",
    "UnknownFailure",
    "ValidationFailure",
    "WebhookHTTPError",
    "format_error",
    "WebhookRequest",
    "build_edit_request",
    "build_send_request",
    "AllowedMentions",
    "DeleteMessageParams",
    "EditMessageParams",
    "Embed",
    "SendMessageParams",
]
