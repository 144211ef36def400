"""Outbound ports: the webhook transport interface and its result type."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from discord_webhook.domain.errors import DiscordWebhookError


@dataclass
class MessageOutcome:
    """Unified result type for message operations."""

    success: bool
    message_id: Optional[str] = None
    channel_id: Optional[str] = None
    timestamp: Optional[str] = None
    error: Optional[DiscordWebhookError] = None

    @classmethod
    def failed(cls, error: DiscordWebhookError) -> "MessageOutcome":
        return cls(success=False, error=error)

    @classmethod
    def from_message(cls, data: Optional[Dict[str, Any]]) -> "MessageOutcome":
        """Build a success from the message object echoed by Discord."""
        if not data:
            return cls(success=True)
        return cls(
            success=True,
            message_id=data.get("id"),
            channel_id=data.get("channel_id"),
            timestamp=data.get("timestamp"),
        )

    def to_structured(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error.to_dict() if self.error else None}
        payload: Dict[str, Any] = {"success": True, "message_id": self.message_id}
        if self.channel_id is not None:
            payload["channel_id"] = self.channel_id
        if self.timestamp is not None:
            payload["timestamp"] = self.timestamp
        return payload


@runtime_checkable
class WebhookPort(Protocol):
    """Interface for webhook transports. Implementations never raise."""

    async def send(
        self,
        body: Dict[str, Any],
        params: Optional[Dict[str, str]] = None,
        wait: bool = True,
    ) -> MessageOutcome: ...

    async def edit(self, message_id: str, body: Dict[str, Any]) -> MessageOutcome: ...

    async def delete(self, message_id: str) -> MessageOutcome: ...
