"""Discord webhook client using aiohttp."""

import json
import sys
from typing import Any, Dict, Optional
from urllib.parse import quote

import aiohttp

from discord_webhook.domain.errors import UnknownFailure, WebhookHTTPError
from discord_webhook.ports.outbound import MessageOutcome


def _log(msg: str):
    print(msg, file=sys.stderr)


class DiscordWebhookClient:
    """Async client for one webhook URL (which embeds the webhook id and token).

    Every call is a single request with no retry. Failures come back as a
    failed MessageOutcome; nothing is raised.
    """

    def __init__(self, webhook_url: str):
        self.webhook_url = webhook_url.rstrip("/")

    def _message_url(self, message_id: str) -> str:
        return f"{self.webhook_url}/messages/{quote(message_id, safe='')}"

    async def _call(
        self,
        method: str,
        url: str,
        label: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None,
        expect_json: bool = True,
    ) -> MessageOutcome:
        # label stands in for the url in logs, the url carries the token
        _log(f"Discord webhook {method} {label}")
        try:
            async with aiohttp.ClientSession() as session:
                async with session.request(method, url, json=body, params=params) as resp:
                    text = await resp.text()
                    status = resp.status
                    reason = resp.reason or ""
        except Exception as e:
            _log(f"Discord webhook {method} {label} failed: {e!r}")
            return MessageOutcome.failed(UnknownFailure(message=str(e) or type(e).__name__))

        if not 200 <= status < 300:
            _log(f"Discord webhook {method} {label} -> {status} {reason}")
            return MessageOutcome.failed(
                WebhookHTTPError(status=status, status_text=reason, body=text)
            )

        if not expect_json or not text.strip():
            return MessageOutcome(success=True)
        try:
            data = json.loads(text)
        except ValueError as e:
            return MessageOutcome.failed(
                UnknownFailure(message=f"Invalid JSON in webhook response: {e}")
            )
        if not isinstance(data, dict):
            return MessageOutcome.failed(
                UnknownFailure(message=f"Unexpected webhook response: {text[:200]}")
            )
        return MessageOutcome.from_message(data)

    async def send(
        self,
        body: Dict[str, Any],
        params: Optional[Dict[str, str]] = None,
        wait: bool = True,
    ) -> MessageOutcome:
        """POST a new message. ``wait`` makes Discord echo the created message."""
        query: Dict[str, str] = {}
        if wait:
            query["wait"] = "true"
        query.update(params or {})
        label = "webhook"
        if query:
            label += "?" + "&".join(f"{k}={v}" for k, v in query.items())
        return await self._call(
            "POST", self.webhook_url, label, body=body, params=query or None, expect_json=wait
        )

    async def edit(self, message_id: str, body: Dict[str, Any]) -> MessageOutcome:
        return await self._call(
            "PATCH", self._message_url(message_id), f"webhook/messages/{message_id}", body=body
        )

    async def delete(self, message_id: str) -> MessageOutcome:
        """DELETE a message. Discord answers 204 with an empty body."""
        outcome = await self._call(
            "DELETE",
            self._message_url(message_id),
            f"webhook/messages/{message_id}",
            expect_json=False,
        )
        if outcome.success:
            outcome.message_id = message_id
        return outcome
