"""Send / edit / delete use cases: validate, build the payload, call the webhook."""

import sys
from typing import Any, Dict, List, Optional

from discord_webhook.domain.errors import InvalidParams
from discord_webhook.domain.limits import MAX_EMBED_TOTAL_CHARS
from discord_webhook.domain.payload import (
    build_edit_request,
    build_send_request,
    embed_text_length,
)
from discord_webhook.domain.schemas import (
    Embed,
    parse_delete_params,
    parse_edit_params,
    parse_send_params,
)
from discord_webhook.ports.outbound import MessageOutcome, WebhookPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def _warn_embed_budget(embeds: Optional[List[Embed]]) -> None:
    total = embed_text_length(embeds)
    if total > MAX_EMBED_TOTAL_CHARS:
        _log(
            f"Embeds total {total} characters (Discord limit {MAX_EMBED_TOTAL_CHARS}); "
            "the webhook will likely reject this message"
        )


async def send_message(client: WebhookPort, arguments: Dict[str, Any]) -> MessageOutcome:
    """Send a new message and return its id, channel and timestamp."""
    try:
        params = parse_send_params(arguments)
        request = build_send_request(params)
    except InvalidParams as e:
        return MessageOutcome.failed(e.failure)

    _warn_embed_budget(params.embeds)
    return await client.send(request.body, request.params, wait=True)


async def edit_message(client: WebhookPort, arguments: Dict[str, Any]) -> MessageOutcome:
    """Edit a message previously sent by this webhook."""
    try:
        params = parse_edit_params(arguments)
        request = build_edit_request(params)
    except InvalidParams as e:
        return MessageOutcome.failed(e.failure)

    _warn_embed_budget(params.embeds)
    outcome = await client.edit(params.message_id, request.body)
    if outcome.success and outcome.message_id is None:
        outcome.message_id = params.message_id
    return outcome


async def delete_message(client: WebhookPort, arguments: Dict[str, Any]) -> MessageOutcome:
    try:
        params = parse_delete_params(arguments)
    except InvalidParams as e:
        return MessageOutcome.failed(e.failure)
    return await client.delete(params.message_id)
