"""Wire payload construction for the webhook endpoint.

Discord treats a present key as "set this field", so optional values are
left out entirely instead of being sent as null or empty.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from discord_webhook.domain.errors import InvalidParams, ValidationFailure
from discord_webhook.domain.schemas import (
    AllowedMentions,
    EditMessageParams,
    Embed,
    SendMessageParams,
)

CONTENT_OR_EMBEDS = "content/embeds"


@dataclass
class WebhookRequest:
    """JSON body plus the query parameters that travel outside of it."""

    body: Dict[str, Any]
    params: Dict[str, str] = field(default_factory=dict)


def require_content_or_embeds(params: Union[SendMessageParams, EditMessageParams]) -> None:
    """Raise InvalidParams unless there is text or at least one embed."""
    if params.content or params.embeds:
        return
    raise InvalidParams(
        ValidationFailure(
            field=CONTENT_OR_EMBEDS,
            message="At least one of content or embeds must be provided",
        )
    )


def _dump_embeds(embeds: List[Embed]) -> List[Dict[str, Any]]:
    return [embed.model_dump(exclude_none=True) for embed in embeds]


def _dump_mentions(mentions: AllowedMentions) -> Dict[str, Any]:
    return mentions.model_dump(exclude_none=True)


def _common_body(
    content: Optional[str],
    embeds: Optional[List[Embed]],
    allowed_mentions: Optional[AllowedMentions],
) -> Dict[str, Any]:
    body: Dict[str, Any] = {}
    if content:
        body["content"] = content
    if embeds:
        body["embeds"] = _dump_embeds(embeds)
    if allowed_mentions is not None:
        body["allowed_mentions"] = _dump_mentions(allowed_mentions)
    return body


def build_send_request(params: SendMessageParams) -> WebhookRequest:
    """Body for a new message. ``thread_id`` becomes a query parameter."""
    require_content_or_embeds(params)

    body = _common_body(params.content, params.embeds, params.allowed_mentions)
    if params.username:
        body["username"] = params.username
    if params.avatar_url:
        body["avatar_url"] = params.avatar_url
    if params.tts:
        body["tts"] = True
    if params.thread_name:
        body["thread_name"] = params.thread_name

    query: Dict[str, str] = {}
    if params.thread_id:
        query["thread_id"] = params.thread_id
    return WebhookRequest(body=body, params=query)


def build_edit_request(
    params: Union[EditMessageParams, SendMessageParams],
) -> WebhookRequest:
    """Body for an edit: only content, embeds and allowed_mentions.

    Create-time fields (username, avatar_url, tts, thread routing) are not
    editable and are dropped when a SendMessageParams is passed in.
    """
    require_content_or_embeds(params)
    return WebhookRequest(
        body=_common_body(params.content, params.embeds, params.allowed_mentions)
    )


def embed_text_length(embeds: Optional[List[Embed]]) -> int:
    """Characters counted by Discord towards the per-message embed budget."""
    total = 0
    for embed in embeds or []:
        total += len(embed.title or "") + len(embed.description or "")
        if embed.footer:
            total += len(embed.footer.text)
        if embed.author:
            total += len(embed.author.name)
        for f in embed.fields or []:
            total += len(f.name) + len(f.value)
    return total
