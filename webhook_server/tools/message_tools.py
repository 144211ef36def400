"""MCP tools for sending, editing and deleting webhook messages.

Arguments reach the handlers untouched; the closed schemas in
``discord_webhook.domain.schemas`` are the only validation they go through.
"""

from typing import Any, Dict

from mcp.types import CallToolResult, ToolAnnotations

from discord_webhook import messages
from discord_webhook.domain.schemas import (
    DeleteMessageParams,
    EditMessageParams,
    SendMessageParams,
)
from discord_webhook.ports.outbound import MessageOutcome
from webhook_server.mcp_server import mcp
from webhook_server.state import get_state
from webhook_server.tools._render import render_outcome


def _sent_text(outcome: MessageOutcome) -> str:
    if outcome.message_id:
        return f"Message sent\nID: {outcome.message_id}\nChannel: {outcome.channel_id}"
    return "Message sent"


@mcp.raw_tool(
    name="send_message",
    params_model=SendMessageParams,
    title="Discord Message Sender",
    annotations=ToolAnnotations(
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def send_message(arguments: Dict[str, Any]) -> CallToolResult:
    """Send a message to the Discord channel of the configured webhook.

    At least one of content or embeds is required. Unknown keys are rejected.
    Discord allows about 30 messages per minute per channel and 6000
    characters across all embeds. Use thread_id to post into a thread and
    thread_name to create one (forum/media channels only).
    """
    outcome = await messages.send_message(get_state().client, arguments)
    return render_outcome(outcome, _sent_text(outcome))


@mcp.raw_tool(
    name="edit_message",
    params_model=EditMessageParams,
    title="Discord Message Editor",
    annotations=ToolAnnotations(
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def edit_message(arguments: Dict[str, Any]) -> CallToolResult:
    """Edit a message previously sent by this webhook.

    Only content, embeds and allowed_mentions can be changed; at least one
    of content or embeds is required.
    """
    outcome = await messages.edit_message(get_state().client, arguments)
    return render_outcome(outcome, f"Message edited\nID: {outcome.message_id}")


@mcp.raw_tool(
    name="delete_message",
    params_model=DeleteMessageParams,
    title="Discord Message Deleter",
    annotations=ToolAnnotations(
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def delete_message(arguments: Dict[str, Any]) -> CallToolResult:
    """Delete a message previously sent by this webhook. This cannot be undone."""
    outcome = await messages.delete_message(get_state().client, arguments)
    return render_outcome(outcome, f"Message deleted\nID: {outcome.message_id}")
