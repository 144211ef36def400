"""Turn a MessageOutcome into an MCP tool result."""

from mcp.types import CallToolResult, TextContent

from discord_webhook.domain.errors import format_error
from discord_webhook.ports.outbound import MessageOutcome


def render_outcome(outcome: MessageOutcome, success_text: str) -> CallToolResult:
    if outcome.success:
        text = success_text
    else:
        text = f"Error: {format_error(outcome.error)}"
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        structuredContent=outcome.to_structured(),
        isError=not outcome.success,
    )
