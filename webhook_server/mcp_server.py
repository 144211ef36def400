"""Discord webhook MCP stdio server — FastMCP entrypoint."""

import builtins
import inspect
import sys

# === stdout protection ===
# MCP JSON-RPC uses stdout exclusively. Override builtins.print to
# always write to stderr so stray prints cannot corrupt the protocol.
_original_print = builtins.print


def _safe_print(*args, **kwargs):
    kwargs.setdefault("file", sys.stderr)
    _original_print(*args, **kwargs)


builtins.print = _safe_print

from typing import Any, Awaitable, Callable, Dict, List, Optional, Type  # noqa: E402

from mcp.server.fastmcp import FastMCP  # noqa: E402
from mcp.types import CallToolResult, Tool, ToolAnnotations  # noqa: E402
from pydantic import BaseModel  # noqa: E402

from discord_webhook.config import ConfigError  # noqa: E402
from webhook_server.state import get_state  # noqa: E402

RawToolHandler = Callable[[Dict[str, Any]], Awaitable[CallToolResult]]


class WebhookMCP(FastMCP):
    """FastMCP with tools that receive the raw argument dict.

    FastMCP builds a lenient argument model from the function signature and
    drops unknown keys before the tool runs. Tools registered with
    ``raw_tool`` skip that step: their handler gets the arguments exactly as
    sent, and the advertised input schema is the schema of their own closed
    pydantic model.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._raw_tools: Dict[str, tuple] = {}

    def raw_tool(
        self,
        name: str,
        params_model: Type[BaseModel],
        title: Optional[str] = None,
        annotations: Optional[ToolAnnotations] = None,
    ) -> Callable[[RawToolHandler], RawToolHandler]:
        def decorator(fn: RawToolHandler) -> RawToolHandler:
            tool = Tool(
                name=name,
                title=title,
                description=inspect.cleandoc(fn.__doc__ or ""),
                inputSchema=params_model.model_json_schema(),
                annotations=annotations,
            )
            self._raw_tools[name] = (tool, fn)
            return fn

        return decorator

    async def list_tools(self) -> List[Tool]:
        tools = list(await super().list_tools())
        return tools + [tool for tool, _ in self._raw_tools.values()]

    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> Any:
        entry = self._raw_tools.get(name)
        if entry is None:
            return await super().call_tool(name, arguments)
        _, fn = entry
        return await fn(dict(arguments or {}))


# Create MCP server instance
mcp = WebhookMCP(
    "discord-webhook",
    instructions=(
        "Send, edit and delete Discord messages through the webhook configured "
        "in DISCORD_WEBHOOK_URL. Discord allows about 30 messages per minute per "
        "channel; on a 429 error read retry_after from the error body before retrying."
    ),
)

# Import tool modules to register them with mcp
from webhook_server.tools import message_tools  # noqa: F401, E402


def main():
    """Run the MCP server via stdio transport.

    Configuration is read here, before serving, so a missing webhook URL
    stops the process instead of failing the first tool call.
    """
    try:
        get_state()
    except ConfigError as e:
        print(e)
        sys.exit(1)
    mcp.run(transport="stdio")
