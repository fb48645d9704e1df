"""MCP stdio binding for the sequence tracker."""

from __future__ import annotations

import json
import logging
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from core.orchestrator import RuntimeBundle
from transport.tool_schema import TOOL_DESCRIPTION, TOOL_INPUT_SCHEMA, TOOL_NAME

logger = logging.getLogger("st.transport")


def _text_result(text: str, is_error: bool) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


class ThinkingServer:
    """Serves one runtime bundle over the MCP tool protocol."""

    def __init__(self, bundle: RuntimeBundle) -> None:
        self.bundle = bundle
        server_cfg = bundle.config.get("server", {})
        self.name = str(server_cfg.get("name", "shannon-thinking-server"))
        self.version = str(server_cfg.get("version", "0.1.0"))

    def tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=TOOL_NAME,
                description=TOOL_DESCRIPTION,
                inputSchema=TOOL_INPUT_SCHEMA,
            )
        ]

    def handle_call(self, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        """Map one tool call onto a tracker submission."""
        if name != TOOL_NAME:
            logger.warning("Unknown tool requested: %s", name)
            return _text_result(f"Unknown tool: {name}", is_error=True)
        result = self.bundle.submit(arguments if arguments is not None else {})
        return _text_result(json.dumps(result.to_payload(), indent=2), is_error=not result.ok)

    def build(self) -> Server:
        """Create a low-level MCP server with list/call handlers bound to this instance."""
        server: Server = Server(self.name, version=self.version)

        @server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return self.tools()

        # Arguments are checked by the validator, which yields structured rejections.
        @server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
            return self.handle_call(name, arguments)

        return server

    async def run_stdio(self) -> None:
        server = self.build()
        async with stdio_server() as (read_stream, write_stream):
            logger.info("%s %s running on stdio", self.name, self.version)
            await server.run(read_stream, write_stream, server.create_initialization_options())
