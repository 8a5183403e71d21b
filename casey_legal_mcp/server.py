"""Main MCP server implementation for Case 1FDV-23-0001009 legal tools."""

import asyncio
import logging
import os
import signal
import sys
from typing import Any, Dict, Optional

from mcp import Tool, types
from mcp.server import Server, NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.shared.exceptions import McpError
from mcp.types import ErrorData, INTERNAL_ERROR, METHOD_NOT_FOUND, TextContent

from .config.settings import get_all_settings, get_setting
from .registry import (
    OperationContext,
    OperationExecutionError,
    OperationNotFound,
    OperationRegistry,
    ToolDispatcher,
)
from .registry.operations import create_registry
from .utils.response import text_response

logger = logging.getLogger(__name__)


class CaseyLegalMCPServer:
    """MCP Server exposing the legal case tools over stdio."""

    def __init__(
        self,
        context: Optional[OperationContext] = None,
        registry: Optional[OperationRegistry] = None
    ):
        """Build the registry and dispatcher and register MCP handlers."""
        self.context = context or OperationContext.from_settings()
        self.registry = registry or create_registry(self.context)
        self.dispatcher = ToolDispatcher(self.registry, self.context)

        self.server_name = get_setting("server_name")
        self.server_version = get_setting("server_version")
        self.shutdown_grace = get_setting("shutdown_grace_seconds")
        self._shutting_down = False

        # Create MCP server instance
        self.server = Server(self.server_name)

        # Register handlers
        self._register_handlers()

    def _register_handlers(self):
        """Register all MCP handlers."""
        self.server.list_tools()(self.handle_list_tools)
        # Registered directly rather than via call_tool(): the decorator
        # validates arguments against the schema and turns McpError into a
        # plain text result, dropping the error code.
        self.server.request_handlers[types.CallToolRequest] = self._handle_call_tool_request

    async def handle_list_tools(self) -> list[Tool]:
        """List all available tools."""
        return [
            Tool(
                name=op.name,
                description=op.description,
                inputSchema=op.input_schema
            )
            for op in self.dispatcher.list()
        ]

    async def _handle_call_tool_request(self, req: types.CallToolRequest) -> types.ServerResult:
        content = await self.handle_call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(types.CallToolResult(content=content, isError=False))

    async def handle_call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> list[TextContent]:
        """Route tool calls to the dispatcher and map failures to MCP errors."""
        try:
            result = self.dispatcher.invoke(name, arguments or {})
        except OperationNotFound as e:
            logger.warning(f"Unknown tool requested: {e.name}")
            raise McpError(ErrorData(
                code=METHOD_NOT_FOUND,
                message=str(e),
                data=e.to_response()["error"]
            )) from e
        except OperationExecutionError as e:
            raise McpError(ErrorData(
                code=INTERNAL_ERROR,
                message=str(e),
                data=e.to_response()["error"]
            )) from e

        return text_response(result.text)

    async def run(self):
        """Run the MCP server until the channel closes or a termination signal arrives."""
        from mcp.server.stdio import stdio_server

        self._install_signal_handlers()

        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info(
                    f"{self.server_name} {self.server_version} running on stdio "
                    f"(case {self.context.case_id}, {len(self.registry)} tools)"
                )
                await self.server.run(
                    read_stream,
                    write_stream,
                    InitializationOptions(
                        server_name=self.server_name,
                        server_version=self.server_version,
                        capabilities=self.server.get_capabilities(
                            notification_options=NotificationOptions(),
                            experimental_capabilities={}
                        )
                    ),
                    raise_exceptions=False
                )
        except asyncio.CancelledError:
            logger.info("Shutdown requested, stdio channel closed")

    def _install_signal_handlers(self) -> None:
        """Shut down on SIGINT/SIGTERM."""
        loop = asyncio.get_running_loop()
        task = asyncio.current_task()

        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self._request_shutdown, loop, task, sig)
            except (NotImplementedError, RuntimeError):
                # Windows event loops do not support signal handlers
                logger.debug(f"Signal handler for {sig.name} not installed")

    def _request_shutdown(
        self,
        loop: asyncio.AbstractEventLoop,
        task: Optional[asyncio.Task],
        sig: signal.Signals
    ) -> None:
        """
        Cancel the run task, then exit once the grace period is over.

        Cancelling closes the stdout writer, but the stdin reader blocks in a
        worker thread that cannot be interrupted while the host keeps stdin
        open, so the run task may never finish on its own.
        """
        if self._shutting_down:
            logger.info(f"Received {sig.name} again, exiting now")
            _exit_process(0)
            return

        self._shutting_down = True
        logger.info(f"Received {sig.name}, shutting down")
        if task is not None:
            task.cancel()
        loop.call_later(self.shutdown_grace, _exit_process, 0)


def _exit_process(code: int) -> None:
    """Flush the standard streams and end the process without joining worker threads."""
    logger.info("Exiting")
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            pass  # stream already closed
    os._exit(code)


def main():
    """Main entry point for the MCP server."""
    logging.basicConfig(level=get_setting("log_level"))
    logger.debug(f"Settings: {get_all_settings()}")
    server = CaseyLegalMCPServer()
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Interrupted")

    if server._shutting_down:
        # The stdin worker thread may still be blocked on a read
        _exit_process(0)


if __name__ == "__main__":
    main()
