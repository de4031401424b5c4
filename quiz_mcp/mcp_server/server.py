"""
MCP Server for the Quiz Tool
Exposes get_quiz over the Model Context Protocol (stdio transport)
"""
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from quiz_mcp.core.config import settings
from quiz_mcp.mcp_server.descriptions import GET_QUIZ_DESCRIPTION, SERVER_INSTRUCTIONS
from quiz_mcp.mcp_server.handlers import GET_QUIZ_TOOL, QuizToolHandler, parse_quiz_request
from quiz_mcp.models.quiz import QuizRequest

logger = logging.getLogger(__name__)


class QuizToolError(Exception):
    """Carries a failed get_quiz result back to the client as an error response"""
    pass


# ============================================================================
# SERVER FACTORY
# ============================================================================

def get_quiz_tool() -> types.Tool:
    """Tool definition published through tools/list"""
    return types.Tool(
        name=GET_QUIZ_TOOL,
        description=GET_QUIZ_DESCRIPTION,
        inputSchema=QuizRequest.model_json_schema(),
    )


def create_server(
    handler: Optional[QuizToolHandler] = None,
    validate_input: bool = True
) -> Server:
    """
    Build an MCP server with the get_quiz tool registered

    Args:
        handler: Tool handler to dispatch to (default handler over the bundled catalog)
        validate_input: Let the SDK check arguments against inputSchema before dispatch

    Returns:
        Configured low-level MCP Server, ready to run on any transport
    """
    handler = handler if handler is not None else QuizToolHandler()

    mcp_server = Server(
        settings.server_name,
        version=settings.server_version,
        instructions=SERVER_INSTRUCTIONS,
    )

    @mcp_server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [get_quiz_tool()]

    @mcp_server.call_tool(validate_input=validate_input)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        # Exceptions raised here are returned to the client with isError=True
        if name != GET_QUIZ_TOOL:
            logger.warning(f"⚠️ Unknown tool requested: {name}")
            raise ValueError(f"Unknown tool: {name}")

        # The SDK validates against inputSchema first; this only runs when
        # that check is disabled (validate_input=False)
        try:
            request = parse_quiz_request(arguments)
        except ValidationError as e:
            logger.warning(f"⚠️ Rejected get_quiz arguments: {arguments}")
            raise ValueError(f"Input validation error: {e}") from e

        result = handler.get_quiz(request)
        if result.is_error:
            raise QuizToolError(result.text)

        return [types.TextContent(type="text", text=result.text)]

    return mcp_server


# ============================================================================
# SERVER LIFECYCLE
# ============================================================================

def configure_logging() -> None:
    """
    Send all log output to stderr; stdout is reserved for JSON-RPC messages

    Raises:
        ValueError: If settings.log_level is not a standard logging level name
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: '{settings.log_level}'")

    logging.basicConfig(
        level=level,
        format=settings.log_format,
        stream=sys.stderr,
    )


def _log_uncaught_exception(exc_type, exc_value, exc_traceback) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.error("❌ Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))


async def main(handler: Optional[QuizToolHandler] = None) -> None:
    """Main entry point for the MCP server"""
    logger.info("🚀 Starting Quiz MCP server...")

    handler = handler if handler is not None else QuizToolHandler()
    mcp_server = create_server(handler)

    catalog = handler.selector.catalog
    logger.info(
        f"📚 Question catalog loaded - "
        f"{len(catalog)} questions across {len(catalog.pool_sizes())} pools"
    )

    async with stdio_server() as (read_stream, write_stream):
        logger.info("✅ Quiz MCP Server started")
        logger.info(f"📋 Available tool: {GET_QUIZ_TOOL}")
        logger.info("👂 Listening for requests...")

        await mcp_server.run(
            read_stream,
            write_stream,
            mcp_server.create_initialization_options()
        )


def run() -> None:
    """Console entry point: run the server until stdin closes or SIGINT"""
    sys.excepthook = _log_uncaught_exception

    try:
        configure_logging()
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("👋 Server shutting down...")
    except Exception as e:
        logger.error(f"❌ Failed to start Quiz MCP Server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
