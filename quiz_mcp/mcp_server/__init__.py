"""
MCP Server Module
Exposes the get_quiz tool via Model Context Protocol (Anthropic MCP)

This module provides:
1. MCP Server - Low-level SDK server with the get_quiz tool registered
2. Tool handler - Validates arguments, selects and formats a question
"""

# MCP Server (Anthropic MCP Protocol)
from quiz_mcp.mcp_server.server import create_server, get_quiz_tool, main, run

# Tool handler
from quiz_mcp.mcp_server.handlers import (
    GET_QUIZ_TOOL,
    QuizToolHandler,
    parse_quiz_request,
)

__all__ = [
    # MCP Server
    "create_server",
    "get_quiz_tool",
    "main",
    "run",

    # Tool handler
    "GET_QUIZ_TOOL",
    "QuizToolHandler",
    "parse_quiz_request",
]
