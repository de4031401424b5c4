"""
Quiz MCP Server
Single-tool Model Context Protocol server serving trivia questions
"""

__version__ = "1.0.0"
