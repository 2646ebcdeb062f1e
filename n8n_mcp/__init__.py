"""
n8n MCP server: exposes n8n workflow operations as MCP tools.
"""

__version__ = "0.1.0"
