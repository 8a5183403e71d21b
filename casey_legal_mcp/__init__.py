"""Casey legal MCP server: case analysis, evidence, deadline and welfare tools."""

__version__ = "1.0.0"
