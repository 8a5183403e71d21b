"""Standardized response utilities for MCP tools."""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from mcp.types import TextContent

NOT_SPECIFIED = "Not specified"


def or_placeholder(value: Any, placeholder: str = NOT_SPECIFIED) -> str:
    """Render a value, substituting a placeholder when it is missing or empty."""
    if value is None or value == "":
        return placeholder
    return str(value)


def join_or_placeholder(values: Optional[Iterable[str]], placeholder: str = NOT_SPECIFIED) -> str:
    """Join a sequence with ``", "``, substituting a placeholder when it is missing or empty."""
    if not values:
        return placeholder
    return ", ".join(str(v) for v in values)


def render_report(
    title: str,
    fields: Sequence[Tuple[str, Any]] = (),
    sections: Sequence[Tuple[str, List[str]]] = (),
    closing: Optional[str] = None
) -> str:
    """
    Render a multi-section text report.

    Layout is a title line, a blank line, one ``Label: value`` line per field,
    then each section as ``Heading:`` followed by its lines, with blank lines
    between blocks, and finally the closing paragraph.

    Args:
        title: First line of the report
        fields: (label, already-rendered value) pairs
        sections: (heading, lines) pairs
        closing: Optional closing paragraph

    Returns:
        The report text
    """
    blocks = [title]

    if fields:
        blocks.append("\n".join(f"{label}: {value}" for label, value in fields))

    for heading, lines in sections:
        blocks.append(f"{heading}:\n" + "\n".join(lines))

    if closing:
        blocks.append(closing)

    return "\n\n".join(blocks)


def text_response(text: str) -> List[TextContent]:
    """Wrap report text as MCP content."""
    return [TextContent(type="text", text=text)]


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Create an error response envelope.

    Args:
        message: Error message
        code: Optional error code
        details: Optional error details

    Returns:
        Standardized error response
    """
    error = {"message": message}

    if code:
        error["code"] = code

    if details:
        error["details"] = details

    return {
        "ok": False,
        "error": error
    }
