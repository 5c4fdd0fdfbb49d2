# Area: Shared
"""Error formatting for structured state-transition error logs."""

from __future__ import annotations
import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def format_error_block(
    error_type: str,
    operation: str,
    state: str,
    mode: Optional[str],
    context: Dict[str, Any],
    details: Optional[List[str]] = None,
) -> str:
    """Format a structured error block for a rejected session operation."""
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " SESSION ERROR — OPERATION REJECTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Operation:    {operation}",
        f" State:        {state}",
    ]

    if mode is not None:
        lines.append(f" Game Mode:    {mode}")

    lines.append("")
    lines.append(" ── SESSION CONTEXT " + "─" * 44)
    lines.append(indent_json(context))

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
