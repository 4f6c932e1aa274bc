"""
CLI-specific formatting functions.

This module handles presentation formatting for the CLI:
- JSON and YAML renderings of the report dictionaries
- Plain text renderings of the client observations
"""
import json
from typing import Any, Dict, Iterable, List, Optional

import yaml


def format_output(data: Dict[str, Any], format_type: str, text: Optional[str] = None) -> str:
    """
    Format data according to the specified format type.

    Args:
        data: Report data as JSON-compatible dictionaries
        format_type: 'text', 'json' or 'yaml'
        text: Pre-rendered text used for the 'text' format; when omitted the
            data is rendered as a key/value list
    """
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "text":
        return text if text is not None else format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_sections(sections: Iterable[List[str]], blank_line_between: bool = True) -> str:
    """Join groups of console lines, optionally separating groups by a blank line."""
    separator = "\n\n" if blank_line_between else "\n"
    return separator.join("\n".join(lines) for lines in sections)


def format_list_output(data: Dict[str, Any]) -> str:
    """Format data as a detailed key/value list."""
    lines: List[str] = []
    for key, value in data.items():
        if isinstance(value, list):
            lines.append(f"{key}:")
            lines.extend(f"  - {item}" for item in value)
        else:
            lines.append(f"{key}: {value}")
    return "\n".join(lines)
