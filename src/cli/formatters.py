"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialisation
- Rich tables with colors and borders
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_table([data["pattern"]])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_list([data["pattern"]])
    else:
        return json.dumps(data, indent=2, default=str)


def format_patterns_table(patterns: List[Dict[str, str]]) -> str:
    """Format pattern registrations as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=False)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category", style="green")
    table.add_column("Summary", style="white")

    for pattern in patterns:
        table.add_row(
            pattern.get("name", "N/A"),
            pattern.get("category", "N/A"),
            pattern.get("summary", ""),
        )

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False, color_system=None)
    with console.capture() as capture:
        console.print(table)

    return capture.get().rstrip("\n")


def format_patterns_list(patterns: List[Dict[str, str]]) -> str:
    """Format pattern registrations as a detailed list."""
    if not patterns:
        return "No patterns found."

    lines = []

    for i, pattern in enumerate(patterns):
        if i > 0:
            lines.append("")  # Blank line between patterns

        lines.append(f"Pattern: {pattern.get('name', 'N/A')}")
        lines.append(f"  Category: {pattern.get('category', 'N/A')}")
        lines.append(f"  Module: {pattern.get('module', 'N/A')}")
        summary = pattern.get("summary")
        if summary:
            lines.append(f"  Summary: {summary}")

    return "\n".join(lines)
