"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Plain text blocks per example
- JSON and YAML documents
- Rich tables for listings and run summaries
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return format_text_output(data)


def format_text_output(data: Any) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_text(data["examples"])
    elif isinstance(data, dict) and "patterns" in data:
        return format_patterns_text(data["patterns"])
    else:
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_table(data["examples"])
    elif isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_examples_text(examples: List[Dict]) -> str:
    """Format run results as one block per example."""
    if not examples:
        return "No examples run."

    blocks = []
    for example in examples:
        lines = [f"== {example['name']} =="]
        lines.extend(f"  {line}" for line in example.get("lines", []))
        error = example.get("error")
        if error:
            lines.append(f"  ERROR [{error['error_code']}]: {error['message']}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def format_patterns_text(patterns: List[Dict]) -> str:
    """Format a catalog listing, one pattern per line."""
    if not patterns:
        return "No patterns registered."

    width = max(len(p["name"]) for p in patterns)
    return "\n".join(
        f"{p['name']:<{width}}  {(p.get('category') or '-'):<11}  {p.get('summary', '')}".rstrip()
        for p in patterns
    )


def format_examples_table(examples: List[Dict]) -> str:
    """Format run results as a Rich table."""
    if not examples:
        return "No examples run."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Name", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Output")

    for example in examples:
        output = "\n".join(example.get("lines", []))
        error = example.get("error")
        if error:
            output = f"{error['error_code']}: {error['message']}"
        table.add_row(example["name"], example.get("status", "ok"), output)

    return _render_table(table)


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format a catalog listing as a Rich table."""
    if not patterns:
        return "No patterns registered."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="blue")
    table.add_column("Summary")

    for pattern in patterns:
        table.add_row(pattern["name"], pattern.get("category") or "-", pattern.get("summary", ""))

    return _render_table(table)


def _render_table(table: Table) -> str:
    """Capture Rich output as string."""
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip("\n")
