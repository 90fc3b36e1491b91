"""
CLI-specific formatting functions for human-readable output.

Results are rendered as JSON, YAML or a Rich table with one row per
processed application.
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    if format_type == "table":
        return format_table_output(data)
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format a single result or a batch report as a table."""
    if isinstance(data, dict) and "results" in data:
        table = format_results_table(data["results"])
        counts = ", ".join(f"{status}: {count}" for status, count in data.get("counts", {}).items())
        return f"{table}{counts}\n" if counts else table
    if isinstance(data, dict) and "status" in data:
        return format_results_table([data])
    return json.dumps(data, indent=2, default=str)


def format_results_table(results: List[Dict[str, Any]]) -> str:
    """Format processing results as a table using Rich."""
    if not results:
        return "No applications processed.\n"

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Application", style="cyan", overflow="fold")
    table.add_column("Status", style="green")
    table.add_column("Stage", style="blue")
    table.add_column("Reasons", style="yellow", overflow="fold")

    for result in results:
        table.add_row(
            str(result.get("application_id", "N/A")),
            str(result.get("status", "N/A")),
            str(result.get("stage", "N/A")),
            "\n".join(result.get("reasons") or []) or "-",
        )

    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
