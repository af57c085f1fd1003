"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Plain text demo traces with optional headers
- JSON and YAML renderings of demo results and listings
- Rich tables for the demo listing
"""

import json
from typing import Any, Iterable, List

import yaml
from rich.console import Console
from rich.table import Table

from pattern_catalog.domain.demo import DemoResult, PatternDemo


def format_output(data: Any, format_type: str) -> str:
    """Format plain data as JSON or YAML."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, default=str)


def format_header(title: str) -> str:
    return f"== {title} =="


def format_results(results: Iterable[DemoResult], format_type: str, show_headers: bool = True) -> str:
    """Format demo run results."""
    results = list(results)
    if format_type in ("json", "yaml"):
        return format_output([result.to_dict() for result in results], format_type)
    return format_results_text(results, show_headers)


def format_results_text(results: List[DemoResult], show_headers: bool = True) -> str:
    """Demo traces one after another, separated by a blank line."""
    blocks = []
    for result in results:
        lines = list(result.lines)
        if show_headers:
            lines.insert(0, format_header(result.title))
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def format_demo_list(demos: Iterable[PatternDemo], format_type: str) -> str:
    """Format the catalog listing."""
    demos = list(demos)
    if not demos:
        return "No pattern demos registered."
    if format_type in ("json", "yaml"):
        return format_output([demo.to_dict() for demo in demos], format_type)
    if format_type == "table":
        return format_demo_table(demos)
    return "\n".join(f"{demo.name:<24} {demo.category.value}" for demo in demos)


def format_demo_table(demos: List[PatternDemo]) -> str:
    """Format the catalog listing as a table using Rich."""
    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category", style="green", width=10)
    table.add_column("Summary", style="white")

    for demo in demos:
        table.add_row(demo.name, demo.category.display_name, demo.summary)

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get().rstrip("\n")


def format_demo_details(demo: PatternDemo, format_type: str) -> str:
    """Format a single demo's description."""
    if format_type in ("json", "yaml"):
        return format_output(demo.to_dict(), format_type)
    return "\n".join([
        format_header(demo.title),
        f"Category: {demo.category.display_name}",
        "",
        demo.summary,
    ])
