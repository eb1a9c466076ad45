"""Report formatting for scan results."""

from pathlib import Path
from typing import Optional

import click

from .errors import OutputWriteError
from .models import DEFAULT_RESULTS_FILE, ScanResult


def format_terminal(result: ScanResult) -> str:
    """Format a result as human-readable text.

    Args:
        result: Scan result to render

    Returns:
        Report listing each match with its line, followed by totals
    """
    lines = []
    lines.append("")
    lines.append(f"Component Finder Results - {result.component_type}")
    lines.append("=" * 50)
    lines.append("")

    if not result.matches:
        lines.append("No components found.")
    else:
        lines.append("Found components in:")
        lines.append("")
        for match in result.matches:
            lines.append(
                f"  {match.file_path} (line {match.line}): {match.component_name}"
            )

    # Summary
    lines.append("")
    lines.append("-" * 50)
    lines.append(f"Total components found: {result.total_count}")
    lines.append(f"Files scanned: {result.scanned_files}")
    lines.append(f"Scan time: {result.scan_time_ms}ms")

    return "\n".join(lines) + "\n"


def format_json(result: ScanResult) -> str:
    """Format a result as JSON with camelCase keys."""
    return result.model_dump_json(by_alias=True, indent=2)


def write_json(result: ScanResult, output_path: str) -> None:
    try:
        Path(output_path).write_text(format_json(result))
    except OSError as e:
        raise OutputWriteError(output_path, str(e)) from e


def write_output(
    result: ScanResult, output_format: str, output_path: Optional[str] = None
) -> None:
    """Display or save a result.

    Args:
        result: Scan result
        output_format: 'terminal', 'json' or 'both'
        output_path: JSON file path (default: ui-elf-results.json)

    Raises:
        ValueError: Unknown output format
        OutputWriteError: JSON file could not be written
    """
    output_path = output_path or DEFAULT_RESULTS_FILE

    if output_format == "terminal":
        click.echo(format_terminal(result), nl=False)
    elif output_format == "json":
        write_json(result, output_path)
        click.echo(f"Results written to {output_path}")
    elif output_format == "both":
        click.echo(format_terminal(result), nl=False)
        write_json(result, output_path)
        click.echo(f"\nResults also written to {output_path}")
    else:
        raise ValueError(f"unsupported output format: {output_format}")


__all__ = ["format_json", "format_terminal", "write_json", "write_output"]
