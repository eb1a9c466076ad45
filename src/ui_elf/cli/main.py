"""UI Elf CLI entry point."""

import logging
import sys

import click

from .. import __version__
from ..discovery import discover_files
from ..errors import UIElfError
from ..models import DEFAULT_RESULTS_FILE, ScanOptions, ScanResult
from ..registry import default_registry
from ..report import write_output
from ..scanner import ComponentScanner, default_parsers

COMPONENT_TYPES = ["form", "button", "dialog", "custom"]
OUTPUT_FORMATS = ["terminal", "json", "both"]

logger = logging.getLogger(__name__)


def _split_filters(values) -> list:
    """Flatten repeated and comma-separated --filter values."""
    parts = []
    for value in values:
        parts.extend(p.strip() for p in value.split(","))
    return [p for p in parts if p]


def execute_scan(options: ScanOptions) -> ScanResult:
    """Discover files under the options' directory and scan them.

    Raises:
        DirectoryNotFoundError: If the directory does not exist
    """
    files = discover_files(options.directory, options.file_filter())
    if not files:
        logger.debug("No component files found under %s", options.directory)
        return ScanResult(component_type=options.component_type)

    scanner = ComponentScanner(default_parsers(), default_registry())
    result = scanner.scan(files, options.component_type)
    logger.debug(
        "Scanned %d files in %dms", result.scanned_files, result.scan_time_ms
    )
    return result


@click.command(
    epilog="""\b
Examples:
  ui-elf --component-type form --directory .
  ui-elf -t button -d ./src --output json
  ui-elf -t custom -d . --filter src/components,src/views
  ui-elf -t dialog -d . --output both"""
)
@click.option(
    "--component-type",
    "-t",
    required=True,
    type=click.Choice(COMPONENT_TYPES),
    help="Component type to search for",
)
@click.option(
    "--directory", "-d", default=".", show_default=True, help="Directory to scan"
)
@click.option(
    "--filter",
    "-f",
    "filters",
    multiple=True,
    help="Comma-separated directories to include (e.g. src/components,src/views)",
)
@click.option(
    "--output",
    "-o",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="terminal",
    show_default=True,
    help="Output format",
)
@click.option(
    "--output-file",
    envvar="UI_ELF_OUTPUT_FILE",
    default=DEFAULT_RESULTS_FILE,
    show_default=True,
    help="Where to write JSON results ($UI_ELF_OUTPUT_FILE)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug details to stderr")
@click.version_option(version=__version__, prog_name="ui-elf")
def cli(component_type, directory, filters, output_format, output_file, verbose):
    """Scan Vue.js and React codebases for specific component types.

    Locates forms, buttons, dialogs and custom components in .vue, .jsx
    and .tsx files and reports each usage with its file and line.
    """
    options = ScanOptions(
        component_type=component_type,
        directory=directory,
        filter=_split_filters(filters),
        output_format=output_format,
        output_file=output_file,
        verbose=verbose,
    )

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        result = execute_scan(options)
        write_output(result, options.output_format, options.output_file)
    except UIElfError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
