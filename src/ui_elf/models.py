"""Pydantic models for scan inputs and results."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

OutputFormat = Literal["terminal", "json", "both"]

DEFAULT_EXCLUDE_PATTERNS = [
    "node_modules",
    "test",
    "tests",
    "__tests__",
    ".test.",
    ".spec.",
]
DEFAULT_EXTENSIONS = [".vue", ".jsx", ".tsx"]
DEFAULT_RESULTS_FILE = "ui-elf-results.json"


class ComponentMatch(BaseModel):
    """A single element usage found in a file.

    ``component_type`` is empty until the scanner classifies the match.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    file_path: str
    line: int = Field(gt=0)  # 1-indexed, relative to the whole file
    component_name: str
    component_type: str = ""


class ScanResult(BaseModel):
    """Aggregate result of one scan.

    Match order depends on worker scheduling; sort before comparing.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    matches: list[ComponentMatch] = Field(default_factory=list)
    total_count: int = 0
    scan_time_ms: int = 0
    component_type: str
    scanned_files: int = 0  # input batch size, not files parsed


class FileFilter(BaseModel):
    """Criteria applied while walking the directory tree."""

    exclude_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS)
    )
    include_directories: list[str] = Field(default_factory=list)
    file_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS)
    )


class ScanOptions(BaseModel):
    """Options collected from the command line."""

    component_type: str
    directory: str = "."
    filter: list[str] = Field(default_factory=list)
    output_format: OutputFormat = "terminal"
    output_file: str = DEFAULT_RESULTS_FILE
    verbose: bool = False

    def file_filter(self) -> FileFilter:
        """Build the discovery filter for these options."""
        return FileFilter(include_directories=list(self.filter))


__all__ = [
    "ComponentMatch",
    "DEFAULT_EXCLUDE_PATTERNS",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_RESULTS_FILE",
    "FileFilter",
    "OutputFormat",
    "ScanOptions",
    "ScanResult",
]
