"""UI Elf: find where form, button, dialog and custom components are used."""

from .models import ComponentMatch, FileFilter, ScanOptions, ScanResult
from .registry import ComponentRegistry, default_registry
from .scanner import ComponentScanner, default_parsers

__all__ = [
    "__version__",
    "ComponentMatch",
    "ComponentRegistry",
    "ComponentScanner",
    "FileFilter",
    "ScanOptions",
    "ScanResult",
    "default_parsers",
    "default_registry",
]

__version__ = "0.1.0"
