"""Component extraction: per-format parsers and the concurrent scanner."""

from .parser import ComponentParser
from .react import ReactParser
from .scanner import ComponentScanner, default_parsers
from .vue import VueParser

__all__ = [
    "ComponentParser",
    "ComponentScanner",
    "ReactParser",
    "VueParser",
    "default_parsers",
]
