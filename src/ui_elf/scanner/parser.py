"""Parser protocol and the line-oriented tag scanner shared by parsers."""

import re
from typing import AbstractSet, List, Optional, Protocol

from ..models import ComponentMatch

# <tag-name followed by ASCII whitespace, >, / or end of line. Attributes on
# following lines are fine since only the opening name is captured.
MARKUP_TAG_PATTERN = re.compile(r"<([A-Za-z][A-Za-z0-9-]*)(?=[\s>/]|$)", re.ASCII)

# JSX components must start with an uppercase letter
JSX_TAG_PATTERN = re.compile(r"<([A-Z][A-Za-z0-9]*)(?=[\s>/]|$)", re.ASCII)


class ComponentParser(Protocol):
    """Extracts raw element usages from one file format."""

    def supports_file(self, file_path: str) -> bool:
        """Return True if this parser handles the file (by extension)."""
        ...

    def parse(self, content: str, file_path: str) -> List[ComponentMatch]:
        """Return unclassified matches with 1-indexed file line numbers."""
        ...


def has_suffix(file_path: str, suffixes) -> bool:
    """Case-insensitive extension check."""
    return file_path.lower().endswith(tuple(suffixes))


def scan_tags(
    text: str,
    file_path: str,
    base_line: int,
    pattern: re.Pattern,
    skip: Optional[AbstractSet[str]] = None,
) -> List[ComponentMatch]:
    """Find opening tags line by line.

    Args:
        text: Region text to scan
        file_path: Reported on every match
        base_line: File line number of the first line of ``text``
        pattern: Regex whose first group is the tag name
        skip: Exact names to ignore

    Returns:
        Matches in source order, at most one per name per line
    """
    matches = []
    for offset, line in enumerate(text.split("\n")):
        seen = set()
        for m in pattern.finditer(line):
            name = m.group(1)
            if skip and name in skip:
                continue
            if name in seen:
                continue
            seen.add(name)
            matches.append(
                ComponentMatch(
                    file_path=file_path,
                    line=base_line + offset,
                    component_name=name,
                )
            )
    return matches
