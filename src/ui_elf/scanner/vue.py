"""Vue single-file component parser (.vue)."""

import re
from typing import List, Optional, Tuple

from ..models import ComponentMatch
from .parser import JSX_TAG_PATTERN, MARKUP_TAG_PATTERN, has_suffix, scan_tags

TEMPLATE_PATTERN = re.compile(r"<template[^>]*>(.*?)</template>", re.DOTALL)
SCRIPT_PATTERN = re.compile(r"<script[^>]*>(.*?)</script>", re.DOTALL)

# Standard HTML elements skipped in templates. Lowercase only, so <Div>
# or <Button> still count as components.
HTML_TAGS = frozenset({
    "div", "span", "p", "a", "img",
    "ul", "ol", "li", "table", "tr",
    "td", "th", "thead", "tbody", "tfoot",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "footer", "nav", "section", "article",
    "aside", "main", "input", "textarea", "select",
    "option", "label", "fieldset", "legend",
    "strong", "em", "b", "i", "u",
    "br", "hr", "pre", "code", "blockquote",
    "iframe", "video", "audio", "canvas", "svg",
    "path", "circle", "rect", "line", "polygon",
    "template", "slot", "script", "style", "link",
    "meta", "title", "head", "body", "html",
    "button", "form", "dialog",
})


def extract_section(pattern: re.Pattern, content: str) -> Tuple[Optional[str], int]:
    """Return the first region matched by ``pattern`` and its start line.

    Returns:
        (region text, 1-indexed line of the region's first character),
        or (None, 0) when the region is absent
    """
    m = pattern.search(content)
    if m is None:
        return None, 0
    return m.group(1), content.count("\n", 0, m.start(1)) + 1


class VueParser:
    """Scans the <template> block for components and <script> for JSX."""

    extensions = (".vue",)

    def supports_file(self, file_path: str) -> bool:
        return has_suffix(file_path, self.extensions)

    def parse(self, content: str, file_path: str) -> List[ComponentMatch]:
        matches = []

        template, template_line = extract_section(TEMPLATE_PATTERN, content)
        if template:
            matches.extend(
                scan_tags(
                    template,
                    file_path,
                    template_line,
                    MARKUP_TAG_PATTERN,
                    skip=HTML_TAGS,
                )
            )

        script, script_line = extract_section(SCRIPT_PATTERN, content)
        if script:
            matches.extend(
                scan_tags(script, file_path, script_line, JSX_TAG_PATTERN)
            )

        return matches
