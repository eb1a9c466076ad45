"""React component parser (.jsx, .tsx)."""

from typing import List

from ..models import ComponentMatch
from .parser import JSX_TAG_PATTERN, has_suffix, scan_tags


class ReactParser:
    """Treats the whole file as JSX starting at line 1."""

    extensions = (".jsx", ".tsx")

    def supports_file(self, file_path: str) -> bool:
        return has_suffix(file_path, self.extensions)

    def parse(self, content: str, file_path: str) -> List[ComponentMatch]:
        return scan_tags(content, file_path, 1, JSX_TAG_PATTERN)
