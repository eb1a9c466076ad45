"""Concurrent scanner: dispatch files to parsers and classify matches."""

import logging
import queue
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence

from ..models import ComponentMatch, ScanResult
from ..registry import ComponentRegistry, default_registry
from .parser import ComponentParser
from .react import ReactParser
from .vue import VueParser

logger = logging.getLogger(__name__)


def default_parsers() -> List[ComponentParser]:
    """Parsers in precedence order."""
    return [VueParser(), ReactParser()]


class ComponentScanner:
    """Runs parsers over a batch of files and aggregates typed matches.

    Each file is one task on a thread pool. Tasks put their contribution
    on a queue sized to the batch, and the calling thread collects exactly
    one item per file. Order of the aggregated matches is not stable.
    """

    def __init__(
        self,
        parsers: Optional[Sequence[ComponentParser]] = None,
        registry: Optional[ComponentRegistry] = None,
        max_workers: Optional[int] = None,
    ):
        self.parsers = list(parsers) if parsers is not None else default_parsers()
        self.registry = registry or default_registry()
        self.max_workers = max_workers

    def parser_for(self, file_path: str) -> Optional[ComponentParser]:
        """Return the first parser that supports the file, if any."""
        for parser in self.parsers:
            if parser.supports_file(file_path):
                return parser
        return None

    def scan(self, files: Sequence[str], component_type: str) -> ScanResult:
        """Scan files for components of ``component_type``.

        Unsupported, unreadable or unparsable files contribute nothing;
        they never fail the scan.

        Args:
            files: Paths to scan, used as given
            component_type: Requested type (known or custom)

        Returns:
            ScanResult; ``scanned_files`` is ``len(files)``
        """
        start = time.perf_counter()
        files = list(files)
        matches: List[ComponentMatch] = []

        if files:
            results: queue.Queue = queue.Queue(maxsize=len(files))
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                for file_path in files:
                    executor.submit(self._collect, file_path, component_type, results)
                for _ in files:
                    matches.extend(results.get())

        elapsed_ms = int((time.perf_counter() - start) * 1000)
        return ScanResult(
            matches=matches,
            total_count=len(matches),
            scan_time_ms=elapsed_ms,
            component_type=component_type,
            scanned_files=len(files),
        )

    def scan_file(self, file_path: str, component_type: str) -> List[ComponentMatch]:
        """Parse one file and keep matches of the requested type.

        Raises:
            OSError: If the file cannot be read
        """
        parser = self.parser_for(file_path)
        if parser is None:
            return []

        # Lines are counted on "\n" only, so no newline translation
        content = Path(file_path).read_bytes().decode("utf-8", errors="replace")
        raw = parser.parse(content, file_path)
        return self.filter_by_type(raw, component_type)

    def filter_by_type(
        self, matches: Sequence[ComponentMatch], component_type: str
    ) -> List[ComponentMatch]:
        """Drop non-matching entries and stamp the type on the rest."""
        return [
            match.model_copy(update={"component_type": component_type})
            for match in matches
            if self.registry.classify(match.component_name, component_type)
        ]

    def _collect(self, file_path: str, component_type: str, results: queue.Queue) -> None:
        contribution: List[ComponentMatch] = []
        try:
            contribution = self.scan_file(file_path, component_type)
        except OSError as e:
            logger.debug("Skipping unreadable file %s: %s", file_path, e)
        except Exception as e:
            logger.debug("Parser failed on %s: %s", file_path, e)
        finally:
            # Exactly one item per file, or the collector would block
            results.put(contribution)
