"""
Page IDs: dense integers handed out in first-seen order, starting at 0.

The page index (id -> metadata) is written out; the reverse lookup
(pageName -> id) only exists while a build runs.
"""
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PageRegistry:
    def __init__(self):
        self.page_index: dict[int, dict[str, str]] = {}
        self._ids: dict[str, int] = {}
        self._sources: dict[str, Path] = {}

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, page_name: str) -> bool:
        return page_name in self._ids

    def page_id(self, page_name: str) -> int | None:
        return self._ids.get(page_name)

    def register_if_absent(self, metadata: dict[str, str], source: Path | None = None) -> int:
        """Return the ID for metadata["pageName"], registering the page on first sight.

        A page seen again keeps its first ID and first metadata. When the
        second sighting comes from a different file the clash is logged.
        """
        page_name = metadata["pageName"]
        existing = self._ids.get(page_name)
        if existing is not None:
            first = self._sources.get(page_name)
            if source is not None and first is not None and Path(source) != first:
                logger.warning(
                    "Page name %r from %s already registered from %s; keeping ID %d",
                    page_name, source, first, existing,
                )
            return existing

        page_id = len(self._ids)
        self._ids[page_name] = page_id
        self.page_index[page_id] = metadata
        if source is not None:
            self._sources[page_name] = Path(source)
        return page_id
