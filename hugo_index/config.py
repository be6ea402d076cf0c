"""
Paths and constants for a Hugo site build:
- source pages live under content/post/ (recursively), one .md file per page
- the two search artifacts are written to content/static/
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

SOURCE_EXTENSION = "md"
POST_DIR = "content/post"
STATIC_DIR = "content/static"
WORD_INDEX_NAME = "word_index.json"
PAGE_INDEX_NAME = "page_index.json"

# pageName is injected by the indexer, the rest come from front matter
METADATA_KEYS = ("pageName", "title", "date", "draft")
FRONT_MATTER_KEYS = frozenset(METADATA_KEYS[1:])


@dataclass(frozen=True)
class BuildPaths:
    root: Path
    post_dir: Path
    static_dir: Path
    word_index: Path
    page_index: Path

    @classmethod
    def from_root(cls, root) -> "BuildPaths":
        root = Path(root)
        static = root / STATIC_DIR
        return cls(
            root=root,
            post_dir=root / POST_DIR,
            static_dir=static,
            word_index=static / WORD_INDEX_NAME,
            page_index=static / PAGE_INDEX_NAME,
        )
