"""
Build the static search index for a Hugo blog:
- read every content/post/**/*.md
- pull title / date / draft out of the front matter
- give each page a dense integer ID (first seen, first numbered)
- tokenize the whole raw page, front matter included
- build the inverted index: token -> {page IDs}
- write:
  content/static/word_index.json  # {"cdi": [27, 45], ...}
  content/static/page_index.json  # {"0": {"pageName": ..., "title": ..., "date": ..., "draft": ...}, ...}

Both files are loaded by the JavaScript on the search page.
"""
from __future__ import annotations

import json
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from .config import SOURCE_EXTENSION, BuildPaths
from .errors import BuildCancelled, DocumentReadError, OutputWriteError
from .frontmatter import parse_metadata
from .normalizer import TextNormalizer
from .registry import PageRegistry
from .word_index import WordIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    path: Path
    page_name: str
    text: str


@dataclass(frozen=True)
class ParsedPage:
    document: Document
    metadata: dict[str, str]
    tokens: list[str]


@dataclass
class BuildResult:
    word_index: WordIndex = field(default_factory=WordIndex)
    page_index: dict[int, dict[str, str]] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        return len(self.page_index)

    @property
    def token_count(self) -> int:
        return len(self.word_index)

    def page_index_json(self) -> dict[str, dict[str, str]]:
        return {str(page_id): meta for page_id, meta in self.page_index.items()}


def page_name_for(path: Path) -> str | None:
    """Filename minus ".md", or None when the file is not a source page."""
    name = Path(path).name
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem or ext != SOURCE_EXTENSION:
        return None
    return stem


def discover_documents(post_dir: Path) -> list[Path]:
    """Every regular file below post_dir, sorted so page IDs come out the same on every run."""
    post_dir = Path(post_dir)
    if not post_dir.is_dir():
        raise DocumentReadError(post_dir, "post directory not found")
    return sorted(p for p in post_dir.rglob("*") if p.is_file())


def read_document(path: Path, page_name: str) -> Document:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, str(e)) from e
    return Document(path=Path(path), page_name=page_name, text=text)


def parse_document(path: Path, page_name: str, normalizer: TextNormalizer) -> ParsedPage:
    doc = read_document(path, page_name)
    metadata = parse_metadata(doc.text, doc.page_name)
    return ParsedPage(document=doc, metadata=metadata, tokens=normalizer.tokenize(doc.text))


class Indexer:
    """One build per call to build(); nothing is shared between builds.

    With workers > 1 pages are read and tokenized on a thread pool, but
    results are merged one at a time in input order, so IDs match a
    single-threaded build of the same paths.
    """

    def __init__(self, normalizer: TextNormalizer | None = None, workers: int = 1):
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self.normalizer = normalizer or TextNormalizer()
        self.workers = workers

    def _candidates(self, paths: Iterable[Path]) -> list[tuple[Path, str]]:
        candidates = []
        for path in paths:
            page_name = page_name_for(path)
            if page_name is not None:
                candidates.append((Path(path), page_name))
        return candidates

    def _parse_all(self, candidates, executor) -> Iterator[ParsedPage]:
        if executor is None:
            for path, page_name in candidates:
                yield parse_document(path, page_name, self.normalizer)
            return
        yield from executor.map(
            lambda c: parse_document(c[0], c[1], self.normalizer), candidates
        )

    def build(self, paths: Iterable[Path], cancel: threading.Event | None = None) -> BuildResult:
        candidates = self._candidates(paths)
        registry = PageRegistry()
        words = WordIndex()

        executor = ThreadPoolExecutor(max_workers=self.workers) if self.workers > 1 else None
        try:
            for page in self._parse_all(candidates, executor):
                if cancel is not None and cancel.is_set():
                    raise BuildCancelled("build cancelled before all pages were indexed")
                page_id = registry.register_if_absent(page.metadata, source=page.document.path)
                words.record_all(page.tokens, page_id)
                logger.debug("%s -> page %d (%d tokens)", page.document.path, page_id, len(page.tokens))
        finally:
            if executor is not None:
                executor.shutdown(wait=True, cancel_futures=True)

        logger.info("Indexed %d page(s), %d unique tokens.", len(registry), len(words))
        return BuildResult(word_index=words, page_index=registry.page_index)


def write_json(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(payload, ensure_ascii=False, separators=(",", ":")),
        encoding="utf-8",
    )


def write_outputs(result: BuildResult, paths: BuildPaths) -> list[OutputWriteError]:
    """Write both artifacts; a failure on one is logged and the other is still attempted."""
    failures = []
    outputs = (
        (paths.word_index, result.word_index.to_json_dict()),
        (paths.page_index, result.page_index_json()),
    )
    for path, payload in outputs:
        try:
            write_json(path, payload)
        except OSError as e:
            logger.exception("Error writing %s", path)
            failures.append(OutputWriteError(path, e))
        else:
            logger.info("Output -> %s", path)
    return failures


def build_site(root, normalizer: TextNormalizer | None = None, workers: int = 1,
               cancel: threading.Event | None = None) -> tuple[BuildResult, list[OutputWriteError]]:
    paths = BuildPaths.from_root(root)
    result = Indexer(normalizer, workers=workers).build(discover_documents(paths.post_dir), cancel=cancel)
    return result, write_outputs(result, paths)
