"""Static search index builder for Hugo blogs."""
from .errors import BuildCancelled, DocumentReadError, IndexerError, OutputWriteError
from .frontmatter import parse_metadata
from .indexer import BuildResult, Indexer, build_site, discover_documents, page_name_for, write_outputs
from .normalizer import TextNormalizer, load_stopwords
from .registry import PageRegistry
from .word_index import WordIndex

__all__ = [
    "BuildCancelled",
    "BuildResult",
    "DocumentReadError",
    "Indexer",
    "IndexerError",
    "OutputWriteError",
    "PageRegistry",
    "TextNormalizer",
    "WordIndex",
    "build_site",
    "discover_documents",
    "load_stopwords",
    "page_name_for",
    "parse_metadata",
    "write_outputs",
]
