"""
Command line entry point.

    hugo-index /path/to/site/ [--stopwords FILE] [--workers N] [-v]

Exit status: 0 when both files were written, 1 when a source page could
not be read (nothing is written) or either output file failed.
"""
from __future__ import annotations

import argparse
import logging

from .errors import DocumentReadError, IndexerError
from .indexer import build_site
from .normalizer import TextNormalizer, load_stopwords

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hugo-index",
        description="Build word_index.json and page_index.json for a Hugo blog's search page.",
    )
    parser.add_argument("root", help="site root containing content/post/ and content/static/")
    parser.add_argument("--stopwords", metavar="FILE",
                        help="stop-word list, one word per line (default: bundled English list)")
    parser.add_argument("--workers", type=int, default=1,
                        help="threads used to read and tokenize pages (default: 1)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("-v", "--verbose", action="store_true", help="same as --log-level DEBUG")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    level = logging.DEBUG if args.verbose else getattr(logging, args.log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    try:
        normalizer = TextNormalizer(load_stopwords(args.stopwords))
    except OSError as e:
        logger.error("Cannot load stop words from %s: %s", args.stopwords, e)
        return 1

    try:
        result, failures = build_site(args.root, normalizer=normalizer, workers=args.workers)
    except DocumentReadError as e:
        logger.error("Build aborted: %s", e)
        return 1
    except IndexerError as e:
        logger.error("Build failed: %s", e)
        return 1

    return 1 if failures else 0
