#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Build the static search index for a Hugo blog (see hugo_index.indexer):
- reads  <root>/content/post/**/*.md
- writes <root>/content/static/word_index.json
         <root>/content/static/page_index.json

Usage: python scripts/build_index.py /path/to/site/
"""
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hugo_index.cli import main  # noqa: E402

if __name__ == '__main__':
    sys.exit(main())
