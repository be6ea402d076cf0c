"""
Raw page text -> indexable tokens.

Pipeline (order matters):
- segment into words; runs of Han ideographs go through jieba
- lowercase
- fold diacritics to ASCII ("café" -> "cafe")
- drop stop words
- drop tokens shorter than 3 characters (except "h2") and plain numbers

The search page applies the same folding to query terms, so anything
changed here has to change there too.
"""
from __future__ import annotations

import logging
import re
import unicodedata
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator

import jieba

jieba.setLogLevel(logging.WARNING)

logger = logging.getLogger(__name__)

# letter/digit runs, kept whole across "3.14", "don't", "e.g"; "_" is a boundary
WORD_RE = re.compile(r"[^\W_]+(?:[.'’][^\W_]+)*")
HAN_RE = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]")
HAN_RUN_RE = re.compile(r"([\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]+)")
NUMERIC_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

# letters NFKD leaves alone
FOLD_TABLE = str.maketrans({
    "ß": "ss", "ẞ": "SS",
    "æ": "ae", "Æ": "AE",
    "œ": "oe", "Œ": "OE",
    "ø": "o", "Ø": "O",
    "ł": "l", "Ł": "L",
    "đ": "d", "Đ": "D",
    "ð": "d", "Ð": "D",
    "þ": "th", "Þ": "TH",
    "ı": "i",
})

MIN_TOKEN_LENGTH = 3
SHORT_TOKEN_EXCEPTIONS = frozenset({"h2"})


def parse_stopwords(text: str) -> frozenset[str]:
    words = set()
    for line in text.splitlines():
        word = line.strip()
        if word and not word.startswith("#"):
            words.add(word.lower())
    return frozenset(words)


@lru_cache(maxsize=None)
def default_stopwords() -> frozenset[str]:
    text = resources.files(__package__).joinpath("stopwords.txt").read_text(encoding="utf-8")
    return parse_stopwords(text)


def load_stopwords(path: str | Path | None = None) -> frozenset[str]:
    """Bundled English list, or one word per line from `path`."""
    if path is None:
        return default_stopwords()
    words = parse_stopwords(Path(path).read_text(encoding="utf-8"))
    logger.debug("Loaded %d stop words from %s", len(words), path)
    return words


def fold_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    folded = []
    for ch in decomposed:
        if unicodedata.combining(ch):
            continue
        # native digits ("١٢٣", "१२३") become ASCII so the numeric filter sees them
        folded.append(str(unicodedata.decimal(ch)) if ch.isdecimal() else ch)
    return "".join(folded).translate(FOLD_TABLE)


def is_numeric(token: str) -> bool:
    return NUMERIC_RE.fullmatch(token) is not None


def accept(token: str) -> bool:
    if len(token) < MIN_TOKEN_LENGTH and token.lower() not in SHORT_TOKEN_EXCEPTIONS:
        return False
    return not is_numeric(token)


class TextNormalizer:
    """Stateless apart from the stop-word set, so one instance can serve many threads."""

    def __init__(self, stopwords: Iterable[str] | None = None):
        if stopwords is None:
            self.stopwords = default_stopwords()
        else:
            self.stopwords = frozenset(w.lower() for w in stopwords)

    def segment(self, text: str) -> Iterator[str]:
        text = unicodedata.normalize("NFC", text)
        for m in WORD_RE.finditer(text):
            word = m.group(0)
            if not HAN_RE.search(word):
                yield word
                continue
            # only Han runs go to jieba
            for part in HAN_RUN_RE.split(word):
                if not part:
                    continue
                if not HAN_RE.match(part):
                    yield from (sub.group(0) for sub in WORD_RE.finditer(part))
                    continue
                for piece in jieba.cut(part):
                    piece = piece.strip()
                    if piece:
                        yield piece

    def normalize(self, word: str) -> str:
        # NFKD can bring capitals back ("𝐓𝐡𝐞" -> "The")
        return fold_diacritics(word.lower()).lower()

    def tokenize(self, text: str) -> list[str]:
        tokens = []
        for word in self.segment(text):
            token = self.normalize(word)
            if not token or token in self.stopwords:
                continue
            if accept(token):
                tokens.append(token)
        return tokens
