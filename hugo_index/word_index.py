"""Inverted index: token -> set of page IDs containing it at least once."""
from __future__ import annotations

from collections import defaultdict
from typing import Iterable


class WordIndex:
    def __init__(self):
        self._pages: defaultdict[str, set[int]] = defaultdict(set)

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, token: str) -> bool:
        return token in self._pages

    def record(self, token: str, page_id: int) -> None:
        self._pages[token].add(page_id)

    def record_all(self, tokens: Iterable[str], page_id: int) -> None:
        for token in tokens:
            self._pages[token].add(page_id)

    def pages(self, token: str) -> frozenset[int]:
        return frozenset(self._pages.get(token, ()))

    def as_dict(self) -> dict[str, set[int]]:
        return dict(self._pages)

    def to_json_dict(self) -> dict[str, list[int]]:
        # sorted ids keep the written file reproducible
        return {token: sorted(ids) for token, ids in self._pages.items()}
