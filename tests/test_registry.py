import logging
from pathlib import Path

from hugo_index.registry import PageRegistry


def meta(name, title="T"):
    return {"pageName": name, "title": title}


def test_ids_are_dense_and_first_seen():
    registry = PageRegistry()
    ids = [registry.register_if_absent(meta(name)) for name in ("c", "a", "b")]
    assert ids == [0, 1, 2]
    assert set(registry.page_index) == {0, 1, 2}
    assert len(registry) == 3
    assert registry.page_id("a") == 1
    assert registry.page_id("missing") is None
    assert "c" in registry


def test_registration_is_idempotent():
    registry = PageRegistry()
    first = registry.register_if_absent(meta("p", "First"))
    second = registry.register_if_absent(meta("p", "Second"))
    assert first == second == 0
    assert registry.page_index == {0: {"pageName": "p", "title": "First"}}
    assert registry.register_if_absent(meta("q")) == 1


def test_conflicting_sources_are_logged(caplog):
    registry = PageRegistry()
    registry.register_if_absent(meta("dup"), source=Path("one/dup.md"))
    with caplog.at_level(logging.WARNING):
        assert registry.register_if_absent(meta("dup", "Other"), source=Path("two/dup.md")) == 0
    assert "already registered" in caplog.text
    assert registry.page_index[0]["title"] == "T"


def test_same_source_twice_is_quiet(caplog):
    registry = PageRegistry()
    registry.register_if_absent(meta("p"), source=Path("p.md"))
    with caplog.at_level(logging.WARNING):
        registry.register_if_absent(meta("p"), source=Path("p.md"))
    assert caplog.records == []
