from pathlib import Path

import pytest

from hugo_index.normalizer import TextNormalizer


def front_matter(title="Hello World", date="2021-05-01T10:00:00Z", draft="false", body=""):
    return f'---\ntitle: "{title}"\ndate: {date}\ndraft: {draft}\n---\n{body}'


@pytest.fixture
def normalizer():
    return TextNormalizer()


@pytest.fixture
def make_site(tmp_path):
    """Write pages below <tmp>/content/post/ and return the site root."""

    def _make(pages: dict) -> Path:
        post_dir = tmp_path / "content" / "post"
        post_dir.mkdir(parents=True, exist_ok=True)
        for rel, content in pages.items():
            path = post_dir / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make
