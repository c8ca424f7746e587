"""Shared test fixtures for front matter migration tests."""

import io
import json
from pathlib import Path

import pytest

HELLO = "---\ntitle: Hello\ndate: 2020-02-01\ntags: x, y\n---\nBody text"


def byte_stdin(text: str) -> io.TextIOWrapper:
    """A stdin replacement with a binary buffer underneath."""
    return io.TextIOWrapper(io.BytesIO(text.encode("utf-8")), encoding="utf-8")


@pytest.fixture
def tmp_corpus(tmp_path: Path) -> Path:
    """Create a temporary content directory with sample posts."""
    config = {"output_folder": "", "alias_prefix": "/posts/note/"}
    (tmp_path / ".fm2toml.json").write_text(json.dumps(config))

    (tmp_path / "posts").mkdir()
    (tmp_path / "posts" / "drafts").mkdir()
    (tmp_path / "node_modules").mkdir()

    (tmp_path / "posts" / "hello.md").write_text(HELLO)
    (tmp_path / "posts" / "book.md").write_text(
        "---\ntitle: 『ビッグデータを支える技術』を読んだ\ndate: 2020-02-01\n"
        "tags: database, book\n---\n\n本文\n"
    )
    (tmp_path / "posts" / "drafts" / "untitled.md").write_text(
        "---\ndate: 2021-01-01\n---\n\nNo title here.\n"
    )
    (tmp_path / "about.md").write_text("---\ntitle: About\n---\n\nAbout me.\n")
    (tmp_path / "node_modules" / "README.md").write_text("# vendored\n")

    return tmp_path
