"""Central Corpus class for path resolution and config reading."""

import json
from pathlib import Path
from typing import Iterator

CONFIG_FILE = ".fm2toml.json"


class Corpus:
    """A static-site content directory on disk."""

    EXCLUDED_DIRS = {".git", ".venv", "node_modules", "public", "themes"}

    def __init__(self, root: str | Path):
        self.root = Path(root).expanduser().resolve()
        if not self.root.is_dir():
            raise ValueError(f"Content path does not exist: {self.root}")

    def resolve_path(self, rel: str) -> Path | None:
        """Resolve a corpus-relative path to an existing file.

        Tries the exact path, then the path with .md appended.
        """
        rel = rel.strip("/")

        candidate = self.root / rel
        if candidate.is_file() and self._is_within_root(candidate):
            return candidate

        if not rel.endswith(".md"):
            candidate = self.root / (rel + ".md")
            if candidate.is_file() and self._is_within_root(candidate):
                return candidate

        return None

    def _is_within_root(self, path: Path) -> bool:
        """Check that a path resolves to within the corpus root."""
        try:
            resolved = path.resolve()
        except (OSError, ValueError):
            return False
        return resolved == self.root or self.root in resolved.parents

    def ensure_path(self, rel: str) -> Path:
        """Convert a corpus-relative path to absolute, creating parent dirs.

        Appends .md if not present. Does NOT check if file exists.
        """
        rel = rel.strip("/")
        if not rel.endswith(".md"):
            rel += ".md"
        full = self.root / rel
        if not self._is_within_root(full):
            raise ValueError(f"Path escapes content root: {rel}")
        full.parent.mkdir(parents=True, exist_ok=True)
        return full

    def read_config(self) -> dict:
        """Read the JSON config file at the root. Returns {} if missing."""
        config_path = self.root / CONFIG_FILE
        if not config_path.is_file():
            return {}
        try:
            return json.loads(config_path.read_text())
        except (json.JSONDecodeError, OSError):
            return {}

    @property
    def migration_config(self) -> dict:
        """Migration settings with defaults."""
        config = self.read_config()
        return {
            "output_folder": config.get("output_folder", ""),
            "alias_prefix": config.get("alias_prefix", ""),
        }

    def iter_notes(self, folder: str = "", recursive: bool = False) -> Iterator[Path]:
        """Yield .md files in the corpus, optionally within a folder."""
        base = self.root / folder if folder else self.root

        if not base.is_dir() or not self._is_within_root(base):
            return

        pattern = base.rglob("*.md") if recursive else base.glob("*.md")
        for p in sorted(pattern):
            if p.is_file() and self._should_include(p):
                yield p

    def _should_include(self, path: Path) -> bool:
        """Check if a path should be included (not in excluded dirs)."""
        parts = path.relative_to(self.root).parts
        return not any(part in self.EXCLUDED_DIRS for part in parts)

    def note_count(self) -> int:
        """Count all .md files in the corpus."""
        return sum(1 for _ in self.iter_notes(recursive=True))
