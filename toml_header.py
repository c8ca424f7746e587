"""TOML front matter rendering."""

from frontmatter import Metadata

MARKER = "+++"
TAG_SEPARATOR = ", "

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def quote(text: str) -> str:
    """Return ``text`` as a TOML basic string literal."""
    out = []
    for ch in text:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def split_tags(tags: str) -> list[str]:
    """Split a tag string on ``", "``.

    Only that exact separator splits; ``"a,b"`` is one tag.
    """
    return tags.split(TAG_SEPARATOR)


def format_list(items: list[str]) -> str:
    return "[" + ",".join(quote(item) for item in items) + "]"


def format_header(metadata: Metadata) -> str:
    """Render metadata as a ``+++`` block with no trailing newline."""
    lines = [MARKER, f"title = {quote(metadata.title)}"]
    if metadata.date is not None:
        lines.append(f"date = {metadata.date}")
    if metadata.alias is not None:
        lines.append(f"aliases = {format_list([metadata.alias])}")
    if metadata.tags is not None:
        lines.append("[taxonomies]")
        lines.append(f"tags = {format_list(split_tags(metadata.tags))}")
    lines.append(MARKER)
    return "\n".join(lines)
