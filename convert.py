"""Whole-document conversion plus the file and stream plumbing around it."""

import dataclasses
import logging
import sys
from pathlib import Path

from scanner import Scanner
from toml_header import format_header

logger = logging.getLogger("fm2toml.convert")

STDIN = "-"


def convert(content: str, alias: str | None = None) -> str:
    """Replace the YAML header of ``content`` with a TOML one.

    ``alias`` overrides any ``alias`` from the header. The body after the
    closing ``---`` is passed through unchanged. Raises a ParseError subclass
    if the document cannot be converted.
    """
    scanner = Scanner(content)
    metadata = scanner.read_front_matter()
    if alias is not None:
        metadata = dataclasses.replace(metadata, alias=alias)

    logger.debug(
        "title=%r date=%r tags=%r alias=%r body=%d chars",
        metadata.title,
        metadata.date,
        metadata.tags,
        metadata.alias,
        len(content) - scanner.offset,
    )
    return format_header(metadata) + scanner.remaining()


def alias_for(path: str | Path, prefix: str) -> str:
    """Build an alias from a prefix and a file name.

    >>> alias_for("drafts/hello.md", "/posts/note/")
    '/posts/note/hello.md'
    """
    return f"{prefix.rstrip('/')}/{Path(path).name}"


def output_path_for(input_path: str | Path, output_dir: str | Path) -> Path:
    return Path(output_dir) / Path(input_path).name


def read_input(path: str | Path | None = None) -> str:
    """Read a whole document from ``path``, or stdin for None / ``-``.

    Bytes are decoded without newline translation, so CRLF line endings
    survive.
    Raises UnicodeDecodeError for input that is not UTF-8.
    """
    if path is None or path == STDIN:
        return sys.stdin.buffer.read().decode("utf-8")
    return Path(path).read_bytes().decode("utf-8")


def write_output(text: str, path: str | Path | None = None) -> None:
    """Write to ``path``, creating parent dirs, or to stdout for None."""
    if path is None:
        sys.stdout.flush()
        sys.stdout.buffer.write(text.encode("utf-8"))
        sys.stdout.buffer.flush()
        return
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8", newline="")


def convert_file(
    input_path: str | None,
    output_path: str | Path | None = None,
    alias: str | None = None,
    alias_prefix: str | None = None,
    write: bool = True,
) -> str:
    """Convert one input and write the result.

    Rendering finishes before anything is written, so a failed conversion
    leaves no output behind. Returns the converted text.
    """
    content = read_input(input_path)
    if alias is None and alias_prefix and input_path not in (None, STDIN):
        alias = alias_for(input_path, alias_prefix)

    converted = convert(content, alias=alias)
    if write:
        write_output(converted, output_path)
        logger.debug("wrote %s", output_path or "<stdout>")
    return converted
