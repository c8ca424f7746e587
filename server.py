"""FastMCP server for front matter migration over a content directory."""

import logging
import os

from fastmcp import FastMCP

import migrate
from convert import convert
from corpus import Corpus
from errors import ParseError

content_path = os.environ.get("FM2TOML_CONTENT_PATH", "~/site/content")
corpus = Corpus(content_path)

mcp = FastMCP("fm2toml")


@mcp.tool(
    annotations={"readOnlyHint": True, "destructiveHint": False, "idempotentHint": True}
)
def corpus_info() -> str:
    """Get the content root and migration settings."""
    config = corpus.migration_config
    lines = [
        f"Content root: {corpus.root}",
        f"Notes: {corpus.note_count()}",
        "",
        "Migration config:",
        f"  output_folder: {config['output_folder'] or '(in place)'}",
        f"  alias_prefix: {config['alias_prefix'] or '(none)'}",
    ]
    return "\n".join(lines)


@mcp.tool(
    annotations={"readOnlyHint": True, "destructiveHint": False, "idempotentHint": True}
)
def convert_text(content: str, alias: str | None = None) -> str:
    """Convert a document's YAML front matter to TOML front matter.

    Args:
        content: Full document text starting with a --- block
        alias: Optional path to emit under `aliases`
    """
    try:
        return convert(content, alias=alias)
    except ParseError as e:
        return f"Error: {e}"


@mcp.tool(
    annotations={"readOnlyHint": True, "destructiveHint": False, "idempotentHint": True}
)
def preview_note(path: str, alias: str | None = None) -> str:
    """Show a note as it would look after conversion, without writing it.

    Args:
        path: Content-relative path (e.g., "posts/hello.md")
        alias: Override for the configured alias prefix
    """
    return migrate.preview_note(corpus, path, alias)


@mcp.tool(
    annotations={
        "readOnlyHint": False,
        "destructiveHint": True,
        "idempotentHint": False,
    }
)
def convert_note(
    path: str, destination: str | None = None, alias: str | None = None
) -> str:
    """Convert one note and write the result.

    Args:
        path: Content-relative path of the source note
        destination: Where to write (default: configured output folder, or in place)
        alias: Override for the configured alias prefix
    """
    return migrate.convert_note(corpus, path, destination, alias)


@mcp.tool(
    annotations={
        "readOnlyHint": False,
        "destructiveHint": True,
        "idempotentHint": False,
    }
)
def migrate_folder(
    folder: str = "", destination: str | None = None, recursive: bool = True
) -> str:
    """Convert every note in a folder.

    Args:
        folder: Content-relative folder (empty = content root)
        destination: Output folder (default: configured output folder, or in place)
        recursive: Include notes in subfolders
    """
    return migrate.migrate_folder(corpus, folder, destination, recursive)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    mcp.run(transport="streamable-http", host="127.0.0.1", port=3001)
