"""Note conversion operations inside a corpus."""

import logging

from convert import alias_for, convert, read_input, write_output
from corpus import Corpus
from errors import ParseError

logger = logging.getLogger("fm2toml.migrate")


def _default_alias(corpus: Corpus, path: str) -> str | None:
    prefix = corpus.migration_config["alias_prefix"]
    return alias_for(path, prefix) if prefix else None


def preview_note(corpus: Corpus, path: str, alias: str | None = None) -> str:
    """Return a note converted to TOML front matter without writing it."""
    resolved = corpus.resolve_path(path)
    if resolved is None:
        return f"Error: Note not found: {path}"

    rel = resolved.relative_to(corpus.root)
    if alias is None:
        alias = _default_alias(corpus, resolved.name)
    try:
        return convert(read_input(resolved), alias=alias)
    except (ParseError, UnicodeDecodeError) as e:
        return f"Error: {rel}: {e}"


def convert_note(
    corpus: Corpus,
    path: str,
    destination: str | None = None,
    alias: str | None = None,
) -> str:
    """Convert a note and write the result.

    Without a destination the note goes to the configured output folder
    under the same relative path, or is rewritten in place if none is set.
    """
    resolved = corpus.resolve_path(path)
    if resolved is None:
        return f"Error: Note not found: {path}"

    rel = str(resolved.relative_to(corpus.root))
    if destination is None:
        output_folder = corpus.migration_config["output_folder"]
        destination = f"{output_folder.strip('/')}/{rel}" if output_folder else rel
    if alias is None:
        alias = _default_alias(corpus, resolved.name)

    try:
        converted = convert(read_input(resolved), alias=alias)
    except (ParseError, UnicodeDecodeError) as e:
        logger.warning("skipping %s: %s", rel, e)
        return f"Error: {rel}: {e}"

    try:
        full = corpus.ensure_path(destination)
    except ValueError as e:
        return f"Error: {e}"

    write_output(converted, full)
    dest_rel = full.relative_to(corpus.root)
    logger.debug("converted %s -> %s", rel, dest_rel)
    return f"Converted {rel} -> {dest_rel}"


def migrate_folder(
    corpus: Corpus,
    folder: str = "",
    destination: str | None = None,
    recursive: bool = True,
) -> str:
    """Convert every note under ``folder``, keeping relative paths.

    Notes that fail to convert are reported and left untouched.
    """
    if destination is None:
        destination = corpus.migration_config["output_folder"]
    destination = destination.strip("/")

    base = corpus.root / folder if folder else corpus.root
    notes = list(corpus.iter_notes(folder=folder, recursive=recursive))
    if not notes:
        return f"No notes in {folder or 'content root'}."

    converted = 0
    failures = []
    for note in notes:
        rel = str(note.relative_to(corpus.root))
        sub = str(note.relative_to(base))
        target = f"{destination}/{sub}" if destination else rel
        result = convert_note(corpus, rel, destination=target)
        if result.startswith("Error:"):
            failures.append(result)
        else:
            converted += 1

    lines = [f"Converted {converted} note(s), {len(failures)} failed."]
    lines.extend(f"  {failure}" for failure in failures)
    return "\n".join(lines)
