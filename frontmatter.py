"""YAML front matter decoding into a Metadata record."""

from dataclasses import dataclass

import yaml

from errors import MetadataDecodeError

OPTIONAL_FIELDS = ("date", "tags", "alias")


@dataclass(frozen=True)
class Metadata:
    """Fields carried over from a YAML header."""

    title: str
    date: str | None = None
    tags: str | None = None
    alias: str | None = None


def decode(block: str) -> Metadata:
    """Decode the text between the ``---`` markers.

    Scalars are kept as text (BaseLoader), so ``date: 2020-02-01`` stays the
    string ``"2020-02-01"``. Unknown keys are ignored.
    """
    try:
        raw = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise MetadataDecodeError(str(e)) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise MetadataDecodeError(f"expected a mapping, got {type(raw).__name__}")

    if "title" not in raw:
        raise MetadataDecodeError("missing field `title`")
    title = raw["title"]
    if not isinstance(title, str):
        raise MetadataDecodeError(f"invalid type for `title`: expected a string, got {type(title).__name__}")
    if not title:
        raise MetadataDecodeError("field `title` is empty")

    fields = {}
    for name in OPTIONAL_FIELDS:
        value = raw.get(name)
        if value is None or value == "":
            continue
        if not isinstance(value, str):
            raise MetadataDecodeError(
                f"invalid type for `{name}`: expected a string, got {type(value).__name__}"
            )
        fields[name] = value

    return Metadata(title=title, **fields)

