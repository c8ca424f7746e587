"""Tests for whole-document conversion and file plumbing."""

from pathlib import Path

import pytest

from conftest import HELLO, byte_stdin
from convert import alias_for, convert, convert_file, output_path_for, read_input, write_output
from errors import DelimiterMismatch, DelimiterNotFound, MetadataDecodeError

HELLO_TOML = (
    '+++\ntitle = "Hello"\ndate = 2020-02-01\n'
    '[taxonomies]\ntags = ["x","y"]\n+++\nBody text'
)


def test_convert_example():
    assert convert(HELLO) == HELLO_TOML


def test_convert_body_untouched():
    body = "\n\n# Heading\n\n--- not a marker ---\n+++\n\ttrailing  \n"
    result = convert("---\ntitle: T\n---" + body)
    header = '+++\ntitle = "T"\n+++'
    assert result == header + body
    assert result[len(header) :] == body


def test_convert_title_only_has_one_field():
    result = convert("---\ntitle: X\n---\n")
    lines = result.splitlines()
    assert lines[1:-1] == ['title = "X"']
    assert "[taxonomies]" not in result


def test_convert_single_tag():
    assert 'tags = ["solo"]' in convert("---\ntitle: X\ntags: solo\n---\n")


def test_convert_tags_in_order():
    result = convert("---\ntitle: X\ndate: 2020-02-01\ntags: a, b\n---\n")
    assert 'tags = ["a","b"]' in result


def test_convert_alias_override():
    result = convert("---\ntitle: X\nalias: /from/yaml\n---\n", alias="/from/cli")
    assert 'aliases = ["/from/cli"]' in result
    assert "/from/yaml" not in result


def test_convert_missing_start_marker():
    with pytest.raises(DelimiterMismatch):
        convert("# Just markdown\n")


def test_convert_missing_end_marker():
    with pytest.raises(DelimiterNotFound):
        convert("---\ntitle: X\n\nbody")


def test_convert_missing_title():
    with pytest.raises(MetadataDecodeError):
        convert("---\ndate: 2020-02-01\n---\nbody")


def test_alias_for():
    assert alias_for("drafts/hello.md", "/posts/note/") == "/posts/note/hello.md"
    assert alias_for(Path("hello.md"), "/posts/note") == "/posts/note/hello.md"


def test_output_path_for(tmp_path: Path):
    assert output_path_for("in/post.md", tmp_path) == tmp_path / "post.md"


def test_read_input_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", byte_stdin(HELLO))
    assert read_input("-") == HELLO
    monkeypatch.setattr("sys.stdin", byte_stdin(HELLO))
    assert read_input(None) == HELLO


def test_read_input_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_input(str(tmp_path / "nope.md"))


def test_write_output_creates_parents(tmp_path: Path):
    target = tmp_path / "a" / "b" / "out.md"
    write_output("text", target)
    assert target.read_text() == "text"


def test_write_output_stdout(capsys):
    write_output("text")
    assert capsys.readouterr().out == "text"


def test_convert_file(tmp_path: Path):
    src = tmp_path / "hello.md"
    src.write_text(HELLO)
    out = tmp_path / "out" / "hello.md"
    result = convert_file(str(src), out, alias_prefix="/posts/note/")
    assert out.read_text() == result
    assert 'aliases = ["/posts/note/hello.md"]' in result


def test_convert_file_explicit_alias_wins(tmp_path: Path):
    src = tmp_path / "hello.md"
    src.write_text(HELLO)
    result = convert_file(str(src), write=False, alias="/x", alias_prefix="/posts/")
    assert 'aliases = ["/x"]' in result


def test_convert_file_failure_writes_nothing(tmp_path: Path):
    src = tmp_path / "bad.md"
    src.write_text("---\ndate: 2020-02-01\n---\nbody")
    out = tmp_path / "out" / "bad.md"
    with pytest.raises(MetadataDecodeError):
        convert_file(str(src), out)
    assert not out.exists()
    assert not out.parent.exists()


@pytest.mark.parametrize(
    "body",
    [
        "\r\n\r\nLine one\r\nLine two\r\n",
        "\rold mac line\rend",
        "\n\ttrailing spaces   \n\n",
        "\nmixed\r\nendings\n\r",
    ],
)
def test_convert_file_keeps_body_bytes(tmp_path: Path, body: str):
    src = tmp_path / "post.md"
    src.write_bytes(("---\ntitle: T\n---" + body).encode("utf-8"))
    out = tmp_path / "out" / "post.md"
    convert_file(str(src), out)
    assert out.read_bytes() == ('+++\ntitle = "T"\n+++' + body).encode("utf-8")


def test_stdin_to_stdout_keeps_crlf(monkeypatch, capsysbinary):
    body = "\r\n\r\nLine one\r\n"
    monkeypatch.setattr("sys.stdin", byte_stdin("---\ntitle: T\n---" + body))
    convert_file(None)
    assert capsysbinary.readouterr().out == ('+++\ntitle = "T"\n+++' + body).encode("utf-8")


def test_read_input_not_utf8(tmp_path: Path):
    src = tmp_path / "latin1.md"
    src.write_bytes(b"---\ntitle: caf\xe9\n---\n")
    with pytest.raises(UnicodeDecodeError):
        read_input(src)
