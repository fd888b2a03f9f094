from pathlib import Path

import pytest

from kilo_engine.buffer import (
    Buffer,
    Document,
    DocumentIOError,
    load_document,
    save_document,
)
from kilo_engine.session import EditorSession


def test_missing_file_loads_as_empty_document(tmp_path: Path) -> None:
    document = load_document(tmp_path / "new.txt")

    assert document.row_count == 0
    assert not document.modified


def test_save_writes_terminated_rows(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"

    written = save_document(Document(["one", "two"]), target)

    assert written == 8
    assert target.read_bytes() == b"one\ntwo\n"


def test_save_truncates_longer_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    target.write_bytes(b"a much longer line\nand more\n")

    save_document(Document(["x"]), target)

    assert target.read_bytes() == b"x\n"


def test_latin1_bytes_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "cafe.txt"
    target.write_bytes(b"caf\xe9\r\nna\xefve\n")

    buffer = Buffer.open(target)
    assert buffer.document.lines() == ["café", "naïve"]

    buffer.save()
    assert target.read_bytes() == b"caf\xe9\nna\xefve\n"
    assert not buffer.document.modified


def test_unreadable_path_raises_document_error(tmp_path: Path) -> None:
    with pytest.raises(DocumentIOError) as info:
        load_document(tmp_path)

    assert info.value.path == str(tmp_path)
    assert isinstance(info.value.__cause__, OSError)


def test_unwritable_path_raises_document_error(tmp_path: Path) -> None:
    with pytest.raises(DocumentIOError) as info:
        save_document(Document(["x"]), tmp_path)

    assert info.value.reason


def test_failed_save_keeps_document_modified(tmp_path: Path) -> None:
    buffer = Buffer.from_text("a\n", filename=str(tmp_path))
    buffer.insert_char("b")
    session = EditorSession(buffer)

    assert session.save() is False

    assert buffer.document.modified
    assert session.status.text.startswith("Can't save! I/O error: ")


def test_successful_save_reports_byte_count(tmp_path: Path) -> None:
    target = tmp_path / "ok.txt"
    buffer = Buffer.from_text("abc\n", filename=str(target))
    buffer.insert_char("x")
    session = EditorSession(buffer)

    assert session.save() is True

    assert session.status.text == "5 bytes written to disk"
    assert target.read_bytes() == b"xabc\n"
    assert not buffer.document.modified
