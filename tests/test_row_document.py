from kilo_engine.buffer import Document, Row, split_lines
from kilo_engine.syntax import HighlightClass


def make_document(*lines: str) -> Document:
    document = Document(lines)
    document.mark_clean()
    return document


def test_row_render_and_highlight_follow_raw() -> None:
    row = Row(index=0, raw="\tx")

    assert row.render == " " * 8 + "x"
    assert len(row.highlight) == len(row.render)

    row.insert_char(0, "a")
    assert row.render == "a" + " " * 7 + "x"
    assert len(row.highlight) == len(row.render)


def test_row_edits_clamp_positions() -> None:
    row = Row(index=0, raw="abc")

    row.insert_char(99, "!")
    assert row.raw == "abc!"
    assert row.delete_char(99) is True
    assert row.raw == "abc"
    assert Row(index=0).delete_char(0) is False


def test_split_lines_strips_terminators() -> None:
    assert split_lines("one\ntwo\r\n") == ["one", "two"]
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("") == []


def test_document_text_round_trip() -> None:
    document = Document.from_text("one\ntwo\n")

    assert document.lines() == ["one", "two"]
    assert document.to_text() == "one\ntwo\n"
    assert [row.index for row in document] == [0, 1]


def test_document_bytes_are_single_byte_characters() -> None:
    data = bytes(range(32, 256)) + b"\n"

    document = Document.from_bytes(data)

    assert document.row_count == 1
    assert len(document.rows[0].raw) == 224
    assert document.to_bytes() == data


def test_insert_row_clamps_and_renumbers() -> None:
    document = make_document("a", "b")

    document.insert_row(10, "z")
    document.insert_row(-3, "first")

    assert document.lines() == ["first", "a", "b", "z"]
    assert [row.index for row in document.rows] == [0, 1, 2, 3]
    assert document.dirty == 2


def test_delete_row_clamps_index() -> None:
    document = make_document("a", "b")

    removed = document.delete_row(-5)

    assert removed is not None and removed.raw == "a"
    assert document.lines() == ["b"]
    assert document.rows[0].index == 0


def test_delete_row_on_empty_document_is_noop() -> None:
    document = make_document()

    assert document.delete_row(0) is None
    assert document.dirty == 0


def test_content_edits_clamp_row_and_column() -> None:
    document = make_document("ab")

    document.insert_char(5, 99, "!")
    assert document.lines() == ["ab!"]

    document.delete_char(0, 99)
    assert document.lines() == ["ab"]

    document.set_row_text(-1, "xyz")
    assert document.lines() == ["xyz"]
    assert document.modified


def test_delete_char_on_empty_row_keeps_clean() -> None:
    document = make_document("")

    document.delete_char(0, 0)

    assert document.lines() == [""]
    assert document.dirty == 0


def test_split_and_join_rows() -> None:
    document = make_document("hello")

    document.split_row(0, 2)
    assert document.lines() == ["he", "llo"]

    column = document.join_rows(0)
    assert column == 2
    assert document.lines() == ["hello"]


def test_mark_clean_resets_dirty() -> None:
    document = make_document("a")
    document.append_text(0, "b")
    assert document.modified

    document.mark_clean()

    assert not document.modified
    assert document.rows[0].highlight == [HighlightClass.NORMAL] * 2


def test_deleting_last_character_leaves_empty_sequences() -> None:
    document = make_document("x")

    document.delete_char(0, 0)

    row = document.rows[0]
    assert (row.raw, row.render, row.highlight) == ("", "", [])


def test_insert_then_delete_restores_row() -> None:
    document = make_document("a\tbc")
    for at in range(5):
        document.insert_char(0, at, "Z")
        document.delete_char(0, at)
        assert document.rows[0].raw == "a\tbc"
        assert len(document.rows[0].render) == len(document.rows[0].highlight)
