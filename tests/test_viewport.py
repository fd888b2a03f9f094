from kilo_engine.buffer import CursorState, Document
from kilo_engine.view import Viewport


def make_document(count: int = 20) -> Document:
    return Document([f"line {i}" for i in range(count)])


def test_scroll_down_and_up_follow_cursor() -> None:
    document = make_document()
    viewport = Viewport(rows=5, cols=10)
    cursor = CursorState(cy=12)

    viewport.scroll(document, cursor)
    assert viewport.row_offset == 8

    cursor.cy = 3
    viewport.scroll(document, cursor)
    assert viewport.row_offset == 3


def test_horizontal_scroll_uses_rendered_column() -> None:
    document = Document(["a" * 30, "\tx"])
    viewport = Viewport(rows=5, cols=10)
    cursor = CursorState(cx=25)

    viewport.scroll(document, cursor)
    assert cursor.rx == 25
    assert viewport.col_offset == 16
    assert viewport.screen_position(cursor) == (0, 9)

    cursor.set(1, 1)
    viewport.scroll(document, cursor)
    assert cursor.rx == 8
    assert viewport.col_offset == 8


def test_cursor_past_end_has_column_zero() -> None:
    document = make_document(2)
    viewport = Viewport(rows=5, cols=10)
    cursor = CursorState(cy=2)

    viewport.scroll(document, cursor)

    assert cursor.rx == 0
    assert viewport.row_offset == 0


def test_reveal_puts_cursor_row_on_top() -> None:
    document = make_document()
    viewport = Viewport(rows=5, cols=10)
    cursor = CursorState(cy=10)

    viewport.reveal(document, cursor)

    assert viewport.row_offset == 10
    assert viewport.screen_position(cursor) == (0, 0)


def test_resize_keeps_at_least_one_cell() -> None:
    viewport = Viewport()

    viewport.resize(-2, 0)

    assert (viewport.rows, viewport.cols) == (1, 1)
