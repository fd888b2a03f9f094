from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest

from kilo_engine.buffer import Buffer
from kilo_engine.modes import (
    EditMode,
    KeyInput,
    ModeBus,
    ModeContext,
    SaveAsMode,
    SearchMode,
)
from kilo_engine.modes.mode_manager import ModeManager
from kilo_engine.runtime import EditorSettings
from kilo_engine.session import EditorSession
from kilo_engine.syntax.rules import C_RULES


def make_manager(
    text: str = "",
    *,
    filename: Optional[str] = None,
    settings: Optional[EditorSettings] = None,
) -> ModeManager:
    session = EditorSession(
        Buffer.from_text(text, filename=filename),
        settings=settings,
        clock=lambda: 0.0,
    )
    context = ModeContext(session=session, bus=ModeBus(), extras={})
    manager = ModeManager(context)
    manager.register_mode(EditMode)
    manager.register_mode(SearchMode)
    manager.register_mode(SaveAsMode)
    return manager


def session_of(manager: ModeManager) -> EditorSession:
    return manager.context.session


def type_text(manager: ModeManager, text: str) -> None:
    for char in text:
        manager.handle_key(KeyInput(key=char, text=char))


def ctrl(key: str) -> KeyInput:
    return KeyInput(key=key, modifiers=("ctrl",))


def test_printable_keys_insert_text() -> None:
    manager = make_manager()

    type_text(manager, "hi")
    manager.handle_key(KeyInput(key="TAB"))
    manager.handle_key(KeyInput(key="ENTER"))
    type_text(manager, "x")

    assert session_of(manager).document.lines() == ["hi\t", "x"]


def test_unbound_and_wide_keys_are_ignored() -> None:
    manager = make_manager("a\n")

    result = manager.handle_key(ctrl("k"))
    manager.handle_key(KeyInput(key="€", text="€"))

    assert result.consumed is False
    assert session_of(manager).document.lines() == ["a"]


def test_bound_editing_and_movement_keys() -> None:
    manager = make_manager("abc\n")

    manager.handle_key(KeyInput(key="END"))
    manager.handle_key(KeyInput(key="BACKSPACE"))
    manager.handle_key(KeyInput(key="HOME"))
    manager.handle_key(KeyInput(key="DELETE"))

    assert session_of(manager).document.lines() == ["b"]


def test_page_down_and_up_move_a_screen() -> None:
    manager = make_manager("".join(f"line {i}\n" for i in range(50)))
    session = session_of(manager)
    session.resize(12, 80)

    manager.handle_key(KeyInput(key="PAGE_DOWN"))
    assert session.cursor.cy == 19
    assert session.viewport.row_offset == 10

    manager.handle_key(KeyInput(key="PAGE_UP"))
    assert session.cursor.cy == 0


def test_viewport_follows_cursor_after_each_key() -> None:
    manager = make_manager("".join(f"line {i}\n" for i in range(50)))
    session = session_of(manager)
    session.resize(12, 80)

    for _ in range(12):
        manager.handle_key(KeyInput(key="DOWN"))

    assert session.cursor.cy == 12
    assert session.viewport.row_offset == 3


def test_save_with_filename(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    manager = make_manager("abc\n", filename=str(target))
    saved: List[object] = []
    manager.context.bus.subscribe("document.saved", saved.append)

    type_text(manager, "x")
    manager.handle_key(ctrl("s"))

    assert target.read_bytes() == b"xabc\n"
    assert session_of(manager).status.text == "5 bytes written to disk"
    assert saved
    assert manager.active_mode is not None and manager.active_mode.name == "edit"


def test_save_as_prompt_names_and_saves(tmp_path: Path) -> None:
    target = tmp_path / "prog.c"
    manager = make_manager("int a;\n")
    session = session_of(manager)

    manager.handle_key(ctrl("s"))
    assert manager.active_mode is not None and manager.active_mode.name == "save_as"
    assert session.status.text == "Save as:  (ESC to cancel)"

    manager.handle_key(KeyInput(key="ENTER"))
    assert manager.active_mode.name == "save_as"

    type_text(manager, str(target) + "q")
    manager.handle_key(KeyInput(key="BACKSPACE"))
    assert session.status.text == f"Save as: {target} (ESC to cancel)"
    manager.handle_key(KeyInput(key="ENTER"))

    assert manager.active_mode.name == "edit"
    assert session.buffer.filename == str(target)
    assert session.document.rule_set is C_RULES
    assert target.read_bytes() == b"int a;\n"


def test_save_as_escape_aborts() -> None:
    manager = make_manager("a\n")

    manager.handle_key(ctrl("s"))
    type_text(manager, "name")
    manager.handle_key(KeyInput(key="ESC"))

    session = session_of(manager)
    assert session.status.text == "Save aborted"
    assert session.buffer.filename is None
    assert manager.active_mode is not None and manager.active_mode.name == "edit"


def test_quit_guard_through_keys() -> None:
    manager = make_manager("a\n")
    quits: List[object] = []
    manager.context.bus.subscribe("session.quit", quits.append)
    type_text(manager, "b")

    for _ in range(3):
        manager.handle_key(ctrl("q"))
    assert quits == []

    type_text(manager, "c")
    for _ in range(3):
        manager.handle_key(ctrl("q"))
    assert quits == []

    manager.handle_key(ctrl("q"))
    assert len(quits) == 1


def test_search_prompt_steps_and_confirms() -> None:
    manager = make_manager("foo\nbox\nfox\n")
    session = session_of(manager)

    manager.handle_key(ctrl("f"))
    type_text(manager, "fo")
    assert session.status.text == "Search: fo (Use ESC/Arrows/Enter)"
    assert (session.cursor.cx, session.cursor.cy) == (0, 0)

    manager.handle_key(KeyInput(key="DOWN"))
    assert session.cursor.cy == 2
    assert session.search.match is not None

    manager.handle_key(KeyInput(key="ENTER"))
    assert manager.active_mode is not None and manager.active_mode.name == "edit"
    assert session.cursor.cy == 2
    assert session.search.match is None


def test_search_escape_restores_cursor() -> None:
    manager = make_manager("foo\nbox\nfox\n")
    session = session_of(manager)

    manager.handle_key(ctrl("f"))
    type_text(manager, "x")
    assert (session.cursor.cx, session.cursor.cy) == (2, 1)

    manager.handle_key(KeyInput(key="ESC"))
    assert (session.cursor.cx, session.cursor.cy) == (0, 0)
    assert session.status.text == ""


def test_search_backspace_and_miss() -> None:
    manager = make_manager("foo\nbox\n")
    session = session_of(manager)
    manager.handle_key(ctrl("f"))

    type_text(manager, "bz")
    assert session.search.match is None

    manager.handle_key(KeyInput(key="BACKSPACE"))
    assert session.search.query == "b"
    assert session.cursor.cy == 1


def test_search_prompt_stops_at_query_limit() -> None:
    manager = make_manager("abc\nabx\n", settings=EditorSettings(query_max_length=2))
    session = session_of(manager)
    manager.handle_key(ctrl("f"))

    type_text(manager, "abcd")
    assert session.search.query == "ab"
    assert session.status.text == "Search: ab (Use ESC/Arrows/Enter)"

    manager.handle_key(KeyInput(key="BACKSPACE"))
    assert session.search.query == "a"
    assert session.status.text == "Search: a (Use ESC/Arrows/Enter)"


def test_manager_errors() -> None:
    manager = make_manager()

    with pytest.raises(KeyError):
        manager.switch_mode("visual")
    with pytest.raises(ValueError):
        manager.register_mode(EditMode)

    empty = ModeManager(
        ModeContext(session=EditorSession(), bus=ModeBus()), load_defaults=False
    )
    with pytest.raises(RuntimeError):
        empty.handle_key(KeyInput(key="a", text="a"))
