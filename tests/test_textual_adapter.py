from __future__ import annotations

from typing import List

from kilo_engine.adapters.textual import (
    TextualKiloAdapter,
    TextualUIHooks,
    create_default_manager,
    normalize_key,
)
from kilo_engine.buffer import Buffer
from kilo_engine.render import Frame
from kilo_engine.session import EditorSession


def make_session(text: str = "") -> EditorSession:
    session = EditorSession(Buffer.from_text(text), clock=lambda: 0.0)
    session.resize(12, 40)
    return session


def test_normalize_key_names() -> None:
    assert normalize_key("ctrl+s", "\x13").key == "s"
    assert normalize_key("ctrl+s", "\x13").modifiers == ("ctrl",)
    assert normalize_key("pagedown").key == "PAGE_DOWN"
    assert normalize_key("escape").key == "ESC"
    assert normalize_key("enter", "\r").key == "ENTER"
    assert normalize_key("tab", "\t").key == "TAB"

    typed = normalize_key("a", "a")
    assert (typed.key, typed.text, typed.modifiers) == ("a", "a", ())
    shifted = normalize_key("shift+a", "A")
    assert (shifted.key, shifted.text) == ("A", "A")


def test_adapter_pushes_frames_and_status() -> None:
    frames: List[Frame] = []
    statuses: List[str] = []
    session = make_session()
    session.set_status("ready")
    hooks = TextualUIHooks(
        update_frame=frames.append,
        update_status=statuses.append,
    )
    adapter = TextualKiloAdapter(create_default_manager(session), hooks)

    assert frames and frames[0].rows[0].filler
    assert statuses[0] == "ready"

    adapter.handle_textual_key("h", text="h")

    assert frames[-1].rows[0].text == "h"
    assert frames[-1].cursor == (0, 1)


def test_adapter_resize_recomposes() -> None:
    frames: List[Frame] = []
    adapter = TextualKiloAdapter(
        create_default_manager(make_session("abc\n")),
        TextualUIHooks(update_frame=frames.append),
    )

    adapter.resize(10, 30)

    assert frames[-1].cols == 30
    assert len(frames[-1].rows) == 8


def test_adapter_relays_quit_event() -> None:
    events: List[str] = []
    adapter = TextualKiloAdapter(
        create_default_manager(make_session("abc\n")),
        TextualUIHooks(
            update_frame=lambda frame: None,
            handle_event=lambda name, payload: events.append(name),
        ),
    )

    adapter.handle_textual_key("q", modifiers=("CTRL",))

    assert events == ["session.quit"]


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = TextualKiloAdapter(
        create_default_manager(make_session()),
        TextualUIHooks(update_frame=lambda frame: None, log=logs.append),
    )

    adapter.handle_textual_key("x", text="x")

    assert any(line.startswith("key ->") for line in logs)
    assert any("mode='edit'" in line for line in logs)
