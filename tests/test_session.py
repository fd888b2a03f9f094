import getpass
from pathlib import Path

import pytest

from kilo_engine.buffer import Buffer
from kilo_engine.runtime import EditorSettings
from kilo_engine.runtime.config import login_greeting
from kilo_engine.session import HELP_MESSAGE, EditorSession


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_session(text: str = "", *, clock: FakeClock | None = None) -> EditorSession:
    return EditorSession(Buffer.from_text(text), clock=clock or FakeClock())


def test_open_new_file_shows_help(tmp_path: Path) -> None:
    target = tmp_path / "new.c"

    session = EditorSession.open(target, settings=EditorSettings(), clock=FakeClock())

    assert session.buffer.filename == str(target)
    assert session.document.row_count == 0
    assert session.document.rule_set is not None
    assert session.visible_status() == HELP_MESSAGE


def test_open_failure_reports_reason(tmp_path: Path) -> None:
    session = EditorSession.open(tmp_path, settings=EditorSettings(), clock=FakeClock())

    assert session.document.row_count == 0
    assert session.buffer.filename == str(tmp_path)
    assert session.visible_status().startswith("Can't open! I/O error: ")


def test_status_message_expires() -> None:
    clock = FakeClock()
    session = make_session(clock=clock)

    session.set_status("%d bytes written to disk", 12)
    assert session.visible_status() == "12 bytes written to disk"

    clock.now = 4.9
    assert session.visible_status() == "12 bytes written to disk"

    clock.now = 5.0
    assert session.visible_status() == ""


def test_quit_guard_requires_repeated_requests() -> None:
    session = make_session("x\n")
    session.buffer.insert_char("y")

    refusals = [session.request_quit() for _ in range(3)]

    assert refusals == [False, False, False]
    assert session.status.text == (
        "WARNING! File has unsaved changes. Press Ctrl-Q 1 more times to quit."
    )
    assert session.request_quit() is True


def test_quit_guard_resets() -> None:
    session = make_session("x\n")
    session.buffer.insert_char("y")
    session.request_quit()
    session.request_quit()

    session.reset_quit_guard()

    assert session.quit_remaining == 3
    assert session.request_quit() is False
    assert "3 more times" in session.status.text


def test_clean_buffer_quits_immediately() -> None:
    assert make_session("x\n").request_quit() is True


def test_resize_reserves_status_lines() -> None:
    session = make_session()

    session.resize(24, 80)

    assert (session.viewport.rows, session.viewport.cols) == (22, 80)


def test_snapshot_and_restore() -> None:
    session = make_session("a\nb\nc\n")
    session.cursor.set(1, 2)
    session.viewport.row_offset = 1
    snapshot = session.snapshot()

    session.cursor.set(0, 0)
    session.viewport.row_offset = 0
    session.restore(snapshot)

    assert (session.cursor.cx, session.cursor.cy) == (1, 2)
    assert session.viewport.row_offset == 1


def test_settings_from_env_fall_back_on_bad_values() -> None:
    settings = EditorSettings.from_env(
        {
            "KILO_ENGINE_TAB_STOP": "4",
            "KILO_ENGINE_QUIT_TIMES": "nope",
            "KILO_ENGINE_STATUS_TIMEOUT": "2.5",
        }
    )

    assert settings.tab_stop == 4
    assert settings.quit_times == 3
    assert settings.status_timeout == 2.5
    assert settings.query_max_length == 256


def test_tab_stop_setting_reaches_rows() -> None:
    session = EditorSession.open(settings=EditorSettings(tab_stop=4), clock=FakeClock())
    session.buffer.insert_char("\t")

    assert session.document.rows[0].render == "    "


def test_login_greeting_names_the_user(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(getpass, "getuser", lambda: "paul")
    assert login_greeting() == "paul Atreides"
    assert EditorSettings.from_env({}).greeting == "paul Atreides"
    assert EditorSettings.from_env({"KILO_ENGINE_GREETING": "hi"}).greeting == "hi"
