"""Raw/rendered column translation for tab-expanded rows.

A raw index (``cx``) counts characters in the stored line. A rendered index
(``rx``) counts terminal columns after every tab has been expanded to the next
multiple of the tab stop.
"""

from __future__ import annotations

from kilo_engine.runtime.config import TAB_STOP


def _advance(width: int, char: str, tab_stop: int) -> int:
    if char == "\t":
        return width + tab_stop - (width % tab_stop)
    return width + 1


def expand_tabs(raw: str, tab_stop: int = TAB_STOP) -> str:
    """Return ``raw`` with every tab replaced by spaces up to the next stop."""

    if "\t" not in raw:
        return raw
    out: list[str] = []
    width = 0
    for char in raw:
        if char == "\t":
            pad = tab_stop - (width % tab_stop)
            out.append(" " * pad)
            width += pad
        else:
            out.append(char)
            width += 1
    return "".join(out)


def raw_to_rendered(raw: str, cx: int, tab_stop: int = TAB_STOP) -> int:
    width = 0
    for char in raw[: max(0, cx)]:
        width = _advance(width, char, tab_stop)
    return width


def rendered_to_raw(raw: str, rx: int, tab_stop: int = TAB_STOP) -> int:
    """Return the raw index whose rendered cell contains column ``rx``.

    Columns past the end of the row map to ``len(raw)``.
    """

    width = 0
    for cx, char in enumerate(raw):
        width = _advance(width, char, tab_stop)
        if width > rx:
            return cx
    return len(raw)


__all__ = ["expand_tabs", "raw_to_rendered", "rendered_to_raw"]
