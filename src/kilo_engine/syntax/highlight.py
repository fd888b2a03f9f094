"""Per-row highlight classification with carried block-comment state."""

from __future__ import annotations

from collections import deque
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from kilo_engine.runtime import telemetry

from .rules import RuleSet

if TYPE_CHECKING:
    from kilo_engine.buffer.row import Row

SEPARATORS = frozenset(",.()+-/*=~%<>[];")
WHITESPACE = frozenset(" \t\n\v\f\r")
DIGITS = frozenset("0123456789")
QUOTES = frozenset("\"'")


class HighlightClass(str, Enum):
    NORMAL = "normal"
    COMMENT = "comment"
    BLOCK_COMMENT = "block_comment"
    KEYWORD1 = "keyword1"
    KEYWORD2 = "keyword2"
    STRING = "string"
    NUMBER = "number"
    MATCH = "match"


Highlight = List[HighlightClass]


def is_separator(char: str) -> bool:
    """End of row counts as a separator, so ``char`` may be empty."""

    return not char or char in WHITESPACE or char in SEPARATORS


@lru_cache(maxsize=None)
def _keywords(rules: RuleSet) -> Tuple[Tuple[str, HighlightClass], ...]:
    return tuple(
        (text, HighlightClass.KEYWORD2 if secondary else HighlightClass.KEYWORD1)
        for text, secondary in rules.keyword_table()
    )


def _match_keyword(
    render: str, start: int, rules: RuleSet
) -> Optional[Tuple[int, HighlightClass]]:
    for text, klass in _keywords(rules):
        end = start + len(text)
        if render.startswith(text, start) and is_separator(render[end : end + 1]):
            return len(text), klass
    return None


def highlight_row(
    render: str, comment_open: bool, rules: Optional[RuleSet]
) -> Tuple[Highlight, bool]:
    """Classify every character of ``render``.

    ``comment_open`` is the state carried in from the previous row. Returns
    the highlight list (same length as ``render``) and the state carried out.
    """

    highlight = [HighlightClass.NORMAL] * len(render)
    if rules is None:
        return highlight, False

    line_comment = rules.line_comment
    block_start = rules.block_comment_start
    block_end = rules.block_comment_end
    block_comments = rules.block_comments

    prev_sep = True
    in_string = ""
    in_comment = comment_open and block_comments
    size = len(render)
    i = 0
    while i < size:
        char = render[i]
        prev = highlight[i - 1] if i > 0 else HighlightClass.NORMAL

        if (
            line_comment
            and not in_string
            and not in_comment
            and render.startswith(line_comment, i)
        ):
            highlight[i:] = [HighlightClass.COMMENT] * (size - i)
            break

        if block_comments and not in_string:
            if in_comment:
                if render.startswith(block_end, i):
                    end = i + len(block_end)
                    highlight[i:end] = [HighlightClass.BLOCK_COMMENT] * len(block_end)
                    i = end
                    in_comment = False
                    prev_sep = True
                    continue
                highlight[i] = HighlightClass.BLOCK_COMMENT
                i += 1
                continue
            if render.startswith(block_start, i):
                end = i + len(block_start)
                highlight[i:end] = [HighlightClass.BLOCK_COMMENT] * len(block_start)
                i = end
                in_comment = True
                continue

        if rules.highlight_strings:
            if in_string:
                highlight[i] = HighlightClass.STRING
                if char == "\\" and i + 1 < size:
                    highlight[i + 1] = HighlightClass.STRING
                    i += 2
                    continue
                if char == in_string:
                    in_string = ""
                i += 1
                prev_sep = True
                continue
            if char in QUOTES:
                in_string = char
                highlight[i] = HighlightClass.STRING
                i += 1
                continue

        if rules.highlight_numbers:
            # A dot right after a number is always numeric, even "5.x".
            if (char in DIGITS and (prev_sep or prev is HighlightClass.NUMBER)) or (
                char == "." and prev is HighlightClass.NUMBER
            ):
                highlight[i] = HighlightClass.NUMBER
                i += 1
                prev_sep = False
                continue

        if prev_sep:
            matched = _match_keyword(render, i, rules)
            if matched is not None:
                length, klass = matched
                highlight[i : i + length] = [klass] * length
                i += length
                prev_sep = False
                continue

        prev_sep = is_separator(char)
        i += 1

    return highlight, in_comment


class SyntaxHighlighter:
    """Keeps row highlights consistent with the active rule set.

    A row whose carried-out comment state changes queues the following row;
    the queue drains iteratively, so a cascade spans any number of rows with
    constant stack depth.
    """

    def __init__(
        self, rules: Optional[RuleSet] = None, *, logger_name: str | None = None
    ) -> None:
        self.rules = rules
        self._logger_name = logger_name

    def refresh(self, rows: Sequence["Row"], start: int) -> int:
        """Recompute ``rows[start]`` and every row its change reaches.

        Returns the number of rows recomputed.
        """

        if not 0 <= start < len(rows):
            return 0
        queue = deque([start])
        recomputed = 0
        while queue:
            index = queue.popleft()
            changed = self._apply(rows, index)
            recomputed += 1
            if changed and index + 1 < len(rows):
                queue.append(index + 1)

        if recomputed > 1:
            telemetry.record_event(
                "syntax.cascade",
                level="debug",
                data={"start": start, "rows": recomputed},
                logger_name=self._logger_name,
            )
        return recomputed

    def refresh_all(self, rows: Sequence["Row"]) -> None:
        """Highlight every row from scratch in document order."""

        with telemetry.span(
            "syntax::refresh_all",
            logger_name=self._logger_name,
            component="syntax",
            metadata={
                "rules": self.rules.name if self.rules else "none",
                "rows": len(rows),
            },
        ):
            for index in range(len(rows)):
                self._apply(rows, index)

    def _apply(self, rows: Sequence["Row"], index: int) -> bool:
        row = rows[index]
        carried = index > 0 and rows[index - 1].comment_open
        highlight, comment_open = highlight_row(row.render, carried, self.rules)
        row.highlight = highlight
        changed = comment_open != row.comment_open
        row.comment_open = comment_open
        return changed


__all__ = [
    "HighlightClass",
    "Highlight",
    "SyntaxHighlighter",
    "highlight_row",
    "is_separator",
]
