"""Incremental literal search over rendered row text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence

from kilo_engine.buffer.document import Document
from kilo_engine.buffer.state import CursorState
from kilo_engine.runtime import telemetry
from kilo_engine.runtime.config import QUERY_MAX_LENGTH
from kilo_engine.syntax.highlight import HighlightClass
from kilo_engine.view.viewport import Viewport


class SearchDirection(IntEnum):
    FORWARD = 1
    BACKWARD = -1


@dataclass(frozen=True, slots=True)
class SearchMatch:
    """A hit: ``offset`` is in rendered columns, ``cx`` in raw characters."""

    row: int
    cx: int
    offset: int
    length: int

    def overlay(self, highlight: Sequence[HighlightClass]) -> List[HighlightClass]:
        """Return a copy of ``highlight`` with the matched span marked."""

        painted = list(highlight)
        end = min(self.offset + self.length, len(painted))
        for index in range(self.offset, end):
            painted[index] = HighlightClass.MATCH
        return painted


class SearchSession:
    """State for one interactive search: query, last hit and direction.

    The active match is only a value; rows keep their stored highlight and
    the frame composer paints the match on a copy.
    """

    def __init__(
        self,
        *,
        max_length: int = QUERY_MAX_LENGTH,
        logger_name: str | None = None,
    ) -> None:
        self.max_length = max_length
        self.query = ""
        self.last_match_row: Optional[int] = None
        self.direction = SearchDirection.FORWARD
        self.match: Optional[SearchMatch] = None
        self._logger_name = logger_name

    def set_query(self, query: str) -> None:
        self.query = query[: self.max_length]
        self.last_match_row = None
        self.match = None

    def clear(self) -> None:
        self.set_query("")
        self.direction = SearchDirection.FORWARD

    def step(
        self,
        document: Document,
        direction: Optional[SearchDirection] = None,
    ) -> Optional[SearchMatch]:
        """Find the next row containing the query, wrapping around.

        A fresh query (no previous hit) always searches forward from the top.
        Returns ``None`` when nothing matches; the previous hit is kept as the
        starting point for the next step.
        """

        self.match = None
        if self.last_match_row is None or direction is None:
            direction = SearchDirection.FORWARD
        self.direction = direction

        total = document.row_count
        if not self.query or total == 0:
            return None

        with telemetry.span(
            "search::step",
            logger_name=self._logger_name,
            component="search",
            metadata={"direction": direction.name.lower(), "rows": total},
        ) as handle:
            current = self.last_match_row if self.last_match_row is not None else -1
            for _ in range(total):
                current = (current + direction) % total
                row = document.rows[current]
                offset = row.render.find(self.query)
                if offset == -1:
                    continue
                self.last_match_row = current
                self.match = SearchMatch(
                    row=current,
                    cx=row.rx_to_cx(offset),
                    offset=offset,
                    length=len(self.query),
                )
                handle.add_metadata("row", current)
                break
            else:
                handle.add_metadata("row", "none")

        if self.match is None:
            telemetry.record_event(
                "search.miss",
                level="debug",
                data={"query": self.query},
                logger_name=self._logger_name,
            )
        else:
            telemetry.record_event(
                "search.match",
                level="debug",
                data={"query": self.query, "row": self.match.row},
                logger_name=self._logger_name,
            )
        return self.match


def jump_to(
    match: SearchMatch,
    document: Document,
    cursor: CursorState,
    viewport: Viewport,
) -> None:
    """Place the cursor on ``match`` and scroll its row to the top."""

    cursor.set(match.cx, match.row)
    viewport.reveal(document, cursor)


__all__ = ["SearchDirection", "SearchMatch", "SearchSession", "jump_to"]
