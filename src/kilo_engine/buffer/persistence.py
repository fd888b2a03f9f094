"""Reading and writing documents as newline-joined bytes."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from kilo_engine.runtime import telemetry
from kilo_engine.runtime.config import TAB_STOP
from kilo_engine.syntax.rules import RuleSet

from .document import Document


class DocumentIOError(RuntimeError):
    """Raised when a document cannot be read from or written to disk."""

    def __init__(self, message: str, *, path: str | os.PathLike[str]) -> None:
        super().__init__(message)
        self.path = str(path)

    @property
    def reason(self) -> str:
        cause = self.__cause__
        if isinstance(cause, OSError) and cause.strerror:
            return cause.strerror
        return str(self)


def load_document(
    path: str | os.PathLike[str],
    *,
    rules: Optional[RuleSet] = None,
    tab_stop: int = TAB_STOP,
) -> Document:
    """Read ``path`` into a clean document.

    A missing file yields an empty document, so a new file can be created by
    saving.
    """

    target = Path(path)
    with telemetry.span(
        "document::load", component="persistence", metadata={"path": str(target)}
    ) as handle:
        try:
            data = target.read_bytes()
        except FileNotFoundError:
            handle.add_metadata("new_file", True)
            data = b""
        except OSError as exc:
            raise DocumentIOError(f"Opening file failed: {target}", path=target) from exc
        document = Document.from_bytes(data, rules=rules, tab_stop=tab_stop)
        document.mark_clean()
        handle.add_metadata("rows", document.row_count)

    telemetry.record_event(
        "document.loaded", data={"path": str(target), "rows": document.row_count}
    )
    return document


def save_document(document: Document, path: str | os.PathLike[str]) -> int:
    """Write every row with a ``\\n`` terminator; return the byte count.

    ``document`` is not modified here; the caller decides when it is clean.
    """

    target = Path(path)
    data = document.to_bytes()
    with telemetry.span(
        "document::save", component="persistence", metadata={"path": str(target)}
    ) as handle:
        try:
            fd = os.open(target, os.O_RDWR | os.O_CREAT, 0o644)
            try:
                os.ftruncate(fd, len(data))
                view = memoryview(data)
                while view:
                    written = os.write(fd, view)
                    view = view[written:]
            finally:
                os.close(fd)
        except OSError as exc:
            raise DocumentIOError(f"Can't save {target}", path=target) from exc
        handle.add_metadata("bytes", len(data))

    telemetry.record_event(
        "document.saved", data={"path": str(target), "bytes": len(data)}
    )
    return len(data)


__all__ = ["DocumentIOError", "load_document", "save_document"]
