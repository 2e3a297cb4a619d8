# statement_parser/parsers/byte_scanner.py
"""
Forward-only scanning primitives over the raw bytes of a statement.

A ``ByteScanner`` never seeks backwards. Each scan starts where the previous
one stopped and consumes its target; content that needs a second look (an
inflated page stream) gets its own scanner.

End of stream is an ordinary outcome for the search primitives:
``scan_until`` returns ``None`` and ``scan_until_any`` returns a ``ScanMatch``
whose ``matched`` is ``None``. Callers that cannot continue without a marker
use ``expect_until``, which raises ``EndOfStreamError`` instead. ``read_line``
always raises on a missing terminator.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final, NamedTuple, Optional, Sequence

from statement_parser.errors import EndOfStreamError
from statement_parser.utilities.core_util import ascii_text, read_file_bytes

_EOL_RE: Final[re.Pattern[bytes]] = re.compile(rb"\r\n|\r|\n")


class ScanMatch(NamedTuple):
    """Result of ``scan_until_any``: bytes before the match and the target hit."""

    consumed: bytes
    matched: Optional[bytes]


class ByteScanner:
    """Cursor over an immutable byte buffer."""

    def __init__(self, data: bytes | bytearray | memoryview):
        self._data = bytes(data)
        self._pos = 0

    @classmethod
    def from_path(cls, path: Path | str) -> "ByteScanner":
        return cls(read_file_bytes(Path(path)))

    # region State

    @property
    def position(self) -> int:
        return self._pos

    def __repr__(self) -> str:
        return f"ByteScanner(position={self._pos}, size={len(self._data)})"

    # endregion State

    # region Scanning

    def scan_until(self, target: bytes) -> Optional[bytes]:
        """
        Consume up to and including ``target``.

        Returns the bytes consumed before ``target``, or ``None`` when the
        stream ends first (the cursor is then left at end of stream).
        """
        if not target:
            raise ValueError("Empty values are not allowed")
        idx = self._data.find(target, self._pos)
        if idx < 0:
            self._pos = len(self._data)
            return None
        consumed = self._data[self._pos : idx]
        self._pos = idx + len(target)
        return consumed

    def expect_until(self, target: bytes, context: str = "") -> bytes:
        """``scan_until`` for markers that must be present."""
        start = self._pos
        consumed = self.scan_until(target)
        if consumed is None:
            expected = repr(target) + (f" ({context})" if context else "")
            raise EndOfStreamError(expected, start)
        return consumed

    def scan_until_any(self, targets: Sequence[bytes]) -> ScanMatch:
        """
        Consume up to and including whichever target completes first.

        "First" is by terminal byte offset in the stream, not by the order of
        ``targets``. Targets completing on the same byte are resolved in
        favour of the shortest one, then the earliest listed. When nothing
        matches, every remaining byte is consumed and ``matched`` is ``None``.
        """
        candidates = tuple(targets)
        if not candidates:
            raise ValueError("At least one target is required")
        if any(len(t) == 0 for t in candidates):
            raise ValueError("Empty values are not allowed")

        # (terminal offset, length, order) of the best match so far
        best: Optional[tuple[int, int, int]] = None
        for order, target in enumerate(candidates):
            limit = len(self._data) if best is None else best[0]
            idx = self._data.find(target, self._pos, limit)
            if idx < 0:
                continue
            key = (idx + len(target), len(target), order)
            if best is None or key < best:
                best = key

        if best is None:
            consumed = self._data[self._pos :]
            self._pos = len(self._data)
            return ScanMatch(consumed, None)

        end, length, order = best
        consumed = self._data[self._pos : end - length]
        self._pos = end
        return ScanMatch(consumed, candidates[order])

    # endregion Scanning

    # region Lines

    def read_line(self) -> str:
        """
        Read ASCII text up to ``\\r``, ``\\n`` or ``\\r\\n``.

        The terminator is consumed and not returned. Raises
        ``EndOfStreamError`` when the stream ends before a terminator; the
        partial line is consumed and discarded.
        """
        start = self._pos
        m = _EOL_RE.search(self._data, start)
        if m is None:
            self._pos = len(self._data)
            raise EndOfStreamError("end of line", start)
        self._pos = m.end()
        return ascii_text(self._data[start : m.start()])

    def skip_lines(self, count: int) -> None:
        for _ in range(count):
            self.read_line()

    # endregion Lines
