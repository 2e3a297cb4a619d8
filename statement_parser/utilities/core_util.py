#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- String utilities
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Literal, Optional, overload

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


@overload
def open_for_write(
    path: Path,
    binary: Literal[True],
    *,
    ensure_parent: bool = ...,
    **kwargs: Any,
) -> IO[bytes]: ...
@overload
def open_for_write(
    path: Path,
    binary: Literal[False] = False,
    *,
    ensure_parent: bool = ...,
    newline: str | None = ...,
    encoding: str | None = ...,
    **kwargs: Any,
) -> IO[str]: ...


def open_for_write(
    path: Path,
    binary: bool = False,
    *,
    ensure_parent: bool = True,
    newline: str | None = "",
    encoding: str | None = "utf-8",
    **kwargs: Any,
) -> IO[Any]:
    path = Path(path)
    if ensure_parent:
        path.parent.mkdir(parents=True, exist_ok=True)
    if binary:
        return open(path, "wb", **kwargs)
    return open(path, "w", newline=newline, encoding=encoding, **kwargs)


def read_file_bytes(path: Path) -> bytes:
    with open_for_read(Path(path), binary=True) as f:
        return f.read()


def ascii_text(raw: bytes) -> str:
    """Single-byte decode used for every piece of statement text."""
    return raw.decode("ascii", errors="replace")


# endregion Common functions
