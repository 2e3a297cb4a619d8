# statement_parser/parsers/stream_inflate.py
from __future__ import annotations

import zlib
from typing import Final

from statement_parser.errors import CorruptStreamError

from .byte_scanner import ByteScanner

# zlib wrapper bytes (CMF/FLG, e.g. 0x78 0x9C) that precede the raw deflate data
ZLIB_HEADER_LENGTH: Final = 2


def inflate(block: bytes, context: str = "") -> bytes:
    """
    Decompress a ``stream ... endstream`` block.

    The 2-byte zlib header is skipped and the rest is inflated as raw DEFLATE
    (wbits=-15). Bytes after the end of the deflate data, such as the Adler-32
    trailer or a stray ``\\r``, are ignored.

    Raises
    ------
    CorruptStreamError
        If the block is too short, the deflate data is invalid, or it ends
        before the final deflate block.
    """
    where = f" ({context})" if context else ""
    if len(block) < ZLIB_HEADER_LENGTH:
        raise CorruptStreamError(
            f"Compressed block of {len(block)} bytes is shorter than its header{where}"
        )
    decompressor = zlib.decompressobj(-zlib.MAX_WBITS)
    try:
        out = decompressor.decompress(block[ZLIB_HEADER_LENGTH:])
        out += decompressor.flush()
    except zlib.error as e:
        raise CorruptStreamError(f"Could not inflate content stream{where}: {e}") from e
    if not decompressor.eof:
        raise CorruptStreamError(f"Content stream is truncated{where}")
    return out


def inflate_to_scanner(block: bytes, context: str = "") -> ByteScanner:
    """Fresh cursor over the inflated bytes of ``block``."""
    return ByteScanner(inflate(block, context))
