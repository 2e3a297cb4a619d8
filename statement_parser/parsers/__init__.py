# statement_parser/parsers/__init__.py
from .byte_scanner import ByteScanner, ScanMatch
from .chase_credit import (
    CHASE_2017_LAYOUT,
    CHASE_2017_SIGNATURE,
    CHASE_2018_LAYOUT,
    CHASE_2018_SIGNATURE,
    ChaseCreditExtractor,
    ChaseLayout,
    find_date_range,
)
from .navy_fed_year_end import NAVY_FED_SIGNATURE, NavyFedYearEndExtractor
from .stream_inflate import inflate, inflate_to_scanner

__all__ = [
    "ByteScanner",
    "ScanMatch",
    "inflate",
    "inflate_to_scanner",
    "ChaseLayout",
    "ChaseCreditExtractor",
    "CHASE_2017_LAYOUT",
    "CHASE_2018_LAYOUT",
    "CHASE_2017_SIGNATURE",
    "CHASE_2018_SIGNATURE",
    "find_date_range",
    "NavyFedYearEndExtractor",
    "NAVY_FED_SIGNATURE",
]
