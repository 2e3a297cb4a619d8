# statement_parser/controllers/__init__.py
from .batch import (
    BatchAborted,
    BatchResult,
    collect_input_files,
    parse_many,
    split_quoted_paths,
)
from .statement_loader import (
    DEFAULT_REGISTRY,
    EXTRACTORS,
    SignatureEntry,
    identify_statement,
    make_extractor,
    parse_statement,
    parse_statement_as,
    parse_statement_file,
    parse_statement_file_as,
)

__all__ = [
    "SignatureEntry",
    "DEFAULT_REGISTRY",
    "EXTRACTORS",
    "identify_statement",
    "make_extractor",
    "parse_statement",
    "parse_statement_as",
    "parse_statement_file",
    "parse_statement_file_as",
    "BatchAborted",
    "BatchResult",
    "collect_input_files",
    "parse_many",
    "split_quoted_paths",
]
