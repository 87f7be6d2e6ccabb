"""Apply a single-string parser across collections of strings."""

from string_parser.collection import StringCollectionParser
from string_parser.collector import ParseCollector
from string_parser.parsers import ParserConfig, StringParser, build_parser


__all__ = [
    "ParseCollector",
    "ParserConfig",
    "StringCollectionParser",
    "StringParser",
    "build_parser",
]
