"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from string_parser.collection import StringCollectionParser
from string_parser.collector import ParseCollector
from string_parser.parsers import StringParser


@pytest.fixture
def parser_mock() -> Mock:
    """Provide a StringParser test double; tests set its ``parse.side_effect``."""
    return Mock(spec=StringParser)


@pytest.fixture
def collection_parser(parser_mock: Mock) -> StringCollectionParser:
    """Provide a StringCollectionParser wired to ``parser_mock``."""
    return StringCollectionParser(parser_mock)


@pytest.fixture
def parse_collector() -> ParseCollector:
    """Provide a fresh ParseCollector instance for each test."""
    return ParseCollector()
