from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

import pandas as pd

from string_parser.collector import ParseCollector


class StringParser(Protocol):
    def parse(self, value: str | None) -> str | None: ...


@dataclass(frozen=True)
class EmptyToNoneParser:
    """Turns empty strings and nulls into ``None``."""

    def parse(self, value: str | None) -> str | None:
        if pd.isna(value) or value == "":
            return None
        return value


DEFAULT_REPLACEMENTS: tuple[tuple[str, str], ...] = (("$", "£"), ("_", ""), ("4", ""))


@dataclass(frozen=True)
class ReplaceCharactersParser:
    """Applies ``(old, new)`` substring replacements in order."""

    replacements: tuple[tuple[str, str], ...] = DEFAULT_REPLACEMENTS

    def parse(self, value: str | None) -> str | None:
        if pd.isna(value):
            return value

        for old, new in self.replacements:
            value = value.replace(old, new)
        return value


@dataclass(frozen=True)
class CollapseDuplicatesParser:
    """Collapses runs of identical adjacent characters to a single character."""

    def parse(self, value: str | None) -> str | None:
        if pd.isna(value):
            return value

        kept: list[str] = []
        for char in value:
            if not kept or kept[-1] != char:
                kept.append(char)
        return "".join(kept)


@dataclass(frozen=True)
class TruncateParser:
    """Keeps at most ``max_length`` leading characters."""

    max_length: int = 15

    def __post_init__(self) -> None:
        if self.max_length < 0:
            raise ValueError(f"max_length must be >= 0, got {self.max_length}")

    def parse(self, value: str | None) -> str | None:
        if pd.isna(value):
            return value
        return value[: self.max_length]


@dataclass
class ChainedParser:
    """Feeds a value through each parser in turn, stopping once it becomes null.

    With a collector attached, every non-null input is recorded together with
    the value the whole chain produced for it.
    """

    parsers: list[StringParser]
    _source_name: str = field(default="", init=False, repr=False)
    _collector: ParseCollector | None = field(default=None, init=False, repr=False)

    def attach_collector(self, source_name: str, collector: ParseCollector) -> None:
        self._source_name = source_name
        self._collector = collector

    def parse(self, value: str | None) -> str | None:
        original = value
        for parser in self.parsers:
            if pd.isna(value):
                break
            value = parser.parse(value)

        if pd.isna(value):
            value = None

        if self._collector is not None and not pd.isna(original):
            self._collector.record(self._source_name, original, value)
        return value


# ---------------------------------------------------------------------------
# Parser config + factories
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParserConfig:
    max_length: int = 15
    replacements: tuple[tuple[str, str], ...] = DEFAULT_REPLACEMENTS


ParserFactory = Callable[[ParserConfig], StringParser]


def _build_empty_to_none_parser(config: ParserConfig) -> StringParser:
    return EmptyToNoneParser()


def _build_replace_characters_parser(config: ParserConfig) -> StringParser:
    return ReplaceCharactersParser(replacements=config.replacements)


def _build_collapse_duplicates_parser(config: ParserConfig) -> StringParser:
    return CollapseDuplicatesParser()


def _build_truncate_parser(config: ParserConfig) -> StringParser:
    return TruncateParser(max_length=config.max_length)


PARSER_FACTORIES: dict[str, ParserFactory] = {
    "EmptyToNone": _build_empty_to_none_parser,
    "ReplaceCharacters": _build_replace_characters_parser,
    "CollapseDuplicates": _build_collapse_duplicates_parser,
    "Truncate": _build_truncate_parser,
}

# Truncate must stay last: max_length applies to the fully parsed text.
DEFAULT_PARSER_CHAIN: tuple[str, ...] = (
    "EmptyToNone",
    "ReplaceCharacters",
    "CollapseDuplicates",
    "Truncate",
)


def list_parsers() -> list[str]:
    return sorted(PARSER_FACTORIES.keys())


def build_parser(
    names: Sequence[str] = DEFAULT_PARSER_CHAIN,
    *,
    config: ParserConfig,
    collector: ParseCollector | None = None,
    source_name: str = "value",
) -> ChainedParser:
    if not names:
        raise ValueError("At least one parser name is required.")

    parsers: list[StringParser] = []
    for name in names:
        if name not in PARSER_FACTORIES:
            supported = ", ".join(list_parsers())
            raise ValueError(f"Unknown parser '{name}'. Supported parsers: {supported}")
        parsers.append(PARSER_FACTORIES[name](config))

    chain = ChainedParser(parsers=parsers)
    if collector is not None:
        chain.attach_collector(source_name, collector)
    return chain
