from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import pandas as pd

from string_parser.parsers import StringParser


logger = logging.getLogger(__name__)


class StringCollectionParser:
    """Applies a single-string parser to every item of a collection."""

    def __init__(self, parser: StringParser):
        self._parser = parser

    def map(self, items: Iterable[str | None]) -> list[str | None]:
        """Return ``[parser.parse(item) for item in items]``.

        Order and length are preserved and each item is parsed exactly once.
        Whatever the parser returns, ``None`` included, is kept as is, and
        anything it raises reaches the caller unchanged.
        """
        result = [self._parser.parse(item) for item in items]
        logger.debug("Parsed %d item(s)", len(result))
        return result

    parse = map

    def map_series(self, series: pd.Series) -> pd.Series:
        # NA cells are handed to the parser as None.
        values = series.astype(object).where(series.notna(), None)
        return pd.Series(self.map(values), index=series.index, name=series.name, dtype=object)

    def map_frame(self, df: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
        result = df.copy()
        for column_name in columns:
            if column_name not in result.columns:
                raise KeyError(column_name)
            result[column_name] = self.map_series(result[column_name])
        return result
