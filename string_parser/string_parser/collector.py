"""Per-source statistics on what a parser chain did to each distinct input."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParseRecord:
    original: str
    parsed: str | None
    occurrences: int = 1

    @property
    def changed(self) -> bool:
        return self.parsed is not None and self.parsed != self.original

    def to_dict(self) -> dict[str, object]:
        return {"original": self.original, "parsed": self.parsed, "occurrences": self.occurrences}


class ParseCollector:
    """Counts how often each original was seen per source and what it parsed to.

    The first parse of an original is kept; later occurrences only bump its
    count. Originals whose parse came back null are reported apart from
    rewritten ones.
    """

    def __init__(self) -> None:
        self._sources: dict[str, dict[str, ParseRecord]] = {}

    def record(self, source_name: str, original: str, parsed: str | None) -> None:
        records = self._sources.setdefault(source_name, {})
        existing = records.get(original)
        if existing is None:
            records[original] = ParseRecord(original=original, parsed=parsed)
        else:
            existing.occurrences += 1

    def records(self, source_name: str) -> list[ParseRecord]:
        return list(self._sources.get(source_name, {}).values())

    def summary(self, source_name: str) -> dict[str, int]:
        records = self.records(source_name)
        return {
            "values": sum(record.occurrences for record in records),
            "distinct": len(records),
            "changed": sum(1 for record in records if record.changed),
            "nulled": sum(1 for record in records if record.parsed is None),
        }

    def to_dict(self) -> dict[str, dict[str, object]]:
        """Export for JSON: per source a summary, rewritten pairs and nulled originals."""
        export: dict[str, dict[str, object]] = {}
        for source_name in self._sources:
            records = self.records(source_name)
            export[source_name] = {
                "summary": self.summary(source_name),
                "parsed": [record.to_dict() for record in records if record.parsed is not None],
                "nulled": [record.original for record in records if record.parsed is None],
            }
        return export
