"""Tests for reading and writing string files."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from string_parser.io import (
    FileFormat,
    detect_format,
    output_path_for_file,
    read_string_file,
    write_string_file,
)


class TestDetectFormat:
    """Test file format detection."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("names.txt", FileFormat.TEXT),
            ("names.csv", FileFormat.CSV),
            ("NAMES.CSV.GZ", FileFormat.CSV_GZIP),
            ("names.parquet", FileFormat.PARQUET),
        ],
    )
    def test_known_extensions(self, name: str, expected: FileFormat) -> None:
        """Test that supported suffixes are recognised."""
        assert detect_format(Path(name)) == expected

    def test_unknown_extension(self) -> None:
        """Test that other suffixes raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported input format"):
            detect_format(Path("names.json"))


class TestReadWrite:
    """Test reading and writing string files."""

    def test_text_keeps_empty_lines(self, tmp_path: Path) -> None:
        """Test that empty lines are read as empty strings."""
        path = tmp_path / "names.txt"
        path.write_text("abc\n\ndef\n", encoding="utf-8")

        df = read_string_file(path)

        assert list(df["value"]) == ["abc", "", "def"]

    def test_text_custom_column(self, tmp_path: Path) -> None:
        """Test that text input lands in the requested column."""
        path = tmp_path / "names.txt"
        path.write_text("abc\n", encoding="utf-8")

        df = read_string_file(path, column="Name")

        assert list(df.columns) == ["Name"]

    def test_text_writes_null_as_empty_line(self, tmp_path: Path) -> None:
        """Test that None is written as an empty line."""
        path = tmp_path / "out" / "names.txt"
        df = pd.DataFrame({"value": pd.Series(["a£", None, "b"], dtype=object)})

        write_string_file(df, path, FileFormat.TEXT)

        assert path.read_text(encoding="utf-8") == "a£\n\nb\n"

    def test_csv_reads_strings(self, tmp_path: Path) -> None:
        """Test that CSV values stay strings and empty cells become NA."""
        path = tmp_path / "names.csv"
        path.write_text("value,count\n0042,1\n,2\n", encoding="utf-8")

        df = read_string_file(path)

        assert df["value"][0] == "0042"
        assert pd.isna(df["value"][1])
        assert df["count"][0] == "1"

    def test_csv_gzip_written(self, tmp_path: Path) -> None:
        """Test that csv-gzip output can be read back."""
        path = tmp_path / "names.csv.gz"
        df = pd.DataFrame({"value": ["abc", "def"]})

        write_string_file(df, path, FileFormat.CSV_GZIP)

        assert list(read_string_file(path)["value"]) == ["abc", "def"]

    def test_csv_null_like_literals_kept(self, tmp_path: Path) -> None:
        """Test that strings such as "NA" or "null" are read as text, not as NA."""
        path = tmp_path / "names.csv"
        path.write_text(
            "value,id\nNA,1\nnull,2\nNone,3\nnan,4\nN/A,5\n,6\n", encoding="utf-8"
        )

        df = read_string_file(path)

        assert list(df["value"][:5]) == ["NA", "null", "None", "nan", "N/A"]
        assert pd.isna(df["value"][5])

    def test_csv_written(self, tmp_path: Path) -> None:
        """Test that plain csv output round-trips, null cells included."""
        path = tmp_path / "out" / "names.csv"
        df = pd.DataFrame(
            {"value": pd.Series(["abc", None, "NA"], dtype=object), "id": ["1", "2", "3"]}
        )

        write_string_file(df, path, FileFormat.CSV)

        result = read_string_file(path)
        assert result["value"][0] == "abc"
        assert pd.isna(result["value"][1])
        assert result["value"][2] == "NA"

    def test_parquet_round_trip(self, tmp_path: Path) -> None:
        """Test that parquet output can be read back with nulls preserved."""
        path = tmp_path / "out" / "names.parquet"
        df = pd.DataFrame({"value": pd.Series(["abc", None, "d£f"], dtype=object)})

        write_string_file(df, path, FileFormat.PARQUET)

        assert list(read_string_file(path)["value"]) == ["abc", None, "d£f"]

    def test_parquet_non_string_column_read_as_strings(self, tmp_path: Path) -> None:
        """Test that numeric parquet values arrive as strings and nulls as None."""
        path = tmp_path / "numbers.parquet"
        pd.DataFrame({"value": [1234.0, None, 5678.5], "other": [1, 2, 3]}).to_parquet(
            path, index=False
        )

        df = read_string_file(path)

        assert list(df["value"]) == ["1234.0", None, "5678.5"]
        assert list(df["other"]) == [1, 2, 3]


class TestOutputPath:
    """Test output path computation."""

    @pytest.mark.parametrize(
        ("input_name", "output_format", "expected"),
        [
            ("names.csv.gz", FileFormat.TEXT, "names.txt"),
            ("names.txt", FileFormat.CSV_GZIP, "names.csv.gz"),
            ("names.parquet", FileFormat.CSV, "names.csv"),
            ("names.csv", FileFormat.PARQUET, "names.parquet"),
        ],
    )
    def test_extension_swapped(
        self, tmp_path: Path, input_name: str, output_format: FileFormat, expected: str
    ) -> None:
        """Test that the input extension is replaced by the output one."""
        result = output_path_for_file(tmp_path / "in" / input_name, tmp_path / "out", output_format)

        assert result == tmp_path / "out" / expected
