from __future__ import annotations

from enum import Enum
from pathlib import Path

import pandas as pd


class FileFormat(str, Enum):
    TEXT = "text"
    CSV = "csv"
    CSV_GZIP = "csv-gzip"
    PARQUET = "parquet"


_EXTENSIONS: dict[FileFormat, str] = {
    FileFormat.TEXT: ".txt",
    FileFormat.CSV: ".csv",
    FileFormat.CSV_GZIP: ".csv.gz",
    FileFormat.PARQUET: ".parquet",
}


def detect_format(path: Path) -> FileFormat:
    name = path.name.lower()
    for file_format, extension in _EXTENSIONS.items():
        if name.endswith(extension):
            return file_format

    supported = ", ".join(_EXTENSIONS.values())
    raise ValueError(f"Unsupported input format: {path}. Supported extensions: {supported}")


def read_string_file(path: Path, *, column: str = "value") -> pd.DataFrame:
    file_format = detect_format(path)

    if file_format == FileFormat.TEXT:
        lines = path.read_text(encoding="utf-8").splitlines()
        return pd.DataFrame({column: pd.Series(lines, dtype=object)})

    if file_format in (FileFormat.CSV, FileFormat.CSV_GZIP):
        # Only empty cells are null; literals such as "NA" or "null" stay strings.
        return pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])

    df = pd.read_parquet(path)
    if column in df.columns:
        df[column] = pd.Series(
            [None if pd.isna(value) else str(value) for value in df[column]],
            index=df.index,
            dtype=object,
        )
    return df


def output_path_for_file(input_file: Path, output_root: Path, output_format: FileFormat) -> Path:
    base = _strip_known_extensions(input_file.name)
    return output_root / f"{base}{_EXTENSIONS[output_format]}"


def write_string_file(
    df: pd.DataFrame, output_file: Path, output_format: FileFormat, *, column: str = "value"
) -> None:
    output_file.parent.mkdir(parents=True, exist_ok=True)

    if output_format == FileFormat.TEXT:
        lines = ["" if pd.isna(value) else str(value) for value in df[column]]
        output_file.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return

    if output_format == FileFormat.CSV:
        df.to_csv(output_file, index=False)
        return

    if output_format == FileFormat.CSV_GZIP:
        df.to_csv(output_file, index=False, compression="gzip")
        return

    if output_format == FileFormat.PARQUET:
        df.to_parquet(output_file, index=False)
        return

    raise ValueError(f"Unsupported output format: {output_format}")


def _strip_known_extensions(name: str) -> str:
    for suffix in (".csv.gz", ".parquet", ".csv", ".txt"):
        if name.lower().endswith(suffix):
            return name[: -len(suffix)]
    return name
