from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from string_parser.collection import StringCollectionParser
from string_parser.collector import ParseCollector
from string_parser.io import (
    FileFormat,
    detect_format,
    output_path_for_file,
    read_string_file,
    write_string_file,
)
from string_parser.parsers import DEFAULT_PARSER_CHAIN, ParserConfig, build_parser, list_parsers


logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="string-parser",
        description="Parse every string in a text, CSV(.gz) or Parquet file.",
    )
    parser.add_argument(
        "input_path",
        type=Path,
        help="Path to a .txt, .csv, .csv.gz or .parquet file.",
    )
    parser.add_argument(
        "output_path",
        type=Path,
        help="Destination folder for the parsed output file.",
    )
    parser.add_argument(
        "--column",
        default="value",
        help="Column holding the strings to parse (default: value).",
    )
    parser.add_argument(
        "--parsers",
        nargs="+",
        choices=list_parsers(),
        default=list(DEFAULT_PARSER_CHAIN),
        metavar="NAME",
        help=f"Parsers to apply, in order (default: {' '.join(DEFAULT_PARSER_CHAIN)}).",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=15,
        help="Maximum length kept by the Truncate parser (default: 15).",
    )
    parser.add_argument(
        "--output-format",
        type=FileFormat,
        choices=list(FileFormat),
        default=None,
        help="Output file format (default: same as the input).",
    )
    parser.add_argument(
        "--export-mappings",
        type=Path,
        default=None,
        metavar="PATH",
        help="Optional path to write a JSON report of what each distinct value parsed to.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    input_path: Path = args.input_path
    output_path: Path = args.output_path
    column: str = args.column
    export_mappings: Path | None = args.export_mappings

    if not input_path.is_file():
        parser.error(f"Input file not found: {input_path}")
    try:
        input_format = detect_format(input_path)
    except ValueError as exc:
        parser.error(str(exc))
    output_format: FileFormat = args.output_format or input_format

    if args.max_length < 0:
        parser.error(f"--max-length must be >= 0, got {args.max_length}")

    destination = output_path_for_file(input_path, output_path, output_format)
    if destination.resolve() == input_path.resolve():
        parser.error(f"Refusing to overwrite the input file: {input_path}")

    collector = ParseCollector() if export_mappings is not None else None
    config = ParserConfig(max_length=args.max_length)
    string_parser = build_parser(
        args.parsers, config=config, collector=collector, source_name=column
    )
    logger.debug("Parser chain: %s", " -> ".join(args.parsers))

    df = read_string_file(input_path, column=column)
    if column not in df.columns:
        available = ", ".join(str(name) for name in df.columns)
        parser.error(f"Column '{column}' not found in {input_path}. Available columns: {available}")

    parsed = StringCollectionParser(string_parser).map_frame(df, [column])
    write_string_file(parsed, destination, output_format, column=column)
    print(f"Processed: {input_path} -> {destination}")
    print(f"Done. Parsed {len(parsed)} value(s) in column '{column}'.")

    if collector is not None:
        export_mappings.parent.mkdir(parents=True, exist_ok=True)
        export_mappings.write_text(
            json.dumps(collector.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
        )
        print(f"Mappings written to: {export_mappings}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
