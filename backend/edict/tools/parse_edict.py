from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Iterable, List, Optional

from edict.services.entry_parser import EntryParserService
from edict.settings import get_settings
from edict.sources import iter_file_lines


def _export_results(path: Path, payload: List[dict]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Parse an EDICT2 dictionary file into structured records.",
    )
    parser.add_argument("--input", type=Path, required=True, help="Path to the EDICT2 file")
    parser.add_argument(
        "--encoding",
        default=settings.encoding,
        help="File encoding (default: %(default)s; the EDICT2 release is euc-jp)",
    )
    parser.add_argument(
        "--skip-line",
        type=int,
        action="append",
        dest="skip_lines",
        help="Line number to skip when it fails to parse (repeatable, replaces the configured list)",
    )
    parser.add_argument(
        "--no-skip",
        action="store_true",
        help="Halt on every malformed line, ignoring the skip list",
    )
    parser.add_argument(
        "--show",
        type=int,
        default=3,
        help="Display first N parsed records in the console (default: 3)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to save all parsed records as JSON",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if not args.verbose else logging.DEBUG,
        format="%(levelname)s %(message)s",
    )

    if args.no_skip:
        known_bad_lines = frozenset()
    elif args.skip_lines:
        known_bad_lines = frozenset(args.skip_lines)
    else:
        known_bad_lines = None

    service = EntryParserService()
    started = time.perf_counter()
    try:
        result = service.parse_batch(
            iter_file_lines(args.input, args.encoding),
            known_bad_lines=known_bad_lines,
        )
    except (OSError, UnicodeError) as exc:
        print(f"Cannot read {args.input}: {exc}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - started

    print(f"Parsed records: {len(result.records)}")
    print(f"Elapsed: {elapsed:.2f}s")

    show_count = max(0, args.show or 0)
    if show_count and result.records:
        print("\nSample records:")
        for record in result.records[:show_count]:
            senses = "; ".join(definition.text for definition in record.definitions)
            tags = ",".join(annotation.code for annotation in record.annotations) or "—"
            print(
                f"- {record.sequence} {';'.join(record.primary_forms)} "
                f"[{';'.join(record.pronunciations)}] ({tags}) {senses}"
            )

    if args.output:
        _export_results(args.output, [record.to_dict() for record in result.records])
        print(f"\nSaved parsed records to {args.output}")

    if not result.success:
        print(result.error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
