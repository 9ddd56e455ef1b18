from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, Iterator, List

from .errors import BatchParseError, EndOfInputError, LineParseError
from .line_parser import parse_line
from .models import Record

LOGGER = logging.getLogger(__name__)

# Lines of the reference EDICT2 release with a "/" inside a definition,
# which cannot be told apart from a field separator.
EDICT2_KNOWN_BAD_LINES: frozenset[int] = frozenset({31179, 104168, 104171})

_READ_ERRORS = (OSError, UnicodeError)


def iter_records(
    lines: Iterable[str],
    known_bad_lines: AbstractSet[int] = frozenset(),
) -> Iterator[Record]:
    """Yield a record per line, in input order.

    Line numbers are 1-based. A failing line whose number is in
    ``known_bad_lines`` is skipped; any other failure stops the iteration
    with :class:`BatchParseError`. ``records`` on the raised error is left
    empty here and filled in by :func:`parse_lines`.
    """

    line_number = 0
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            break
        except _READ_ERRORS as exc:
            if line_number == 0:
                raise
            raise EndOfInputError(line_number, [], exc) from exc

        line_number += 1
        try:
            record = parse_line(line)
        except LineParseError as exc:
            if line_number in known_bad_lines:
                LOGGER.warning("Skipping known-bad line %d: %s", line_number, exc)
                continue
            raise BatchParseError(line_number, [], exc) from exc
        yield record

    LOGGER.debug("Reached end of input after %d lines", line_number)


def parse_lines(
    lines: Iterable[str],
    known_bad_lines: AbstractSet[int] = frozenset(),
) -> List[Record]:
    """Parse every line, halting on the first failure not on the skip list.

    The raised :class:`BatchParseError` or :class:`EndOfInputError` carries
    every record parsed before the failing line.
    """

    records: List[Record] = []
    try:
        for record in iter_records(lines, known_bad_lines):
            records.append(record)
    except (BatchParseError, EndOfInputError) as exc:
        exc.records = records
        raise
    LOGGER.info("Parsed %d records", len(records))
    return records
