from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Any, Dict, Iterable, List, Optional

from edict.parsing import (
    BatchParseError,
    EndOfInputError,
    LineParseError,
    Record,
    parse_line,
    parse_lines,
)
from edict.settings import ParserSettings, get_settings

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class LineParseResult:
    success: bool
    record: Optional[Record] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "record": self.record.to_dict() if self.record else None,
            "error": self.error,
            "error_kind": self.error_kind,
        }


@dataclass(slots=True)
class BatchParseResult:
    records: List[Record] = field(default_factory=list)
    error: Optional[str] = None
    error_kind: Optional[str] = None
    line_number: Optional[int] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "count": len(self.records),
            "records": [record.to_dict() for record in self.records],
            "error": self.error,
            "error_kind": self.error_kind,
            "line_number": self.line_number,
        }


class EntryParserService:
    """Turns parser exceptions into result objects for the CLI and the API."""

    def __init__(self, settings: Optional[ParserSettings] = None) -> None:
        self.settings = settings or get_settings()

    def parse_line(self, line: str) -> LineParseResult:
        try:
            record = parse_line(line)
        except LineParseError as exc:
            return LineParseResult(
                success=False,
                error=str(exc),
                error_kind=type(exc).__name__,
            )
        return LineParseResult(success=True, record=record)

    def parse_batch(
        self,
        lines: Iterable[str],
        *,
        known_bad_lines: Optional[AbstractSet[int]] = None,
    ) -> BatchParseResult:
        if known_bad_lines is None:
            known_bad_lines = self.settings.known_bad_lines
        try:
            records = parse_lines(lines, known_bad_lines)
        except (BatchParseError, EndOfInputError) as exc:
            LOGGER.error("Parsing stopped: %s", exc)
            return BatchParseResult(
                records=exc.records,
                error=str(exc),
                error_kind=type(exc.cause).__name__,
                line_number=exc.line_number,
            )
        return BatchParseResult(records=records)
