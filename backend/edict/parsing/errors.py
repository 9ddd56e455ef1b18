"""Exceptions raised while parsing EDICT2 lines."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:  # pragma: no cover - type checking helper
    from .models import Record


class EdictError(Exception):
    """Base class for every error raised by the parser."""


class LineParseError(EdictError):
    """A single line could not be turned into a record."""


class MalformedKeyField(LineParseError):
    def __init__(self, message: str, key: str) -> None:
        super().__init__(f"{message} in key field {key!r}")
        self.key = key


class GlossFailure(str, Enum):
    UNEXPECTED_CHARACTER = "unexpected_character"
    UNTERMINATED_TAG = "unterminated_tag"
    INCOMPLETE_DEFINITION = "incomplete_definition"


class MalformedGlossField(LineParseError):
    def __init__(
        self,
        reason: GlossFailure,
        message: str,
        gloss: Optional[str] = None,
    ) -> None:
        text = message if gloss is None else f"{message} in gloss {gloss!r}"
        super().__init__(text)
        self.reason = reason
        self.message = message
        self.gloss = gloss

    def with_gloss(self, gloss: str) -> "MalformedGlossField":
        return MalformedGlossField(self.reason, self.message, gloss)


class MissingTrailingSeparator(LineParseError):
    def __init__(self, last_field: str) -> None:
        super().__init__(f"last field should be blank, but is {last_field!r}")
        self.last_field = last_field


class UnexpectedCrossReferenceInGlobalScope(LineParseError):
    def __init__(self, cross_references: List[str]) -> None:
        super().__init__(
            f"unexpected cross-reference in entry-wide details: {cross_references}"
        )
        self.cross_references = cross_references


class MissingDefinition(LineParseError):
    def __init__(self, line: str) -> None:
        super().__init__(f"no definition found in line {line!r}")
        self.line = line


class BatchParseError(EdictError):
    """Parsing halted on a line that is not on the skip list."""

    def __init__(self, line_number: int, records: List["Record"], cause: LineParseError) -> None:
        super().__init__(f"line {line_number}: {cause}")
        self.line_number = line_number
        self.records = records
        self.cause = cause


class EndOfInputError(EdictError):
    """The line source failed after some lines had already been read."""

    def __init__(self, line_number: int, records: List["Record"], cause: BaseException) -> None:
        super().__init__(f"past end of input (line {line_number}): {cause}")
        self.line_number = line_number
        self.records = records
        self.cause = cause
