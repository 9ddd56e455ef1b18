from __future__ import annotations

import codecs
import os
from functools import lru_cache
from typing import Any, FrozenSet, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from edict.parsing import EDICT2_KNOWN_BAD_LINES

KNOWN_BAD_LINES_ENV = "EDICT_KNOWN_BAD_LINES"
ENCODING_ENV = "EDICT_ENCODING"


class ParserSettings(BaseModel):
    known_bad_lines: FrozenSet[int] = Field(
        default=EDICT2_KNOWN_BAD_LINES,
        description="Line numbers whose parse failures are skipped instead of halting the batch.",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding of dictionary files (EDICT2 itself ships as euc-jp).",
    )

    @field_validator("known_bad_lines", mode="before")
    @classmethod
    def _split_line_numbers(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [int(item) for item in value.split(",") if item.strip()]
        return value

    @field_validator("known_bad_lines")
    @classmethod
    def _positive_line_numbers(cls, value: FrozenSet[int]) -> FrozenSet[int]:
        invalid = sorted(number for number in value if number < 1)
        if invalid:
            raise ValueError(f"line numbers must be positive, got {invalid}")
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ParserSettings":
        environ = os.environ if environ is None else environ
        values = {}
        if KNOWN_BAD_LINES_ENV in environ:
            values["known_bad_lines"] = environ[KNOWN_BAD_LINES_ENV]
        if ENCODING_ENV in environ:
            values["encoding"] = environ[ENCODING_ENV]
        return cls(**values)


@lru_cache
def get_settings() -> ParserSettings:
    return ParserSettings.from_env()
