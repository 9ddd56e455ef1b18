from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .annotations import Annotation

SEQUENCE_PATTERN = re.compile(r"EntL(?P<number>\d+)")


@dataclass(frozen=True)
class Definition:
    """One sense of an entry."""

    text: str
    annotations: Tuple[Annotation, ...] = ()
    cross_references: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "annotations": [annotation.code for annotation in self.annotations],
            "cross_references": list(self.cross_references),
        }


@dataclass(frozen=True)
class Record:
    """One parsed EDICT2 line.

    ``annotations`` apply to every definition; a definition's own
    ``annotations`` apply to that sense only.
    """

    primary_forms: Tuple[str, ...]
    pronunciations: Tuple[str, ...]
    annotations: Tuple[Annotation, ...]
    definitions: Tuple[Definition, ...]
    sequence: str
    recording_available: bool = False

    @property
    def sequence_number(self) -> Optional[int]:
        match = SEQUENCE_PATTERN.fullmatch(self.sequence)
        if not match:
            return None
        return int(match.group("number"))

    @property
    def is_common(self) -> bool:
        return Annotation.COMMON in self.annotations

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary_forms": list(self.primary_forms),
            "pronunciations": list(self.pronunciations),
            "annotations": [annotation.code for annotation in self.annotations],
            "definitions": [definition.to_dict() for definition in self.definitions],
            "sequence": self.sequence,
            "recording_available": self.recording_available,
        }
