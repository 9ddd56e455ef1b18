"""Assembly of a full EDICT2 line into a :class:`Record`.

Layout of a line::

    KEY /(pos) (1) (tags) first sense/(2) second sense/(P)/EntL1234567X/

The key is handled by :mod:`.key_parser`, every sense field by
:mod:`.gloss_parser`. This module decides which tags are entry-wide and which
belong to a single sense.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .annotations import Annotation
from .errors import (
    MalformedGlossField,
    MissingDefinition,
    MissingTrailingSeparator,
    UnexpectedCrossReferenceInGlobalScope,
)
from .gloss_parser import ParsedGloss, parse_gloss
from .key_parser import normalize_key, parse_key
from .models import Definition, Record

FIELD_SEPARATOR = "/"
RECORDING_MARKER = "X"
COMMON_FIELD = "(P)"
FIRST_SENSE_MARKER = "(1)"
PLACEHOLDER_DEFINITION = "placeholder definition"


def _parse_gloss_field(gloss: str) -> ParsedGloss:
    try:
        return parse_gloss(gloss)
    except MalformedGlossField as exc:
        raise exc.with_gloss(gloss) from exc


def _split_entry_details(first_gloss: str) -> Tuple[Optional[List[Annotation]], str]:
    """Separate the tags written before ``(1)`` from the first sense.

    Returns ``(None, first_gloss)`` when the field has no single ``(1)``
    marker, in which case nothing is entry-wide.
    """

    pieces = first_gloss.split(FIRST_SENSE_MARKER)
    if len(pieces) != 2:
        return None, first_gloss

    leading, remainder = pieces
    try:
        details = parse_gloss(leading + PLACEHOLDER_DEFINITION)
    except MalformedGlossField as exc:
        raise exc.with_gloss(leading) from exc
    if details.cross_references:
        raise UnexpectedCrossReferenceInGlobalScope(details.cross_references)
    return details.annotations, remainder


def parse_line(line: str) -> Record:
    fields = line.split(FIELD_SEPARATOR)
    if fields[-1] != "":
        raise MissingTrailingSeparator(fields[-1])
    if len(fields) < 4:
        raise MissingDefinition(line)

    sequence = fields[-2]
    recording_available = sequence.endswith(RECORDING_MARKER)
    if recording_available:
        sequence = sequence[: -len(RECORDING_MARKER)]

    primary_forms, pronunciations = parse_key(fields[0])

    glosses = fields[1:-2]
    leading_tags: List[Annotation] = []
    if len(glosses) > 1:
        details, first_gloss = _split_entry_details(glosses[0])
        if details is not None:
            leading_tags = details
            glosses[0] = first_gloss

    common_tags: List[Annotation] = []
    parsed: List[ParsedGloss] = []
    for gloss in glosses:
        if gloss == COMMON_FIELD:
            common_tags.append(Annotation.COMMON)
            continue
        parsed.append(_parse_gloss_field(gloss))

    if not parsed:
        raise MissingDefinition(line)

    # A single sense carries no sense-specific tags: they describe the entry.
    if len(parsed) == 1:
        leading_tags = leading_tags + parsed[0].annotations
        parsed[0].annotations = []

    definitions = tuple(
        Definition(
            text=gloss.definition,
            annotations=tuple(gloss.annotations),
            cross_references=tuple(gloss.cross_references),
        )
        for gloss in parsed
    )

    return Record(
        primary_forms=tuple(normalize_key(form) for form in primary_forms),
        pronunciations=tuple(normalize_key(reading) for reading in pronunciations),
        annotations=tuple(leading_tags + common_tags),
        definitions=definitions,
        sequence=sequence,
        recording_available=recording_available,
    )
