"""Parser for one definition field of an EDICT2 line.

A field looks like ``(n,vs) (1) (See 胸焼け) heartburn``: any number of
parenthesised tags, each followed by a space, then the definition text.
Tags are only recognised at the front of the field; once definition text
has started every character, parentheses included, belongs to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List

from .annotations import Annotation
from .errors import GlossFailure, MalformedGlossField
from .identifiers import AnnotationTag, CrossReference, FreeText, Ordinal, classify_identifier


class GlossState(Enum):
    START = "start"
    TAG = "tag"
    CLOSED = "closed"
    DEFINITION = "definition"


@dataclass
class ParsedGloss:
    definition: str
    annotations: List[Annotation] = field(default_factory=list)
    cross_references: List[str] = field(default_factory=list)


@dataclass
class _GlossScan:
    tag: str = ""
    definition: str = ""
    annotations: List[Annotation] = field(default_factory=list)
    cross_references: List[str] = field(default_factory=list)


def _on_start(scan: _GlossScan, char: str, index: int) -> GlossState:
    if char == "(":
        return GlossState.TAG
    scan.definition += char
    return GlossState.DEFINITION


def _on_tag(scan: _GlossScan, char: str, index: int) -> GlossState:
    if char == ",":
        # (n,vs) groups several codes in one pair of parentheses, but a comma
        # inside a cross-reference or prose is just a character.
        identifier = classify_identifier(scan.tag)
        if isinstance(identifier, AnnotationTag):
            scan.annotations.append(identifier.annotation)
            scan.tag = ""
        else:
            scan.tag += char
        return GlossState.TAG

    if char != ")":
        scan.tag += char
        return GlossState.TAG

    identifier = classify_identifier(scan.tag)
    scan.tag = ""
    if isinstance(identifier, AnnotationTag):
        scan.annotations.append(identifier.annotation)
    elif isinstance(identifier, CrossReference):
        scan.cross_references.append(identifier.target)
    elif isinstance(identifier, FreeText):
        scan.definition += identifier.as_literal()
        return GlossState.DEFINITION
    elif not isinstance(identifier, Ordinal):  # pragma: no cover - exhaustive
        raise TypeError(f"Unknown identifier: {identifier!r}")
    return GlossState.CLOSED


def _on_closed(scan: _GlossScan, char: str, index: int) -> GlossState:
    if char == " ":
        return GlossState.START
    raise MalformedGlossField(
        GlossFailure.UNEXPECTED_CHARACTER,
        f"unexpected {char!r} at position {index} after a closed tag (expecting space)",
    )


def _on_definition(scan: _GlossScan, char: str, index: int) -> GlossState:
    scan.definition += char
    return GlossState.DEFINITION


_TRANSITIONS: Dict[GlossState, Callable[[_GlossScan, str, int], GlossState]] = {
    GlossState.START: _on_start,
    GlossState.TAG: _on_tag,
    GlossState.CLOSED: _on_closed,
    GlossState.DEFINITION: _on_definition,
}


def parse_gloss(gloss: str) -> ParsedGloss:
    gloss = gloss.strip()
    scan = _GlossScan()
    state = GlossState.START
    for index, char in enumerate(gloss):
        state = _TRANSITIONS[state](scan, char, index)

    if state is GlossState.TAG:
        raise MalformedGlossField(
            GlossFailure.UNTERMINATED_TAG,
            f"unterminated tag {scan.tag!r}",
        )
    if state is not GlossState.DEFINITION:
        raise MalformedGlossField(
            GlossFailure.INCOMPLETE_DEFINITION,
            f"no definition text after tags (annotations={[a.code for a in scan.annotations]}, "
            f"cross_references={scan.cross_references})",
        )

    return ParsedGloss(
        definition=scan.definition,
        annotations=scan.annotations,
        cross_references=scan.cross_references,
    )
