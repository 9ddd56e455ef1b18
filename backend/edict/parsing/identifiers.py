"""Classification of the text found inside one pair of parentheses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from .annotations import Annotation, annotation_of

ORDINAL_PATTERN = re.compile(r"[+-]?[0-9]+")
CROSS_REFERENCE_PREFIX = "See "


@dataclass(frozen=True)
class Ordinal:
    """Sense number such as ``(2)``; carries nothing forward."""


@dataclass(frozen=True)
class CrossReference:
    target: str


@dataclass(frozen=True)
class AnnotationTag:
    annotation: Annotation


@dataclass(frozen=True)
class FreeText:
    """Parenthesised prose that belongs to the definition itself."""

    text: str

    def as_literal(self) -> str:
        return f"({self.text})"


Identifier = Union[Ordinal, CrossReference, AnnotationTag, FreeText]


def classify_identifier(token: str) -> Identifier:
    """Decide what a parenthesised token means.

    The decision depends only on the token: sense numbers first, then
    ``See <target>`` cross-references, then known annotation codes. Anything
    else is free text that the caller puts back into the definition.
    """

    if ORDINAL_PATTERN.fullmatch(token):
        return Ordinal()
    if token.startswith(CROSS_REFERENCE_PREFIX):
        return CrossReference(token[len(CROSS_REFERENCE_PREFIX):])
    annotation = annotation_of(token)
    if annotation is not None:
        return AnnotationTag(annotation)
    return FreeText(token)
