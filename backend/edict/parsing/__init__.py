"""EDICT2 line parsing: key and gloss state machines plus line assembly."""

from .annotations import Annotation, AnnotationKind, annotation_of, code_of, describe
from .batch import EDICT2_KNOWN_BAD_LINES, iter_records, parse_lines
from .errors import (
    BatchParseError,
    EdictError,
    EndOfInputError,
    GlossFailure,
    LineParseError,
    MalformedGlossField,
    MalformedKeyField,
    MissingDefinition,
    MissingTrailingSeparator,
    UnexpectedCrossReferenceInGlobalScope,
)
from .gloss_parser import ParsedGloss, parse_gloss
from .identifiers import classify_identifier
from .key_parser import normalize_key, parse_key
from .line_parser import parse_line
from .models import Definition, Record

__all__ = [
    "Annotation",
    "AnnotationKind",
    "BatchParseError",
    "Definition",
    "EDICT2_KNOWN_BAD_LINES",
    "EdictError",
    "EndOfInputError",
    "GlossFailure",
    "LineParseError",
    "MalformedGlossField",
    "MalformedKeyField",
    "MissingDefinition",
    "MissingTrailingSeparator",
    "ParsedGloss",
    "Record",
    "UnexpectedCrossReferenceInGlobalScope",
    "annotation_of",
    "classify_identifier",
    "code_of",
    "describe",
    "iter_records",
    "normalize_key",
    "parse_gloss",
    "parse_key",
    "parse_line",
    "parse_lines",
]
