from edict.parsing.annotations import Annotation
from edict.parsing.identifiers import (
    AnnotationTag,
    CrossReference,
    FreeText,
    Ordinal,
    classify_identifier,
)


def test_ordinal():
    assert classify_identifier("42") == Ordinal()
    assert classify_identifier("1") == Ordinal()


def test_cross_reference():
    assert classify_identifier("See foo") == CrossReference("foo")
    assert classify_identifier("See あ・い") == CrossReference("あ・い")


def test_cross_reference_keeps_commas():
    assert classify_identifier("See 半挿・はんぞう・1, 他") == CrossReference("半挿・はんぞう・1, 他")


def test_annotation():
    assert classify_identifier("n") == AnnotationTag(Annotation.N)
    assert classify_identifier("uK") == AnnotationTag(Annotation.USUALLY_KANJI)


def test_free_text():
    identifier = classify_identifier("esp. ")
    assert identifier == FreeText("esp. ")
    assert identifier.as_literal() == "(esp. )"


def test_numbers_with_spaces_are_not_ordinals():
    assert classify_identifier(" 1") == FreeText(" 1")
    assert classify_identifier("1a") == FreeText("1a")


def test_see_prefix_requires_space():
    assert classify_identifier("Seefoo") == FreeText("Seefoo")
