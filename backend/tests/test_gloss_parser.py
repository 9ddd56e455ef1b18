import pytest

from edict.parsing.annotations import Annotation
from edict.parsing.errors import GlossFailure, MalformedGlossField
from edict.parsing.gloss_parser import parse_gloss


def _parsed(text: str):
    gloss = parse_gloss(text)
    return gloss.definition, gloss.annotations, gloss.cross_references


def test_single_tag():
    assert _parsed("(n) foo") == ("foo", [Annotation.N], [])


def test_grouped_tags():
    assert _parsed("(n,adj-no) foo") == ("foo", [Annotation.N, Annotation.ADJ_NO], [])


def test_cross_reference():
    assert _parsed("(See foobar) foo") == ("foo", [], ["foobar"])


def test_tag_and_cross_reference():
    assert _parsed("(n) (See foobar) foo") == ("foo", [Annotation.N], ["foobar"])


def test_plain_definition():
    assert _parsed("foo") == ("foo", [], [])


def test_ordinal_is_dropped_and_order_preserved():
    assert _parsed("(1) (abbr) (uK) (See foobar) foo") == (
        "foo",
        [Annotation.ABBR, Annotation.USUALLY_KANJI],
        ["foobar"],
    )


def test_surrounding_whitespace_is_trimmed():
    assert _parsed("  (n) foo bar ") == ("foo bar", [Annotation.N], [])


def test_free_text_parenthetical_starts_definition():
    assert _parsed("(esp. ) wide-mouthed vessel") == ("(esp. ) wide-mouthed vessel", [], [])


def test_free_text_after_tags():
    definition, annotations, xrefs = _parsed(
        "(n,vs) (obsc) (嘈囃 is sometimes read むねやけ) (See 胸焼け) heartburn"
    )
    assert annotations == [Annotation.N, Annotation.VS, Annotation.OBSC]
    assert xrefs == []
    assert definition == "(嘈囃 is sometimes read むねやけ) (See 胸焼け) heartburn"


def test_parentheses_inside_definition_are_literal():
    assert _parsed("(n) cutting off the leg (form of punishment)") == (
        "cutting off the leg (form of punishment)",
        [Annotation.N],
        [],
    )


def test_comma_inside_cross_reference_is_kept():
    assert _parsed("(See 日本, にほん) Japan") == ("Japan", [], ["日本, にほん"])


def test_comma_after_annotation_inside_free_text():
    # The first piece is a known code, so it is taken as a grouped tag.
    assert _parsed("(n,some remark) foo") == ("(some remark) foo", [Annotation.N], [])


def test_only_tags_fails():
    with pytest.raises(MalformedGlossField) as excinfo:
        parse_gloss("(n) (vs)")
    assert excinfo.value.reason is GlossFailure.INCOMPLETE_DEFINITION


def test_empty_gloss_fails():
    with pytest.raises(MalformedGlossField) as excinfo:
        parse_gloss("   ")
    assert excinfo.value.reason is GlossFailure.INCOMPLETE_DEFINITION


def test_unterminated_tag_fails():
    with pytest.raises(MalformedGlossField) as excinfo:
        parse_gloss("(n foo")
    assert excinfo.value.reason is GlossFailure.UNTERMINATED_TAG


def test_tag_without_following_space_fails():
    with pytest.raises(MalformedGlossField) as excinfo:
        parse_gloss("(n)foo")
    assert excinfo.value.reason is GlossFailure.UNEXPECTED_CHARACTER
