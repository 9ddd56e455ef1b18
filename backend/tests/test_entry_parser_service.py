from edict.services.entry_parser import EntryParserService
from edict.settings import ParserSettings

GOOD_LINE = "日 [ひ] /(n) sun/(P)/EntL1360890X/"
OTHER_LINE = "嗉嚢;そ嚢 [そのう] /(n) bird's crop/bird's craw/EntL2542030/"
BAD_LINE = "日 [ひ] /(n)sun/EntL1360890/"


def _service(*known_bad_lines: int) -> EntryParserService:
    return EntryParserService(ParserSettings(known_bad_lines=frozenset(known_bad_lines)))


def test_parse_line_success():
    result = _service().parse_line(GOOD_LINE)
    assert result.success
    assert result.record is not None
    assert result.to_dict()["record"]["annotations"] == ["n", "P"]


def test_parse_line_failure():
    result = _service().parse_line(BAD_LINE)
    assert not result.success
    assert result.record is None
    assert result.error_kind == "MalformedGlossField"
    assert "(n)sun" in result.error


def test_parse_batch_uses_configured_skip_list():
    result = _service(2).parse_batch([GOOD_LINE, BAD_LINE, OTHER_LINE])
    assert result.success
    assert len(result.records) == 2


def test_parse_batch_override_skip_list():
    result = _service(2).parse_batch([GOOD_LINE, BAD_LINE, OTHER_LINE], known_bad_lines=frozenset())
    assert not result.success
    assert result.line_number == 2
    assert result.error_kind == "MalformedGlossField"
    payload = result.to_dict()
    assert payload["count"] == 1
    assert payload["error"].startswith("line 2: ")
