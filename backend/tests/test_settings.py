import pytest
from pydantic import ValidationError

from edict.parsing.batch import EDICT2_KNOWN_BAD_LINES
from edict.settings import ParserSettings


def test_defaults():
    settings = ParserSettings.from_env({})
    assert settings.known_bad_lines == EDICT2_KNOWN_BAD_LINES
    assert settings.encoding == "utf-8"


def test_known_bad_lines_from_environment():
    settings = ParserSettings.from_env({"EDICT_KNOWN_BAD_LINES": "7, 12,7"})
    assert settings.known_bad_lines == frozenset({7, 12})


def test_empty_variable_disables_skip_list():
    settings = ParserSettings.from_env({"EDICT_KNOWN_BAD_LINES": ""})
    assert settings.known_bad_lines == frozenset()


def test_encoding_from_environment():
    settings = ParserSettings.from_env({"EDICT_ENCODING": "euc-jp"})
    assert settings.encoding == "euc-jp"


def test_rejects_non_positive_line_numbers():
    with pytest.raises(ValidationError):
        ParserSettings.from_env({"EDICT_KNOWN_BAD_LINES": "0,5"})


def test_rejects_garbage_line_numbers():
    with pytest.raises(ValidationError):
        ParserSettings.from_env({"EDICT_KNOWN_BAD_LINES": "five"})


def test_rejects_unknown_encoding():
    with pytest.raises(ValidationError):
        ParserSettings(encoding="no-such-codec")
