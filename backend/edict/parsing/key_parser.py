"""Parser for the key field: ``Form1;Form2 [Reading1;Reading2] ``."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Tuple

from .errors import MalformedKeyField


class KeyState(Enum):
    PRIMARY = "primary"
    AFTER_PRIMARY = "after_primary"
    PRONUNCIATION = "pronunciation"
    DONE = "done"


@dataclass
class _KeyScan:
    key: str
    state: KeyState = KeyState.PRIMARY
    buffer: str = ""
    primary_forms: List[str] = field(default_factory=list)
    pronunciations: List[str] = field(default_factory=list)

    def flush_into(self, target: List[str], label: str) -> None:
        if not self.buffer:
            raise MalformedKeyField(f"empty {label}", self.key)
        target.append(self.buffer)
        self.buffer = ""

    def fail(self, char: str, index: int) -> MalformedKeyField:
        return MalformedKeyField(
            f"unexpected {char!r} at position {index} in state {self.state.value}",
            self.key,
        )


def _on_primary(scan: _KeyScan, char: str, index: int) -> KeyState:
    if char == ";":
        scan.flush_into(scan.primary_forms, "primary form")
        return KeyState.PRIMARY
    if char == " ":
        scan.flush_into(scan.primary_forms, "primary form")
        return KeyState.AFTER_PRIMARY
    if char in "[]":
        raise scan.fail(char, index)
    scan.buffer += char
    return KeyState.PRIMARY


def _on_after_primary(scan: _KeyScan, char: str, index: int) -> KeyState:
    if char == " ":
        return KeyState.AFTER_PRIMARY
    if char == "[":
        return KeyState.PRONUNCIATION
    raise scan.fail(char, index)


def _on_pronunciation(scan: _KeyScan, char: str, index: int) -> KeyState:
    if char == ";":
        scan.flush_into(scan.pronunciations, "pronunciation")
        return KeyState.PRONUNCIATION
    if char == "]":
        scan.flush_into(scan.pronunciations, "pronunciation")
        return KeyState.DONE
    if char in "[ ":
        raise scan.fail(char, index)
    scan.buffer += char
    return KeyState.PRONUNCIATION


def _on_done(scan: _KeyScan, char: str, index: int) -> KeyState:
    if char == " ":
        return KeyState.DONE
    raise scan.fail(char, index)


_TRANSITIONS: Dict[KeyState, Callable[[_KeyScan, str, int], KeyState]] = {
    KeyState.PRIMARY: _on_primary,
    KeyState.AFTER_PRIMARY: _on_after_primary,
    KeyState.PRONUNCIATION: _on_pronunciation,
    KeyState.DONE: _on_done,
}


def parse_key(key: str) -> Tuple[List[str], List[str]]:
    """Split a key field into primary forms and pronunciations.

    The pronunciation group is optional, so ``"あ "`` and ``"A;B"`` are both
    valid and return an empty pronunciation list.
    """

    scan = _KeyScan(key=key)
    for index, char in enumerate(key):
        scan.state = _TRANSITIONS[scan.state](scan, char, index)

    if scan.state is KeyState.PRIMARY:
        scan.flush_into(scan.primary_forms, "primary form")
    elif scan.state is KeyState.PRONUNCIATION:
        raise MalformedKeyField("unterminated pronunciation list", key)

    return scan.primary_forms, scan.pronunciations


def normalize_key(token: str) -> str:
    """Drop trailing parenthetical qualifiers such as ``(ateji)`` or ``(P)``."""

    paren = token.find("(")
    if paren == -1:
        return token
    return token[:paren]
