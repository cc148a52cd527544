"""Persistent store of words seen in the hacking minigame, grouped by length."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

MIN_LENGTH = 4
MAX_LENGTH = 15
SLOTS = MAX_LENGTH - MIN_LENGTH + 1
DEFAULT_PATH = "saved_words.json"

PathLike = Union[str, Path]

log = logging.getLogger(__name__)


def _empty_slots() -> list[list[str]]:
    return [[] for _ in range(SLOTS)]


@dataclass
class WordsByLengths:
    """Word lists for every word length the minigame uses (4 to 15)."""

    lengths: list[list[str]] = field(default_factory=_empty_slots)

    def __post_init__(self) -> None:
        if len(self.lengths) != SLOTS:
            raise ValueError(f"expected {SLOTS} word lists, got {len(self.lengths)}")
        self.lengths = [list(group) for group in self.lengths]

    @staticmethod
    def _slot(length: int) -> int:
        if not MIN_LENGTH <= length <= MAX_LENGTH:
            raise ValueError(
                f"word length {length} is outside {MIN_LENGTH}-{MAX_LENGTH}"
            )
        return length - MIN_LENGTH

    def get(self, length: int) -> list[str]:
        """Return the stored words of the given length."""
        return self.lengths[self._slot(length)]

    def set(self, length: int, words: Iterable[str]) -> None:
        """Replace the stored words of the given length."""
        self.lengths[self._slot(length)] = list(words)

    def to_json(self) -> str:
        """Serialise to pretty-printed JSON."""
        return json.dumps({"lengths": self.lengths}, indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> WordsByLengths:
        """Parse JSON text; raise ValueError if it does not hold a valid store."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"parsing error: {exc}") from exc
        if not isinstance(data, dict) or "lengths" not in data:
            raise ValueError("parsing error: missing field 'lengths'")
        lengths = data["lengths"]
        if not isinstance(lengths, list) or len(lengths) != SLOTS:
            raise ValueError(f"parsing error: 'lengths' must be a list of {SLOTS} lists")
        for group in lengths:
            if not isinstance(group, list) or not all(isinstance(w, str) for w in group):
                raise ValueError("parsing error: every word list must hold only strings")
        return cls(lengths)


def serialize_to_json(words: WordsByLengths) -> str:
    """Serialise a word store to pretty-printed JSON."""
    return words.to_json()


def parse_json_struct(contents: str) -> WordsByLengths:
    """Parse a word store from JSON text."""
    return WordsByLengths.from_json(contents)


def write_to_file(output: str, path: PathLike) -> None:
    """Write text to a file, replacing what it held."""
    Path(path).write_text(output, encoding="utf-8")


def _create_empty_file(path: PathLike) -> None:
    log.info("creating empty file %s", path)
    write_to_file(serialize_to_json(WordsByLengths()), path)


def open_saved_words_file(path: PathLike = DEFAULT_PATH) -> str:
    """Read the saved words file, creating an empty store first if it is missing."""
    file = Path(path)
    try:
        return file.read_text(encoding="utf-8")
    except FileNotFoundError:
        _create_empty_file(file)
        return file.read_text(encoding="utf-8")


def process_user_inputted_words(
    words_inputted: Iterable[str],
    word_length: int,
    path: PathLike = DEFAULT_PATH,
) -> bool:
    """Merge words into the saved store; return True if the file was rewritten."""
    all_words = parse_json_struct(open_saved_words_file(path))
    existing = list(dict.fromkeys(all_words.get(word_length)))
    known = set(existing)
    new_words = sorted(set(words_inputted) - known)
    if not new_words:
        return False
    all_words.set(word_length, existing + new_words)
    write_to_file(serialize_to_json(all_words), path)
    return True