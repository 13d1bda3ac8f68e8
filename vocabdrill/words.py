"""Word list entries and the JSON file that stores them."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

_TEXT_FIELDS = ("english", "example", "japanese")


class WordFileError(ValueError):
    """Raised when a word list file does not hold a valid list of words."""


@dataclass
class Word:
    """One entry of the word list."""

    english: str
    example: str
    japanese: str
    skip: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Word:
        """Build a word from its JSON object; ``skip`` defaults to false."""
        if not isinstance(data, Mapping):
            raise WordFileError(f"word entry must be an object, not {data!r}")
        values: dict[str, Any] = {}
        for name in _TEXT_FIELDS:
            if name not in data:
                raise WordFileError(f"word entry is missing field {name!r}")
            value = data[name]
            if not isinstance(value, str):
                raise WordFileError(f"field {name!r} must be a string, not {value!r}")
            values[name] = value
        skip = data.get("skip", False)
        if not isinstance(skip, bool):
            raise WordFileError(f"field 'skip' must be a boolean, not {skip!r}")
        return cls(skip=skip, **values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "english": self.english,
            "example": self.example,
            "japanese": self.japanese,
            "skip": self.skip,
        }


def load_words(path: str | Path) -> list[Word]:
    """Read the word list stored as a JSON array at ``path``."""
    with open(path, encoding="utf-8") as file:
        try:
            data = json.load(file)
        except json.JSONDecodeError as error:
            raise WordFileError(f"failed to parse {path}: {error}") from error
    if not isinstance(data, list):
        raise WordFileError(f"{path} must hold a JSON array of words")
    return [Word.from_dict(entry) for entry in data]


def save_words(path: str | Path, words: Iterable[Word]) -> None:
    """Write the word list to ``path`` as pretty-printed JSON."""
    text = json.dumps(
        [word.to_dict() for word in words], indent=2, ensure_ascii=False
    )
    with open(path, "w", encoding="utf-8") as file:
        file.write(text)


def pending_indices(words: Iterable[Word]) -> list[int]:
    """Positions of the words that are not marked to be skipped."""
    return [index for index, word in enumerate(words) if not word.skip]


def reset_skips(words: Iterable[Word]) -> None:
    """Clear the skip mark on every word."""
    for word in words:
        word.skip = False