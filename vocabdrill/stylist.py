"""Highlighting of a target word inside an example sentence."""

from __future__ import annotations

from vocabdrill.dictionary import Dictionary
from vocabdrill.styled_text import Color, Style, StyledText

EXAMPLE_COLOR = Color.DARK_GREY


def _is_wordlike(piece: str) -> bool:
    return all(char.isalpha() or char == "-" for char in piece)


def split_example(example: str) -> list[str]:
    """Split a sentence into runs of letters and single other characters.

    A letter extends the previous piece when that piece holds only letters
    and hyphens; every other character stands alone.
    """
    pieces: list[str] = []
    for char in example:
        if char.isalpha() and pieces and _is_wordlike(pieces[-1]):
            pieces[-1] += char
        else:
            pieces.append(char)
    return pieces


def style_example(
    dictionary: Dictionary, example: str, target: str
) -> list[StyledText]:
    """Style an example, marking words that share the target's base form."""
    target_base = dictionary.get_base_form(target)

    def style_for(piece: str) -> Style:
        if _is_wordlike(piece) and dictionary.get_base_form(piece) == target_base:
            return Style.BOLD_UNDERLINE
        return Style.PLAIN

    return [
        StyledText(piece, EXAMPLE_COLOR, style_for(piece))
        for piece in split_example(example)
    ]