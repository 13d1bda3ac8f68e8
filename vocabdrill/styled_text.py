"""Text fragments with a foreground colour and bold/underline attributes."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

BOLD_ON = "\x1b[1m"
BOLD_OFF = "\x1b[22m"
UNDERLINE_ON = "\x1b[4m"
UNDERLINE_OFF = "\x1b[24m"
RESET_ALL = "\x1b[0m"


class Color(enum.Enum):
    """Terminal foreground colours, valued by their 256-colour palette index."""

    BLACK = 0
    DARK_RED = 1
    DARK_GREEN = 2
    DARK_YELLOW = 3
    DARK_BLUE = 4
    DARK_MAGENTA = 5
    DARK_CYAN = 6
    GREY = 7
    DARK_GREY = 8
    RED = 9
    GREEN = 10
    YELLOW = 11
    BLUE = 12
    MAGENTA = 13
    CYAN = 14
    WHITE = 15
    RESET = -1

    @property
    def sequence(self) -> str:
        """The escape sequence that selects this colour."""
        if self is Color.RESET:
            return "\x1b[39m"
        return f"\x1b[38;5;{self.value}m"


class Style(enum.Enum):
    PLAIN = enum.auto()
    BOLD = enum.auto()
    UNDERLINE = enum.auto()
    BOLD_UNDERLINE = enum.auto()


@dataclass(frozen=True)
class StyledText:
    text: str
    color: Color
    style: Style = Style.PLAIN

    @property
    def bold(self) -> bool:
        return self.style in (Style.BOLD, Style.BOLD_UNDERLINE)

    @property
    def underline(self) -> bool:
        return self.style in (Style.UNDERLINE, Style.BOLD_UNDERLINE)


def render_styled_text(styled_text: StyledText) -> str:
    """Return the text wrapped in the escape sequences for its style."""
    return "".join(
        (
            styled_text.color.sequence,
            BOLD_ON if styled_text.bold else BOLD_OFF,
            UNDERLINE_ON if styled_text.underline else UNDERLINE_OFF,
            styled_text.text,
            RESET_ALL,
        )
    )


def print_styled_text(stream: TextIO, styled_text: StyledText) -> None:
    stream.write(render_styled_text(styled_text))
    stream.flush()


def print_styled_texts(stream: TextIO, styled_texts: Iterable[StyledText]) -> None:
    for styled_text in styled_texts:
        print_styled_text(stream, styled_text)