"""Interactive vocabulary drill in the terminal."""

from __future__ import annotations

import argparse
import enum
import logging
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from blessed import Terminal
from wcwidth import wcswidth, wcwidth

from vocabdrill.dictionary import Dictionary
from vocabdrill.speaker import Speaker
from vocabdrill.styled_text import (
    Color,
    Style,
    StyledText,
    print_styled_text,
    print_styled_texts,
)
from vocabdrill.stylist import style_example
from vocabdrill.words import (
    Word,
    load_words,
    pending_indices,
    reset_skips,
    save_words,
)

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

DEFAULT_FILE = "words.json"
INSTRUCTIONS = "(q)uit, (m)ark memorized, (ret) next"
RESET_PROMPT = (
    "All words have been memorized 🎉 Press 'r' to reset the word list or 'q' to quit."
)


class Action(enum.Enum):
    """What the user asked for while a word is shown."""

    NEXT = enum.auto()
    MARK_MEMORIZED = enum.auto()
    QUIT = enum.auto()


def action_for_key(key: str) -> Action | None:
    """Map a key press to an action; other keys give ``None``."""
    if getattr(key, "name", None) == "KEY_ENTER" or key in ("\n", "\r"):
        return Action.NEXT
    if key == "m":
        return Action.MARK_MEMORIZED
    if key == "q":
        return Action.QUIT
    return None


def _display_width(text: str) -> int:
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(char), 0) for char in text)


def centered_x(columns: int, text: str) -> int:
    """Column at which ``text`` starts when centred in ``columns`` cells."""
    return max(columns - _display_width(text), 0) // 2


def progress_text(index: int, total: int) -> str:
    """Progress label for the zero-based ``index`` out of ``total`` words."""
    return f"{index + 1} / {total}"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vocabdrill", description="Drill English vocabulary in the terminal."
    )
    parser.add_argument(
        "-f",
        "--file",
        default=DEFAULT_FILE,
        help="path of the word file (JSON)",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _wait_for_action(term: Terminal) -> Action:
    while True:
        action = action_for_key(term.inkey())
        if action is not None:
            return action


def _prompt_reset(term: Terminal, path: Path, words: list[Word]) -> bool:
    """Offer to reset a fully memorised list; return False if the user quits."""
    with term.fullscreen(), term.cbreak():
        _write(term.clear)
        x = centered_x(term.width, RESET_PROMPT)
        _write(term.move_xy(x, term.height // 2) + RESET_PROMPT)
        while True:
            key = term.inkey()
            if key == "r":
                reset_skips(words)
                save_words(path, words)
                return True
            if key == "q":
                return False


def _print_instructions(term: Terminal, columns: int, rows: int) -> None:
    x = max(columns - _display_width(INSTRUCTIONS) - 1, 0)
    y = max(rows - 1, 0)
    _write(term.move_xy(x, y) + INSTRUCTIONS)


def _print_progress(term: Terminal, columns: int, index: int, total: int) -> None:
    progress = progress_text(index, total)
    _write(term.move_xy(centered_x(columns, progress), 1))
    print_styled_text(
        sys.stdout, StyledText(progress, Color.DARK_CYAN, Style.UNDERLINE)
    )


def _print_question(
    term: Terminal, dictionary: Dictionary, columns: int, rows: int, word: Word
) -> int:
    """Show the word and its example; return the row of the example."""
    y = max(rows // 2 - 2, 0)
    _write(term.move_xy(centered_x(columns, word.english), y))
    print_styled_text(sys.stdout, StyledText(word.english, Color.YELLOW, Style.BOLD))

    y += 1
    _write(term.move_xy(centered_x(columns, word.example), y))
    print_styled_texts(
        sys.stdout, style_example(dictionary, f"({word.example})", word.english)
    )
    return y


def _drill(
    term: Terminal,
    dictionary: Dictionary,
    speaker: Speaker,
    words: list[Word],
    indices: list[int],
) -> None:
    total = len(indices)
    for position, index in enumerate(indices):
        word = words[index]
        speaker.speak(word.english)

        _write(term.clear)
        columns, rows = term.width, term.height
        _print_instructions(term, columns, rows)
        _print_progress(term, columns, position, total)
        y = _print_question(term, dictionary, columns, rows, word)

        action = _wait_for_action(term)
        if action is Action.NEXT:
            x = centered_x(columns, word.japanese)
            _write(term.move_xy(x, y + 2) + word.japanese + "\n")
            action = _wait_for_action(term)
            if action is Action.NEXT:
                continue
        if action is Action.MARK_MEMORIZED:
            word.skip = True
        elif action is Action.QUIT:
            return


def run(path: str | Path) -> None:
    """Run one drill session over the word file at ``path``."""
    path = Path(path)
    logger.info("Initializing dictionary...")
    dictionary = Dictionary()
    logger.info("Loaded dictionary successfully")

    logger.info("Loading words...")
    words = load_words(path)
    indices = pending_indices(words)
    logger.info("Loaded words successfully")

    speaker = Speaker()
    term = Terminal()

    if not indices:
        if not _prompt_reset(term, path, words):
            return
        indices = pending_indices(words)

    random.shuffle(indices)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        _drill(term, dictionary, speaker, words, indices)

    _write(term.clear + term.move_xy(0, 0) + "\n")
    save_words(path, words)


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    args = parse_args(argv)
    try:
        run(args.file)
    except (OSError, ValueError) as error:
        logger.error("Error: %s", error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())