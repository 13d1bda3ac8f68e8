import pytest

from vocabdrill.dictionary import Dictionary
from vocabdrill.styled_text import Color, Style, StyledText
from vocabdrill.stylist import split_example, style_example

COLOR = Color.DARK_GREY


@pytest.fixture(scope="module")
def dictionary():
    return Dictionary()


def plain(text):
    return StyledText(text, COLOR, Style.PLAIN)


def marked(text):
    return StyledText(text, COLOR, Style.BOLD_UNDERLINE)


def test_style_example_normal(dictionary):
    styled = style_example(dictionary, "be kind.", "be")
    assert styled[0] == marked("be")
    assert styled[1] == plain(" ")
    assert styled[2] == plain("kind")


def test_style_example_empty(dictionary):
    assert len(style_example(dictionary, "", "am")) == 0


def test_style_example_conjugation(dictionary):
    styled = style_example(dictionary, "I ate a student.", "eat")
    assert styled[0] == plain("I")
    assert styled[1] == plain(" ")
    assert styled[2] == marked("ate")
    assert styled[3] == plain(" ")
    assert styled[4] == plain("a")
    assert styled[5] == plain(" ")
    assert styled[6] == plain("student")


@pytest.mark.parametrize(
    ("example", "mark"),
    [
        ("I am.", "."),
        ("I am,", ","),
        ("I am!", "!"),
        ("I am?", "?"),
        ("I am;", ";"),
        ("I am:", ":"),
        ("I am; ", ";"),
    ],
)
def test_style_example_located_at_end(dictionary, example, mark):
    styled = style_example(dictionary, example, "be")
    assert styled[0] == plain("I")
    assert styled[1] == plain(" ")
    assert styled[2] == marked("am")
    assert styled[3] == plain(mark)


def test_style_example_between_non_alphabets(dictionary):
    styled = style_example(dictionary, 'I :!"am"?:', "be")
    assert styled[0] == plain("I")
    assert styled[1] == plain(" ")
    assert styled[2] == plain(":")
    assert styled[3] == plain("!")
    assert styled[4] == plain('"')
    assert styled[5] == marked("am")
    assert styled[6] == plain('"')
    assert styled[7] == plain("?")
    assert styled[8] == plain(":")


def test_styled_pieces_rebuild_the_example(dictionary):
    example = "(The children were running home.)"
    styled = style_example(dictionary, example, "child")
    assert "".join(piece.text for piece in styled) == example
    assert all(piece.color is COLOR for piece in styled)
    assert [p.text for p in styled if p.style is Style.BOLD_UNDERLINE] == ["children"]


def test_split_example_words_and_punctuation():
    assert split_example("I am.") == ["I", " ", "am", "."]


def test_split_example_hyphen_starts_new_piece():
    assert split_example("state-of-the-art") == ["state", "-of", "-the", "-art"]


def test_split_example_empty():
    assert split_example("") == []