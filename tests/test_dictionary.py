import pytest

from vocabdrill.dictionary import Dictionary


@pytest.fixture(scope="module")
def dictionary():
    return Dictionary()


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("cats", "cat"),
        ("running", "run"),
        ("ran", "run"),
        ("are", "be"),
        ("was", "be"),
        ("had", "have"),
        ("children", "child"),
        ("word", "word"),
        ("state-of-the-art", "state-of-the-art"),
    ],
)
def test_get_base_form(dictionary, word, expected):
    assert dictionary.get_base_form(word) == expected


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("am", "be"),
        ("be", "be"),
        ("ate", "eat"),
        ("eat", "eat"),
        ("kind", "kind"),
        ("student", "student"),
        ("a", "a"),
        ("I", "I"),
    ],
)
def test_words_used_in_examples(dictionary, word, expected):
    assert dictionary.get_base_form(word) == expected


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("boxes", "box"),
        ("studies", "study"),
        ("stopped", "stop"),
        ("hoped", "hope"),
        ("played", "play"),
        ("this", "this"),
    ],
)
def test_regular_inflections(dictionary, word, expected):
    assert dictionary.get_base_form(word) == expected


def test_lookup_ignores_case(dictionary):
    assert dictionary.get_base_form("Was") == "be"
    assert dictionary.get_base_form("Running") == "run"


def test_empty_word_has_no_base_form(dictionary):
    assert dictionary.get_base_form("") is None


def test_whitespace_only_has_no_base_form(dictionary):
    assert dictionary.get_base_form("   ") is None


def test_more_than_two_base_forms_is_ambiguous(dictionary):
    assert dictionary.get_base_form("red green blue") is None


def test_base_form_is_idempotent(dictionary):
    for word in ["cats", "running", "children", "was", "hoped"]:
        base = dictionary.get_base_form(word)
        assert dictionary.get_base_form(base) == base


def test_extra_forms_override_builtin_table():
    custom = Dictionary(extra_forms={"Went": "wend"})
    assert custom.get_base_form("went") == "wend"
    assert custom.get_base_form("ran") == "run"