import pytest

from vocabdrill.app import (
    Action,
    action_for_key,
    centered_x,
    main,
    parse_args,
    progress_text,
)


class _NamedKey(str):
    def __new__(cls, text, name):
        key = super().__new__(cls, text)
        key.name = name
        return key


@pytest.mark.parametrize("key", ["\n", "\r"])
def test_enter_means_next(key):
    assert action_for_key(key) is Action.NEXT


def test_named_enter_key_means_next():
    assert action_for_key(_NamedKey("", "KEY_ENTER")) is Action.NEXT


def test_m_marks_memorized():
    assert action_for_key("m") is Action.MARK_MEMORIZED


def test_q_quits():
    assert action_for_key("q") is Action.QUIT


@pytest.mark.parametrize("key", ["x", "M", "Q", " ", ""])
def test_other_keys_are_ignored(key):
    assert action_for_key(key) is None


def test_centered_x_balances_margins():
    for columns in range(4, 40):
        x = centered_x(columns, "word")
        right = columns - x - 4
        assert right - x in (0, 1)


def test_centered_x_counts_wide_characters_twice():
    assert centered_x(30, "日本") == centered_x(30, "abcd")


def test_centered_x_saturates_when_text_is_too_wide():
    assert centered_x(3, "a rather long sentence") == 0


def test_centered_x_full_width_text_starts_at_left():
    assert centered_x(5, "hello") == 0


def test_progress_text_is_one_based():
    assert progress_text(0, 5) == "1 / 5"


def test_progress_text_last_item_matches_total():
    total = 12
    assert progress_text(total - 1, total) == f"{total} / {total}"


def test_parse_args_default_file():
    assert parse_args([]).file == "words.json"


@pytest.mark.parametrize("flag", ["-f", "--file"])
def test_parse_args_file_option(flag):
    assert parse_args([flag, "mine.json"]).file == "mine.json"


def test_main_missing_file_returns_error(tmp_path):
    assert main(["-f", str(tmp_path / "missing.json")]) == 1


def test_main_invalid_json_returns_error(tmp_path):
    path = tmp_path / "words.json"
    path.write_text("not json", encoding="utf-8")
    assert main(["--file", str(path)]) == 1
    assert path.read_text(encoding="utf-8") == "not json"