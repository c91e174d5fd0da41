from genfunctions.chararray import STRING_SIZE
from genfunctions.text import MAX_TOKENS_IN_ARRAY, split, trim


def test_trim_example():
    assert trim("    Hello, World!   ") == "Hello, World!"


def test_trim_all_whitespace_gives_empty():
    assert trim(" \t\n ") == ""


def test_trim_keeps_inner_spaces():
    assert trim("\t\v\fa  b\r\n") == "a  b"


def test_trim_is_idempotent():
    once = trim("  x y  ")
    assert trim(once) == once


def test_split_example():
    result = split("apple, banana, cherry, pineapple", ",")
    assert result == ["apple", "banana", "cherry", "pineapple"]


def test_split_skips_empty_runs():
    assert split(",,apple,,banana,", ",") == ["apple", "banana"]


def test_split_keeps_whitespace_only_token_as_empty():
    assert split("apple, ,banana", ",") == ["apple", "", "banana"]


def test_split_delimiter_is_a_set_of_characters():
    assert split("apple;banana,cherry", ",;") == ["apple", "banana", "cherry"]


def test_split_empty_input():
    assert split("", ",") == []


def test_split_caps_token_count():
    text = ",".join(str(i) for i in range(MAX_TOKENS_IN_ARRAY + 50))
    result = split(text, ",")
    assert len(result) == MAX_TOKENS_IN_ARRAY
    assert result[-1] == str(MAX_TOKENS_IN_ARRAY - 1)


def test_split_truncates_long_tokens():
    result = split("a" * (STRING_SIZE * 2) + ",b", ",")
    assert len(result[0]) == STRING_SIZE - 1
    assert result[1] == "b"


def test_split_with_empty_delimiter_returns_whole_text_trimmed():
    assert split("  apple  ", "") == ["apple"]