import pytest

from sigtalk.chars import to_upper
from sigtalk.strings import (
    bounded_concat,
    bounded_copy,
    compare_n,
    each_indexed,
    find_bounded,
    find_char,
    join,
    map_indexed,
    rfind_char,
    split,
    substr,
    trim,
)


# split

def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_text():
    assert split("", " ") == []


def test_split_only_separators():
    assert split(",,,", ",") == []


def test_split_without_separator_keeps_whole_text():
    assert split("abc", "x") == ["abc"]


@pytest.mark.parametrize("text", ["a,b,,c", ",,lead", "trail,,", "one"])
def test_split_words_never_contain_separator(text):
    words = split(text, ",")
    assert all(word and "," not in word for word in words)
    assert ",".join(words) == ",".join(w for w in text.split(",") if w)


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


# trim

def test_trim_both_ends():
    assert trim("xyhixy", "xy") == "hi"


def test_trim_everything():
    assert trim("xxxx", "x") == ""


def test_trim_empty_set_keeps_text():
    assert trim(" a ", "") == " a "


def test_trim_keeps_inner_characters():
    assert trim("-a-b-", "-") == "a-b"


# substr

def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""


def test_substr_start_at_end():
    assert substr("hello", 5, 2) == ""


def test_substr_length_clipped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


# find_bounded

def test_find_bounded_found():
    assert find_bounded("lorem ipsum", "ipsum", 11) == len("lorem ")


def test_find_bounded_needle_beyond_limit():
    assert find_bounded("lorem ipsum", "ipsum", 10) is None


def test_find_bounded_empty_needle():
    assert find_bounded("abc", "", 0) == 0


def test_find_bounded_missing():
    assert find_bounded("abc", "zz", 3) is None


# compare_n

def test_compare_n_equal_prefix():
    assert compare_n("abc", "abd", 2) == 0


def test_compare_n_difference_sign():
    assert compare_n("abc", "abd", 3) < 0
    assert compare_n("abd", "abc", 3) > 0


def test_compare_n_shorter_string_ends_with_zero():
    assert compare_n("ab", "abc", 5) == -ord("c")


def test_compare_n_zero_length():
    assert compare_n("abc", "xyz", 0) == 0


def test_compare_n_identical():
    assert compare_n("same", "same", 100) == 0


# find_char / rfind_char

def test_find_char_first():
    assert find_char("hello", "l") == 2


def test_rfind_char_last():
    assert rfind_char("hello", "l") == 3


def test_find_char_nul_finds_end():
    assert find_char("abc", "\0") == len("abc")
    assert rfind_char("abc", "\0") == len("abc")


def test_find_char_missing():
    assert find_char("abc", "z") is None
    assert rfind_char("abc", "z") is None


def test_find_char_rejects_empty():
    with pytest.raises(ValueError):
        find_char("abc", "")


# bounded_copy

def test_bounded_copy_truncates():
    assert bounded_copy("hello", 3) == ("he", len("hello"))


def test_bounded_copy_zero_size():
    assert bounded_copy("hello", 0) == ("", len("hello"))


def test_bounded_copy_fits():
    assert bounded_copy("hello", 6) == ("hello", len("hello"))


def test_bounded_copy_negative_size():
    with pytest.raises(ValueError):
        bounded_copy("hello", -1)


# bounded_concat

def test_bounded_concat_truncates():
    result, total = bounded_concat("ab", "cdef", 5)
    assert result == "abcd"
    assert total == len("ab") + len("cdef")


def test_bounded_concat_fits():
    result, total = bounded_concat("ab", "cd", 10)
    assert result == "abcd"
    assert total == len(result)


def test_bounded_concat_dest_fills_buffer():
    result, total = bounded_concat("abc", "xy", 2)
    assert result == "abc"
    assert total == 2 + len("xy")


def test_bounded_concat_zero_size():
    assert bounded_concat("abc", "xy", 0) == ("abc", len("xy"))


# join

def test_join():
    assert join("foo", "bar") == "foobar"
    assert join("", "") == ""


# map_indexed / each_indexed

def test_map_indexed_upper():
    assert map_indexed("abc", lambda _i, ch: to_upper(ch)) == "ABC"


def test_map_indexed_uses_index():
    assert map_indexed("aaaa", lambda i, ch: ch if i % 2 else "-") == "-a-a"


def test_each_indexed_none_keeps_text():
    seen = []
    result = each_indexed("xyz", lambda i, ch: seen.append((i, ch)))
    assert result == "xyz"
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_each_indexed_replaces_selected():
    assert each_indexed("abcd", lambda i, ch: to_upper(ch) if i == 0 else None) == "Abcd"