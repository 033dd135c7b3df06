import pytest

from solong.strings import (
    split,
    strchr,
    striteri,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split(",,a,,b,c,,", ",") == ["a", "b", "c"]


def test_split_no_separator_present():
    assert split("abc", " ") == ["abc"]


def test_split_only_separators_gives_empty_list():
    assert split("    ", " ") == []


def test_split_empty_string():
    assert split("", ",") == []


@pytest.mark.parametrize("text", ["a b  c", "  lead", "trail  ", "x"])
def test_split_pieces_have_no_separator(text):
    pieces = split(text, " ")
    assert all(p and " " not in p for p in pieces)
    assert "".join(pieces) == text.replace(" ", "")


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"


def test_strtrim_all_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_keeps_inner_chars():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_empty_set():
    assert strtrim(" ab ", "") == " ab "


def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_past_end_is_empty():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


def test_substr_length_clipped():
    assert substr("abcdef", 2, 100) == "cdef"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_found():
    assert strnstr("lorem ipsum", "ipsum", 11) == 6


def test_strnstr_needle_beyond_limit():
    assert strnstr("lorem ipsum", "ipsum", 10) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_zero_length():
    assert strnstr("abc", "a", 0) is None


def test_strnstr_absent():
    assert strnstr("abcdef", "xyz", 6) is None


def test_strnstr_result_is_a_match():
    hay = "abcabcabc"
    index = strnstr(hay, "cab", len(hay))
    assert hay[index:index + 3] == "cab"


def test_strncmp_equal():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_limit_hides_difference():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_antisymmetric():
    assert strncmp("hello", "help", 5) == -strncmp("help", "hello", 5)


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 5) < 0


def test_strncmp_zero_n():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_stops_at_nul():
    assert strncmp("ab\0x", "ab\0y", 10) == 0


def test_strchr_first():
    s = "banana"
    index = strchr(s, "a")
    assert s[index] == "a"
    assert "a" not in s[:index]


def test_strchr_missing():
    assert strchr("banana", "z") is None


def test_strchr_nul_is_end():
    assert strchr("abc", "\0") == len("abc")


def test_strrchr_last():
    s = "banana"
    index = strrchr(s, "n")
    assert s[index] == "n"
    assert "n" not in s[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "q") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_strmapi_identity():
    assert strmapi("so long", lambda i, c: c) == "so long"


def test_striteri_in_place():
    chars = list("abc")
    result = striteri(chars, lambda i, c: c.upper() if i == 1 else None)
    assert chars == ["a", "B", "c"]
    assert result is chars


def test_striteri_empty():
    assert striteri([], lambda i, c: "x") == []