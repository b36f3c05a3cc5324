import string

import pytest

from sigtalk.textutil import (
    find_char,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    rfind_char,
    strjoin,
    strlcat,
    strmapi,
    strncmp,
    strnstr,
    strtrim,
    substr,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(ch):
    assert is_alpha(ch) is True
    assert is_alnum(ch) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits_are_digit_not_alpha(ch):
    assert is_digit(ch) is True
    assert is_alpha(ch) is False
    assert is_alnum(ch) is True


def test_alnum_is_alpha_or_digit_over_byte_range():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_range_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_printable_subset_of_ascii():
    for code in range(-5, 300):
        if is_print(code):
            assert is_ascii(code)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)


@pytest.mark.parametrize("lower", list(string.ascii_lowercase))
def test_case_round_trip(lower):
    upper = to_upper(lower)
    assert upper == lower.upper()
    assert to_lower(upper) == lower


def test_case_conversion_keeps_type_for_integers():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


@pytest.mark.parametrize("ch", ["1", "@", "[", "`", "{", " "])
def test_case_conversion_leaves_non_letters(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_find_char_first_occurrence():
    s = "hello world"
    idx = find_char(s, "o")
    assert s[idx] == "o"
    assert "o" not in s[:idx]


def test_find_char_missing():
    assert find_char("hello", "z") is None


def test_find_char_terminator():
    assert find_char("hello", "\0") == len("hello")
    assert find_char("hello", 0) == len("hello")


def test_rfind_char_last_occurrence():
    s = "hello world"
    idx = rfind_char(s, "o")
    assert s[idx] == "o"
    assert "o" not in s[idx + 1:]


def test_rfind_char_missing_and_terminator():
    assert rfind_char("abc", "x") is None
    assert rfind_char("abc", "\0") == len("abc")


def test_strncmp_equal():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_ordering():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0


def test_strncmp_antisymmetric():
    pairs = [("apple", "apricot"), ("x", "xy"), ("same", "same"), ("", "a")]
    for a, b in pairs:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strncmp_difference_of_codes():
    assert strncmp("a", "b", 1) == ord("a") - ord("b")


def test_strncmp_negative_n_rejected():
    with pytest.raises(ValueError):
        strncmp("a", "b", -2)


def test_strnstr_found_within_length():
    hay = "lorem ipsum dolor"
    idx = strnstr(hay, "ipsum", len(hay))
    assert hay[idx:idx + len("ipsum")] == "ipsum"


def test_strnstr_needle_must_fit_within_length():
    hay = "lorem ipsum"
    assert strnstr(hay, "ipsum", len(hay) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_minus_one_length():
    assert strnstr("abc", "c", -1) is None
    idx = strnstr("abc", "b", -1)
    assert "abc"[idx] == "b"


def test_strnstr_missing():
    assert strnstr("abc", "zz", 100) is None


def test_strlcat_fits():
    result, total = strlcat("ab", "cdef", 10)
    assert result == "ab" + "cdef"
    assert total == len("ab") + len("cdef")


def test_strlcat_truncates_to_size_minus_one():
    result, total = strlcat("ab", "cdef", 4)
    assert len(result) == 4 - 1
    assert result.startswith("ab")
    assert "ab" + "cdef" == result + "cdef"[len(result) - 2:]
    assert total == len("ab") + len("cdef")


def test_strlcat_buffer_too_small_keeps_dst():
    result, total = strlcat("abcd", "xy", 2)
    assert result == "abcd"
    assert total == len("xy") + 2


def test_strlcat_negative_size_rejected():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


def test_substr_middle():
    s = "hello"
    part = substr(s, 1, 3)
    assert len(part) == 3
    assert s[1:].startswith(part)


def test_substr_clamps_length():
    s = "hello"
    assert substr(s, 2, 100) == s[2:]


def test_substr_start_past_end():
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 99, 2) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_concatenates():
    a, b = "mini", "talk"
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strjoin_empty_parts():
    assert strjoin("", "x") == "x"
    assert strjoin("x", "") == "x"


def test_strtrim_both_ends():
    assert strtrim("  xx hi xx  ", " x") == "hi"


def test_strtrim_all_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_without_charset():
    assert strtrim("  keep  ", None) == "  keep  "
    assert strtrim("  keep  ", "") == "  keep  "


def test_strtrim_ends_outside_charset():
    trimmed = strtrim("--*body*--", "-*")
    assert trimmed == "body"


def test_strmapi_passes_index_and_char():
    seen = []

    def record(index, ch):
        seen.append((index, ch))
        return ch

    assert strmapi("abc", record) == "abc"
    assert seen == list(enumerate("abc"))


def test_strmapi_uppercases():
    assert strmapi("hello", lambda i, c: to_upper(c)) == "HELLO"


def test_strmapi_empty():
    assert strmapi("", lambda i, c: c * 2) == ""