import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.chars import to_upper
from ftlib.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

text = st.text(alphabet="abc,xy ", max_size=30)


def test_strchr_finds_first_occurrence():
    assert strchr("hello", "l") == "hello".index("l")


def test_strchr_accepts_int_code():
    assert strchr("hello", ord("e")) == strchr("hello", "e")


def test_strchr_missing_and_terminator():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hello", "he")


def test_strrchr_finds_last_occurrence():
    assert strrchr("hello", "l") == "hello".rindex("l")
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


@given(text, st.sampled_from("abcxz"))
def test_strchr_strrchr_bracket_all_matches(s, c):
    first, last = strchr(s, c), strrchr(s, c)
    if c in s:
        assert s[first] == c and s[last] == c
        assert c not in s[:first] and c not in s[last + 1:]
    else:
        assert first is None and last is None


def test_strncmp_basics():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_end_counts_as_zero():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


@given(text, text, st.integers(min_value=0, max_value=40))
def test_strncmp_antisymmetric(a, b, n):
    assert strncmp(a, b, n) == -strncmp(b, a, n)
    assert (strncmp(a, b, n) == 0) == (a[:n] == b[:n])


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_empty_needle_and_limits():
    assert strnstr("haystack", "", 0) == 0
    assert strnstr("haystack", "stack", len("haystack")) == "haystack".index("stack")
    assert strnstr("haystack", "stack", len("haystack") - 1) is None


@given(text, st.text(alphabet="abc", min_size=1, max_size=3), st.integers(min_value=0, max_value=35))
def test_strnstr_match_lies_within_length(haystack, needle, length):
    index = strnstr(haystack, needle, length)
    if index is None:
        assert needle not in haystack[:length]
    else:
        assert haystack[index:index + len(needle)] == needle
        assert index + len(needle) <= length


def test_strlcpy_truncates_and_reports_source_length():
    assert strlcpy("hello", 3) == ("he", len("hello"))
    assert strlcpy("hello", 0) == ("", len("hello"))
    assert strlcpy("hello", 100) == ("hello", len("hello"))


@given(text, st.integers(min_value=0, max_value=40))
def test_strlcpy_invariants(src, size):
    copied, total = strlcpy(src, size)
    assert total == len(src)
    assert src.startswith(copied)
    assert len(copied) <= max(size - 1, 0)


def test_strlcat_small_buffer_leaves_dst():
    assert strlcat("abc", "de", 2) == ("abc", 2 + len("de"))


def test_strlcat_appends_within_room():
    assert strlcat("abc", "def", 5) == ("abcd", len("abcdef"))
    assert strlcat("abc", "def", 20) == ("abcdef", len("abcdef"))


@given(text, text, st.integers(min_value=0, max_value=70))
def test_strlcat_invariants(dst, src, size):
    result, total = strlcat(dst, src, size)
    assert result.startswith(dst)
    if size > len(dst):
        assert total == len(dst) + len(src)
        assert len(result) <= size - 1
        assert (dst + src).startswith(result)
    else:
        assert result == dst


def test_substr_cases():
    assert substr("hello", 1, 3) == "hello"[1:4]
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 2, 0) == ""
    assert substr("hello", 3, 100) == "hello"[3:]


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


@given(text, text)
def test_strjoin_concatenates(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a) and joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "a")


def test_strtrim_cases():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("", "x") == ""
    assert strtrim(" ab ", "") == " ab "


@given(text, st.text(alphabet="ax ", min_size=1, max_size=3))
def test_strtrim_invariants(s, charset):
    trimmed = strtrim(s, charset)
    assert trimmed in s
    if trimmed:
        assert trimmed[0] not in charset and trimmed[-1] not in charset


def test_split_drops_empty_pieces():
    assert split(",,a,,bc,", ",") == ["a", "bc"]
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@given(text)
def test_split_invariants(s):
    parts = split(s, ",")
    assert all(part and "," not in part for part in parts)
    assert "".join(parts) == s.replace(",", "")


def test_strmapi_passes_indexes():
    assert strmapi("abc", lambda i, c: str(i)) == "012"


def test_strmapi_uppercases():
    assert strmapi("abc", lambda i, c: to_upper(c)) == "ABC"
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_modifies_in_place():
    chars = list("abcd")
    result = striteri(chars, lambda i, c: to_upper(c) if i % 2 == 0 else None)
    assert result is chars
    assert "".join(chars) == "AbCd"


def test_striteri_records_every_index():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("xyz"))
    assert chars == list("xyz")