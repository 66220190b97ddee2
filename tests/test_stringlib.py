import pytest

from cutilkit import stringlib as sl

EXAMPLE = "This \t is a \n test!  "


def test_documented_example():
    spaced = sl.single_space(EXAMPLE)
    assert spaced == "This is a test!"
    assert sl.find_any(spaced, "!a") == 8
    assert sl.reverse(spaced) == "!tset a si sihT"


def test_reverse_round_trip():
    s = "abcdef ghi"
    assert sl.reverse(sl.reverse(s)) == s
    assert sl.reverse("") == ""


def test_trim():
    assert sl.trim("  \t hello world \n\r") == "hello world"
    assert sl.trim("") == ""
    assert sl.trim("   ") == ""
    assert sl.trim("\u00a0x") == "\u00a0x"


def test_standardize_whitespace():
    s = "a\tb\nc d\re"
    result = sl.standardize_whitespace(s, "_")
    assert len(result) == len(s)
    assert not any(ch in sl.WHITESPACE for ch in result)
    assert result.count("_") == 4


def test_remove_unwanted_chars():
    s = "hello world"
    result = sl.remove_unwanted_chars(s, "lo")
    assert not set(result) & set("lo")
    assert len(result) == len(s) - s.count("l") - s.count("o")
    assert sl.remove_unwanted_chars(s, "") == s


def test_replace_unwanted_chars():
    s = "hello world"
    result = sl.replace_unwanted_chars(s, "lo", "#")
    assert len(result) == len(s)
    assert result.count("#") == s.count("l") + s.count("o")
    assert sl.remove_unwanted_chars(result, "#") == sl.remove_unwanted_chars(s, "lo")


def test_find_and_find_reverse():
    s = "mississippi"
    first = sl.find(s, "s")
    last = sl.find_reverse(s, "s")
    assert s[first] == "s" and "s" not in s[:first]
    assert s[last] == "s" and "s" not in s[last + 1:]
    assert sl.find(s, "z") == -1
    assert sl.find_reverse(s, "z") == -1


def test_find_rejects_multi_char():
    with pytest.raises(ValueError):
        sl.find("abc", "ab")


def test_find_str_and_reverse_non_overlapping():
    assert sl.find_str("aaa", "aa") == sl.find_str_reverse("aaa", "aa")
    s = "one two one two"
    last = sl.find_str_reverse(s, "two")
    assert s[last:last + 3] == "two"
    assert "two" not in s[last + 1:]
    assert sl.find_str(s, "three") == -1
    assert sl.find_str_reverse(s, "three") == -1


def test_find_str_reverse_empty_sub():
    with pytest.raises(ValueError):
        sl.find_str_reverse("abc", "")


def test_find_any_reverse():
    s = "hello, world!"
    idx = sl.find_any_reverse(s, ",o")
    assert s[idx] in ",o"
    assert not any(ch in ",o" for ch in s[idx + 1:])
    assert sl.find_any_reverse(s, "xyz") == -1
    assert sl.find_any(s, "xyz") == -1


def test_counts():
    assert sl.find_cnt_str("aaaa", "aa") == 2
    s = "a,b;c,d"
    assert sl.find_cnt_any(s, ",;") == sl.find_cnt(s, ",") + sl.find_cnt(s, ";")
    assert sl.find_cnt(s, "z") == 0
    with pytest.raises(ValueError):
        sl.find_cnt_str("abc", "")


def test_find_alt_char():
    s = "a.b.c.d"
    cnt = sl.find_cnt(s, ".")
    assert sl.find_alt(s, ".", 1) == sl.find(s, ".")
    assert sl.find_alt(s, ".", cnt) == sl.find_reverse(s, ".")
    assert sl.find_alt(s, ".", cnt + 1) == -1
    assert sl.find_alt(s, ".", 0) == -1


def test_find_alt_str():
    s = "ab--cd--ef--"
    cnt = sl.find_cnt_str(s, "--")
    assert sl.find_alt_str(s, "--", 1) == sl.find_str(s, "--")
    assert sl.find_alt_str(s, "--", cnt) == sl.find_str_reverse(s, "--")
    assert sl.find_alt_str(s, "--", cnt + 1) == -1


def test_find_alt_any():
    s = "x1y2z3"
    cnt = sl.find_cnt_any(s, "123")
    assert sl.find_alt_any(s, "123", 1) == sl.find_any(s, "123")
    assert sl.find_alt_any(s, "123", cnt) == sl.find_any_reverse(s, "123")
    assert sl.find_alt_any(s, "123", cnt + 1) == -1


def test_concat():
    a, b = "foo", "bar"
    joined = sl.concat(a, b)
    assert joined[:len(a)] == a
    assert joined[len(a):] == b


def test_compare():
    assert sl.compare("abc", "abc") == 0
    assert sl.compare("abc", "abd") == -1
    assert sl.compare("abd", "abc") == 1
    assert sl.compare("ABC", "abc", False) == 0
    assert sl.compare("ABC", "abc", True) == -1
    assert sl.compare(None, "a") == -1
    assert sl.compare("a", None) == 1
    assert sl.compare(None, None) == 0


def test_extract_substring():
    s = "hello world"
    assert sl.extract_substring(s, 6, 5) == "world"
    assert sl.extract_substring(s, 6, 100) == "world"
    assert sl.extract_substring(s, len(s), 1) is None
    assert sl.extract_substring_str(s, "wor", 3) == "wor"
    assert sl.extract_substring_str(s, "xyz", 3) is None
    assert sl.extract_substring_c(s, "w", 100) == "world"
    assert sl.extract_substring_c(s, "z", 3) is None


def test_split_string_c():
    assert sl.split_string_c("a,,b,c,", ",") == ["a", "b", "c"]
    assert sl.split_string_c(",,,", ",") == []


def test_split_string_str():
    assert sl.split_string_str("a--b----c", "--") == ["a", "b", "c"]
    with pytest.raises(ValueError):
        sl.split_string_str("abc", "")


def test_split_string_any_default_whitespace():
    assert sl.split_string_any(" one\ttwo \n three ") == ["one", "two", "three"]
    assert sl.split_string_any("a.b-c", ".-") == ["a", "b", "c"]


def test_split_lines():
    assert sl.split_lines("one\n\ntwo\r\nthree\f") == ["one", "two", "three"]
    assert sl.split_lines("") == []


def test_single_space_idempotent():
    once = sl.single_space(EXAMPLE)
    assert sl.single_space(once) == once
    assert "  " not in once
    assert once == sl.trim(once)