import pytest

from pipex.strutil import atoi, itoa, split, strncmp, strnstr, strtrim, substr


@pytest.mark.parametrize("n", [0, 1, -1, 7, -42, 123456, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)
    with pytest.raises(OverflowError):
        itoa(-2147483649)


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r-42") == -42
    assert atoi("+17abc") == 17


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_wraps_like_32_bit():
    assert atoi("2147483648") == -2147483648


def test_split_drops_empty_fields():
    assert split("  ls   -l  ", " ") == ["ls", "-l"]
    assert split("/usr/bin:/bin::/sbin", ":") == ["/usr/bin", "/bin", "/sbin"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("::::", ":") == []


def test_split_join_invariant():
    text = "a b  c   d"
    parts = split(text, " ")
    assert " ".join(parts) == "a b c d"
    assert all(part and " " not in part for part in parts)


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("abc", "")
    with pytest.raises(ValueError):
        split("abc", "ab")


def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  hi  ", "") == "  hi  "


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_substr_basic():
    assert substr("pipex", 1, 3) == "ipe"
    assert substr("pipex", 2, 100) == "pex"


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 3, 2) == ""


def test_substr_length_bound():
    text = "hello world"
    for start in range(len(text) + 2):
        for length in range(len(text) + 2):
            result = substr(text, start, length)
            assert len(result) <= length
            assert result in text


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_found_and_missing():
    assert strnstr("PATH=/bin", "=", 9) == 4
    assert strnstr("abcdef", "zz", 6) is None


def test_strnstr_needle_must_fit_in_length():
    assert strnstr("abcdef", "cde", 4) is None
    assert strnstr("abcdef", "cde", 5) == 2


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_equal_and_prefix():
    assert strncmp("PATH", "PATH", 4) == 0
    assert strncmp("PATHX", "PATHY", 4) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abc", "ab", 3) > 0


def test_strncmp_antisymmetric():
    pairs = [("a", "b"), ("hello", "help"), ("", "x"), ("same", "same")]
    for a, b in pairs:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strncmp_difference_of_codes():
    assert strncmp("a", "b", 1) == ord("a") - ord("b")


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)