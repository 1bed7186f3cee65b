import pytest

from pushswap.text import (
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_counts_characters():
    assert strlen("hjhjhjhj") == 8
    assert strlen("") == 0


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == 3


def test_strchr_finds_first():
    s = "Findme"
    assert strchr(s, "d") == s.index("d")
    assert strchr(s, ord("F")) == 0


def test_strchr_nul_gives_length():
    assert strchr("Findme", "\0") == len("Findme")
    assert strchr("Findme", 0) == len("Findme")


def test_strchr_missing():
    assert strchr("Findme", "z") is None


def test_strchr_wraps_code():
    assert strchr("abc", ord("b") + 256) == 1


def test_strrchr_finds_last():
    s = "abcdefghija"
    assert strrchr(s, "a") == s.rindex("a")
    assert strrchr("abcdefghij", "a") == 0


def test_strrchr_nul_and_missing():
    assert strrchr("abc", "\0") == 3
    assert strrchr("abc", "q") is None


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_prefix_equal():
    assert strncmp("ciao", "ciaoa", 4) == 0


def test_strncmp_sign():
    assert strncmp("ciao", "ciaoa", 5) < 0
    assert strncmp("ciaoa", "ciao", 5) > 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_zero_and_identical():
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("same", "same", 100) == 0


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_empty_needle():
    assert strnstr("Hellowoworlddd", "", 3) == 0


def test_strnstr_found_within_length():
    big = "Hellowoworlddd"
    assert strnstr(big, "world", len(big)) == big.index("world")


def test_strnstr_match_must_fit():
    big = "Hellowoworlddd"
    start = big.index("world")
    assert strnstr(big, "world", start + len("world")) == start
    assert strnstr(big, "world", start + len("world") - 1) is None


def test_strnstr_missing():
    assert strnstr("abc", "zz", 10) is None


def test_strdup_copies():
    assert strdup("helloworld") == "helloworld"
    assert strdup("hello\0world") == "hello"


def test_strlcpy_truncates():
    assert strlcpy("ciao", 2) == ("c", 4)


def test_strlcpy_fits_and_zero():
    assert strlcpy("ciao", 10) == ("ciao", 4)
    assert strlcpy("ciao", 0) == ("", 4)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("x", -1)


def test_strlcat_source_example():
    assert strlcat("He", "llo", 5) == ("Hell", 5)


def test_strlcat_full_append():
    result, total = strlcat("He", "llo", 12)
    assert result == "He" + "llo"
    assert total == len(result)


def test_strlcat_size_not_larger_than_dst():
    assert strlcat("Hello", "abc", 3) == ("Hello", 3 + 3)


@pytest.mark.parametrize("size", range(0, 10))
def test_strlcat_result_fits_buffer(size):
    result, total = strlcat("abc", "defgh", size)
    assert total == (len("abcdefgh") if size > 3 else size + 5)
    if size > 3:
        assert len(result) <= size - 1
        assert "abcdefgh".startswith(result)