import pytest

from kingkai.search import strchr, strlen, strncmp, strnstr, strrchr


def test_strlen_plain():
    assert strlen("Hola") == len("Hola")


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == strlen("ab")


def test_strlen_empty():
    assert strlen("") == 0


def test_strchr_finds_first():
    text = "Hola mundo"
    index = strchr(text, "m")
    assert text[index] == "m"
    assert "m" not in text[:index]


def test_strchr_accepts_code():
    assert strchr("Hola mundo", ord("m")) == strchr("Hola mundo", "m")


def test_strchr_nul_gives_terminator():
    assert strchr("Hola", 0) == strlen("Hola")


def test_strchr_missing():
    assert strchr("Hola", "z") is None


def test_strchr_ignores_text_after_nul():
    assert strchr("ab\0c", "c") is None


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last():
    text = "HEllo World!"
    index = strrchr(text, "o")
    assert text[index:] == "orld!"


def test_strrchr_nul_gives_terminator():
    assert strrchr("abc", "\0") == strlen("abc")


def test_strrchr_missing():
    assert strrchr("abc", "x") is None


def test_strrchr_not_before_strchr():
    text = "banana"
    assert strrchr(text, "a") >= strchr(text, "a")


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string():
    assert strncmp("abc", "ab", 3) == ord("c")


def test_strncmp_stops_at_nul():
    assert strncmp("a\0x", "a\0y", 5) == 0


def test_strncmp_zero_length():
    assert strncmp("x", "y", 0) == 0


def test_strncmp_negative_length():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_finds_inside_window():
    big = "Hola mundo"
    index = strnstr(big, "mun", len(big))
    assert big[index : index + 3] == "mun"


def test_strnstr_match_must_fit_window():
    big = "Hola mundo"
    index = strnstr(big, "mun", len(big))
    assert strnstr(big, "mun", index + 2) is None
    assert strnstr(big, "mun", index + 3) == index


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "abd", 3) is None


def test_strnstr_no_false_partial_match():
    assert strnstr("abxaxc", "abc", 6) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)