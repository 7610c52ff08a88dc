import pytest

from kingkai.strings import (
    split,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strtrim,
    substr,
)


def test_strdup_copies_whole_string():
    assert strdup("Hola, mundo!") == "Hola, mundo!"


def test_strdup_stops_at_terminator():
    assert strdup("abc\0def") == "abc"


def test_strlcpy_fits():
    assert strlcpy("Hola, mundo!", 20) == ("Hola, mundo!", 12)


def test_strlcpy_truncates_and_reports_full_length():
    copied, total = strlcpy("Hola, mundo!", 5)
    assert copied == "Hola"
    assert total == len("Hola, mundo!")


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("Hola", 0) == ("", 4)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("x", -1)


def test_strlcat_worked_example():
    assert strlcat("Hola", " Mundo", 20) == ("Hola Mundo", 10)


def test_strlcat_truncates_to_buffer():
    result, total = strlcat("Hola", " Mundo", 7)
    assert len(result) == 6
    assert result == ("Hola" + " Mundo")[:6]
    assert total == len("Hola") + len(" Mundo")


def test_strlcat_destination_fills_buffer():
    assert strlcat("Hola", " Mundo", 3) == ("Hola", 3 + len(" Mundo"))


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -2)


def test_substr_middle():
    assert substr("Hello", 1, 3) == "ell"


def test_substr_start_past_end_is_empty():
    assert substr("Hello", 10, 3) == ""


def test_substr_length_clamped():
    assert substr("Hello", 2, 100) == "Hello"[2:]


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("Hello", -1, 2)


def test_strjoin_worked_example():
    assert strjoin("Hola ", "Mundo!") == "Hola Mundo!"


def test_strjoin_length_invariant():
    a, b = "first", "second part"
    joined = strjoin(a, b)
    assert len(joined) == len(a) + len(b)
    assert joined.startswith(a) and joined.endswith(b)


def test_strtrim_worked_example():
    assert strtrim("   ***Hello, World!***   ", " *") == "Hello, World!"


def test_strtrim_all_trimmed():
    assert strtrim("*** ***", " *") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  padded  ", "") == "  padded  "


def test_split_drops_empty_pieces():
    assert split(",,one,,two,three,,", ",") == ["one", "two", "three"]


def test_split_nul_separator_gives_first_word():
    assert split("paco\0pacoo\0pacooo\0pacoooo\0", "\0") == ["paco"]


def test_split_integer_separator():
    assert split("a b  c", ord(" ")) == ["a", "b", "c"]


def test_split_only_separators():
    assert split("////", "/") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_uses_index_and_char():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_strmapi_keeps_length():
    text = "hello world"
    assert len(strmapi(text, lambda i, ch: "x")) == len(text)


def test_striteri_replaces_in_place():
    chars = list("hello")
    striteri(chars, lambda i, ch: ch.upper() if i == 0 else None)
    assert "".join(chars) == "Hello"


def test_striteri_stops_at_nul():
    chars = list("ab\0cd")
    seen = []
    striteri(chars, lambda i, ch: seen.append(i))
    assert seen == [0, 1]
    assert chars == list("ab\0cd")