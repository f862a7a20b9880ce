import re

import pytest

from testfactory import string_factory as sf


def test_random_string_range_and_prefix():
    value = sf.random_string(50, "id-")
    assert value.startswith("id-")
    assert len(value) == 53
    assert all(33 <= ord(c) <= 125 for c in value[3:])


def test_random_high_ascii_range():
    value = sf.random_high_ascii(200)
    assert len(value) == 200
    assert all(33 <= ord(c) <= 255 for c in value)


def test_random_nicelink_is_url_safe():
    value = sf.random_nicelink(100)
    assert len(value) == 100
    assert re.fullmatch(r"[A-Za-z0-9_.\-]+", value)
    assert not set(value) & set(",@+ ")


def test_random_email_shape():
    email = sf.random_email(8)
    name, _, domain = email.partition("@")

    assert len(name) == 10
    assert name[0] in sf.ALPHANUMS
    assert name[-1] in sf.ALPHANUMS
    assert domain.endswith(".com")
    assert len(domain) == 64


def test_random_email_name_is_capped():
    name = sf.random_email(500).split("@")[0]
    assert len(name) == sf.MAX_EMAIL_NAME + 2


def test_alphanum_and_letter_sets():
    assert set(sf.random_alphanums(200)) <= set(sf.ALPHANUMS)
    assert set(sf.random_letters(200)) <= set(sf.LETTERS)
    assert set(sf.random_alphanums_plus(200)) <= set(sf.KEYBOARD_CHARS)
    assert sf.random_alphanums(5, "x").startswith("x")
    assert not set("ilo") & set(sf.LETTERS)


@pytest.mark.parametrize("word_count,line_count,expected_lines", [
    (2, 2, 2),
    (10, 4, 4),
    (5, 1, 1),
    (3, 9, 2),
    (1, 2, 1),
])
def test_random_multiline_counts(word_count, line_count, expected_lines):
    text = sf.random_multiline(word_count, line_count)

    assert len(text.split("\n")) == expected_lines
    assert len(re.split(r"[ \n]", text)) == word_count
    assert all(1 <= len(word) <= 16 for word in re.split(r"[ \n]", text))


def test_random_multiline_char_types():
    text = sf.random_multiline(20, 3, char_type="string")
    words = re.split(r"[ \n]", text)
    assert len(words) == 20
    assert all(33 <= ord(c) <= 125 for word in words for c in word)

    with pytest.raises(KeyError):
        sf.random_multiline(2, 2, char_type="emoji")


def test_random_xss_string_uses_table():
    assert len(sf.XSS_STRINGS) == 101
    for _ in range(20):
        value = sf.random_xss_string()
        assert any(value == p + s for p in ('', '"', '">', '>') for s in sf.XSS_STRINGS)


def test_random_xss_string_limits_to_first_entries():
    for _ in range(20):
        value = sf.random_xss_string(1)
        assert value.endswith(sf.XSS_STRINGS[0])


def test_random_hex_color():
    assert re.fullmatch(r"#[0-9A-F]{6}", sf.random_hex_color())
