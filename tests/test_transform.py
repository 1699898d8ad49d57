import pytest

from cstrkit.transform import insert, to_lower, to_upper, trim


@pytest.mark.parametrize(
    "s, expected",
    [
        ("Hello World", "hello world"),
        ("hello world", "hello world"),
        ("12345", "12345"),
        ("!@#$$^&*()_+", "!@#$$^&*()_+"),
        ("", ""),
        (" ", " "),
        ("Hello,\nWorld!", "hello,\nworld!"),
    ],
)
def test_to_lower(s, expected):
    assert to_lower(s) == expected


def test_to_lower_none():
    with pytest.raises(TypeError):
        to_lower(None)


def test_to_lower_ascii_only():
    assert to_lower("\u00c0B") == "\u00c0b"


@pytest.mark.parametrize(
    "s, expected",
    [
        ("Hello World", "HELLO WORLD"),
        ("HELLO WORLD", "HELLO WORLD"),
        ("12345", "12345"),
        ("!@#$$^&*()_+", "!@#$$^&*()_+"),
        ("", ""),
        (" ", " "),
        ("Hello,\nWorld!", "HELLO,\nWORLD!"),
    ],
)
def test_to_upper(s, expected):
    assert to_upper(s) == expected


def test_to_upper_none():
    with pytest.raises(TypeError):
        to_upper(None)


def test_to_upper_ascii_only():
    assert to_upper("stra\u00dfe") == "STRA\u00dfE"


@pytest.mark.parametrize(
    "src, trim_chars, expected",
    [
        ("** *Hello, world!\n*  *", "* ", "Hello, world!\n"),
        ("Hello, world!", "*", "Hello, world!"),
        ("\nHello, world!\n\n", "\n", "Hello, world!"),
        ("hello world\0", "\0", "hello world"),
        (" " * 21, " ", ""),
    ],
)
def test_trim(src, trim_chars, expected):
    assert trim(src, trim_chars) == expected


def test_trim_src_none():
    with pytest.raises(TypeError):
        trim(None, "*")


def test_trim_chars_none():
    with pytest.raises(TypeError):
        trim("hello world", None)


@pytest.mark.parametrize(
    "src, s, index, expected",
    [
        ("hello world", "my ", 6, "hello my world"),
        ("hello world", "", 2, "hello world"),
        ("", "abd", 0, "abd"),
        ("", "", 0, ""),
        ("abc", "d", 3, "abcd"),
    ],
)
def test_insert(src, s, index, expected):
    assert insert(src, s, index) == expected


def test_insert_index_larger():
    with pytest.raises(IndexError):
        insert("abcde", "e", 8)


def test_insert_negative_index():
    with pytest.raises(IndexError):
        insert("abcde", "e", -1)


def test_insert_src_none():
    with pytest.raises(TypeError):
        insert(None, "e", 8)


def test_insert_str_none():
    with pytest.raises(TypeError):
        insert("hello world", None, 8)