import pytest

from _bifrostio.grammar import NEEDS_QUOTING, is_whitespace, needs_quoting


@pytest.mark.parametrize("char", b" \t\n\v\f\r")
def test_ascii_whitespace(char):
    assert is_whitespace(char)
    assert NEEDS_QUOTING[char]


@pytest.mark.parametrize("char", [0x1C, 0x85, 0xA0, ord("a"), ord("'")])
def test_not_whitespace(char):
    assert not is_whitespace(char)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"", False),
        (b"plain", False),
        ("caf\u00e9\u00a0".encode("utf-8"), False),
        (b"a b", True),
        (b"it's", True),
        (b'"', True),
        (b"C:\\", True),
    ],
)
def test_needs_quoting(raw, expected):
    assert needs_quoting(raw) is expected


def test_table_is_read_only():
    with pytest.raises(ValueError):
        NEEDS_QUOTING[0] = True
