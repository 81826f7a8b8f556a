import io

import pytest
from hypothesis import given

import bifrostio
from _bifrostio.writing import EmptyMessageError, PackError, pack, render

from .generators.lines import plain_words


@pytest.mark.parametrize(
    "words, expected, rendered",
    [
        (
            ["uuid", "FLOAD", "/this/is/a/file"],
            b"uuid FLOAD /this/is/a/file\n",
            "uuid FLOAD /this/is/a/file",
        ),
        (
            ["uuid", "fload", "C:\\silly\\windows\\is\\silly"],
            rb"uuid fload 'C:\silly\windows\is\silly'" + b"\n",
            "uuid fload C:\\silly\\windows\\is\\silly",
        ),
        (
            ["uuid", "ACK", "OK", "/home/the donald/01 The Nightfly.mp3"],
            b"uuid ACK OK '/home/the donald/01 The Nightfly.mp3'\n",
            "uuid ACK OK /home/the donald/01 The Nightfly.mp3",
        ),
        (
            ["OHAI", "a'bar'b"],
            rb"OHAI 'a'\''bar'\''b'" + b"\n",
            "OHAI a'bar'b",
        ),
        (
            ["OHAI", 'a"bar"b'],
            b"OHAI 'a\"bar\"b'\n",
            'OHAI a"bar"b',
        ),
        (["OHAI"], b"OHAI\n", "OHAI"),
        (["tag", "tab\there"], b"tag 'tab\there'\n", "tag tab\there"),
        (["tag", "two\nlines"], b"tag 'two\nlines'\n", "tag two\nlines"),
    ],
)
def test_pack(words, expected, rendered):
    assert pack(words) == expected
    assert render(words) == rendered


@given(plain_words)
def test_plain_words_are_not_escaped(word):
    assert pack(["tag", word]) == b"tag " + word.encode("utf-8") + b"\n"


def test_non_ascii_whitespace_is_not_escaped():
    assert pack(["tag", "a\u00a0b"]) == "tag a\u00a0b\n".encode("utf-8")


def test_empty_argument_is_quoted():
    assert pack(["tag", "", "x"]) == b"tag '' x\n"


@pytest.mark.parametrize("words", [[], ()])
def test_pack_empty_message(words):
    with pytest.raises(EmptyMessageError):
        pack(words)


def test_pack_non_string_word():
    with pytest.raises(PackError, match="must be strings"):
        pack(["tag", 1])


@pytest.mark.parametrize("tag", ["a tag", "it's", "", "\\"])
def test_tag_is_written_unescaped(tag):
    with pytest.warns(UserWarning, match="unescaped"):
        packed = pack([tag, "x"])
    assert packed == tag.encode("utf-8") + b" x\n"


def test_pack_with_encoding():
    assert pack(["tag", "\u00e6"], encoding="latin-1") == b"tag \xe6\n"


def test_write_to_stream():
    stream = io.BytesIO()
    bifrostio.write(stream, [["a", "b c"], ["d"]])
    assert stream.getvalue() == b"a 'b c'\nd\n"


def test_write_to_file(tmpdir):
    with tmpdir.as_cwd():
        bifrostio.write("session.log", [["!", "OHAI", "server 1.0"]])
        with open("session.log", "rb") as f:
            assert f.read() == b"! OHAI 'server 1.0'\n"


def test_write_empty_message():
    with pytest.raises(EmptyMessageError):
        bifrostio.write(io.BytesIO(), [["a"], []])


def test_tag_warning_points_at_caller():
    with pytest.warns(UserWarning) as record:
        pack(["a tag", "x"])
    assert record[0].filename == __file__


def test_tag_warning_from_write_points_at_caller():
    with pytest.warns(UserWarning) as record:
        bifrostio.write(io.BytesIO(), [["a tag", "x"]])
    assert record[0].filename == __file__
