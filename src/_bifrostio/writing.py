import pathlib
import warnings

from _bifrostio.grammar import (
    ENCODING,
    ENCODING_ERRORS,
    LINE_FEED,
    SPACE,
    needs_quoting,
)


class PackError(Exception):
    pass


class EmptyMessageError(PackError):
    """
    Raised when packing a message without any words, which has no
    representation on the wire.
    """

    pass


def encode_word(word, encoding, errors):
    if not isinstance(word, str):
        raise PackError(f"Words must be strings, found {word!r}")
    return word.encode(encoding, errors)


def escape_argument(raw):
    """
    Wrap an encoded word in single quotes. Embedded single quotes are
    written as '\\'' (close quote, escaped quote, reopen quote).
    """
    return b"'" + raw.replace(b"'", b"'\\''") + b"'"


def pack_argument(raw):
    if not raw:
        return b"''"
    if needs_quoting(raw):
        return escape_argument(raw)
    return raw


def check_tag(tag, raw, stacklevel):
    if not raw or needs_quoting(raw):
        warnings.warn(
            f"tag {tag!r} is written unescaped and will not be read back as "
            "a single word",
            stacklevel=stacklevel + 2,
        )


def pack(words, encoding=ENCODING, errors=ENCODING_ERRORS, stacklevel=1):
    """
    Packs the words of a message into a line that can be written to a
    stream, ie. pack(["uuid", "fload", "a file.mp3"]) returns
    b"uuid fload 'a file.mp3'\\n".

    The first word is the tag and is always written as is. Any other word
    containing whitespace, quotes or backslashes is single quoted.

    :param words: Sequence of strings, the tag followed by the verb and
        its arguments.
    :param stacklevel: Stack level of the warning issued for a tag that
        can not be read back, relative to the caller of pack.
    :returns: The packed line as bytes, terminated by a line feed.
    """
    if len(words) == 0:
        raise EmptyMessageError("Cannot pack a message with no words")
    tag, *arguments = words
    raw_tag = encode_word(tag, encoding, errors)
    check_tag(tag, raw_tag, stacklevel)

    result = bytearray(raw_tag)
    for word in arguments:
        result += SPACE
        result += pack_argument(encode_word(word, encoding, errors))
    result.append(LINE_FEED)
    return bytes(result)


def render(words):
    """
    Joins the words of a message with spaces, without any escaping. Only
    useful for logging and debugging, the result can not be tokenized back
    into the same words.
    """
    return " ".join(words)


def write_lines(stream, lines, encoding, errors):
    for line in lines:
        stream.write(pack(line, encoding, errors, stacklevel=3))


def write(filelike, lines, encoding=ENCODING, errors=ENCODING_ERRORS):
    """
    Packs the given lines and writes them to the file.
    :param filelike: A file-like object, (string to path, pathlib.Path or
        opened binary stream).
    :param lines: Iterable of messages, each a sequence of words.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "wb") as stream:
            write_lines(stream, lines, encoding, errors)
    else:
        write_lines(filelike, lines, encoding, errors)
