"""
The byte classes shared by the line tokenizer and the packer.

A line is a sequence of words separated by unquoted ascii whitespace and
terminated by an unquoted line feed:

    line         := word (SP word)* LF
    word         := unquoted | squoted | dquoted
    unquoted     := (any byte except SP/LF/'/"/\\) | escaped-byte
    squoted      := "'" (any byte except "'")* "'"
    dquoted      := '"' (any byte except '"' or unescaped '\\')* '"'
    escaped-byte := "\\" any-byte

Classification is done on single bytes, so only ascii whitespace ever acts
as a delimiter; multi-byte encoded whitespace is ordinary word content.
"""
import numpy as np

ENCODING = "utf-8"
# Keeps undecodable bytes intact through a tokenize/pack round trip.
ENCODING_ERRORS = "surrogateescape"

SINGLE_QUOTE = ord("'")
DOUBLE_QUOTE = ord('"')
BACKSLASH = ord("\\")
LINE_FEED = ord("\n")
SPACE = b" "

WHITESPACE = frozenset(b" \t\n\v\f\r")

# Lookup table over all byte values, True for bytes that force an argument
# to be quoted.
NEEDS_QUOTING = np.zeros(256, dtype=np.bool_)
NEEDS_QUOTING[list(WHITESPACE)] = True
NEEDS_QUOTING[[SINGLE_QUOTE, DOUBLE_QUOTE, BACKSLASH]] = True
NEEDS_QUOTING.setflags(write=False)


def is_whitespace(byte):
    """
    :param byte: A single byte value as an int.
    :returns: Whether the byte is an ascii whitespace delimiter.
    """
    return byte in WHITESPACE


def needs_quoting(raw):
    """
    :param raw: The encoded bytes of a word.
    :returns: True if the word contains whitespace, a quote or a backslash.
    """
    if not raw:
        return False
    return bool(NEEDS_QUOTING[np.frombuffer(raw, dtype=np.uint8)].any())
