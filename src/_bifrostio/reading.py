import pathlib
from contextlib import contextmanager

from _bifrostio.grammar import ENCODING, ENCODING_ERRORS
from _bifrostio.tokenizer import LineTokenizer


def read(filelike, encoding=ENCODING, errors=ENCODING_ERRORS):
    """
    Reads all lines of a file and returns them as a list of words,
    ie. lines = read("/my/session.log")

    The file must end on a line boundary, otherwise EndOfStreamError is
    raised.
    """
    with lazy_read(filelike, encoding, errors) as lines:
        return list(lines)


@contextmanager
def lazy_read(filelike, encoding=ENCODING, errors=ENCODING_ERRORS):
    """
    Context manager giving an iterator of the lines in the file. Lines are
    only read from the file as the iterator is advanced.

    :param filelike: A file-like object, (string to path, pathlib.Path or
        opened binary stream or socket).
    """
    stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        stream = open(filelike, "rb")

    try:
        yield iter(LineTokenizer(stream, encoding, errors))
    finally:
        if did_open:
            stream.close()
