import logging
import select

from _bifrostio.grammar import (
    BACKSLASH,
    DOUBLE_QUOTE,
    ENCODING,
    ENCODING_ERRORS,
    LINE_FEED,
    SINGLE_QUOTE,
    is_whitespace,
)
from _bifrostio.tokenizer.errors import (
    EndOfStreamError,
    SourceError,
    UnterminatedQuoteError,
    WrongStreamModeError,
)
from _bifrostio.tokenizer.line_state import LineState
from _bifrostio.tokenizer.quote_kind import QuoteKind

logger = logging.getLogger(__name__)


def byte_reader(stream):
    """
    :param stream: A binary stream with a read method, or a socket-like
        object with a recv method.
    :returns: A function reading at most n bytes from the stream.
    """
    if hasattr(stream, "read"):
        return stream.read
    if hasattr(stream, "recv"):
        return stream.recv
    raise TypeError(f"Cannot read bytes from {stream!r}, expected read() or recv()")


def wait_readable(stream):
    """
    Block until the stream has data to read. Streams without a file
    descriptor are retried immediately.
    """
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return
    select.select([fd], [], [])


class LineTokenizer:
    """
    Tokenizes lines of words from a byte stream. Words are separated by
    unquoted ascii whitespace and a line is ended by an unquoted line feed.
    Words can be quoted with single quotes, where every byte is literal, or
    double quotes, where a backslash escapes the following byte. Outside
    of single quotes a backslash always escapes the following byte.

    >>> import io
    >>> tokenizer = LineTokenizer(io.BytesIO(b"uuid fload 'a file.mp3'\\n"))
    >>> tokenizer.tokenize_line()
    ['uuid', 'fload', 'a file.mp3']

    The tokenizer holds the state of the line currently being read, and so
    must only be used by one reader at a time.
    """

    def __init__(self, stream, encoding=ENCODING, errors=ENCODING_ERRORS):
        """
        :param stream: A byte stream (or socket) containing lines.
        :param encoding: The encoding used to decode words.
        :param errors: The error handler used when decoding words.
        """
        self.stream = stream
        self.encoding = encoding
        self.errors = errors
        self._read = byte_reader(stream)
        self._state = LineState()

    @property
    def quote(self):
        return self._state.quote

    def __iter__(self):
        """
        Iterates over the lines of the stream until the stream ends. Ending
        in the middle of a line raises EndOfStreamError.
        """
        while True:
            try:
                yield self.tokenize_line()
            except EndOfStreamError as err:
                if err.discarded:
                    raise
                logger.debug("Reached end of stream on a line boundary")
                return

    def tokenize_line(self):
        """
        Reads bytes from the stream until an unquoted line feed is found.

        :returns: The list of words in the line.
        :raises SourceError: If the stream fails or ends before the line
            is complete, the partially read line is discarded.
        """
        while True:
            if self.tokenize_byte(self.read_byte()):
                line = self._state.words
                self._state = LineState()
                return line

    def tokenize_byte(self, byte):
        """
        Tokenize a single byte of the stream.

        :param byte: The byte as an int.
        :returns: True if the byte ended the line, which can only
            happen outside of quotes.
        """
        state = self._state
        if state.escape_next:
            state.put(byte)
            state.escape_next = False
            return False

        if state.quote == QuoteKind.UNQUOTED:
            return self.tokenize_unquoted(byte)
        elif state.quote == QuoteKind.SINGLE:
            self.tokenize_single_quoted(byte)
        elif state.quote == QuoteKind.DOUBLE:
            self.tokenize_double_quoted(byte)
        else:
            raise ValueError(f"Unexpected quote kind {state.quote}")
        return False

    def tokenize_unquoted(self, byte):
        state = self._state
        if byte == SINGLE_QUOTE:
            # Opening a quote starts a word, so that '' is the empty word.
            state.in_word = True
            state.quote = QuoteKind.SINGLE
        elif byte == DOUBLE_QUOTE:
            state.in_word = True
            state.quote = QuoteKind.DOUBLE
        elif byte == BACKSLASH:
            state.escape_next = True
        elif byte == LINE_FEED:
            state.end_word(self.encoding, self.errors)
            return True
        elif is_whitespace(byte):
            state.end_word(self.encoding, self.errors)
        else:
            state.put(byte)
        return False

    def tokenize_single_quoted(self, byte):
        if byte == SINGLE_QUOTE:
            # The word stays open so that ab'cd'ef is a single word.
            self._state.quote = QuoteKind.UNQUOTED
        else:
            self._state.put(byte)

    def tokenize_double_quoted(self, byte):
        if byte == DOUBLE_QUOTE:
            self._state.quote = QuoteKind.UNQUOTED
        elif byte == BACKSLASH:
            self._state.escape_next = True
        else:
            self._state.put(byte)

    def read_byte(self):
        """
        Reads a single byte from the stream, retrying while a non-blocking
        stream has no data available.

        :returns: The byte read, as an int.
        """
        try:
            read_char = self.read_available()
        except OSError as err:
            state = self.discard_line()
            raise SourceError(
                f"Failed to read from stream after {state.consumed} bytes of line"
            ) from err

        if isinstance(read_char, str):
            self.discard_line()
            raise WrongStreamModeError("Tokenizer was given a stream in text mode!")

        if not read_char:
            state = self.discard_line()
            if state.quote != QuoteKind.UNQUOTED:
                closing = QuoteKind.closing_quotes()[state.quote]
                raise UnterminatedQuoteError(
                    f"Reached end of stream while expecting closing {closing}",
                    state.quote,
                    state.consumed,
                )
            raise EndOfStreamError(
                f"Reached end of stream after {state.consumed} bytes of line",
                state.consumed,
            )

        self._state.consumed += 1
        return read_char[0]

    def read_available(self):
        while True:
            try:
                read_char = self._read(1)
            except BlockingIOError:
                read_char = None
            if read_char is not None:
                return read_char
            wait_readable(self.stream)

    def discard_line(self):
        """
        Drop the partially read line.

        :returns: The state of the discarded line.
        """
        state = self._state
        self._state = LineState()
        if state.consumed:
            logger.debug(
                "Discarding %s bytes of unfinished line, words so far: %s",
                state.consumed,
                state.words,
            )
        return state
