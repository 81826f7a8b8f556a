class TokenizationError(Exception):
    """
    Base class for errors raised by the line tokenizer. When a
    TokenizationError is raised, the partially read line has been
    discarded and the tokenizer is ready to read the next line.
    """

    pass


class SourceError(TokenizationError):
    """
    Raised when the underlying byte source fails or ends before
    a line feed completes the line.
    """

    pass


class EndOfStreamError(SourceError):
    """
    Raised when the byte source ends before the line is completed.
    """

    def __init__(self, message, discarded=0):
        """
        :param discarded: The number of bytes of the abandoned line that
            were read before the stream ended.
        """
        super().__init__(message)
        self.discarded = discarded


class UnterminatedQuoteError(EndOfStreamError):
    """
    Raised when the byte source ends while a quoted word is still open.
    """

    def __init__(self, message, quote, discarded=0):
        super().__init__(message, discarded)
        self.quote = quote


class WrongStreamModeError(TokenizationError):
    """
    Thrown when the tokenizer is given a stream opened in text mode,
    the protocol is tokenized from bytes.
    """

    pass
