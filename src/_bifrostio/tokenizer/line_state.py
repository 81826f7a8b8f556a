from dataclasses import dataclass, field

from _bifrostio.tokenizer.quote_kind import QuoteKind


@dataclass
class LineState:
    """
    The decoding state of a single line. A LineTokenizer installs a fresh
    LineState whenever a line is completed or abandoned, so no state
    survives across line boundaries.
    """

    quote: QuoteKind = QuoteKind.UNQUOTED
    escape_next: bool = False
    word: bytearray = field(default_factory=bytearray)
    # Distinguishes "no word yet" from a word of length zero, which is
    # needed for '' and "" to produce an empty argument.
    in_word: bool = False
    words: list = field(default_factory=list)
    consumed: int = 0

    def put(self, byte):
        self.in_word = True
        self.word.append(byte)

    def end_word(self, encoding, errors):
        if not self.in_word:
            return
        self.words.append(self.word.decode(encoding, errors))
        self.word = bytearray()
        self.in_word = False
