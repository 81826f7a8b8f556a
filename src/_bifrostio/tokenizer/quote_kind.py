from enum import Enum, auto, unique


@unique
class QuoteKind(Enum):
    UNQUOTED = auto()
    SINGLE = auto()
    DOUBLE = auto()

    @classmethod
    def closing_quotes(cls):
        return {
            cls.SINGLE: "'",
            cls.DOUBLE: '"',
        }
