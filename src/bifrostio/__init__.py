import bifrostio.version
from _bifrostio.features import (
    Feature,
    FeatureSet,
    NotAFeaturesMessageError,
    UnknownFeatureError,
)
from _bifrostio.message import Message, ack, request, response
from _bifrostio.reading import lazy_read, read
from _bifrostio.tokenizer import LineTokenizer
from _bifrostio.tokenizer.errors import (
    EndOfStreamError,
    SourceError,
    TokenizationError,
    UnterminatedQuoteError,
    WrongStreamModeError,
)
from _bifrostio.writing import EmptyMessageError, PackError, pack, render, write

__author__ = """University Radio York"""

__version__ = bifrostio.version.version

__all__ = [
    "EmptyMessageError",
    "EndOfStreamError",
    "Feature",
    "FeatureSet",
    "LineTokenizer",
    "Message",
    "NotAFeaturesMessageError",
    "PackError",
    "SourceError",
    "TokenizationError",
    "UnknownFeatureError",
    "UnterminatedQuoteError",
    "WrongStreamModeError",
    "ack",
    "lazy_read",
    "pack",
    "read",
    "render",
    "request",
    "response",
    "write",
]
