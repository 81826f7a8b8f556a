"""
In this module, a tokenizer reads a byte stream one byte at a time and
splits it into lines of words. If the stream fails or ends before a line is
complete, the partial line is discarded and an error is raised, leaving
the tokenizer ready to read the next line.

The tokenizer never seeks in the stream, so it can be given network
connections as well as files. For files, the stream has to be opened in
binary mode.
"""

from .line_tokenizer import LineTokenizer

__all__ = ["LineTokenizer"]
