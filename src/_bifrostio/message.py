from _bifrostio.vocabulary import RS_ACK, TAG_BROADCAST
from _bifrostio.writing import pack, render


class Message(list):
    """
    A message is the list of words in a line: the tag, the verb and
    the arguments of the verb.

    >>> msg = request("uuid", "fload", "a file.mp3")
    >>> msg.pack()
    b"uuid fload 'a file.mp3'\\n"
    >>> str(msg)
    'uuid fload a file.mp3'

    """

    @property
    def tag(self):
        return self[0]

    @property
    def verb(self):
        return self[1]

    @property
    def args(self):
        return self[2:]

    def is_broadcast(self):
        return len(self) > 0 and self[0] == TAG_BROADCAST

    def pack(self, **kwargs):
        """
        :returns: The message packed as bytes, see _bifrostio.writing.pack.
        """
        return pack(self, stacklevel=2, **kwargs)

    def __str__(self):
        return render(self)


def request(tag, verb, *args):
    return Message([tag, verb, *args])


def response(tag, verb, *args):
    return Message([tag, verb, *args])


def ack(tag, ack_type, description, *original):
    """
    Constructs an ACK response of the given type, followed by
    the words of the request being acknowledged.
    """
    return Message([tag, RS_ACK, ack_type, description, *original])
