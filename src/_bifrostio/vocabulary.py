"""
The words of the protocol. The tag of a message is its first word, the
verb (request or response) its second word.
"""

# Requests
RQ_DUMP = "dump"
RQ_FLOAD = "fload"
RQ_EJECT = "eject"
RQ_PLAY = "play"
RQ_STOP = "stop"
RQ_END = "end"
RQ_POS = "pos"

# Responses
RS_ACK = "ACK"
RS_OHAI = "OHAI"
RS_IAMA = "IAMA"
RS_FLOAD = "FLOAD"
RS_EJECT = "EJECT"
RS_PLAY = "PLAY"
RS_STOP = "STOP"
RS_END = "END"
RS_POS = "POS"
RS_FEATURES = "FEATURES"

# The type of an ACK response, its third word.
ACK_OK = "OK"
ACK_WHAT = "WHAT"
ACK_FAIL = "FAIL"

# Tag of messages sent to every client rather than in reply to a request.
TAG_BROADCAST = "!"

REQUESTS = frozenset([RQ_DUMP, RQ_FLOAD, RQ_EJECT, RQ_PLAY, RQ_STOP, RQ_END, RQ_POS])
RESPONSES = frozenset(
    [
        RS_ACK,
        RS_OHAI,
        RS_IAMA,
        RS_FLOAD,
        RS_EJECT,
        RS_PLAY,
        RS_STOP,
        RS_END,
        RS_POS,
        RS_FEATURES,
    ]
)
