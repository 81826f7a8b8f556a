from enum import Enum, unique

from _bifrostio.message import Message
from _bifrostio.vocabulary import RS_FEATURES, TAG_BROADCAST


class NotAFeaturesMessageError(ValueError):
    pass


class UnknownFeatureError(ValueError):
    """
    Raised when a FEATURES message lists features that are not known.
    """

    def __init__(self, names):
        super().__init__(f"Unknown features: {', '.join(names)}")
        self.names = names


@unique
class Feature(Enum):
    UNKNOWN = "<UNKNOWN FEATURE>"
    FILE_LOAD = "FileLoad"
    PLAY_STOP = "PlayStop"
    SEEK = "Seek"
    END = "End"
    TIME_REPORT = "TimeReport"
    PLAYLIST = "Playlist"
    PLAYLIST_AUTO_ADVANCE = "Playlist.AutoAdvance"
    PLAYLIST_TEXT_ITEMS = "Playlist.TextItems"

    @classmethod
    def lookup(cls, word):
        """
        :returns: The feature with the given name, or Feature.UNKNOWN.
        """
        try:
            return cls(word)
        except ValueError:
            return cls.UNKNOWN

    def is_unknown(self):
        return self is Feature.UNKNOWN

    def __str__(self):
        return self.value


class FeatureSet(set):
    @classmethod
    def from_message(cls, message):
        """
        :param message: A FEATURES response, ie. ["!", "FEATURES", "Seek"].
        :returns: The set of features listed in the message.
        """
        if len(message) < 2 or message[1] != RS_FEATURES:
            raise NotAFeaturesMessageError(f"{message} is not a FEATURES message")
        features = cls()
        unknown = []
        for word in message[2:]:
            feature = Feature.lookup(word)
            if feature.is_unknown():
                unknown.append(word)
            features.add_feature(feature)
        if unknown:
            raise UnknownFeatureError(unknown)
        return features

    def add_feature(self, feature):
        self.add(feature)
        return self

    def del_feature(self, feature):
        self.discard(feature)
        return self

    def to_message(self, tag=TAG_BROADCAST):
        """
        :returns: A FEATURES response listing the features, sorted
            alphabetically so that the output is deterministic.
        """
        return Message([tag, RS_FEATURES, *sorted(str(f) for f in self)])
