"""Exception hierarchy for ID3 tag parsing.

Names follow mutagen.id3 so code written against mutagen can catch the
same errors.
"""


class ID3Error(Exception):
    """Base class for all errors raised while reading an ID3 tag."""


class ID3NoHeaderError(ID3Error, ValueError):
    """The source does not start with an ID3v2 header."""


class ID3UnsupportedVersionError(ID3Error, NotImplementedError):
    """The tag uses a major version below 2.3."""


class ID3TruncatedError(ID3Error, EOFError):
    """The source (or the committed window) ended before a read finished."""


class ID3FrameError(ID3Error):
    """A single frame could not be read. Ends frame iteration."""


class ID3InvalidFrameIdError(ID3FrameError, ValueError):
    """A frame id byte is not an uppercase letter or a digit."""


class ID3TruncatedFrameError(ID3FrameError, ID3TruncatedError):
    """A frame header or payload runs past the end of the tag."""


NotATagError = ID3NoHeaderError
UnsupportedVersionError = ID3UnsupportedVersionError
InvalidFrameIdError = ID3InvalidFrameIdError
