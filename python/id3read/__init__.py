"""id3read - ID3v2.3 / ID3v2.4 tag reader.

Parses the tag at the start of an MP3 (or any byte stream) into a
version, a set of header flags and the decoded frames in file order.
Reading only; tags are never written.
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("id3read")
except PackageNotFoundError:
    __version__ = "0.0.0"

version = tuple(int(x) for x in __version__.split('.')[:3])
version_string = __version__

from ._cursor import ByteCursor  # noqa: E402
from ._errors import (  # noqa: E402
    ID3Error,
    ID3NoHeaderError,
    ID3UnsupportedVersionError,
    ID3TruncatedError,
    ID3FrameError,
    ID3InvalidFrameIdError,
    ID3TruncatedFrameError,
    NotATagError,
    UnsupportedVersionError,
    InvalidFrameIdError,
)
from ._id3frames import Frame, FRAME_DECODERS, decode_frame  # noqa: E402
from ._id3types import Flag, PictureType  # noqa: E402
from ._text import Encoding, decode_text  # noqa: E402
from ._util import (  # noqa: E402
    decode_synchsafe,
    encode_synchsafe,
    split_delimited,
    split_fields,
    split_fixed,
)
from .id3 import (  # noqa: E402
    Tag,
    TagHeader,
    iter_frames,
    parse_file,
    parse_header,
    parse_tag,
    read_frame,
)

__all__ = [
    'parse_tag', 'parse_header', 'parse_file', 'iter_frames', 'read_frame',
    'Tag', 'TagHeader', 'Frame', 'Flag', 'PictureType', 'Encoding',
    'ByteCursor', 'FRAME_DECODERS', 'decode_frame', 'decode_text',
    'decode_synchsafe', 'encode_synchsafe',
    'split_fixed', 'split_delimited', 'split_fields',
    'ID3Error', 'ID3NoHeaderError', 'ID3UnsupportedVersionError',
    'ID3TruncatedError', 'ID3FrameError', 'ID3InvalidFrameIdError',
    'ID3TruncatedFrameError', 'NotATagError', 'UnsupportedVersionError',
    'InvalidFrameIdError',
]
