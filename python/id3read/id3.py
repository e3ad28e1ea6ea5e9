"""id3read.id3 - ID3v2.3/v2.4 tag reader.

Reads the 10-byte tag header, skips the extended header if present,
then pulls frames from the tag body until it is exhausted or a frame
header is malformed.
"""

import logging
from collections import namedtuple

from ._cursor import ByteCursor
from ._errors import (
    ID3FrameError,
    ID3InvalidFrameIdError,
    ID3NoHeaderError,
    ID3TruncatedError,
    ID3TruncatedFrameError,
    ID3UnsupportedVersionError,
)
from ._id3frames import decode_frame
from ._id3types import Flag, flags_from_byte
from ._util import decode_synchsafe

logger = logging.getLogger(__name__)

MAGIC = b'ID3'
HEADER_SIZE = 10
FOOTER_SIZE = 10

_FRAME_ID_BYTES = frozenset(b'ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789')

TagHeader = namedtuple('TagHeader', ['version', 'flags', 'size'])


# ──────────────────────────────────────────────────────────────
# Tag container
# ──────────────────────────────────────────────────────────────

class Tag:
    """A parsed ID3 tag: version, header flags and frames in file order.

    Frame ids are not unique; use ``getall`` to see every frame with a
    given id.
    """

    __slots__ = ('_version', '_flags', '_frames', '_size')

    def __init__(self, version, flags, frames, size=0):
        self._version = version
        self._flags = frozenset(flags)
        self._frames = tuple(frames)
        self._size = size

    @property
    def version(self):
        return self._version

    @property
    def flags(self):
        return self._flags

    @property
    def frames(self):
        return self._frames

    @property
    def size(self):
        """Tag body size declared in the header (excludes header and footer)."""
        return self._size

    def __len__(self):
        return len(self._frames)

    def __iter__(self):
        return iter(self._frames)

    def __getitem__(self, index):
        return self._frames[index]

    def __contains__(self, frame_id):
        return any(frame.id == frame_id for frame in self._frames)

    def keys(self):
        """Frame ids in file order, duplicates included."""
        return [frame.id for frame in self._frames]

    def getall(self, frame_id):
        """Return the values of all frames with ``frame_id``."""
        return [frame.value for frame in self._frames if frame.id == frame_id]

    def get(self, frame_id, default=None):
        """Return the value of the first frame with ``frame_id``."""
        for frame in self._frames:
            if frame.id == frame_id:
                return frame.value
        return default

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return (self._version, self._flags, self._frames, self._size) == \
            (other._version, other._flags, other._frames, other._size)

    __hash__ = None

    def pprint(self):
        """Pretty-print the header line and one line per frame."""
        flags = ', '.join(sorted(flag.name for flag in self._flags))
        lines = [f'ID3v2.{self._version} ({len(self._frames)} frames'
                 + (f'; {flags})' if flags else ')')]
        lines.extend(frame.pprint() for frame in self._frames)
        return '\n'.join(lines)

    def __repr__(self):
        return (f'Tag(version={self._version}, flags={set(self._flags)!r}, '
                f'frames={list(self._frames)!r})')


# ──────────────────────────────────────────────────────────────
# Header
# ──────────────────────────────────────────────────────────────

def _as_cursor(source):
    if isinstance(source, ByteCursor):
        return source
    return ByteCursor(source)


def parse_header(source, log=None):
    """Read the 10-byte tag header.

    Returns a ``TagHeader(version, flags, size)`` where ``size`` is the
    byte count of the tag body that follows the header.
    """
    log = log or logger
    cursor = _as_cursor(source)
    cursor.commit(HEADER_SIZE)
    try:
        magic = cursor.read(len(MAGIC))
    except ID3TruncatedError as err:
        raise ID3NoHeaderError('Source too short for an ID3 header') from err
    if magic != MAGIC:
        raise ID3NoHeaderError(f'{magic!r} does not start an ID3 tag')

    version = cursor.read_one()
    cursor.read_one()  # revision
    if version < 3:
        raise ID3UnsupportedVersionError(f'ID3v2.{version} is not supported')
    if version > 4:
        log.warning('ID3v2.%d is newer than v2.4, reading it as v2.4', version)

    flags = flags_from_byte(cursor.read_one())
    size = decode_synchsafe(cursor.read(4), 7)
    return TagHeader(version, flags, size)


def skip_extended_header(cursor, log=None):
    """Skip the extended header without interpreting it.

    Returns the number of bytes consumed.
    """
    log = log or logger
    size = decode_synchsafe(cursor.read(4), 7)
    skipped = max(size - 4, 0)
    cursor.skip(skipped)
    log.warning('Skipped %d byte extended header; its contents are not parsed',
                4 + skipped)
    return 4 + skipped


# ──────────────────────────────────────────────────────────────
# Frames
# ──────────────────────────────────────────────────────────────

def _read_frame_bytes(cursor, n):
    try:
        return cursor.read(n)
    except ID3TruncatedError as err:
        raise ID3TruncatedFrameError(str(err)) from err


def read_frame(cursor, version, log=None):
    """Read one frame header and payload from ``cursor`` and decode it."""
    raw_id = _read_frame_bytes(cursor, 4)
    if not all(byte in _FRAME_ID_BYTES for byte in raw_id):
        raise ID3InvalidFrameIdError(f'Invalid frame id {raw_id!r}')
    frame_id = raw_id.decode('ascii')

    # v2.3 frame sizes are plain 32-bit integers, v2.4 sizes are synchsafe
    bits = 8 if version == 3 else 7
    size = decode_synchsafe(_read_frame_bytes(cursor, 4), bits)
    _read_frame_bytes(cursor, 2)  # frame flags
    payload = _read_frame_bytes(cursor, size)
    return decode_frame(frame_id, payload, log)


def iter_frames(cursor, version, log=None):
    """Yield frames until the committed window is empty or a frame is malformed."""
    log = log or logger
    while cursor.remaining:
        start = cursor.position
        try:
            frame = read_frame(cursor, version, log)
        except ID3FrameError as err:
            log.debug('End of frames at offset %d: %s', start, err)
            return
        yield frame


# ──────────────────────────────────────────────────────────────
# Entry points
# ──────────────────────────────────────────────────────────────

def parse_tag(source, log=None):
    """Parse the ID3v2 tag at the start of ``source``.

    ``source`` is a bytes-like object, a binary file object positioned at
    the tag, or a ByteCursor. ``log`` receives warnings (defaults to
    this module's logger). On return the source is positioned just past
    the tag.
    """
    log = log or logger
    cursor = _as_cursor(source)
    header = parse_header(cursor, log)

    cursor.commit(header.size)
    frames = []
    try:
        if Flag.EXTENDED_HEADER in header.flags:
            skip_extended_header(cursor, log)
    except ID3TruncatedError as err:
        log.warning('Extended header runs past the tag body, no frames read: %s', err)
    else:
        frames = list(iter_frames(cursor, header.version, log))

    padding = cursor.remaining
    if Flag.FOOTER in header.flags:
        cursor.commit(padding + FOOTER_SIZE)
    try:
        cursor.skip(cursor.remaining)
    except ID3TruncatedError:
        log.warning('Source ends inside the declared tag (%d bytes, %d frames read)',
                    header.size, len(frames))

    return Tag(header.version, header.flags, frames, header.size)


def parse_file(path, log=None):
    """Open ``path`` and parse the ID3v2 tag at its start."""
    with open(path, 'rb') as fileobj:
        return parse_tag(fileobj, log)
