"""ID3 frame record and per-frame payload decoders.

Each decoder is a pure function ``(frame_id, payload, log) -> value``.
The payload has already been read in full; decoders never touch the
cursor. Lookup is a static table keyed by frame id; other ``T*`` and
``W*`` ids get the generic text decoder and the rest stay raw bytes.
"""

from ._id3types import picture_type
from ._text import Encoding, decode_text, latin1
from ._util import split_delimited, split_fields, split_fixed


# ──────────────────────────────────────────────────────────────
# Frame record
# ──────────────────────────────────────────────────────────────

class Frame:
    """One decoded frame: a 4-character id and its value."""

    __slots__ = ('_id', '_value')

    def __init__(self, frame_id, value):
        self._id = frame_id
        self._value = value

    @property
    def id(self):
        return self._id

    @property
    def value(self):
        return self._value

    # mutagen spelling
    FrameID = id

    def __iter__(self):
        return iter((self._id, self._value))

    def __eq__(self, other):
        if not isinstance(other, Frame):
            return NotImplemented
        return self._id == other._id and self._value == other._value

    __hash__ = None

    def _pprint(self):
        value = self._value
        if isinstance(value, bytes):
            return f'{len(value)} bytes'
        if isinstance(value, list):
            return ' / '.join(
                f'{len(v)} bytes' if isinstance(v, bytes) else str(v)
                for v in value)
        return value

    def pprint(self):
        return f'{self._id}={self._pprint()}'

    def __repr__(self):
        return f'Frame({self._id!r}, {self._value!r})'


# ──────────────────────────────────────────────────────────────
# Decoders
# ──────────────────────────────────────────────────────────────

def _pop_encoding(payload, log=None):
    """Split off the leading encoding byte."""
    head, rest = split_fixed(payload, 1)
    return Encoding.from_byte(head[0] if head else 0, log), rest


def decode_text_frame(frame_id, payload, log=None):
    """T*** and W***: encoding byte followed by text."""
    encoding, rest = _pop_encoding(payload, log)
    return decode_text(rest, encoding)


def decode_txxx(frame_id, payload, log=None):
    """TXXX: [description, value]."""
    text = decode_text_frame(frame_id, payload, log)
    desc, _, value = text.partition('\x00')
    return [desc, value.lstrip('\ufeff')]


def decode_apic(frame_id, payload, log=None):
    """APIC: [mime, picture type, description, image data]."""
    encoding, rest = _pop_encoding(payload, log)
    mime, ptype, desc, data = split_fields(
        rest, [b'\x00', 1, encoding.terminator])
    return [latin1(mime), picture_type(ptype[0] if ptype else 0),
            decode_text(desc, encoding), data]


def decode_geob(frame_id, payload, log=None):
    """GEOB: [mime, filename, description, object data]."""
    encoding, rest = _pop_encoding(payload, log)
    mime, filename, desc, data = split_fields(
        rest, [b'\x00', encoding.terminator, encoding.terminator])
    return [latin1(mime), decode_text(filename, encoding),
            decode_text(desc, encoding), data]


def decode_comm(frame_id, payload, log=None):
    """COMM and USLT: [language, description, text]."""
    encoding, rest = _pop_encoding(payload, log)
    lang, desc, text = split_fields(rest, [3, encoding.terminator])
    return [latin1(lang), decode_text(desc, encoding),
            decode_text(text, encoding)]


def decode_wxxx(frame_id, payload, log=None):
    """WXXX: [description, url]. The url is Latin-1 whatever the encoding."""
    encoding, rest = _pop_encoding(payload, log)
    desc, url = split_fields(rest, [encoding.terminator])
    return [decode_text(desc, encoding), latin1(url)]


def decode_owner_data(frame_id, payload, log=None):
    """PRIV and UFID: [owner identifier, data]."""
    owner, data = split_delimited(payload, b'\x00')
    return [latin1(owner), data]


def decode_raw(frame_id, payload, log=None):
    return payload


FRAME_DECODERS = {
    'TXXX': decode_txxx,
    'APIC': decode_apic,
    'GEOB': decode_geob,
    'COMM': decode_comm,
    'USLT': decode_comm,
    'WXXX': decode_wxxx,
    'PRIV': decode_owner_data,
    'UFID': decode_owner_data,
}


def get_decoder(frame_id):
    """Return the decoder for ``frame_id``."""
    try:
        return FRAME_DECODERS[frame_id]
    except KeyError:
        pass
    if frame_id[:1] in ('T', 'W'):
        return decode_text_frame
    return decode_raw


def decode_frame(frame_id, payload, log=None):
    """Decode ``payload`` according to ``frame_id`` and wrap it in a Frame.

    ``log`` receives decoding warnings (unknown text encodings).
    """
    return Frame(frame_id, get_decoder(frame_id)(frame_id, payload, log))
