"""Text encoding selectors and decoding of encoded-text fields."""

import logging

logger = logging.getLogger(__name__)

_CODECS = {0: 'latin-1', 1: 'utf-16', 2: 'utf-16-be', 3: 'utf-8'}


class Encoding(int):
    """ID3 text encoding, compatible with mutagen.id3.Encoding."""
    _name = ''
    def __new__(cls, val, name=''):
        obj = super().__new__(cls, val)
        obj._name = name
        return obj
    def __repr__(self):
        return f'<Encoding.{self._name}: {int(self)}>'
    def __str__(self):
        return f'Encoding.{self._name}'

    @property
    def codec(self):
        """Python codec name for this selector."""
        return _CODECS[int(self)]

    @property
    def terminator(self):
        """String terminator: one NUL for 8-bit charsets, two for UTF-16."""
        return b'\x00\x00' if self in (1, 2) else b'\x00'

    @classmethod
    def from_byte(cls, value, log=None):
        """Map a selector byte to an Encoding, falling back to LATIN1.

        ``log`` receives the warning for an unknown selector.
        """
        try:
            return _BY_VALUE[value]
        except KeyError:
            (log or logger).warning(
                'Unknown text encoding %d, decoding as Latin-1', value)
            return cls.LATIN1

Encoding.LATIN1 = Encoding(0, 'LATIN1')
Encoding.UTF16 = Encoding(1, 'UTF16')
Encoding.UTF16BE = Encoding(2, 'UTF16BE')
Encoding.UTF8 = Encoding(3, 'UTF8')

_BY_VALUE = {int(e): e for e in (
    Encoding.LATIN1, Encoding.UTF16, Encoding.UTF16BE, Encoding.UTF8)}


def decode_text(data, encoding=None):
    """Decode an encoded-text field and strip its trailing terminator.

    Without an encoding the bytes are returned untouched.
    """
    if encoding is None:
        return data
    text = data.decode(Encoding.from_byte(encoding).codec, 'replace')
    # utf-16 only consumes the BOM of the first string in a payload
    return text.lstrip('\ufeff').rstrip('\x00')


def latin1(data):
    return decode_text(data, Encoding.LATIN1)
