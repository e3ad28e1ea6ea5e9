"""Synchsafe integers and byte-sequence splitting.

Every multi-field frame decoder is built on ``split_fields``: a frame
payload is carved left to right into consecutive fields, either by a
fixed byte count or by a literal delimiter.
"""


def decode_synchsafe(data, bits=7):
    """Decode a big-endian integer whose bytes carry ``bits`` significant bits.

    >>> decode_synchsafe(b'\\x00\\x00\\x02\\x01')
    257
    """
    if len(data) != 4:
        raise ValueError(f'Synchsafe integers are 4 bytes, got {len(data)}')
    mask = (1 << bits) - 1
    value = 0
    for byte in data:
        value = (value << bits) | (byte & mask)
    return value


def encode_synchsafe(value, bits=7, width=4):
    """Inverse of ``decode_synchsafe``."""
    if value < 0:
        raise ValueError(f'Cannot encode negative value {value}')
    mask = (1 << bits) - 1
    digits = []
    for _ in range(width):
        digits.append(value & mask)
        value >>= bits
    if value:
        raise ValueError(f'Value too wide for {width} bytes of {bits} bits')
    return bytes(reversed(digits))


def split_fixed(data, count):
    """Split off the first ``count`` bytes."""
    return data[:count], data[count:]


def split_delimited(data, delimiter, step=1):
    """Split at the first occurrence of ``delimiter``, consuming it.

    Only offsets that are a multiple of ``step`` are considered, which
    keeps a two-byte UTF-16 terminator aligned to code units. If the
    delimiter never occurs, the whole input is the first segment.
    """
    index = data.find(delimiter)
    while index != -1 and index % step:
        index = data.find(delimiter, index + 1)
    if index == -1:
        return data, b''
    return data[:index], data[index + len(delimiter):]


def split_fields(data, separators):
    """Carve ``data`` into ``len(separators) + 1`` consecutive fields.

    An int separator takes that many bytes; a bytes separator splits at
    that delimiter (two-byte delimiters are matched on even offsets).
    """
    fields = []
    rest = data
    for sep in separators:
        if isinstance(sep, int):
            field, rest = split_fixed(rest, sep)
        else:
            field, rest = split_delimited(rest, sep, step=len(sep))
        fields.append(field)
    fields.append(rest)
    return fields
