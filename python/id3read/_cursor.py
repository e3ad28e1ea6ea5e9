"""Forward-only byte cursor over a buffer or a binary file object."""

from ._errors import ID3TruncatedError


class ByteCursor:
    """Sequential reader with a committed read window.

    The source is either a bytes-like object or anything with a binary
    ``read(n)`` method. File sources are read lazily, one request at a
    time, so the underlying file position always matches ``position``.
    """

    __slots__ = ('_source', '_buffer', '_position', '_limit')

    def __init__(self, source):
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._buffer = bytes(source)
            self._source = None
        elif hasattr(source, 'read'):
            self._buffer = None
            self._source = source
        else:
            raise TypeError(
                f'Expected bytes or a binary file object, got {type(source).__name__}')
        self._position = 0
        self._limit = None

    @property
    def position(self):
        """Number of bytes consumed so far."""
        return self._position

    @property
    def remaining(self):
        """Bytes left in the committed window, or None if nothing is committed."""
        if self._limit is None:
            return None
        return self._limit - self._position

    def commit(self, n):
        """Open a window over the next ``n`` bytes."""
        if n < 0:
            raise ValueError(f'Cannot commit a negative byte count ({n})')
        self._limit = self._position + n

    def read(self, n):
        if n < 0:
            raise ValueError(f'Cannot read a negative byte count ({n})')
        if self._limit is not None and self._position + n > self._limit:
            raise ID3TruncatedError(
                f'Requested {n} bytes at offset {self._position}, '
                f'window ends at {self._limit}')
        if self._buffer is not None:
            data = self._buffer[self._position:self._position + n]
        else:
            data = self._read_source(n)
        if len(data) != n:
            raise ID3TruncatedError(
                f'Requested {n} bytes at offset {self._position}, '
                f'source returned {len(data)}')
        self._position += n
        return data

    def _read_source(self, n):
        # file objects may return short reads before end of stream
        chunks = []
        while n:
            chunk = self._source.read(n)
            if not chunk:
                break
            chunks.append(chunk)
            n -= len(chunk)
        return b''.join(chunks)

    def read_one(self):
        return self.read(1)[0]

    def skip(self, n):
        self.read(n)

    def __repr__(self):
        return f'ByteCursor(position={self._position}, remaining={self.remaining})'
