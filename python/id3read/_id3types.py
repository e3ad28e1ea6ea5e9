"""Int-valued enums for ID3 header flags and picture types."""


def _make_int_enum(name, members):
    """Create a simple int-enum class with named members."""

    class EnumMeta(type):
        def __iter__(cls):
            return iter(cls._members.values())
        def __contains__(cls, item):
            return item in cls._members.values()
        def __len__(cls):
            return len(cls._members)

    class IntEnum(int, metaclass=EnumMeta):
        _name = ''
        _members = {}
        def __new__(cls, val, mname=None):
            obj = int.__new__(cls, val)
            obj._name = mname or ''
            return obj
        @property
        def name(self):
            return self._name
        def __repr__(self):
            return f'<{name}.{self._name}: {int(self)}>'
        def __str__(self):
            return f'{name}.{self._name}'

    IntEnum.__name__ = name
    IntEnum.__qualname__ = name
    member_dict = {}
    for mname, mval in members:
        inst = IntEnum(mval, mname)
        setattr(IntEnum, mname, inst)
        member_dict[mname] = inst
    IntEnum._members = member_dict
    return IntEnum


# Header flag bits, most significant first.
Flag = _make_int_enum('Flag', [
    ('UNSYNCHRONIZED', 0x80), ('EXTENDED_HEADER', 0x40),
    ('EXPERIMENTAL', 0x20), ('FOOTER', 0x10),
])

PictureType = _make_int_enum('PictureType', [
    ('OTHER', 0), ('FILE_ICON', 1), ('OTHER_FILE_ICON', 2),
    ('COVER_FRONT', 3), ('COVER_BACK', 4), ('LEAFLET_PAGE', 5),
    ('MEDIA', 6), ('LEAD_ARTIST', 7), ('ARTIST', 8),
    ('CONDUCTOR', 9), ('BAND', 10), ('COMPOSER', 11),
    ('LYRICIST', 12), ('RECORDING_LOCATION', 13),
    ('DURING_RECORDING', 14), ('DURING_PERFORMANCE', 15),
    ('SCREEN_CAPTURE', 16), ('FISH', 17), ('ILLUSTRATION', 18),
    ('BAND_LOGOTYPE', 19), ('PUBLISHER_LOGOTYPE', 20),
])


def flags_from_byte(value):
    """Return the frozenset of Flag members whose bit is set in ``value``."""
    return frozenset(flag for flag in Flag if value & flag)


def picture_type(value):
    """Map a picture type byte to PictureType, keeping unknown values as int."""
    for member in PictureType:
        if member == value:
            return member
    return value
