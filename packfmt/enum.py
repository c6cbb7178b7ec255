from enum import Enum, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class Kind(Enum):
    '''Category of a directive of the format language'''
    SPACE     = auto()
    ENDIANESS = auto()
    ALIGNMENT = auto()
    PADDING   = auto()
    INTEGER   = auto()
    FLOAT     = auto()
    BLOCK     = auto()
    STRING    = auto()
