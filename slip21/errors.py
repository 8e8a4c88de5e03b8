class Slip21Error(Exception):
    """Base class for SLIP-21 specific errors."""


# Decoding
class DecodeError(Slip21Error, ValueError):
    pass


class HexDecodeError(DecodeError):
    pass


class NodeLengthError(DecodeError):
    def __init__(self, actual: int, expected: int):
        super().__init__(f"invalid length {actual}, expected {expected}")
        self.actual = actual
        self.expected = expected


class InvalidValueError(DecodeError):
    pass


# Paths
class PathError(Slip21Error, ValueError):
    pass
