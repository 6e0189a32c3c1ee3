"""
Errors raised while decoding a package.

Every decoding failure derives from ParseError so callers can isolate a
single bad file (or a single bad export) without catching unrelated
exceptions.
"""


class ParseError(ValueError):
    """Base class for package decoding failures."""

    kind = 'ParseError'


class UnexpectedEndOfBuffer(ParseError):
    """A read would run past the end of the buffer."""

    kind = 'UnexpectedEndOfBuffer'

    def __init__(self, offset: int, wanted: int, available: int):
        self.offset = offset
        self.wanted = wanted
        self.available = available
        super().__init__(
            f"Unexpected end of buffer at offset {offset}: "
            f"wanted {wanted} bytes, {available} available"
        )


class MalformedInput(ParseError):
    """The buffer is not a package this decoder understands."""

    kind = 'MalformedInput'


class InvalidIndex(ParseError):
    """A name, export or import index is outside its table."""

    kind = 'InvalidIndex'

    def __init__(self, table: str, index: int, size: int):
        self.table = table
        self.index = index
        self.size = size
        super().__init__(f"Invalid {table} index {index} (table size {size})")


class UnterminatedPropertyTagStream(ParseError):
    """A property tag stream ran out of data before its None tag."""

    kind = 'UnterminatedPropertyTagStream'

    def __init__(self, export_index: int, offset: int):
        self.export_index = export_index
        self.offset = offset
        super().__init__(
            f"Property tag stream of export {export_index} starting at "
            f"offset {offset} has no terminating None tag"
        )
