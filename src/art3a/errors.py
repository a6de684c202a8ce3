"""Exceptions raised while reading, validating and editing 3a art."""


class ArtError(Exception):
    """Base exception for all art3a errors."""

    pass


# Character validation


class CharError(ArtError, ValueError):
    """Raised when a value cannot be used as a single art character."""

    pass


class DisallowedCharError(CharError):
    """Raised for control, combining, zero-width or bidi code points."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"disallowed char with code: U+{code:04X}")


class CharLengthError(CharError):
    """Raised when a string that must hold exactly one character does not."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"cannot convert str with length {length} to a single char")


# Parsing


class ParseError(ArtError, ValueError):
    """Base exception for malformed input."""

    pass


class DelayParseError(ParseError):
    """Raised when a delay line cannot be parsed."""

    pass


class ColorParseError(ParseError):
    """Raised when a color or color pair token cannot be parsed."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"failed to parse color: {value}")


class HeaderFlagError(ParseError):
    """Raised when a yes/no header flag has another value."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"failed to parse header flag key '{key}'; value must be 'yes' or 'no'"
        )


class HeaderKeyWithoutValueError(ParseError):
    """Raised for a header line that has a key but no value."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"header key '{line}' has no value")


class HeaderValueError(ParseError):
    """Raised when a numeric header value (preview, width, height) is invalid."""

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"failed to parse {key} value '{value}'")


class BlockExpectedError(ParseError):
    """Raised when a block title (``@name``) was expected."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"block title expected, got: {line}")


class LegacyHeaderError(ParseError):
    """Raised when a legacy header lacks the geometry needed to read frames."""

    pass


# Duplication


class DuplicateError(ArtError):
    """Base exception for values that may only appear once."""

    pass


class HeaderKeyDuplicateError(DuplicateError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"header key '{key}' duplicates")


class ColorDuplicateError(DuplicateError):
    """Raised when ``fg:`` or ``bg:`` appears twice in one color pair."""

    def __init__(self, channel: str, line: str):
        self.channel = channel
        self.line = line
        super().__init__(f"{channel} duplicates in: {line}")


class ColorMapDuplicateError(DuplicateError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"color mapping for '{name}' duplicates")


class BlockDuplicateError(DuplicateError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"block {name} duplicated")


class DelayDuplicateError(DuplicateError):
    pass


# Structure


class MismatchError(ArtError):
    """Base exception for art components that do not fit each other."""

    pass


class WidthMismatchError(MismatchError):
    def __init__(self, message: str = "width of some art components do not match each other"):
        super().__init__(message)


class HeightMismatchError(MismatchError):
    def __init__(self, message: str = "height of some art components do not match each other"):
        super().__init__(message)


class FramesMismatchError(MismatchError):
    def __init__(self, message: str = "channels frame count mismatch"):
        super().__init__(message)


class ColorsMismatchError(MismatchError):
    def __init__(self, message: str = "color info from header and body mismatch"):
        super().__init__(message)


class EmptyBodyError(MismatchError):
    def __init__(self, message: str = "0 frames in text channel"):
        super().__init__(message)


# I/O


class ArtIOError(ArtError):
    """Wraps an ``OSError`` raised while reading or writing art files."""

    pass
