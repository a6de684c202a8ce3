"""Shared constants for the 3a art format."""

# First line of a modern document
MAGIC = "@3a"

# Prefixes
BLOCK_PREFIX = "@"
COMMENT_PREFIX = ";;"
TAG_PREFIX = "#"
LEGACY_COMMENT_PREFIX = "@"

# Frame delay used when none is set (milliseconds)
DEFAULT_DELAY_MS = 50

# Tag-lines are wrapped before reaching this many characters
TAGLINE_WIDTH = 80

# Written in color channels for cells without a color reference
NO_COLOR = "_"

# Block names with a fixed meaning
BLOCK_ATTACH = "attach"
BLOCK_TEXT_PIN = "text-pin"
BLOCK_COLOR_PIN = "color-pin"
BLOCK_BODY = "body"

# Characters with a built-in color mapping, in 4-bit color order
BUILTIN_COLOR_NAMES = "0123456789abcdef"

# Legacy foreground digits -> modern built-in color names
LEGACY_FG_TRANSLATION = {
    "0": "0",
    "1": "4",
    "2": "2",
    "3": "6",
    "4": "1",
    "5": "5",
    "6": "3",
    "7": "7",
    "8": "8",
    "9": "c",
    "a": "a",
    "b": "e",
    "c": "9",
    "d": "d",
    "e": "b",
    "f": "f",
}

# Code points that normalize to a plain space
SPACE_LIKE: frozenset[int] = frozenset(
    [0x0009, 0x0020, 0x00A0, 0x1680, 0x180E, 0x202F, 0x205F, 0x3000]
    + list(range(0x2000, 0x200B))
)

# Individual C1-area code points that are rejected
REJECTED_C1: frozenset[int] = frozenset([0x7F, 0x81, 0x8D, 0x8F, 0x90, 0x9D])

# Rejected code point ranges (inclusive)
REJECTED_RANGES: tuple[tuple[int, int], ...] = (
    (0x0000, 0x001F),   # C0 controls
    (0x0300, 0x036F),   # Combining diacritical marks
    (0x200B, 0x200F),   # Zero-width space, joiners, direction marks
    (0xFEFF, 0xFEFF),   # Zero-width no-break space
    (0xFE00, 0xFE0F),   # Variation selectors
    (0x202A, 0x202E),   # Bidi embedding / override
    (0x2066, 0x2069),   # Bidi isolates
    (0xD800, 0xDFFF),   # Surrogates
)
