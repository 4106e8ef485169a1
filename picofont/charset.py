"""
Character sets and character -> slot index mapping.

The order of a character set is part of the font format: slot i of every
font built for a set holds the glyph for the set's i-th character, so
reordering a set breaks every table generated for it.

Letters are stored lowercase. ASCII uppercase letters fold to the same slot
as their lowercase form; no other case folding is done.
"""


class CharacterSet:
    """A fixed, ordered set of supported characters."""

    def __init__(self, name: str, chars: str):
        if len(set(chars)) != len(chars):
            raise ValueError(f"Character set '{name}' contains duplicate characters")
        if any("A" <= c <= "Z" for c in chars):
            raise ValueError(f"Character set '{name}' must store letters lowercase")
        self.name = name
        self.chars = chars
        self._slots = {c: i for i, c in enumerate(chars)}

    def index(self, c) -> int | None:
        """
        Get the slot index of a character, or None if the set doesn't have it.

        Never raises: non-ASCII characters, multi-character strings and
        non-strings all yield None.
        """
        if not isinstance(c, str) or len(c) != 1:
            return None
        if "A" <= c <= "Z":
            c = c.lower()
        return self._slots.get(c)

    def char_at(self, index: int) -> str:
        return self.chars[index]

    def __len__(self):
        return len(self.chars)

    def __iter__(self):
        return iter(self.chars)

    def __contains__(self, c):
        return self.index(c) is not None

    def __repr__(self):
        return f"CharacterSet({self.name!r}, {len(self)} chars)"


# the space after "z" is a real character, not padding
EXTENDED = CharacterSet(
    "extended",
    "0123456789abcdefghijklmnopqrstuvwxyz ~`!@#%^&*_=+-(){}[]|\\:;\"'<>?/,.",
)

MINIMAL = CharacterSet(
    "minimal",
    "0123456789abcdefghijklmnopqrstuvwxyz ~`#%^&*()_=+-[]|\\:;\"'<>?/,.",
)

CHARSETS = {charset.name: charset for charset in (EXTENDED, MINIMAL)}

LENGTH = len(EXTENDED)


def index(c) -> int | None:
    """Get the slot index of a character in the extended set."""
    return EXTENDED.index(c)
