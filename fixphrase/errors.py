"""
Error types raised by the dictionary and the codec.

Word-list errors are fatal at startup (or an internal inconsistency during
lookup). Input errors are caller-correctable and carry the name of the
offending field.
"""
from typing import Optional


class FixPhraseError(Exception):
    """Base class for all FixPhrase errors."""

    field: Optional[str] = None

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        if field is not None:
            self.field = field


class WordlistError(FixPhraseError):
    """The word list cannot back the codec."""


class EmptyWordlist(WordlistError):
    def __init__(self):
        super().__init__("wordlist empty")


class InsufficientWordlist(WordlistError):
    def __init__(self, size: int, required: int):
        super().__init__(f"wordlist too short: got {size}, need {required}")
        self.size = size
        self.required = required


class WordlistFormatError(WordlistError):
    """The word-list source is not a JSON array of strings."""


class IndexOutOfRange(WordlistError, IndexError):
    def __init__(self, index: int, size: int):
        super().__init__(f"word index out of range: {index} (size={size})")
        self.index = index
        self.size = size


class InputError(FixPhraseError, ValueError):
    """Invalid encode or decode input."""


class LatitudeOutOfRange(InputError):
    field = "lat"

    def __init__(self, latitude: float):
        super().__init__(f"latitude out of range: {latitude}")
        self.value = latitude


class LongitudeOutOfRange(InputError):
    field = "lon"

    def __init__(self, longitude: float):
        super().__init__(f"longitude out of range: {longitude}")
        self.value = longitude


class EmptyPhrase(InputError):
    field = "phrase"

    def __init__(self):
        super().__init__("empty phrase (need at least 2 words)")


class TooFewWords(InputError):
    field = "phrase"

    def __init__(self, count: int):
        super().__init__("not enough words (need at least 2)")
        self.count = count


class NotDecodable(InputError):
    field = "phrase"

    def __init__(self):
        super().__init__("supplied words input error? This phrase is not decodable.")
