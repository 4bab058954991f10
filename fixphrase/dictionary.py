"""
Word dictionary for encoding/decoding coordinates.

The first 7610 words are split into four bands. Band 0 holds the latitude at
0.1 degree resolution, band 1 the longitude at 0.1 degree resolution, band 2
the interleaved second-decimal digits and band 3 the interleaved
fourth-decimal digits.
"""
from typing import Dict, Optional, Sequence, Tuple

from fixphrase.errors import EmptyWordlist, IndexOutOfRange, InsufficientWordlist

# (start, end) of each band, end exclusive
BANDS: Tuple[Tuple[int, int], ...] = (
    (0, 2000),
    (2000, 5610),
    (5610, 6610),
    (6610, 7610),
)

REQUIRED_WORDS = BANDS[-1][1]


def band_of(index: int) -> Optional[int]:
    """
    Return the band an absolute word index falls in.

    Args:
        index: Absolute index into the word list

    Returns:
        Band number 0-3, or None for indices outside every band
    """
    for band, (start, end) in enumerate(BANDS):
        if start <= index < end:
            return band
    return None


def band_start(band: int) -> int:
    """Absolute index of the first word in a band."""
    return BANDS[band][0]


class Dictionary:
    """
    Immutable word list with a case-insensitive reverse lookup.

    Longer lists are accepted; words past the last band can be looked up by
    index but never take part in encoding or decoding.
    """

    def __init__(self, words: Sequence[str]):
        """
        Build the dictionary.

        Args:
            words: Ordered word list, at least 7610 entries

        Raises:
            EmptyWordlist: If no words are given
            InsufficientWordlist: If fewer than 7610 words are given
        """
        if not words:
            raise EmptyWordlist()
        if len(words) < REQUIRED_WORDS:
            raise InsufficientWordlist(len(words), REQUIRED_WORDS)

        self._words: Tuple[str, ...] = tuple(words)
        # later duplicates shadow earlier ones
        self._index: Dict[str, int] = {}
        for i, word in enumerate(self._words):
            self._index[word.lower()] = i

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._index

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def word_at(self, index: int) -> str:
        """
        Get the stored word at an absolute index.

        Raises:
            IndexOutOfRange: If index is negative or past the end of the list
        """
        if index < 0 or index >= len(self._words):
            raise IndexOutOfRange(index, len(self._words))
        return self._words[index]

    def index_of(self, word: str) -> Optional[int]:
        """Absolute index of a word (case-insensitive), or None if unknown."""
        return self._index.get(word.lower())
