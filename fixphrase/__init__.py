"""
FixPhrase - four-word phrases for geographic coordinates.

A coordinate is packed into four dictionary indices, one per band of the
word list, and rendered as a phrase. Decoding accepts 2, 3 or 4 of those
words in any order and returns the coordinate at the precision the words
allow (0.1, 0.01 or 0.0001 degrees).

Usage:
    from fixphrase.dictionary import Dictionary
    from fixphrase.codec import encode, decode

    dictionary = Dictionary(words)
    result = encode(dictionary, 52.5902, -2.1304)
    decoded = decode(dictionary, result.phrase)
"""

__version__ = "0.1.0"
