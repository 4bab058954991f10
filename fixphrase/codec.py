"""
Coordinate <-> phrase codec.

Both coordinates are scaled to 4 decimal places and offset to be
non-negative, giving two 7-digit strings. The leading 4 digits of each
become the band 0 and band 1 words; the trailing 3 digits of each are
interleaved into the band 2 and band 3 words:

    lat  = L1 L2 L3 L4 L5 L6 L7
    lon  = G1 G2 G3 G4 G5 G6 G7

    band 0 = L1 L2 L3 L4
    band 1 = G1 G2 G3 G4
    band 2 = L5 L6 G5
    band 3 = L7 G6 G7
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fixphrase.dictionary import Dictionary, band_of, band_start
from fixphrase.errors import (
    EmptyPhrase,
    LatitudeOutOfRange,
    LongitudeOutOfRange,
    NotDecodable,
    TooFewWords,
)

SCALE = 10000
LAT_OFFSET = 90
LON_OFFSET = 180

# divisor -> (accuracy in degrees, centering offset)
PRECISION_TIERS = {
    10: (0.1, 0.05),
    100: (0.01, 0.005),
    10000: (0.0001, 0.0),
}


@dataclass(frozen=True)
class EncodeResult:
    lat: float
    lon: float
    phrase: str
    words: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'lat': self.lat,
            'lon': self.lon,
            'phrase': self.phrase,
            'words': list(self.words),
        }


@dataclass(frozen=True)
class DecodeResult:
    input_words: List[str]
    canonical_phrase: str
    lat: float
    lon: float
    accuracy_degrees: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'inputWords': list(self.input_words),
            'canonicalPhrase': self.canonical_phrase,
            'lat': self.lat,
            'lon': self.lon,
            'accuracyDegrees': self.accuracy_degrees,
        }


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    # no abs(value) + 0.5: that rounds 0.49999999999999994 up to 1
    t = math.trunc(value)
    if abs(value - t) >= 0.5:
        t += math.copysign(1, value)
    return int(t)


def round4(value: float) -> float:
    """Round to 4 decimal places, halves away from zero."""
    return round_half_away(value * SCALE) / SCALE


def encode(dictionary: Dictionary, latitude: float, longitude: float) -> EncodeResult:
    """
    Encode a coordinate as four words.

    Args:
        dictionary: Word dictionary with at least 7610 words
        latitude: Latitude in decimal degrees, -90 to 90
        longitude: Longitude in decimal degrees, -180 to 180

    Returns:
        EncodeResult with the input coordinate, the phrase and its words

    Raises:
        LatitudeOutOfRange: If latitude is outside [-90, 90] or NaN
        LongitudeOutOfRange: If longitude is outside [-180, 180] or NaN
    """
    if not -90 <= latitude <= 90:
        raise LatitudeOutOfRange(latitude)
    if not -180 <= longitude <= 180:
        raise LongitudeOutOfRange(longitude)

    lat = f"{round_half_away(latitude * SCALE) + LAT_OFFSET * SCALE:07d}"
    lon = f"{round_half_away(longitude * SCALE) + LON_OFFSET * SCALE:07d}"

    indexes = [
        int(lat[0:4]) + band_start(0),
        int(lon[0:4]) + band_start(1),
        int(lat[4:6] + lon[4:5]) + band_start(2),
        int(lat[6:7] + lon[5:7]) + band_start(3),
    ]
    words = [dictionary.word_at(ix) for ix in indexes]

    return EncodeResult(
        lat=latitude,
        lon=longitude,
        phrase=' '.join(words),
        words=words,
    )


def _resolve_bands(dictionary: Dictionary, parts: List[str]) -> List[Optional[int]]:
    """Map input words to band-relative values; unknown words are skipped."""
    values: List[Optional[int]] = [None, None, None, None]
    for word in parts:
        ix = dictionary.index_of(word)
        if ix is None:
            continue
        band = band_of(ix)
        if band is None:
            continue
        values[band] = ix - band_start(band)
    return values


def decode(dictionary: Dictionary, phrase: str) -> DecodeResult:
    """
    Decode a phrase of 2-4 words back to a coordinate.

    Word order does not matter and unknown words are ignored. A latitude
    (band 0) and a longitude (band 1) word are required; a band 2 word
    refines the result to 0.01 degrees, and a band 3 word on top of it to
    0.0001 degrees. Coarse results are moved to the centre of their cell.

    Args:
        dictionary: Word dictionary with at least 7610 words
        phrase: Whitespace-separated words, any case

    Returns:
        DecodeResult with the coordinate and its accuracy

    Raises:
        EmptyPhrase: If the phrase is blank
        TooFewWords: If the phrase has a single word
        NotDecodable: If no latitude or no longitude word was recognised
    """
    phrase = phrase.lower().strip()
    if not phrase:
        raise EmptyPhrase()
    parts = phrase.split()
    if len(parts) < 2:
        raise TooFewWords(len(parts))

    values = _resolve_bands(dictionary, parts)
    if values[0] is None or values[1] is None:
        raise NotDecodable()

    divisor = 10
    lat = f"{values[0]:04d}"
    lon = f"{values[1]:04d}"

    if values[2] is not None:
        divisor = 100
        latlon2dec = f"{values[2]:03d}"
        lat += latlon2dec[0:1]
        lon += latlon2dec[2:3]
        # band 3 only counts alongside band 2, whose middle digit it needs
        if values[3] is not None:
            divisor = 10000
            latlon4dec = f"{values[3]:03d}"
            lat += latlon2dec[1:2] + latlon4dec[0:1]
            lon += latlon4dec[1:3]

    accuracy, centre = PRECISION_TIERS[divisor]
    latitude = round4(int(lat) / divisor - LAT_OFFSET) + centre
    longitude = round4(int(lon) / divisor - LON_OFFSET) + centre

    canonical = [
        dictionary.word_at(band_start(band) + value) if value is not None else ''
        for band, value in enumerate(values)
    ]

    return DecodeResult(
        input_words=parts,
        canonical_phrase=' '.join(canonical).strip(),
        lat=latitude,
        lon=longitude,
        accuracy_degrees=accuracy,
    )
