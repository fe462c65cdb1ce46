"""UTF-16 code-unit helpers.

Python ``str`` is a sequence of *Unicode code-points*, but perceived
characters are classified on the string's **UTF-16 view**: an astral
code-point occupies two 16-bit code units (a surrogate pair) there.  This
module converts between the two representations and implements the
surrogate-pair arithmetic.

Encoding uses the ``surrogatepass`` error handler so that lone surrogate
code-points (e.g. ``"\\ud83d"``, as produced by splitting a string one
UTF-16 unit at a time) survive as single code units instead of raising.
"""

from __future__ import annotations

from array import array
from collections.abc import Sequence

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF

LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF

# First code-point outside the Basic Multilingual Plane.
SUPPLEMENTARY_START = 0x10000

_CODEC = "utf-16-le"
_ERRORS = "surrogatepass"


def between_inclusive(value: int, lower: int, upper: int) -> bool:
    """Return ``True`` if *lower* <= *value* <= *upper*."""
    return lower <= value <= upper


def is_high_surrogate(unit: int) -> bool:
    return between_inclusive(unit, HIGH_SURROGATE_START, HIGH_SURROGATE_END)


def is_low_surrogate(unit: int) -> bool:
    return between_inclusive(unit, LOW_SURROGATE_START, LOW_SURROGATE_END)


def to_code_units(text: str) -> array:
    """Return the UTF-16 code units of *text* as an ``array('H')``.

    Parameters
    ----------
    text:
        Any Python string, including one carrying lone surrogate
        code-points.

    Returns
    -------
    array
        One unsigned 16-bit item per code unit.  An empty string yields an
        empty array.

    Examples
    --------
    >>> list(to_code_units("a\\U0001f600"))
    [97, 55357, 56832]
    """
    units = array("H")
    units.frombytes(text.encode(_CODEC, _ERRORS))
    return units


def from_code_units(units: Sequence[int]) -> str:
    """Decode a run of UTF-16 code units back into a Python string.

    A well-formed high/low pair becomes one astral code-point; an unpaired
    surrogate unit becomes a lone surrogate code-point.

    Examples
    --------
    >>> from_code_units([0xD83D, 0xDE00]) == "\\U0001f600"
    True
    """
    if not isinstance(units, array):
        units = array("H", units)
    return units.tobytes().decode(_CODEC, _ERRORS)


def first_code_unit(char: str) -> int:
    """Return the first UTF-16 code unit of the non-empty string *char*.

    For an astral code-point this is its high surrogate.
    """
    cp = ord(char[0])
    if cp < SUPPLEMENTARY_START:
        return cp
    return HIGH_SURROGATE_START + ((cp - SUPPLEMENTARY_START) >> 10)


def decode_code_point(pair: Sequence[int]) -> int:
    """Combine a surrogate pair into the code-point it encodes.

    Parameters
    ----------
    pair:
        Exactly two code units, high surrogate first.  The result is
        meaningless for anything that is not a valid surrogate pair; the
        range checks in :mod:`spliddit.classifier` are applied to whatever
        comes out.

    Returns
    -------
    int
        ``((high - 0xD800) << 10) + (low - 0xDC00) + 0x10000``

    Examples
    --------
    >>> hex(decode_code_point([0xD83C, 0xDDE6]))
    '0x1f1e6'
    """
    high_offset = pair[0] - HIGH_SURROGATE_START
    low_offset = pair[1] - LOW_SURROGATE_START
    return (high_offset << 10) + low_offset + SUPPLEMENTARY_START


def count_unpaired_surrogates(units: Sequence[int]) -> int:
    """Count surrogate code units that are not part of a high/low pair."""
    count = 0
    i = 0
    n = len(units)
    while i < n:
        unit = units[i]
        if is_high_surrogate(unit) and i + 1 < n and is_low_surrogate(units[i + 1]):
            i += 2
            continue
        if is_high_surrogate(unit) or is_low_surrogate(unit):
            count += 1
        i += 1
    return count
