"""Perceived-character classification on UTF-16 code units.

Decides, at a given index into a string's code-unit buffer, how many units
the perceived character starting there occupies:

* **1** -- a BMP character, or a high surrogate with nothing after it
* **2** -- a surrogate pair (one astral code-point)
* **4** -- two pairs kept together: a national flag made of two regional
  indicator symbols (see http://emojipedia.org/flags/), or an emoji
  followed by a Fitzpatrick skin-tone modifier
  (see http://emojipedia.org/modifiers/)

Only some code-points are meant to combine with a skin-tone modifier.
This module does not check the preceding pair; any pair followed by a
modifier is treated as one 4-unit element.

The two public predicates, :func:`is_first_of_surrogate_pair` and
:func:`has_pair`, are total: they return ``False`` for any value they do
not understand instead of raising.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from spliddit.config import SplidditConfig
from spliddit.models import ClusterKind
from spliddit.utils.surrogates import (
    between_inclusive,
    decode_code_point,
    first_code_unit,
    is_high_surrogate,
    to_code_units,
)

REGIONAL_INDICATOR_START = 0x1F1E6
REGIONAL_INDICATOR_END = 0x1F1FF

FITZPATRICK_MODIFIER_START = 0x1F3FB
FITZPATRICK_MODIFIER_END = 0x1F3FF

_DEFAULT_CONFIG = SplidditConfig()


# ---------------------------------------------------------------------------
# Public predicates
# ---------------------------------------------------------------------------

def is_first_of_surrogate_pair(value: Any) -> bool:
    """Return ``True`` if *value* starts with a high surrogate code unit.

    Parameters
    ----------
    value:
        A string, or a list / tuple whose first element is a string.  Only
        the first UTF-16 code unit of the first character is inspected, so
        both an astral character (``"\\U0001f433"``) and its lone high
        half (``"\\ud83d"``) qualify.

    Returns
    -------
    bool
        ``False`` for every other shape: ``None``, numbers, bytes, empty
        strings and empty sequences included.

    Examples
    --------
    >>> is_first_of_surrogate_pair("\\U0001f433")
    True
    >>> is_first_of_surrogate_pair(["\\U0001f423"])
    True
    >>> is_first_of_surrogate_pair("Hello")
    False
    >>> is_first_of_surrogate_pair(42)
    False
    """
    if isinstance(value, (list, tuple)):
        if not value:
            return False
        value = value[0]
    if not isinstance(value, str) or not value:
        return False
    return is_high_surrogate(first_code_unit(value))


def has_pair(value: Any) -> bool:
    """Return ``True`` if any UTF-16 unit of *value* is a high surrogate.

    Non-string input returns ``False``.

    Examples
    --------
    >>> has_pair("hello \\U0001d50e what's up")
    True
    >>> has_pair("hello")
    False
    """
    if not isinstance(value, str):
        return False
    return any(is_first_of_surrogate_pair(ch) for ch in value)


# ---------------------------------------------------------------------------
# Pair range checks
# ---------------------------------------------------------------------------

def _pair_units(pair: str | Sequence[int]) -> Sequence[int] | None:
    units = to_code_units(pair) if isinstance(pair, str) else pair
    if len(units) < 2:
        return None
    return units


def is_regional_indicator(pair: str | Sequence[int]) -> bool:
    """Return ``True`` if *pair* decodes to a regional indicator symbol.

    *pair* is either two code units or a string whose UTF-16 view starts
    with them.
    """
    units = _pair_units(pair)
    if units is None:
        return False
    return between_inclusive(
        decode_code_point(units), REGIONAL_INDICATOR_START, REGIONAL_INDICATOR_END,
    )


def is_fitzpatrick_modifier(pair: str | Sequence[int]) -> bool:
    """Return ``True`` if *pair* decodes to a Fitzpatrick skin-tone modifier."""
    units = _pair_units(pair)
    if units is None:
        return False
    return between_inclusive(
        decode_code_point(units), FITZPATRICK_MODIFIER_START, FITZPATRICK_MODIFIER_END,
    )


# ---------------------------------------------------------------------------
# Width decision
# ---------------------------------------------------------------------------

def classify(
    units: Sequence[int],
    i: int,
    config: SplidditConfig | None = None,
) -> ClusterKind:
    """Classify the perceived character starting at code unit *i*.

    Parameters
    ----------
    units:
        The UTF-16 code units of the whole input.
    i:
        Index of the first unit of the character; ``0 <= i < len(units)``.
    config:
        Toggles for flag and skin-tone merging.  Defaults to both on.

    Returns
    -------
    ClusterKind
        Its :attr:`~spliddit.models.ClusterKind.width` is the number of
        units to consume.
    """
    cfg = config or _DEFAULT_CONFIG
    last_index = len(units) - 1

    if not is_high_surrogate(units[i]):
        return ClusterKind.BMP
    if i == last_index:
        return ClusterKind.LONE_SURROGATE

    # Not enough room for a second full pair after this one.
    if i + 3 > last_index:
        return ClusterKind.SURROGATE_PAIR

    current_pair = units[i : i + 2]
    next_pair = units[i + 2 : i + 4]

    if (
        cfg.combine_flags
        and is_regional_indicator(current_pair)
        and is_regional_indicator(next_pair)
    ):
        return ClusterKind.FLAG

    if cfg.combine_skin_tones and is_fitzpatrick_modifier(next_pair):
        return ClusterKind.SKIN_TONE

    return ClusterKind.SURROGATE_PAIR


def take_how_many(
    units: Sequence[int],
    i: int,
    config: SplidditConfig | None = None,
) -> int:
    """Return how many code units (1, 2 or 4) to consume at index *i*."""
    return classify(units, i, config).width
