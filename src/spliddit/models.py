"""Public data models for spliddit.

Segmentation itself only produces lists of strings; the types here name
the decisions the classifier makes so they can be reported through the
metrics hook and inspected in tests.
"""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ClusterKind(str, Enum):
    """Why the classifier chose the width of a perceived character."""

    BMP = "bmp"
    """A single code unit that does not start a surrogate pair."""

    LONE_SURROGATE = "lone_surrogate"
    """A high surrogate in the last position of the input, with no room
    for its low half."""

    SURROGATE_PAIR = "surrogate_pair"
    """One astral code-point (or a best-effort pair of units)."""

    FLAG = "flag"
    """Two regional indicator symbols forming a national flag."""

    SKIN_TONE = "skin_tone"
    """A surrogate pair followed by a Fitzpatrick skin-tone modifier."""

    @property
    def width(self) -> int:
        """Number of UTF-16 code units consumed by this kind."""
        return _WIDTHS[self]


_WIDTHS: dict[ClusterKind, int] = {
    ClusterKind.BMP: 1,
    ClusterKind.LONE_SURROGATE: 1,
    ClusterKind.SURROGATE_PAIR: 2,
    ClusterKind.FLAG: 4,
    ClusterKind.SKIN_TONE: 4,
}
