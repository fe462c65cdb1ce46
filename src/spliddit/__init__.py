"""spliddit — split strings into user-perceived characters.

Python ``str`` indexing works on code-points, so ``list("🇦🇸")`` yields two
regional indicator symbols and ``list("🎅🏽")`` separates Santa from his
skin tone.  :func:`segment` keeps national flags and skin-tone sequences
together, and also accepts strings that were split one UTF-16 unit at a
time (lone surrogates) and joins their pairs back up.

Public re-exports
-----------------

* **Entry points:** :func:`segment`, :class:`Splitter`
* **Predicates:** :func:`is_first_of_surrogate_pair`, :func:`has_pair`
* **Configuration:** :class:`SplidditConfig`
* **Errors:** :class:`SplidditError`, :class:`SplidditInvalidArgumentError`,
  :class:`ErrorCode`
* **Models:** :class:`ClusterKind`

Usage::

    from spliddit import segment

    segment("Sup \\U0001f1ee\\U0001f1f9 Italy")
    # ['S', 'u', 'p', ' ', '🇮🇹', ' ', 'I', 't', 'a', 'l', 'y']

    segment("1-800-867-5309", "-")
    # ['1', '800', '867', '5309']
"""

from __future__ import annotations

__version__ = "2.0.0"

# ── Predicates ──────────────────────────────────────────────────────────
from spliddit.classifier import has_pair, is_first_of_surrogate_pair

# ── Configuration ───────────────────────────────────────────────────────
from spliddit.config import SplidditConfig

# ── Errors ──────────────────────────────────────────────────────────────
from spliddit.errors import (
    ErrorCode,
    SplidditError,
    SplidditInvalidArgumentError,
)

# ── Models ──────────────────────────────────────────────────────────────
from spliddit.models import ClusterKind

# ── Entry points ────────────────────────────────────────────────────────
from spliddit.splitter import Splitter, segment

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Entry points
    "segment",
    "Splitter",
    # Predicates
    "is_first_of_surrogate_pair",
    "has_pair",
    # Configuration
    "SplidditConfig",
    # Errors
    "SplidditError",
    "SplidditInvalidArgumentError",
    "ErrorCode",
    # Models
    "ClusterKind",
]
