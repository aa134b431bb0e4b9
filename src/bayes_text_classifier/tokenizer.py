"""Bag-of-words tokenization shared by training and prediction."""

from __future__ import annotations

import re

# Maximal runs of letters and digits; underscore and punctuation separate tokens.
_TOKEN_RE = re.compile(r"[^\W_]+")


def tokenize(text: str) -> frozenset[str]:
    """Return the set of distinct case-folded alphanumeric tokens in ``text``.

    Any non-alphanumeric character acts as a separator and is dropped.
    Order and repetition are discarded, so ``"Win, win WIN!"`` yields
    ``{"win"}``.

    Args:
        text: Raw document text.

    Returns:
        Frozen set of normalized tokens (empty for empty input).
    """
    if not text:
        return frozenset()
    return frozenset(m.group().casefold() for m in _TOKEN_RE.finditer(text))
