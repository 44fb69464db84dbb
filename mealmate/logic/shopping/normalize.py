"""Ingredient name normalization used as the comparison key across the grocery logic."""
import re

_NON_ALNUM = re.compile(r'[^a-z0-9\s]')
_WHITESPACE = re.compile(r'\s+')


def normalize_ingredient(name: str) -> str:
    """Lower-case, drop punctuation, collapse whitespace. Idempotent; None -> ''."""
    lowered = (name or '').lower()
    stripped = _NON_ALNUM.sub('', lowered)
    return _WHITESPACE.sub(' ', stripped).strip()


__all__ = ['normalize_ingredient']
