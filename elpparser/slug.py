"""Accent folding and filesystem-safe identifiers for page titles."""

from __future__ import annotations

import re
import unicodedata
from typing import Dict, Optional

_LOCALE_OVERRIDES: Dict[str, Dict[str, str]] = {
    "de": {
        "Ä": "Ae",
        "ä": "ae",
        "Ö": "Oe",
        "ö": "oe",
        "Ü": "Ue",
        "ü": "ue",
        "ß": "ss",
    },
    "da": {
        "Æ": "Ae",
        "æ": "ae",
        "Ø": "Oe",
        "ø": "oe",
        "Å": "Aa",
        "å": "aa",
    },
    "ca": {
        "l·l": "ll",
        "L·L": "LL",
    },
    "sr": {
        "Đ": "DJ",
        "đ": "dj",
    },
}
_LOCALE_OVERRIDES["bs"] = _LOCALE_OVERRIDES["sr"]

# Letters that carry no canonical decomposition to an ASCII base.
_SUBSTITUTIONS = {
    "ß": "ss",
    "Æ": "AE",
    "æ": "ae",
    "Ø": "O",
    "ø": "o",
    "Œ": "OE",
    "œ": "oe",
    "Đ": "D",
    "đ": "d",
    "Ð": "D",
    "ð": "d",
    "Ł": "L",
    "ł": "l",
    "Þ": "TH",
    "þ": "th",
    "Ħ": "H",
    "ħ": "h",
    "Ŧ": "T",
    "ŧ": "t",
    "Ŋ": "N",
    "ŋ": "n",
    "ı": "i",
    "ĸ": "k",
    "ſ": "s",
    "ª": "a",
    "º": "o",
}
_SUBSTITUTION_TABLE = str.maketrans(_SUBSTITUTIONS)
_SEPARATORS = re.compile(r"[^a-z0-9]+")


def remove_accents(text: str, locale: Optional[str] = None) -> str:
    """Fold accented letters to their closest ASCII spelling."""
    for source, target in _locale_overrides(locale).items():
        text = text.replace(source, target)
    text = text.translate(_SUBSTITUTION_TABLE)
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def slugify(text: str, locale: Optional[str] = None) -> str:
    """Return a lowercase ``[a-z0-9_]`` identifier derived from ``text``."""
    folded = remove_accents(text, locale).lower()
    return _SEPARATORS.sub("_", folded).strip("_")


def _locale_overrides(locale: Optional[str]) -> Dict[str, str]:
    if not locale:
        return {}
    language = re.split(r"[-_]", locale.strip(), maxsplit=1)[0].lower()
    return _LOCALE_OVERRIDES.get(language, {})


__all__ = ["remove_accents", "slugify"]
