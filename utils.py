# utils.py
import unicodedata
from typing import Any

OKINA = "ʻ"


def norm_match(s: str) -> str:
    """Lowercase, strip diacritics (NFD + drop combining marks), okina -> apostrophe.

    Marks are dropped by category (Mn/Mc/Me), not combining class: U+034F
    COMBINING GRAPHEME JOINER has class 0 but is still a mark.
    Punctuation and spacing are kept so hyphenated names stay searchable as written.
    """
    if not s:
        return ""
    s = s.lower()
    s = "".join(
        c for c in unicodedata.normalize("NFD", s)
        if not unicodedata.category(c).startswith("M")
    )
    return s.replace(OKINA, "'")


def name_contains_word(name: Any, word: str) -> bool:
    """
    Substring test after normalization on both sides.

    A name that isn't a string counts as "". Not word-boundary aware:
    "kai" matches inside compounds like "Kaʻūpūlehu-Kai" or "Hanakai".
    """
    s = name if isinstance(name, str) else ""
    return norm_match(word) in norm_match(s)
