"""Text helpers shared by the keyword-aware checks."""

import re

# Common English/Italian stop words ignored when matching multi-word keywords
STOP_WORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "of", "to", "for", "in", "on", "with",
        "di", "da", "in", "su", "per", "con", "il", "la", "lo", "gli", "le",
        "un", "una", "uno", "e", "o", "ma", "che", "è", "sono", "del",
        "della", "dei", "delle", "al", "alla", "ai", "alle",
    }
)

_AMPERSAND_RE = re.compile(r"\s*&\s*")


def contains_keyword(text: str, keyword: str) -> bool:
    """Case-insensitive substring match."""
    keyword = keyword.strip()
    return bool(keyword) and keyword.lower() in text.lower()


def contains_keyword_words(text: str, keyword: str) -> bool:
    """
    Looser keyword match for prose such as meta descriptions.

    Matches when the keyword appears verbatim, when it appears after
    normalising "B & B" to "B&B", or when every significant word of the
    keyword (stop words skipped) occurs somewhere in the text.
    """
    keyword = keyword.strip()
    if not keyword:
        return False

    if contains_keyword(text, keyword):
        return True

    if contains_keyword(_AMPERSAND_RE.sub("&", text), _AMPERSAND_RE.sub("&", keyword)):
        return True

    text_lower = text.lower()
    for part in keyword.lower().split():
        if "&" in part:
            if part in text_lower:
                continue
            pieces = [piece.strip() for piece in part.split("&") if piece.strip()]
            if any(piece not in text_lower for piece in pieces):
                return False
            continue

        if part in STOP_WORDS:
            continue

        if part not in text_lower:
            return False

    return True
