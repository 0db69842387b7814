"""
Title Cleaner - Derives a display title from raw block text.
"""
import re

from config import ParserConfig


DUE_PHRASE_PATTERN = re.compile(r'\b(?:due|by|deadline)[:\s].*$', re.IGNORECASE | re.DOTALL)
DATED_PARENTHETICAL_PATTERN = re.compile(r'\((?:[^()]*\d[^()]*)\)$')
MULTISPACE_PATTERN = re.compile(r'\s{2,}')


def clean_title(raw: str, fallback_chars: int = ParserConfig.TITLE_FALLBACK_CHARS) -> str:
    """
    Strip the trailing due phrase and any dated parenthetical, collapse
    whitespace runs and capitalize the first character.

    Falls back to the first ``fallback_chars`` characters of ``raw`` when
    nothing is left.
    """
    title = DUE_PHRASE_PATTERN.sub("", raw).strip()
    title = DATED_PARENTHETICAL_PATTERN.sub("", title).strip()
    title = MULTISPACE_PATTERN.sub(" ", title)
    if title:
        title = title[0].upper() + title[1:]
    return title or raw[:fallback_chars]
