"""
Emoji extraction for lexicon lookup.

Emojis are pulled from the raw text before any normalization so that
lower-casing and punctuation stripping cannot split multi-codepoint
sequences. Each match is a whole grapheme sequence (base pictograph plus
variation selector, skin-tone modifier, tag characters, and ZWJ-joined
parts; keycaps; regional-indicator flag pairs) so it can match
multi-codepoint keys in the lexicon's emoji table.

Usage:
    from sentiment_arc.lexical.emoji import extract_emojis

    extract_emojis("Top 👍🏽 mais 🤷‍♂️")  # ["👍🏽", "🤷‍♂️"]
"""

import re
from typing import List

# Pictographic base characters
_BASE = (
    "["
    "\U0001F300-\U0001F5FF"  # Symbols & pictographs
    "\U0001F600-\U0001F64F"  # Emoticons
    "\U0001F680-\U0001F6FF"  # Transport & map symbols
    "\U0001F900-\U0001F9FF"  # Supplemental symbols
    "\U0001FA70-\U0001FAFF"  # Symbols extended-A
    "\U0001F170-\U0001F251"  # Enclosed alphanumerics/ideographs
    "\U0001F004\U0001F0CF"  # Mahjong, playing card
    "\U00002600-\U000026FF"  # Misc symbols
    "\U00002700-\U000027BF"  # Dingbats
    "\U00002300-\U000023FF"  # Misc technical
    "\U00002B05-\U00002B07\U00002B1B\U00002B1C\U00002B50\U00002B55"  # Arrows, squares, star, circle
    "\U00002934\U00002935\U00003030\U0000303D\U00003297\U00003299"
    "\U0000203C\U00002049\U00002122\U00002139"
    "]"
)
_VS16 = "\U0000FE0F"
_SKIN_TONE = "[\U0001F3FB-\U0001F3FF]"
_TAGS = "[\U000E0020-\U000E007F]+"
_ZWJ = "\U0000200D"

_ELEMENT = f"{_BASE}(?:{_VS16}|{_SKIN_TONE})?(?:{_TAGS})?"
_FLAG = "[\U0001F1E6-\U0001F1FF]{2}"
_KEYCAP = f"[0-9#*]{_VS16}?\U000020E3"

_EMOJI_PATTERN = re.compile(
    f"{_FLAG}|{_KEYCAP}|{_ELEMENT}(?:{_ZWJ}{_ELEMENT})*",
    flags=re.UNICODE,
)


def extract_emojis(text: str) -> List[str]:
    """
    Extract emoji grapheme sequences from text, in order of appearance.

    Args:
        text: Raw input text

    Returns:
        List of emoji sequences; repeated emojis appear once per occurrence
    """
    if not text:
        return []

    return _EMOJI_PATTERN.findall(text)


def is_emoji(candidate: str) -> bool:
    """Check whether a string is exactly one emoji sequence."""
    return _EMOJI_PATTERN.fullmatch(candidate) is not None
