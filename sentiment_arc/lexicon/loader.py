"""
Lexicon loading from JSON documents.

The loader owns the only I/O in the scoring path: it reads the lexicon
once and hands an immutable ``Lexicon`` to the scorers. A missing,
unreadable, malformed, or mis-shaped document degrades to an empty
lexicon (logged) unless strict loading is requested.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from sentiment_arc.config.settings import get_settings
from sentiment_arc.lexical.emoji import is_emoji
from sentiment_arc.lexicon.schemas import Lexicon

logger = structlog.get_logger(__name__)

BUNDLED_LEXICON_PATH = Path(__file__).parent / "data" / "lexicon_fr.json"


class LexiconLoadError(Exception):
    """Raised by strict loads when a lexicon document cannot be used."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load lexicon from {path}: {reason}")


class LexiconLoader:
    """
    Reads lexicon documents from disk.

    Usage:
        loader = LexiconLoader()
        lexicon = loader.load(Path("data/lexicon_fr.json"))

        # Raise instead of falling back to an empty lexicon
        lexicon = loader.load(path, strict=True)
    """

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def read_document(self, path: Path) -> dict[str, Any]:
        """
        Read and parse a lexicon document.

        Raises:
            LexiconLoadError: If the file is missing, unreadable, or not a JSON object
        """
        try:
            raw = path.read_text(encoding=self._encoding)
        except OSError as e:
            raise LexiconLoadError(path, f"unreadable file ({e.strerror or e})") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise LexiconLoadError(path, f"malformed JSON at line {e.lineno}") from e

        if not isinstance(data, dict):
            raise LexiconLoadError(path, "top-level value must be an object")

        return data

    def load(self, path: Path | str, strict: bool = False) -> Lexicon:
        """
        Load a lexicon from a JSON file.

        Args:
            path: Path to the lexicon document
            strict: Raise LexiconLoadError instead of returning an empty lexicon

        Returns:
            Loaded lexicon, or an empty lexicon on failure when not strict
        """
        path = Path(path)
        try:
            data = self.read_document(path)
            try:
                lexicon = Lexicon.from_document(data)
            except ValidationError as e:
                raise LexiconLoadError(
                    path, f"invalid shape ({e.error_count()} errors)"
                ) from e
        except LexiconLoadError as e:
            logger.error("Lexicon load failed", path=str(path), reason=e.reason)
            if strict:
                raise
            logger.warning("Falling back to empty lexicon", path=str(path))
            return Lexicon.empty()

        unmatchable = unmatchable_emoji_keys(lexicon)
        if unmatchable:
            logger.warning(
                "Emoji entries can never match", path=str(path), entries=unmatchable
            )
        logger.info("Lexicon loaded", path=str(path), **lexicon.summary())
        return lexicon


def unmatchable_emoji_keys(lexicon: Lexicon) -> list[str]:
    """
    Emoji-table keys that are not exactly one emoji sequence.

    Emojis are looked up by whole extracted sequence, so a key holding text
    or several emojis is never hit.
    """
    return [key for key in lexicon.emoji_sentiments if not is_emoji(key)]


@lru_cache
def load_default_lexicon() -> Lexicon:
    """
    Load the process-wide lexicon.

    Uses ``Settings.lexicon_path`` when set, else the bundled French lexicon.
    Cached so the file is read once per process; clear with
    ``load_default_lexicon.cache_clear()``.
    """
    settings = get_settings()
    path = settings.lexicon_path or BUNDLED_LEXICON_PATH
    return LexiconLoader().load(path)
