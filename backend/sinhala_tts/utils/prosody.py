"""
SSML prosody wrapping for phonetic text.
"""
import re
from typing import List
from xml.sax.saxutils import escape

DEFAULT_PITCH = "0.5st"

# Punctuation and whitespace delimiters, kept as tokens
_DELIMITERS = re.compile(r"([.,!?\s])")


def split_phrases(text: str) -> List[str]:
    """
    Split text on punctuation and whitespace, keeping the delimiters.

    "ka ta." -> ["ka", " ", "ta", ".", ""]
    """
    return _DELIMITERS.split(text)


def wrap_phrases(text: str, pitch: str = DEFAULT_PITCH) -> str:
    """
    Wrap every non-blank token in a prosody tag and join with spaces.

    Blank tokens (whitespace delimiters, empty edges) are kept as they are,
    so every token boundary ends up with at least one space.
    """
    wrapped = []
    for token in split_phrases(text):
        phrase = token.strip()
        if phrase:
            wrapped.append(f'<prosody pitch="{pitch}">{escape(phrase)}</prosody>')
        else:
            wrapped.append(token)
    return " ".join(wrapped)


def build_ssml(text: str, pitch: str = DEFAULT_PITCH) -> str:
    """Build the full <speak> document for phonetic text."""
    return f"<speak>{wrap_phrases(text, pitch=pitch)}</speak>"
