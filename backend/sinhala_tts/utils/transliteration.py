"""
Transliteration helper: Sinhala -> Latin phonetic text.

The lookup table lives in data/sinhala_phonetic.json and is grouped by
grapheme kind. Two scan modes are supported:

- "literal": one codepoint at a time. Multi-codepoint keys in the table
  (ක්, ක්‍ර, යු, ...) are never reached.
- "longest": greedy longest-match-first over the registered key lengths,
  falling back to copying a single codepoint.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from ..config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_MAPPING_PATH = Path(__file__).resolve().parent.parent / "data" / "sinhala_phonetic.json"

MODES = ("longest", "literal")


class MappingError(ValueError):
    """Raised when a mapping table file is malformed."""


def load_mapping(path: Optional[str] = None) -> Dict[str, str]:
    """
    Load the phonetic mapping table and flatten its groups.

    Args:
        path: JSON file to read. Defaults to the bundled table.

    Returns:
        Flat dict of grapheme unit -> Latin phonetic string
    """
    path = Path(path) if path else DEFAULT_MAPPING_PATH

    with open(path, "r", encoding="utf-8") as f:
        groups = json.load(f)

    if not isinstance(groups, dict):
        raise MappingError(f"{path}: expected an object of groups")

    mapping = {}
    for group, entries in groups.items():
        if not isinstance(entries, dict):
            raise MappingError(f"{path}: group '{group}' must be an object")
        for key, value in entries.items():
            if not key:
                raise MappingError(f"{path}: empty key in group '{group}'")
            if not isinstance(value, str):
                raise MappingError(f"{path}: value for {key!r} must be a string")
            if key in mapping:
                raise MappingError(f"{path}: duplicate key {key!r} in group '{group}'")
            mapping[key] = value

    logger.info("Loaded %d mapping entries from %s", len(mapping), path)
    return mapping


class Transliterator:
    """
    Converts Sinhala Unicode text to a Latin phonetic approximation.
    Characters that are not in the table are copied through unchanged.
    """

    def __init__(self, mapping: Dict[str, str], mode: str = "longest"):
        if mode not in MODES:
            raise ValueError(f"Unknown transliteration mode: {mode}")

        self.mapping = dict(mapping)
        self.mode = mode
        self.max_key_length = max((len(key) for key in self.mapping), default=1)

    def transliterate(self, text: str) -> str:
        """Transliterate text using the configured scan mode."""
        if self.mode == "literal":
            return "".join(self.mapping.get(char, char) for char in text)
        return self._longest_match(text)

    def _longest_match(self, text: str) -> str:
        output = []
        i = 0
        n = len(text)

        while i < n:
            for size in range(min(self.max_key_length, n - i), 0, -1):
                chunk = text[i:i + size]
                if chunk in self.mapping:
                    output.append(self.mapping[chunk])
                    i += size
                    break
            else:
                output.append(text[i])
                i += 1

        return "".join(output)


@lru_cache()
def get_transliterator() -> Transliterator:
    """Process-wide transliterator built from settings."""
    settings = get_settings()
    mapping = load_mapping(settings.MAPPING_PATH)
    return Transliterator(mapping, mode=settings.TRANSLITERATION_MODE)


def sinhala_to_phonetic(text: str) -> str:
    """Transliterate with the process-wide transliterator."""
    return get_transliterator().transliterate(text)
