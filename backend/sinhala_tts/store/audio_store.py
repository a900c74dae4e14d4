"""
audio_store.py - Per-request audio files

Each synthesized clip gets its own file name so concurrent requests
never read each other's audio.
"""
import logging
import uuid
from pathlib import Path
from typing import Union

from ..config import get_settings

logger = logging.getLogger(__name__)


class AudioStore:
    """Writes audio clips to uniquely named files under one directory."""

    def __init__(self, output_dir: Union[str, Path], extension: str = "mp3"):
        self.output_dir = Path(output_dir)
        self.extension = extension

    def save(self, audio: bytes) -> Path:
        """Write audio to a new file and return its path."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / f"{uuid.uuid4().hex}.{self.extension}"
        path.write_bytes(audio)
        logger.info("Saved %d bytes to %s", len(audio), path)
        return path

    def discard(self, path: Union[str, Path]) -> None:
        """Remove a clip once it has been sent."""
        Path(path).unlink(missing_ok=True)
        logger.debug("Removed %s", path)


# Singleton instance
_audio_store = None


def get_audio_store() -> AudioStore:
    global _audio_store
    if _audio_store is None:
        _audio_store = AudioStore(get_settings().OUTPUT_DIR)
    return _audio_store
