import sys
import os
from unittest.mock import patch

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../backend')))

from sinhala_tts.config import Settings
from sinhala_tts.store import audio_store
from sinhala_tts.store.audio_store import AudioStore


def test_save_writes_unique_files(tmp_path):
    store = AudioStore(tmp_path / "clips")

    first = store.save(b"one")
    second = store.save(b"two")

    assert first != second
    assert first.parent == tmp_path / "clips"
    assert first.suffix == ".mp3"
    assert first.read_bytes() == b"one"
    assert second.read_bytes() == b"two"


def test_discard(tmp_path):
    store = AudioStore(tmp_path)
    path = store.save(b"audio")

    store.discard(path)
    assert not path.exists()

    # already gone
    store.discard(path)


def test_get_audio_store_uses_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(audio_store, "_audio_store", None)
    settings = Settings(OUTPUT_DIR=str(tmp_path / "clips"))

    with patch('sinhala_tts.store.audio_store.get_settings', return_value=settings):
        store = audio_store.get_audio_store()

    assert store.output_dir == tmp_path / "clips"
