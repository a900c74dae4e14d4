import sys
import os
import re
import pytest

# Add backend to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../backend')))

from sinhala_tts.utils.prosody import build_ssml, split_phrases, wrap_phrases

SEGMENT = re.compile(r'<prosody pitch="0\.5st">(.*?)</prosody>')


def test_split_keeps_delimiters():
    assert split_phrases("ka ta.") == ["ka", " ", "ta", ".", ""]
    assert split_phrases("") == [""]


def test_empty_text():
    assert build_ssml("") == "<speak></speak>"


@pytest.mark.parametrize("text", [" ", "   ", "\t\n"])
def test_whitespace_only_has_no_prosody(text):
    ssml = build_ssml(text)
    assert "<prosody" not in ssml
    assert ssml.startswith("<speak>")
    assert ssml.endswith("</speak>")


def test_two_words():
    ssml = build_ssml("ka ta")
    assert ssml == (
        '<speak><prosody pitch="0.5st">ka</prosody>   '
        '<prosody pitch="0.5st">ta</prosody></speak>'
    )
    assert SEGMENT.findall(ssml) == ["ka", "ta"]
    assert ssml.count("<speak>") == 1


def test_single_word():
    assert build_ssml("ama") == '<speak><prosody pitch="0.5st">ama</prosody></speak>'


def test_punctuation_is_wrapped():
    assert wrap_phrases("ama.") == (
        '<prosody pitch="0.5st">ama</prosody> <prosody pitch="0.5st">.</prosody> '
    )


def test_multiple_spaces_keep_segments_trimmed():
    ssml = build_ssml("ka   ta,  ga")
    assert SEGMENT.findall(ssml) == ["ka", "ta", ",", "ga"]


def test_custom_pitch():
    assert wrap_phrases("ka", pitch="-2st") == '<prosody pitch="-2st">ka</prosody>'


def test_markup_characters_are_escaped():
    assert SEGMENT.findall(build_ssml("a&b <x>")) == ["a&amp;b", "&lt;x&gt;"]
