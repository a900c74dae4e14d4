# Text utilities
from .transliteration import Transliterator, MappingError, load_mapping, get_transliterator, sinhala_to_phonetic
from .prosody import split_phrases, wrap_phrases, build_ssml

__all__ = [
    'Transliterator', 'MappingError', 'load_mapping', 'get_transliterator', 'sinhala_to_phonetic',
    'split_phrases', 'wrap_phrases', 'build_ssml',
]
