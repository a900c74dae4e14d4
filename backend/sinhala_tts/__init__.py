"""
Sinhala Phonetic TTS - transliterates Sinhala text and speaks it
through Google Cloud Text-to-Speech.
"""
