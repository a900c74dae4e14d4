"""
speech_synthesizer.py

Speech synthesis through Google Cloud Text-to-Speech.
Supports two providers:
1. google - official client library, credentials from the environment
2. rest   - REST endpoint with an API key (GOOGLE_TTS_API_KEY)
"""
import base64
import logging
from dataclasses import dataclass
from typing import Optional

import requests
from google.api_core.exceptions import ClientError, TooManyRequests
from google.cloud import texttospeech
from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_exponential

from ..config import get_settings

logger = logging.getLogger(__name__)

REST_ENDPOINT = "https://texttospeech.googleapis.com/v1/text:synthesize"


@dataclass(frozen=True)
class VoiceConfig:
    """Fixed voice and audio settings sent with every request."""
    language_code: str = "en-US"
    name: str = "en-IN-Wavenet-B"
    audio_encoding: str = "MP3"
    pitch: float = 4.0
    speaking_rate: float = 0.8
    volume_gain_db: float = 2.0


class SynthesisError(Exception):
    """Raised when the provider could not produce audio."""


def is_retryable(exc: BaseException) -> bool:
    """Only transient failures are worth another attempt: 5xx, 429 and network errors."""
    if isinstance(exc, SynthesisError):
        return False
    if isinstance(exc, ClientError):
        return isinstance(exc, TooManyRequests)
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        status = exc.response.status_code
        return status >= 500 or status == 429
    return True


class SpeechSynthesizer:
    """
    Turns an SSML document into audio bytes.
    Every provider failure surfaces as SynthesisError.
    """

    PROVIDERS = ("google", "rest")

    def __init__(
        self,
        provider: str = "google",
        voice: Optional[VoiceConfig] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_attempts: int = 1,
        wait=None
    ):
        """
        Initialize the synthesizer.
        provider: 'google' or 'rest'
        """
        self.provider = provider.lower()
        if self.provider not in self.PROVIDERS:
            raise ValueError(f"Unknown TTS provider: {provider}")

        self.voice = voice or VoiceConfig()
        self.api_key = api_key
        self.timeout = timeout
        self._client = None

        self._retrying = Retrying(
            stop=stop_after_attempt(max(1, max_attempts)),
            wait=wait if wait is not None else wait_exponential(multiplier=1, min=2, max=10),
            retry=retry_if_exception(is_retryable),
            reraise=True
        )

        if self.provider == "rest" and not self.api_key:
            logger.warning("No API key for the rest provider")

        logger.info("Using provider: %s (voice=%s)", self.provider, self.voice.name)

    def synthesize(self, ssml: str) -> bytes:
        """
        Synthesize an SSML document.

        Args:
            ssml: Complete <speak> document

        Returns:
            Encoded audio bytes (MP3 by default)
        """
        if self.provider == "rest" and not self.api_key:
            raise SynthesisError("GOOGLE_TTS_API_KEY not set")

        try:
            audio = self._retrying.copy()(self._call_provider, ssml)
        except Exception as e:
            raise SynthesisError(f"{self.provider} synthesis failed: {e}") from e

        if not audio:
            raise SynthesisError(f"{self.provider} returned no audio")

        logger.info("Received %d bytes of audio", len(audio))
        return audio

    def _call_provider(self, ssml: str) -> bytes:
        if self.provider == "google":
            return self._synthesize_google(ssml)
        return self._synthesize_rest(ssml)

    def _get_client(self):
        """Create the client library instance on first use."""
        if self._client is None:
            self._client = texttospeech.TextToSpeechClient()
        return self._client

    def _synthesize_google(self, ssml: str) -> bytes:
        kwargs = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        response = self._get_client().synthesize_speech(
            input=texttospeech.SynthesisInput(ssml=ssml),
            voice=texttospeech.VoiceSelectionParams(
                language_code=self.voice.language_code,
                name=self.voice.name
            ),
            audio_config=texttospeech.AudioConfig(
                audio_encoding=texttospeech.AudioEncoding[self.voice.audio_encoding],
                pitch=self.voice.pitch,
                speaking_rate=self.voice.speaking_rate,
                volume_gain_db=self.voice.volume_gain_db
            ),
            **kwargs
        )
        return response.audio_content

    def _synthesize_rest(self, ssml: str) -> bytes:
        payload = {
            "input": {"ssml": ssml},
            "voice": {
                "languageCode": self.voice.language_code,
                "name": self.voice.name
            },
            "audioConfig": {
                "audioEncoding": self.voice.audio_encoding,
                "pitch": self.voice.pitch,
                "speakingRate": self.voice.speaking_rate,
                "volumeGainDb": self.voice.volume_gain_db
            }
        }

        response = requests.post(
            REST_ENDPOINT,
            params={"key": self.api_key},
            json=payload,
            timeout=self.timeout
        )
        response.raise_for_status()

        return base64.b64decode(response.json().get("audioContent", ""))


# Singleton instance
_speech_synthesizer = None


def get_speech_synthesizer() -> SpeechSynthesizer:
    global _speech_synthesizer
    if _speech_synthesizer is None:
        settings = get_settings()
        _speech_synthesizer = SpeechSynthesizer(
            provider=settings.TTS_PROVIDER,
            api_key=settings.GOOGLE_TTS_API_KEY,
            timeout=settings.SYNTHESIS_TIMEOUT,
            max_attempts=settings.SYNTHESIS_MAX_ATTEMPTS
        )
    return _speech_synthesizer
