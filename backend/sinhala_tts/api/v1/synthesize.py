"""
synthesize.py - Speech Synthesis API Endpoint

Pipeline:
1. Transliteration - Sinhala Unicode to Latin phonetic text
2. Prosody Wrapping - split into phrases, build the SSML document
3. Synthesis - Google Cloud Text-to-Speech
4. Response - per-request MP3 file, removed after it is sent
"""
import logging

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse, PlainTextResponse
from pydantic import BaseModel, StrictStr

from ...agents.speech_synthesizer import SynthesisError, get_speech_synthesizer
from ...config import get_settings
from ...store.audio_store import get_audio_store
from ...utils.prosody import build_ssml
from ...utils.transliteration import get_transliterator

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_MESSAGE = "Error synthesizing speech"


class SynthesizeRequest(BaseModel):
    """Request model for the synthesis endpoint."""
    text: StrictStr


class TransientFileResponse(FileResponse):
    """FileResponse that removes its file once sending ends, even if sending fails."""

    def __init__(self, path, on_close, **kwargs):
        super().__init__(path, **kwargs)
        self.on_close = on_close

    async def __call__(self, scope, receive, send):
        try:
            await super().__call__(scope, receive, send)
        finally:
            await run_in_threadpool(self.on_close, self.path)


@router.post(
    "/synthesize",
    response_class=FileResponse,
    responses={200: {"content": {"audio/mpeg": {}}}, 500: {"content": {"text/plain": {}}}}
)
async def synthesize(request: SynthesizeRequest):
    """
    Speak Sinhala text.

    Args:
        request: SynthesizeRequest with Sinhala text

    Returns:
        MP3 audio, or a plain-text 500 if synthesis or the file write fails
    """
    settings = get_settings()

    phonetic_text = get_transliterator().transliterate(request.text)
    logger.info("Phonetic text: %s", phonetic_text)

    ssml = build_ssml(phonetic_text, pitch=settings.PROSODY_PITCH)

    store = get_audio_store()
    try:
        audio = await run_in_threadpool(get_speech_synthesizer().synthesize, ssml)
        path = await run_in_threadpool(store.save, audio)
    except (SynthesisError, OSError):
        logger.exception("Error synthesizing speech")
        return PlainTextResponse(ERROR_MESSAGE, status_code=500)

    if settings.KEEP_AUDIO_FILES:
        return FileResponse(path, media_type="audio/mpeg")
    return TransientFileResponse(path, on_close=store.discard, media_type="audio/mpeg")
