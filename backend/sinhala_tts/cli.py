"""
cli.py - Command line tools

Usage:
    sinhala-tts transliterate "අම"             # Phonetic text
    sinhala-tts ssml "අම" --mode literal       # SSML document
    sinhala-tts speak "අම" -o amma.mp3         # Full pipeline to a file
    sinhala-tts serve --port 3000              # HTTP server
"""
import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import get_settings
from .utils.prosody import build_ssml
from .utils.transliteration import Transliterator, get_transliterator, load_mapping


def _transliterator(mode: str = None) -> Transliterator:
    """Process-wide transliterator, or a fresh one for an explicit mode."""
    if mode is None:
        return get_transliterator()
    return Transliterator(load_mapping(get_settings().MAPPING_PATH), mode=mode)


def cmd_transliterate(args) -> int:
    print(_transliterator(args.mode).transliterate(args.text))
    return 0


def cmd_ssml(args) -> int:
    phonetic = _transliterator(args.mode).transliterate(args.text)
    print(build_ssml(phonetic, pitch=get_settings().PROSODY_PITCH))
    return 0


def cmd_speak(args) -> int:
    from .agents.speech_synthesizer import SynthesisError, get_speech_synthesizer

    phonetic = _transliterator(args.mode).transliterate(args.text)
    ssml = build_ssml(phonetic, pitch=get_settings().PROSODY_PITCH)
    print("[speak] Phonetic text:", phonetic)

    try:
        audio = get_speech_synthesizer().synthesize(ssml)
    except SynthesisError as e:
        print("[speak] Error:", e, file=sys.stderr)
        return 1

    try:
        Path(args.output).write_bytes(audio)
    except OSError as e:
        print("[speak] Error:", e, file=sys.stderr)
        return 1

    print(f"[speak] Audio saved to: {args.output}")
    return 0


def cmd_serve(args) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "sinhala_tts.main:app",
        host=args.host or settings.HOST,
        port=args.port or settings.PORT
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sinhala-tts",
        description="Sinhala phonetic text-to-speech"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, func, help_text in (
        ("transliterate", cmd_transliterate, "Print the Latin phonetic text"),
        ("ssml", cmd_ssml, "Print the SSML document"),
        ("speak", cmd_speak, "Synthesize speech to an MP3 file"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("text", help="Sinhala text")
        p.add_argument("--mode", choices=["longest", "literal"], default=None,
                       help="Transliteration mode (default: from settings)")
        p.set_defaults(func=func)

    sub.choices["speak"].add_argument("-o", "--output", default="output.mp3",
                                      help="Where to write the audio")

    serve = sub.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
