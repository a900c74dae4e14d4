"""
main.py - Main FastAPI Application

This file is the entry point for the speech server.
It creates the FastAPI application and includes the synthesis route.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from datetime import datetime

from .config import get_settings
from .api.v1 import synthesize
from dotenv import load_dotenv

# Explicitly load .env file so the Google client sees its credentials
load_dotenv()

# Load settings from .env file
settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create the FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Speaks Sinhala text through a Latin phonetic transliteration",
    version=settings.VERSION
)

# Add CORS middleware to allow browser clients to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(synthesize.router, tags=["Synthesis"])


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Reject malformed bodies (missing or non-string text) with 400."""
    logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.on_event("startup")
async def startup_event():
    """Runs when the application starts."""
    print("=" * 50)
    print(settings.APP_NAME)
    print("=" * 50)
    print(f"Started at: {datetime.now()}")
    print(f"Server is running on http://localhost:{settings.PORT}")
    print(f"Transliteration mode: {settings.TRANSLITERATION_MODE}")
    print(f"TTS provider: {settings.TTS_PROVIDER}")
    print("=" * 50)


@app.on_event("shutdown")
async def shutdown_event():
    """Runs when the application shuts down."""
    print(f"Shutting down {settings.APP_NAME}...")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("sinhala_tts.main:app", host=settings.HOST, port=settings.PORT)
