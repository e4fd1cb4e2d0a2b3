"""
Transcription module - Audio to text using Deepgram.
"""

from voice_relay.transcription.router import router as transcription_router

__all__ = ["transcription_router"]
