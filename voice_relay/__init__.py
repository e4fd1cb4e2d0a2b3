"""
Voice Relay Application.

A FastAPI backend for the browser voice recorder.
Forwards recorded audio to Deepgram and returns the transcript.
"""

__version__ = "0.1.0"
