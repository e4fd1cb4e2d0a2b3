"""
Transcription relay - Business logic for audio transcription.
Forwards uploaded audio to the Deepgram API and normalizes the result.
"""

import logging
from typing import Dict, Optional

import httpx
from fastapi import Depends, Request
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException

from voice_relay.config import Settings, get_settings
from voice_relay.core.exceptions import (
    AudioValidationError,
    ConfigurationError,
    EmptyTranscriptError,
    RelayError,
    UpstreamError,
)
from voice_relay.transcription.deepgram import error_message, extract_transcript, parse_error_body
from voice_relay.transcription.schemas import AudioSubmission, RelayResponse

logger = logging.getLogger(__name__)

AUDIO_FIELD = "audio"
MASKED_AUTHORIZATION = "Token [API Key Masked]"


class TranscriptionRelay:
    """Relays one audio upload to Deepgram and returns a transcript or an error."""

    def __init__(
        self,
        api_key: Optional[str],
        api_url: str,
        query_params: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.query_params = dict(query_params or {})
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "TranscriptionRelay":
        return cls(
            api_key=settings.deepgram_api_key,
            api_url=settings.deepgram_api_url,
            query_params=settings.deepgram_query_params,
            timeout=settings.deepgram_timeout,
            transport=transport,
        )

    async def handle(self, request: Request) -> RelayResponse:
        """
        Run the full relay for an incoming multipart request.

        Never raises: every failure is converted into an error response.

        Args:
            request: Incoming request carrying the `audio` form field

        Returns:
            RelayResponse with either a transcript or an error message
        """
        try:
            self._require_credential()

            async with request.form() as form:
                submission = await self._read_submission(form.get(AUDIO_FIELD))

            transcript = await self.transcribe(submission)
            return RelayResponse.success(transcript)

        except RelayError as e:
            logger.error(
                f"[TranscriptionRelay] {type(e).__name__} ({e.status_code}): {e.message}"
            )
            return RelayResponse.failure(e.message, e.status_code)

        except Exception as e:
            logger.exception(f"[TranscriptionRelay] Server-side transcription error: {e!r}")
            return RelayResponse.failure(_fault_message(e), 500)

    async def transcribe(self, submission: AudioSubmission) -> str:
        """
        Send validated audio to Deepgram and extract the transcript.

        Raises:
            ConfigurationError: If no API key is configured
            UpstreamError: If Deepgram answers with a non-success status
            EmptyTranscriptError: If Deepgram returns no transcript text
        """
        self._require_credential()

        url = httpx.URL(self.api_url, params=self.query_params)
        logger.info(f"[TranscriptionRelay] Sending request to Deepgram: {url}")
        logger.info(
            f"[TranscriptionRelay] Headers: "
            f"{self._headers(submission.content_type, masked=True)}"
        )
        logger.info(f"[TranscriptionRelay] Body size: {submission.size} bytes")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                self.api_url,
                params=self.query_params,
                headers=self._headers(submission.content_type),
                content=submission.data,
            )

        if not response.is_success:
            error_text = response.text
            logger.error(
                f"[TranscriptionRelay] Deepgram API returned an error: "
                f"{response.status_code} - {error_text}"
            )
            raise UpstreamError(
                error_message(parse_error_body(error_text)),
                status_code=response.status_code,
            )

        payload = response.json()
        if payload is None:
            raise ValueError("Deepgram returned a null response body")

        transcript = extract_transcript(payload)
        if transcript is None:
            logger.warning("[TranscriptionRelay] Deepgram returned no transcription text")
            raise EmptyTranscriptError("No transcript could be generated from the audio.")

        logger.info(f"[TranscriptionRelay] Transcription successful, length: {len(transcript)} chars")
        return transcript

    def _require_credential(self) -> None:
        if not self.api_key:
            raise ConfigurationError(
                "Deepgram API Key not configured. "
                "Please set DEEPGRAM_API_KEY environment variable."
            )

    def _headers(self, content_type: str, masked: bool = False) -> Dict[str, str]:
        return {
            "Authorization": MASKED_AUTHORIZATION if masked else f"Token {self.api_key}",
            "Content-Type": content_type,
        }

    async def _read_submission(self, audio: object) -> AudioSubmission:
        """Validate the form value and read it fully into memory."""
        if not isinstance(audio, UploadFile):
            raise AudioValidationError("No audio file provided.")

        content_type = audio.content_type or ""
        if not content_type.startswith("audio/"):
            logger.warning(f"[TranscriptionRelay] Invalid file type provided: {content_type!r}")
            raise AudioValidationError("Invalid file type. Only audio files are supported.")

        data = await audio.read()
        logger.info(
            f"[TranscriptionRelay] Received audio file: {audio.filename}, "
            f"{content_type}, {len(data)} bytes"
        )
        if not data:
            raise AudioValidationError("Audio file is empty.")

        return AudioSubmission(filename=audio.filename, content_type=content_type, data=data)


def _fault_message(exc: Exception) -> str:
    """Caller-facing message for an unexpected exception."""
    if isinstance(exc, HTTPException):
        # Raised by request.form() for malformed multipart bodies
        return f"Transcription failed: {exc.detail}"
    if str(exc):
        return f"Transcription failed: {exc}"
    return f"An unknown error occurred: {exc!r}"


def get_transcription_relay(
    settings: Settings = Depends(get_settings),
) -> TranscriptionRelay:
    """Dependency provider for TranscriptionRelay, one per request."""
    return TranscriptionRelay.from_settings(settings)
