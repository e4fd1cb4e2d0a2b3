"""
Transcription router - API endpoint for audio transcription.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from voice_relay.transcription.schemas import ErrorResponse, TranscriptResponse
from voice_relay.transcription.service import TranscriptionRelay, get_transcription_relay

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transcribe", tags=["Transcription"])


@router.post(
    "",
    response_model=TranscriptResponse,
    status_code=status.HTTP_200_OK,
    summary="Transcribe audio file",
    description="Upload a recorded audio file and get the transcribed text using Deepgram.",
    responses={
        200: {"model": TranscriptResponse, "description": "Successful transcription"},
        400: {"model": ErrorResponse, "description": "Missing or invalid audio file"},
        404: {"model": ErrorResponse, "description": "No transcript could be generated"},
        500: {"model": ErrorResponse, "description": "Misconfiguration or transcription failure"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "multipart/form-data": {
                    "schema": {
                        "type": "object",
                        "required": ["audio"],
                        "properties": {
                            "audio": {"type": "string", "format": "binary"},
                        },
                    }
                }
            },
        }
    },
)
async def transcribe_audio(
        request: Request,
        relay: TranscriptionRelay = Depends(get_transcription_relay),
) -> JSONResponse:
    """
    Transcribe an uploaded audio file to text.

    Expects a multipart form with an `audio` field whose content type
    starts with `audio/`. Deepgram errors keep their status code.

    The form is parsed by the relay rather than declared as an `UploadFile`
    parameter, so the credential is checked before the body is read and a
    missing field answers 400 instead of FastAPI's 422.
    """
    logger.info("[TranscriptionRouter] Received transcription request")

    result = await relay.handle(request)

    if result.status_code == status.HTTP_200_OK:
        logger.info("[TranscriptionRouter] Transcription successful")
    else:
        logger.info(f"[TranscriptionRouter] Transcription failed with status {result.status_code}")

    return JSONResponse(status_code=result.status_code, content=result.content)
