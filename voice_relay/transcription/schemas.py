"""
Pydantic schemas for transcription module.
DTOs for API input/output and the relay's internal values.
"""

from typing import Any, Dict

from fastapi import status
from pydantic import BaseModel, ConfigDict, Field


class AudioSubmission(BaseModel):
    """Validated audio upload, held fully in memory."""

    model_config = ConfigDict(frozen=True)

    filename: str | None = None
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class TranscriptResponse(BaseModel):
    """Response DTO for a successful transcription."""

    transcript: str = Field(..., description="Transcribed text from audio")

    model_config = {
        "json_schema_extra": {
            "example": {"transcript": "Hello world, this is a test recording."}
        }
    }


class ErrorResponse(BaseModel):
    """Error response for every relay failure."""

    error: str = Field(..., description="Error message")

    model_config = {
        "json_schema_extra": {
            "example": {"error": "No transcript could be generated from the audio."}
        }
    }


class RelayResponse(BaseModel):
    """Status code and JSON body returned by the relay."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: TranscriptResponse | ErrorResponse

    @classmethod
    def success(cls, transcript: str) -> "RelayResponse":
        return cls(
            status_code=status.HTTP_200_OK,
            body=TranscriptResponse(transcript=transcript),
        )

    @classmethod
    def failure(cls, message: str, status_code: int) -> "RelayResponse":
        return cls(status_code=status_code, body=ErrorResponse(error=message))

    @property
    def content(self) -> Dict[str, Any]:
        return self.body.model_dump()
