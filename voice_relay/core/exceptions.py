"""
Custom exceptions for the application.

Every relay error carries the HTTP status code it is reported with.
"""

from fastapi import status


class RelayError(Exception):
    """Base exception for the transcription relay."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "An error occurred", status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


# ═══════════════════════════════════════════════════════════════════════════
# CONFIGURATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════


class ConfigurationError(RelayError):
    """Raised when the Deepgram credential is not configured."""
    pass


# ═══════════════════════════════════════════════════════════════════════════
# REQUEST EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════


class AudioValidationError(RelayError):
    """Raised when the submitted audio is missing or unusable."""

    status_code = status.HTTP_400_BAD_REQUEST


# ═══════════════════════════════════════════════════════════════════════════
# TRANSCRIPTION EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════


class UpstreamError(RelayError):
    """Raised when Deepgram answers with a non-success status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message, status_code=status_code)


class EmptyTranscriptError(RelayError):
    """Raised when Deepgram succeeds but returns no transcript text."""

    status_code = status.HTTP_404_NOT_FOUND
