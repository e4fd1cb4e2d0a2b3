"""
Deepgram response helpers.

Pure functions that turn Deepgram response bodies into relay values.
"""

import json
from dataclasses import dataclass
from typing import Any, Union

GENERIC_UPSTREAM_ERROR = "Deepgram API error"


@dataclass(frozen=True)
class ParsedError:
    """Error body that decoded as JSON."""

    message: str


@dataclass(frozen=True)
class RawText:
    """Error body that could not be decoded as JSON."""

    text: str


UpstreamErrorBody = Union[ParsedError, RawText]


def extract_transcript(payload: Any) -> str | None:
    """
    Extract the transcript from a prerecorded-audio response.

    Follows results.channels[0].alternatives[0].transcript.

    Returns:
        The transcript text, or None when the path is absent or the text is empty.
    """
    results = payload.get("results") if isinstance(payload, dict) else None
    channels = results.get("channels") if isinstance(results, dict) else None
    channel = channels[0] if isinstance(channels, list) and channels else None
    alternatives = channel.get("alternatives") if isinstance(channel, dict) else None
    alternative = alternatives[0] if isinstance(alternatives, list) and alternatives else None
    transcript = alternative.get("transcript") if isinstance(alternative, dict) else None

    if not isinstance(transcript, str) or not transcript:
        return None
    return transcript


def parse_error_body(text: str) -> UpstreamErrorBody:
    """
    Classify a non-success response body.

    A JSON object yields its `error` field, else its `message` field,
    else the generic message. Bodies that are not JSON (or are JSON null)
    are kept verbatim.
    """
    try:
        data = json.loads(text)
    except ValueError:
        return RawText(text)

    if data is None:
        return RawText(text)
    if not isinstance(data, dict):
        return ParsedError(GENERIC_UPSTREAM_ERROR)

    message = data.get("error") or data.get("message") or GENERIC_UPSTREAM_ERROR
    return ParsedError(message if isinstance(message, str) else json.dumps(message))


def error_message(body: UpstreamErrorBody) -> str:
    """Render a classified error body as the caller-facing message."""
    match body:
        case ParsedError(message=message):
            return message
        case RawText(text=text):
            return f"{GENERIC_UPSTREAM_ERROR}: {text}"
    raise TypeError(f"Unsupported error body: {body!r}")
