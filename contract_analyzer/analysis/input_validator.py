"""Validates an uploaded artifact before any completion call is made."""

from contract_analyzer.analysis.exceptions import (
    FileTooLargeError,
    MissingFileError,
    TextTooLongError,
    TextTooShortError,
    UnsupportedTypeError,
)
from contract_analyzer.analysis.models import ExtractedText, UploadedArtifact, ValidationLimits

PLAIN_TEXT_MEDIA_TYPE = "text/plain"


def validate_artifact(
    artifact: UploadedArtifact | None,
    limits: ValidationLimits | None = None,
) -> ExtractedText:
    """Check the artifact and decode it into text.

    Checks run in a fixed order and the first failure wins: presence, byte
    size, media type, minimum trimmed length, maximum raw length.

    Raises:
        InputValidationError: the subclass matching the first failed check.
    """
    limits = limits or ValidationLimits()
    if artifact is None:
        raise MissingFileError("No artifact in upload field")
    if artifact.size > limits.max_file_size_bytes:
        raise FileTooLargeError(
            f"Artifact is {artifact.size} bytes (max {limits.max_file_size_bytes})"
        )
    if artifact.content_type != PLAIN_TEXT_MEDIA_TYPE:
        raise UnsupportedTypeError(f"Unsupported media type {artifact.content_type!r}")

    text = _decode(artifact.content)
    if len(text.strip()) < limits.min_text_chars:
        raise TextTooShortError(
            f"Trimmed text is {len(text.strip())} chars (min {limits.min_text_chars})"
        )
    if len(text) > limits.max_text_chars:
        raise TextTooLongError(f"Text is {len(text)} chars (max {limits.max_text_chars})")
    return ExtractedText(text=text)


def _decode(content: bytes) -> str:
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise UnsupportedTypeError(f"Artifact is not valid UTF-8 text: {exc}") from exc
