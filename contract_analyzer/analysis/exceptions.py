from typing import ClassVar

from contract_analyzer.analysis.models import ErrorKind


class AnalysisError(Exception):
    """Base exception for all analysis pipeline failures.

    Every subclass carries the ErrorKind it maps to, so callers never need to
    inspect the message text to classify a failure.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.UNCLASSIFIED


class CredentialMissingError(AnalysisError):
    """Raised when no completion service API key is configured."""

    kind = ErrorKind.CREDENTIAL_MISSING


class InputValidationError(AnalysisError):
    """Raised when the uploaded artifact fails input validation."""


class MissingFileError(InputValidationError):
    kind = ErrorKind.MISSING_FILE


class FileTooLargeError(InputValidationError):
    kind = ErrorKind.FILE_TOO_LARGE


class UnsupportedTypeError(InputValidationError):
    kind = ErrorKind.UNSUPPORTED_TYPE


class TextTooShortError(InputValidationError):
    kind = ErrorKind.TEXT_TOO_SHORT


class TextTooLongError(InputValidationError):
    kind = ErrorKind.TEXT_TOO_LONG


class UpstreamError(AnalysisError):
    """Raised when the completion service fails in an unclassified way."""


class UpstreamRateLimitedError(UpstreamError):
    """Raised when the completion service reports rate limiting."""

    kind = ErrorKind.UPSTREAM_RATE_LIMITED


class UpstreamUnavailableError(UpstreamError):
    """Raised when the completion service is unreachable, times out or rejects the credential."""

    kind = ErrorKind.UPSTREAM_UNAVAILABLE

    def __init__(self, message: str, *, credential_rejected: bool = False) -> None:
        super().__init__(message)
        self.credential_rejected = credential_rejected


class MalformedOutputError(AnalysisError):
    """Raised when the completion is not a single JSON object."""

    kind = ErrorKind.MALFORMED_OUTPUT


class IncompleteOutputError(AnalysisError):
    """Raised when the completion is valid JSON but misses required fields."""

    kind = ErrorKind.INCOMPLETE_OUTPUT

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(f"Missing or invalid required fields: {', '.join(missing_fields)}")
        self.missing_fields = list(missing_fields)
