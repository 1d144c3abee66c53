"""Maps any pipeline failure onto a stable caller-facing error."""

from contract_analyzer.analysis.exceptions import (
    AnalysisError,
    IncompleteOutputError,
    UpstreamUnavailableError,
)
from contract_analyzer.analysis.models import ErrorKind, PipelineError

_TEMPLATES: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.CREDENTIAL_MISSING: (500, "OpenAI API key not configured"),
    ErrorKind.MISSING_FILE: (400, "No file uploaded"),
    ErrorKind.FILE_TOO_LARGE: (400, "File too large. Maximum size is 10MB."),
    ErrorKind.UNSUPPORTED_TYPE: (
        400,
        "Only .txt files are supported currently. PDF and DOC support coming soon!",
    ),
    ErrorKind.TEXT_TOO_SHORT: (
        400,
        "Contract text is too short or empty. Please upload a valid contract.",
    ),
    ErrorKind.TEXT_TOO_LONG: (
        400,
        "Contract is too long. Please upload a contract under 50,000 characters.",
    ),
    ErrorKind.UPSTREAM_RATE_LIMITED: (
        429,
        "Service temporarily busy. Please try again in a moment.",
    ),
    ErrorKind.UPSTREAM_UNAVAILABLE: (
        503,
        "Analysis service temporarily unavailable. Please try again later.",
    ),
    ErrorKind.MALFORMED_OUTPUT: (500, "Analysis formatting error. Please try again."),
    ErrorKind.INCOMPLETE_OUTPUT: (
        500,
        "Analysis incomplete: missing or invalid fields: {fields}. Please try again.",
    ),
    ErrorKind.UNCLASSIFIED: (500, "Analysis failed. Please try again or contact support."),
}

_CREDENTIAL_REJECTED = (500, "Invalid API key configuration")


def map_error(exc: BaseException) -> PipelineError:
    """Translate an exception into a PipelineError.

    Total over all exceptions: anything that is not an AnalysisError is
    Unclassified. Messages come from fixed templates only; the exception text
    is never forwarded.
    """
    if not isinstance(exc, AnalysisError):
        return error_for(ErrorKind.UNCLASSIFIED)
    if isinstance(exc, UpstreamUnavailableError) and exc.credential_rejected:
        status, message = _CREDENTIAL_REJECTED
        return PipelineError(kind=exc.kind, message=message, status=status)
    if isinstance(exc, IncompleteOutputError):
        return error_for(exc.kind, fields=", ".join(exc.missing_fields))
    return error_for(exc.kind)


def error_for(kind: ErrorKind, fields: str = "required fields") -> PipelineError:
    status, template = _TEMPLATES[kind]
    return PipelineError(kind=kind, message=template.format(fields=fields), status=status)
