from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds the analysis pipeline can report."""

    CREDENTIAL_MISSING = "CredentialMissing"
    MISSING_FILE = "MissingFile"
    FILE_TOO_LARGE = "FileTooLarge"
    UNSUPPORTED_TYPE = "UnsupportedType"
    TEXT_TOO_SHORT = "TextTooShort"
    TEXT_TOO_LONG = "TextTooLong"
    UPSTREAM_RATE_LIMITED = "UpstreamRateLimited"
    UPSTREAM_UNAVAILABLE = "UpstreamUnavailable"
    MALFORMED_OUTPUT = "MalformedOutput"
    INCOMPLETE_OUTPUT = "IncompleteOutput"
    UNCLASSIFIED = "Unclassified"


@dataclass(frozen=True)
class UploadedArtifact:
    """Raw uploaded file as received from the caller."""

    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ExtractedText:
    """Decoded artifact text that passed input validation."""

    text: str

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class ValidationLimits:
    max_file_size_bytes: int = 10 * 1024 * 1024
    min_text_chars: int = 50
    max_text_chars: int = 50_000


@dataclass(frozen=True)
class AnalysisRequestMessages:
    """Ordered system/user message pair sent to the completion service."""

    system: str
    user: str

    def as_chat_messages(self) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


@dataclass(frozen=True)
class AnalysisResult:
    """Validated model output enriched with request metadata."""

    fields: dict[str, object]

    def to_dict(self) -> dict[str, object]:
        return dict(self.fields)


@dataclass(frozen=True)
class PipelineError:
    """Caller-facing failure: kind, templated message and HTTP status."""

    kind: ErrorKind
    message: str
    status: int

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message}


@dataclass(frozen=True)
class PipelineOutcome:
    """Terminal value of one pipeline run: exactly one of result or error is set."""

    result: AnalysisResult | None = None
    error: PipelineError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status(self) -> int:
        return 200 if self.error is None else self.error.status

    def to_payload(self) -> dict[str, object]:
        if self.error is not None:
            return dict(self.error.to_payload())
        if self.result is None:
            raise ValueError("PipelineOutcome must carry a result or an error")
        return self.result.to_dict()
