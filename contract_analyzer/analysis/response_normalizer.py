"""Turns a raw model completion into a validated AnalysisResult."""

import json
from datetime import datetime, timezone
from typing import Any

from contract_analyzer.analysis.exceptions import IncompleteOutputError, MalformedOutputError
from contract_analyzer.analysis.models import AnalysisResult, UploadedArtifact
from contract_analyzer.analysis.schemas import SchemaDescriptor


def normalize_completion(
    raw: str,
    descriptor: SchemaDescriptor,
    artifact: UploadedArtifact,
    text_length: int | None = None,
    now: datetime | None = None,
) -> AnalysisResult:
    """Parse, check and enrich a raw completion.

    The completion must be exactly one JSON object; no code-fence stripping or
    other leniency is applied. Every required field of ``descriptor`` must be
    present, non-empty and of the expected shape. All offending fields are
    reported in a single error.

    Metadata keys never overwrite a model-supplied key of the same name, so
    normalizing an already-normalized result is a no-op for its fields.

    Raises:
        MalformedOutputError: the completion is not a JSON object.
        IncompleteOutputError: one or more required fields are missing or invalid.
    """
    data = parse_json_object(raw)
    missing = find_missing_fields(data, descriptor)
    if missing:
        raise IncompleteOutputError(missing)

    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    data.setdefault("analysis_timestamp", timestamp)
    data.setdefault("file_name", artifact.filename)
    data.setdefault("file_size", artifact.size)
    if descriptor.include_text_length and text_length is not None:
        data.setdefault("text_length", text_length)
    return AnalysisResult(fields=data)


def parse_json_object(raw: str) -> dict[str, Any]:
    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        raise MalformedOutputError(f"Invalid JSON response: {exc}") from exc
    if not isinstance(parsed, dict):
        raise MalformedOutputError("JSON response must be an object")
    return parsed


def find_missing_fields(data: dict[str, Any], descriptor: SchemaDescriptor) -> list[str]:
    """Return required field names that are absent, empty or wrongly shaped, in schema order."""
    missing: list[str] = []
    for required in descriptor.required_fields:
        value = data.get(required.name)
        if _is_empty(value) or not required.shape.matches(value):
            missing.append(required.name)
    return missing


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return False
