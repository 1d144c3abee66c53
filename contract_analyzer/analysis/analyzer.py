"""AI-powered contract risk analyzer."""

from contract_analyzer.analysis.client_base import BaseCompletionClient
from contract_analyzer.analysis.error_mapper import map_error
from contract_analyzer.analysis.exceptions import MissingFileError
from contract_analyzer.analysis.input_validator import validate_artifact
from contract_analyzer.analysis.models import (
    AnalysisResult,
    PipelineError,
    PipelineOutcome,
    UploadedArtifact,
    ValidationLimits,
)
from contract_analyzer.analysis.prompt_builder import build_messages
from contract_analyzer.analysis.response_normalizer import normalize_completion
from contract_analyzer.analysis.schemas import SchemaDescriptor
from contract_analyzer.logging.logger import Log

_MAX_TEMPERATURE = 0.5


class ContractAnalyzer:
    """Runs the validate -> build prompt -> complete -> normalize pipeline.

    Holds only read-only configuration, so one instance serves concurrent
    requests.
    """

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        descriptor: SchemaDescriptor,
        system_prompt: str,
        temperature: float = 0.3,
        limits: ValidationLimits | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._descriptor = descriptor
        self._system_prompt = system_prompt
        self._temperature = max(0.0, min(_MAX_TEMPERATURE, temperature))
        self._limits = limits or ValidationLimits()

    @property
    def descriptor(self) -> SchemaDescriptor:
        return self._descriptor

    def analyze(self, artifact: UploadedArtifact | None) -> PipelineOutcome:
        """Analyze one uploaded artifact.

        Never raises: every failure is mapped to a PipelineError.
        """
        try:
            result = self._run(artifact)
        except Exception as exc:
            error = map_error(exc)
            self._log_failure(error, exc)
            return PipelineOutcome(error=error)
        return PipelineOutcome(result=result)

    def _run(self, artifact: UploadedArtifact | None) -> AnalysisResult:
        self._client.require_credential()
        # validate_artifact repeats this check; here it narrows the type for the log lines below
        if artifact is None:
            raise MissingFileError("No artifact in upload field")

        text = validate_artifact(artifact, self._limits)
        Log.info(
            f"Analyzing '{artifact.filename}' ({artifact.size} bytes, {len(text)} chars) "
            f"with variant {self._descriptor.name}"
        )

        messages = build_messages(text, self._descriptor, self._system_prompt)
        Log.debug(f"Analysis prompt:\n{messages.user}")

        raw = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            messages=messages.as_chat_messages(),
        )
        Log.debug(f"AI raw response:\n{raw}")

        result = normalize_completion(
            raw,
            self._descriptor,
            artifact,
            text_length=len(text),
        )
        Log.info(
            f"Analysis complete for '{artifact.filename}' with variant {self._descriptor.name}",
            variant=self._descriptor.name,
            upload_name=artifact.filename,
            upload_size=artifact.size,
        )
        return result

    @staticmethod
    def _log_failure(error: PipelineError, exc: Exception) -> None:
        message = f"Analysis failed [{error.kind.value}] status={error.status}: {exc}"
        if error.status >= 500:
            Log.error(message, kind=error.kind.value, status=error.status)
        else:
            Log.warning(message, kind=error.kind.value, status=error.status)
