"""FastAPI application exposing the contract analysis pipeline."""

from datetime import datetime, timezone

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from contract_analyzer.analysis.analyzer import ContractAnalyzer
from contract_analyzer.analysis.error_mapper import error_for
from contract_analyzer.analysis.factory import AnalyzerFactory
from contract_analyzer.analysis.models import ErrorKind, PipelineError, UploadedArtifact
from contract_analyzer.config.settings import Settings
from contract_analyzer.logging.logger import Log

ANALYZE_PATH = "/api/analyze"


def create_app(
    settings: Settings | None = None,
    analyzer: ContractAnalyzer | None = None,
) -> FastAPI:
    """Build the application with its analyzer wired once.

    Settings are read here and stay immutable for the lifetime of the app.
    """
    settings = settings or Settings()
    app = FastAPI(
        title=settings.service_name,
        description="Risk analysis for uploaded plain-text contracts",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.analyzer = analyzer or AnalyzerFactory.create(settings)

    @app.exception_handler(RequestValidationError)
    async def invalid_upload_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        Log.warning(f"Rejected malformed upload request: {exc.errors()}")
        return _error_response(error_for(ErrorKind.MISSING_FILE))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        Log.error(f"Unhandled error on {request.url.path}: {exc!r}")
        return _error_response(error_for(ErrorKind.UNCLASSIFIED))

    @app.post(ANALYZE_PATH, summary="Analyze an uploaded contract")
    async def analyze_contract(
        request: Request,
        contract: UploadFile | None = File(None, description="Plain-text contract"),
    ) -> JSONResponse:
        max_bytes = request.app.state.settings.max_file_size_bytes
        artifact = await _read_artifact(contract, max_bytes)
        contract_analyzer: ContractAnalyzer = request.app.state.analyzer
        outcome = await run_in_threadpool(contract_analyzer.analyze, artifact)
        return JSONResponse(status_code=outcome.status, content=outcome.to_payload())

    @app.get(ANALYZE_PATH, summary="Service health check")
    def health_check(request: Request) -> JSONResponse:
        return JSONResponse(
            content={
                "status": "healthy",
                "service": request.app.state.settings.service_name,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    return app


def _error_response(error: PipelineError) -> JSONResponse:
    return JSONResponse(status_code=error.status, content=error.to_payload())


async def _read_artifact(upload: UploadFile | None, max_bytes: int) -> UploadedArtifact | None:
    """Read at most one byte past the size limit; that is enough to reject oversized files."""
    if upload is None:
        return None
    content = await upload.read(max_bytes + 1)
    return UploadedArtifact(
        filename=upload.filename or "",
        content_type=_media_type(upload.content_type),
        content=content,
    )


def _media_type(content_type: str | None) -> str:
    # "text/plain; charset=utf-8" is still plain text
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()
