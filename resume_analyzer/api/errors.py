from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from resume_analyzer.analysis.exceptions import AiAnalysisError
from resume_analyzer.extraction.exceptions import ExtractionError
from resume_analyzer.logging.logger import Log

AI_FAILURE_MESSAGE = "AI analysis failed. Please try again."


class MissingFileError(Exception):
    """Raised when the upload request carries no ``resume`` file."""

    def __init__(self) -> None:
        super().__init__("File not uploaded")


async def _missing_file_handler(request: Request, exc: MissingFileError) -> JSONResponse:
    Log.warning(f"{request.method} {request.url.path}: no resume file in request")
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _extraction_error_handler(request: Request, exc: ExtractionError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _analysis_error_handler(request: Request, exc: AiAnalysisError) -> JSONResponse:
    # Provider detail stays in the log.
    Log.exception(f"AI analysis error: {exc}")
    return JSONResponse(status_code=500, content={"error": AI_FAILURE_MESSAGE})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MissingFileError, _missing_file_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ExtractionError, _extraction_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(AiAnalysisError, _analysis_error_handler)  # type: ignore[arg-type]
