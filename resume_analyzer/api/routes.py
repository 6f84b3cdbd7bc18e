from typing import Annotated, Any

from fastapi import APIRouter, File, Form, Request, UploadFile

from resume_analyzer.api.errors import MissingFileError
from resume_analyzer.config.settings import Settings
from resume_analyzer.processor.models import Upload
from resume_analyzer.processor.processor import Processor

router = APIRouter()


@router.get("/")
def index() -> dict[str, str]:
    return {"message": "this message is from server"}


# Sync handler; FastAPI runs it in its threadpool.
@router.post("/resume/upload")
def upload_resume(
    request: Request,
    resume: Annotated[UploadFile | str | None, File()] = None,
    target_role: Annotated[str | None, Form(alias="targetRole")] = None,
) -> dict[str, Any]:
    # A plain text field named "resume" is not an upload.
    if resume is None or isinstance(resume, str):
        raise MissingFileError()

    settings: Settings = request.app.state.settings
    processor: Processor = request.app.state.processor
    upload = Upload(
        content=resume.file.read(),
        file_name=resume.filename or "",
        target_role=target_role or settings.default_target_role,
    )

    context = processor.process(upload)
    return {
        "targetRole": upload.target_role,
        "fileName": upload.file_name,
        "extractedChars": context.extraction.char_count,  # type: ignore[union-attr]
        "analysis": context.analysis,
    }
