from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from resume_analyzer.api.errors import register_error_handlers
from resume_analyzer.api.routes import router
from resume_analyzer.config.settings import Settings
from resume_analyzer.logging.logger import Log
from resume_analyzer.processor.processor import Processor, build_processor


def create_app(settings: Settings, processor: Processor | None = None) -> FastAPI:
    """Build the HTTP application around a single settings instance.

    ``processor`` defaults to the adapters selected by ``settings``; tests pass
    one wired with fakes.
    """
    app = FastAPI(title="Resume Analyzer")
    app.state.settings = settings
    app.state.processor = processor if processor is not None else build_processor(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        Log.debug(f"Static directory {static_dir} not found, static files disabled")
    return app
