"""FastAPI application entry point."""

import sys

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from speech_common import ErrorResponse, setup_logging
from transcription_relay.dependencies import get_config
from transcription_relay.exceptions import MissingAudioFileError, RelayError
from transcription_relay.routes import health_router, index_router, transcribe_router

patch_all()

logger = setup_logging()

app = FastAPI(title="Speech to Text Relay")
app.add_middleware(
    CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"]
)
app.include_router(index_router)
app.include_router(health_router)
app.include_router(transcribe_router)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    """Renders relay errors as {error, message} bodies."""
    logger.warning(
        "Request rejected",
        extra={
            "path": request.url.path,
            "status_code": exc.status_code,
            "error": exc.error,
            "detail": exc.message,
        },
    )
    body = ErrorResponse(error=exc.error, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """An `audio` field that is not a file counts as a missing upload."""
    if any(tuple(error.get("loc", ()))[:2] == ("body", "audio") for error in exc.errors()):
        return await relay_error_handler(request, MissingAudioFileError())
    return await request_validation_exception_handler(request, exc)


def main():
    """Starts the relay with uvicorn."""
    config = get_config()
    if not config.assemblyai.api_key:
        logger.error("ASSEMBLYAI_API_KEY not found in environment variables")
        sys.exit(1)

    logger.info(
        "Speech to Text relay starting",
        extra={"host": config.server.host, "port": config.server.port},
    )
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()
