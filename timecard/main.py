import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from timecard.api.routes import router as api_router
from timecard.services.config_service import ConfigService
from timecard.utils.logging_utils import configure_logging

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def create_app(config: Optional[ConfigService] = None) -> FastAPI:
    config = config or ConfigService()
    configure_logging(config.log_level)

    app = FastAPI(
        title="Timecard Excel Service",
        description="API for filling the weekly timecard spreadsheet template.",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(RequestValidationError)
    async def bad_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed payloads are rejected as bad requests, not 422.
        errors = exc.errors()
        message = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}" for error in errors
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": f"bad json: {message}"})

    @app.get("/health", response_class=PlainTextResponse, tags=["health"])
    def health_check() -> str:
        """Health check endpoint."""
        return "ok"

    app.include_router(api_router)

    logger.info("Timecard app initialized", extra={"cors_origins": config.cors_origins})
    return app


app = create_app()
