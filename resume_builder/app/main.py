import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_builder.app.api.routes.resume import router as resume_router
from resume_builder.app.api.routes.resume_children import router as resume_children_router
from resume_builder.app.core.config import get_settings
from resume_builder.app.core.exceptions import PersistenceError
from resume_builder.app.core.logging_config import configure_logging

log = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request validation failures as 400 with the list of field errors."""
    _msg = f"Rejected request to {request.url.path}: {len(exc.errors())} validation error(s)"
    log.debug(_msg)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def persistence_exception_handler(request: Request, exc: PersistenceError):
    """Log a storage failure with its traceback and answer with a generic 500."""
    _msg = f"Persistence failure on {request.method} {request.url.path}: {exc}"
    log.exception(_msg, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        None

    Returns:
        FastAPI: The configured FastAPI application instance.

    Notes:
        1. Configure logging from the settings.
        2. Initialize the FastAPI application with the title "Resume Builder API".
        3. Add CORS middleware for the configured origins.
        4. Map request validation errors to 400 and persistence errors to 500.
        5. Include the resume and resume entry routers under the API prefix.
        6. Define a health check endpoint at "/health" that returns a JSON object with status "ok".
        7. Log a success message indicating the application was created.

    """
    settings = get_settings()
    configure_logging(settings)

    _msg = "Creating FastAPI application"
    log.debug(_msg)

    app = FastAPI(title="Resume Builder API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PersistenceError, persistence_exception_handler)

    app.include_router(resume_router, prefix=settings.api_prefix)
    app.include_router(resume_children_router, prefix=settings.api_prefix)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    _msg = "FastAPI application created successfully"
    log.debug(_msg)
    return app


app = create_app()
