"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from api.routers import auth, bookmarks, health, users
from core.config import get_settings
from db.session import create_engine, create_session_factory
from services.exceptions import ServiceError

logger = logging.getLogger(__name__)

BANNER = "Entertainment App API created by Nadeem Shareef"
INTERNAL_ERROR_MESSAGE = "Internal server error"
MISSING_PAYLOAD_MESSAGE = "Missing payload"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    app_settings = get_settings()

    # Startup: one engine shared by all requests, sessions are per request
    engine = create_engine(app_settings.database_url)
    app.state.session_factory = create_session_factory(engine)
    logger.info("Database engine created")

    yield

    # Shutdown: release pooled connections
    await engine.dispose()
    logger.info("Database engine disposed")


def format_validation_errors(errors: list[dict]) -> str:
    """
    Join validation errors into one message.

    Each error reads "<field> <reason>", errors are separated by " , ".
    A request without a body yields "Missing payload". A body that is not
    valid JSON is reported without the character offset of the failure.
    """
    parts = []
    for error in errors:
        if error.get("type") == "json_invalid":
            parts.append(error["msg"])
            continue
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        if not loc and error.get("type") == "missing":
            return MISSING_PAYLOAD_MESSAGE
        field = ".".join(loc)
        parts.append(f"{field} {error['msg']}" if field else error["msg"])
    return " , ".join(parts)


app_settings = get_settings()

app = FastAPI(
    title="Entertainment App API Documentation",
    description="API endpoints for user signup, login and bookmarks of the Entertainment App.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    openapi_url="/docs.json",
    redoc_url=None,
    contact={
        "name": "Nadeem Shareef",
        "url": "https://github.com/shareef99",
    },
    servers=[
        {"url": "http://localhost:9000/", "description": "Local Server"},
        {"url": "https://entertainment-app-api-iymh.onrender.com/", "description": "Live Server"},
    ],
    openapi_tags=[
        {"name": "Users", "description": "Registered users"},
        {"name": "Signup", "description": "Account creation"},
        {"name": "Login", "description": "Credential checks"},
        {"name": "Bookmark", "description": "Per-user bookmarked items"},
    ],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Report every failing field in a single message."""
    return JSONResponse(
        status_code=400,
        content={"message": format_validation_errors(exc.errors()), "code": "validation_error"},
    )


@app.exception_handler(ServiceError)
async def service_exception_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    """Map typed service errors to their status code."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "code": exc.code},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Hide storage failures behind a generic 500."""
    logger.error(
        "Database error on %s %s", request.method, request.url.path, exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"message": INTERNAL_ERROR_MESSAGE, "code": "internal"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so no failure leaks details to the client."""
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"message": INTERNAL_ERROR_MESSAGE, "code": "internal"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", include_in_schema=False)
async def root() -> str:
    """Return the API banner."""
    return BANNER


app.include_router(health.router)
app.include_router(users.router)
app.include_router(auth.router)
app.include_router(bookmarks.router)
