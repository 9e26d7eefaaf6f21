"""FastAPI application entry point."""

import asyncio
import contextlib
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from formrelay import __version__
from formrelay.config import settings
from formrelay.exceptions import FormRelayError, error_response, formrelay_exception_handler
from formrelay.middleware import OriginPolicyMiddleware
from formrelay.routers import careers, contact, health
from formrelay.services.mailer import Mailer
from formrelay.utils.logger import get_logger, setup_logging

setup_logging(settings)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Own the mail transport for the lifetime of the process.

    Startup creates the Mailer and verifies it in the background without
    waiting for the result; shutdown cancels a verification still in flight.
    """
    mailer = Mailer(settings)
    app.state.mailer = mailer
    verify_task = asyncio.create_task(mailer.verify())

    logger.info("Server running on port %s", settings.port)
    logger.info("Email user: %s", "Configured" if settings.email_user else "NOT SET")

    yield

    if not verify_task.done():
        verify_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await verify_task


app = FastAPI(
    title="RSN Backend API",
    description="Relays careers and contact form submissions by email",
    version=__version__,
    lifespan=lifespan,
)

# CORS headers for allow-listed origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Added last so it runs first: rejects unlisted origins and answers preflights
app.add_middleware(OriginPolicyMiddleware, allowed_origins=settings.allowed_origins)

app.add_exception_handler(FormRelayError, formrelay_exception_handler)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors; unmatched paths and methods are reported as not found."""
    if exc.status_code in (404, 405):
        return error_response(404, "Endpoint not found")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Server error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(500, "Internal server error")


# Mount routers
app.include_router(health.router)
app.include_router(careers.router, prefix="/api")
app.include_router(contact.router, prefix="/api")
