"""
FastAPI application factory.

* Registers the ``/distance`` route.
* Maps domain errors to plain-text 400 / 500 responses (newline-terminated).
* Interactive docs and the OpenAPI schema are not served.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from src.api.routes import distance
from src.config import settings
from src.domain.errors import InvalidParameterError, ResponseSerializationError

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting server on http://localhost:%d", settings.port)
    yield


async def invalid_parameter_handler(request: Request, exc: InvalidParameterError):
    logger.debug("Rejected %s: %s", exc.param, exc.message)
    return PlainTextResponse(exc.message + "\n", status_code=400)


async def serialization_error_handler(
    request: Request, exc: ResponseSerializationError
):
    logger.error("Failed to encode response for %s: %s", request.url, exc, exc_info=exc)
    return PlainTextResponse("Failed to marshal JSON response\n", status_code=500)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Great-Circle Distance API",
        description="Haversine distance between two coordinates, in meters and km.",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_exception_handler(InvalidParameterError, invalid_parameter_handler)
    app.add_exception_handler(ResponseSerializationError, serialization_error_handler)

    app.include_router(distance.router)

    return app
