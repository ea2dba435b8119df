"""
FastAPI Application Entry Point

This module initializes the FastAPI application and configures:
- The management and redirect routes
- Middleware (logging, CORS)
- Plain-text error responses
- Engine cleanup on shutdown

Every path that is not reserved (management, health) is a redirect key,
so the interactive API docs are disabled to keep /docs, /redoc and
/openapi.json free for mappings.

Run with: uvicorn redirector.main:app
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from redirector.api import endpoints
from redirector.core.exceptions import RedirectorException, redirector_exception_handler
from redirector.core.setting import settings
from redirector.db.session import dispose_engine
from redirector.middleware.logging import add_logging_middleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """The store is provisioned externally; only connections are cleaned up."""
    yield
    await dispose_engine()


app = FastAPI(
    title=settings.SERVICE_NAME,
    description="Maps short paths to target URLs and serves redirects",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    lifespan=lifespan,
)

app.add_exception_handler(RedirectorException, redirector_exception_handler)

add_logging_middleware(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Defined before the router so the catch-all redirect route does not shadow it
@app.get(settings.HEALTH_PATH, tags=["Health"])
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns:
        Health status of the service
    """
    return {"status": "healthy"}


app.include_router(endpoints.router, tags=["Redirects"])
