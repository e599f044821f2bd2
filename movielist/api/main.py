"""
FastAPI application entry point for the Movie List API.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movielist.api.routers import auth, users, system
from movielist.api.validation import format_errors
from movielist.errors import AppError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movie List API",
    description="REST API for user accounts and per-user movie lists",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(system.router)


@app.exception_handler(AppError)
def handle_app_error(request: Request, exc: AppError):
    """Render any application error as {"detail": message} with its status."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.debug("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Malformed requests (e.g. unparsable JSON) are a 400 like any other bad body."""
    return JSONResponse(status_code=400, content={"detail": format_errors(exc.errors(), strip_prefix="body")})


@app.exception_handler(Exception)
def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie List API",
        "docs": "/docs",
        "health": "/api/health",
    }

