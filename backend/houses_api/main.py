# backend/houses_api/main.py
from __future__ import annotations

import logging
from collections import defaultdict
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .db import dispose_engine, init_db
from .http_mapping import validation_problem
from .logging_config import configure_logging
from .middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_of
from .middleware.structured_logging import StructuredLoggingMiddleware
from .routers.bids import router as bids_router
from .routers.health import router as health_router
from .routers.houses import router as houses_router

log = logging.getLogger("houses_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if settings.auto_create_schema:
        await init_db()
    log.info("app started")
    yield
    await dispose_engine()
    log.info("app stopped")


def _field_name(loc: tuple) -> str:
    # ("body", "price") -> "price"; ("body",) -> "body"
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Parser-level failures share the rule-violation shape.

    A path id that is not an integer means the route does not exist for it, so
    it is reported as 404 rather than a payload problem.
    """
    errs = exc.errors()
    if any(tuple(e.get("loc", ()))[:1] == ("path",) for e in errs):
        return JSONResponse(status_code=404, content={"detail": "Not Found"})

    grouped: dict[str, list[str]] = defaultdict(list)
    for e in errs:
        grouped[_field_name(tuple(e.get("loc", ())))].append(str(e.get("msg", "invalid value")))
    return validation_problem(dict(grouped))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # storage failures and anything else the handlers do not turn into outcomes
    rid = request_id_of(request)
    log.exception(
        "unhandled exception",
        extra={"method": request.method, "path": request.url.path, "request_id": rid},
    )
    detail = str(exc) if settings.debug else "Internal Server Error"
    content = {"detail": detail}
    headers = {}
    if rid:
        # quote this id when reporting the failure
        content["request_id"] = rid
        headers[REQUEST_ID_HEADER] = rid
    return JSONResponse(status_code=500, content=content, headers=headers)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # RequestID is added last so it wraps the access log line and the id is set there
    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    prefix = settings.api_prefix
    app.include_router(health_router, prefix=prefix)
    app.include_router(houses_router, prefix=prefix)
    app.include_router(bids_router, prefix=prefix)

    return app


app = create_app()
