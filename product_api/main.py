# product_api/main.py
from __future__ import annotations

import time
import uuid
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from product_api.core.logging import setup_logging
from product_api.core.settings import settings
from product_api.database import SessionLocal, engine, get_db, init_db_if_requested, mask_url
from product_api.routers.product import router as products_router
from product_api.services.errors import ProductError

# --- Logging ---
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("product-api")

tags_metadata = [
    {"name": "health", "description": "Liveness/Readiness checks"},
    {"name": "products", "description": "Product CRUD"},
]


def _get_req_id_from_headers(request: Request) -> str:
    # Prefer X-Request-ID, apoi X-Correlation-ID; dacă lipsesc, generează unul.
    return (
        request.headers.get("x-request-id")
        or request.headers.get("x-correlation-id")
        or uuid.uuid4().hex[:12]
    )


def _error(request: Request, status_code: int, detail) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail},
        headers={"X-Request-ID": _get_req_id_from_headers(request)},
    )


# --- Middleware func (registered after app is created) ---
async def request_context_mw(request: Request, call_next):
    """
    - Generează/propagă X-Request-ID
    - Limitează mărimea corpului când Content-Length e disponibil
    - X-Process-Time
    """
    req_id = _get_req_id_from_headers(request)

    if settings.MAX_BODY_SIZE_BYTES > 0:
        cl = request.headers.get("content-length")
        if cl is not None and cl.isdigit() and int(cl) > settings.MAX_BODY_SIZE_BYTES:
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"detail": "Payload too large", "max_bytes": settings.MAX_BODY_SIZE_BYTES},
                headers={"X-Request-ID": req_id},
            )

    start = time.perf_counter()
    response: Response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000

    response.headers.setdefault("X-Request-ID", req_id)
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-App-Version", settings.APP_VERSION)
    response.headers.setdefault("X-Process-Time", f"{duration_ms:.1f}ms")
    return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: tabele (doar dacă SQLALCHEMY_CREATE_ALL=1) + sanity check DB
    try:
        if init_db_if_requested():
            logger.info("Tables created from models (SQLALCHEMY_CREATE_ALL=1).")
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        logger.info("DB startup check OK (url=%s, dialect=%s)", mask_url(str(engine.url)), engine.dialect.name)
    except Exception:
        logger.exception("DB startup check FAILED")

    yield


# --- App factory (create app BEFORE registering middleware) ---
app = FastAPI(
    title=settings.APP_TITLE,
    version=settings.APP_VERSION,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.middleware("http")(request_context_mw)

# CORS din env: CORS_ORIGINS="http://localhost:3000,https://example.com"
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Process-Time", "X-App-Version"],
    )


# --- Exception handlers ---
@app.exception_handler(ProductError)
async def _product_error_handler(request: Request, exc: ProductError):
    # 400 invalid / 404 not found / 409 conflict, după tipul erorii
    if exc.status_code >= 500:
        logger.error("Product error (%s): %s", exc.kind, exc.detail)
    return _error(request, exc.status_code, exc.detail)


@app.exception_handler(RequestValidationError)
async def _validation_handler(request: Request, exc: RequestValidationError):
    # validarea la graniță (nume gol, preț <= 0, UUID invalid) => 400, înainte de domeniu
    return _error(request, status.HTTP_400_BAD_REQUEST, jsonable_encoder(exc.errors()))


# Prinde 404/405 Starlette și răspunde JSON unitar
@app.exception_handler(StarletteHTTPException)
async def _starlette_http_exc_handler(request: Request, exc: StarletteHTTPException):
    headers = dict(exc.headers or {})
    headers.setdefault("X-Request-ID", _get_req_id_from_headers(request))
    detail = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        detail = {"message": "Not Found", "path": str(request.url.path)}
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        detail = {"message": "Method Not Allowed", "path": str(request.url.path)}
    return JSONResponse(status_code=exc.status_code, content={"detail": detail}, headers=headers)


@app.exception_handler(Exception)
async def _unhandled_exc_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error: %s", exc)
    return _error(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


# --- Routes: health ---
@app.get("/", tags=["health"])
def root():
    return {"name": settings.APP_TITLE, "version": settings.APP_VERSION}


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}


@app.get("/health/db", tags=["health"])
def health_db(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("DB health check failed")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="DB not ready")
    return {"status": "ok", "db": "up", "dialect": db.get_bind().dialect.name}


# --- Routers ---
app.include_router(products_router)
