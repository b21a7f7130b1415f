"""
FastAPI app assembly: middleware, error mapping and router wiring.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.requests import Request
from starlette.responses import JSONResponse

from core.api.about import router as about_router
from core.api.auth import router as auth_router
from core.api.contact import router as contact_router
from core.api.health import router as health_router
from core.api.legal import router as legal_router
from core.api.projects import router as projects_router
from core.api.skills import router as skills_router
from core.api.testimonials import router as testimonials_router
from core.api.uploads import router as uploads_router
from core.db.database import engine
from core.db.migration_ledger import apply_migrations
from core.errors import (
    AuthError,
    ContentValidationError,
    NotFoundError,
    PayloadTooLargeError,
    StorageError,
)
from core.services.image_uploads import UPLOAD_URL_PREFIX
from core.services.validation import field_errors
from core.utils.settings import get_settings

# Configure logging
settings = get_settings()
LOG_LEVEL_NAME = settings.log_level
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s env=%s", LOG_LEVEL_NAME, settings.app_env)

# Writes that anonymous visitors are allowed to make
PUBLIC_WRITE_PATHS = {
    ("POST", "/api/contact"),
    ("POST", "/api/auth/login"),
}

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_migrate:
        applied = apply_migrations(engine)
        logger.info("migrations_applied: %s", applied or "none")
    yield


app = FastAPI(
    title="Portfolio Content Service",
    description="API for managing portfolio projects, skills, testimonials, contact messages and site content.",
    version="1.0.0",
    lifespan=lifespan,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware: reject anonymous writes before they reach a route
@app.middleware("http")
async def enforce_readonly_for_guests(request: Request, call_next):
    if request.method in ("POST", "PUT", "PATCH", "DELETE"):
        path = request.url.path or ""
        if path.startswith("/api/") and (request.method, path.rstrip("/")) not in PUBLIC_WRITE_PATHS:
            h = request.headers
            bearer = (h.get("authorization") or "").lower().startswith("bearer ")
            cookie = request.cookies.get(settings.session_cookie_name)
            if not bearer and not cookie:
                return JSONResponse(
                    {"error": "Authentication required"},
                    status_code=status.HTTP_401_UNAUTHORIZED,
                )
    return await call_next(request)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    if settings.is_production:
        response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
    return response


@app.exception_handler(ContentValidationError)
async def content_validation_error_handler(request: Request, exc: ContentValidationError):
    return JSONResponse(
        {"error": "Validation failed", "fields": [f.as_dict() for f in exc.fields]},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        {"error": "Validation failed", "fields": [f.as_dict() for f in field_errors(exc.errors())]},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    return JSONResponse({"error": str(exc)}, status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(AuthError)
async def auth_error_handler(request: Request, exc: AuthError):
    return JSONResponse({"error": str(exc)}, status_code=status.HTTP_401_UNAUTHORIZED)


@app.exception_handler(PayloadTooLargeError)
async def payload_too_large_handler(request: Request, exc: PayloadTooLargeError):
    return JSONResponse({"error": str(exc)}, status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    return JSONResponse({"error": "Storage failure"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


app.include_router(auth_router)
app.include_router(projects_router)
app.include_router(skills_router)
app.include_router(testimonials_router)
app.include_router(contact_router)
app.include_router(about_router)
app.include_router(legal_router)
app.include_router(uploads_router)
app.include_router(health_router)

os.makedirs(settings.upload_dir, exist_ok=True)
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=settings.upload_dir), name="uploads")
