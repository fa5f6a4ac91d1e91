# taskhub/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskhub.config import settings
from taskhub.core.db import init_db, close_db
from taskhub.core.errors import BadRequestError, DomainError, InternalServerError, error_body

from taskhub.api.v1.routers import auth, users, collections, tasks

logger = logging.getLogger("uvicorn.error")
logger.setLevel(settings.log_level)

app = FastAPI(title=settings.APP_NAME)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(error: DomainError) -> JSONResponse:
    return JSONResponse(status_code=int(error.status_code), content=error.to_dict())


def _validation_message(exc: RequestValidationError) -> str:
    """First validation problem as "<location> <reason>", e.g. "body/name Field required"."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = "/".join(str(part) for part in first.get("loc", ()))
    return f"{location} {first.get('msg', 'is invalid')}".strip()


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    if int(exc.status_code) >= 500:
        logger.error("[api] %s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return _error_response(BadRequestError(_validation_message(exc)))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.status_code, str(exc.detail)))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("[api] unhandled error on %s %s", request.method, request.url.path)
    return _error_response(InternalServerError("Internal Server Error"))


@app.on_event("startup")
async def on_startup():
    await init_db(generate_schemas=settings.generate_schemas)


@app.on_event("shutdown")
async def on_shutdown():
    await close_db()


# REST
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(collections.router)
app.include_router(tasks.router)


@app.get("/healthz")
def healthz():
    return {"ok": True}
