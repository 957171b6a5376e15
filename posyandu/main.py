import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from posyandu.api.v1 import routers
from posyandu.core.config import settings
from posyandu.core.exceptions import BadRequestException, InternalServerErrorException
from posyandu.db.session import close_db_pool, connect_db_pool
from posyandu.middleware.logging_middleware import RequestLoggingMiddleware

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_db_pool()
    yield
    await close_db_pool()


app = FastAPI(
    title="Posyanduku API",
    description="Pencatatan kader, ibu, anak, perkembangan dan imunisasi posyandu",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
)
app.add_middleware(RequestLoggingMiddleware)


def error_response(exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = BadRequestException().detail
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        detail = f"{detail} ({location}: {first.get('msg')})" if location else detail
    return error_response(BadRequestException(detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(InternalServerErrorException())


app.include_router(routers.router)


@app.get("/")
async def root():
    return {"message": "Selamat datang di Posyanduku API"}


def run():
    uvicorn.run("posyandu.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
