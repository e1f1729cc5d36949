"""Zoomingo - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from zoomingo.core.config import get_settings
from zoomingo.db.session import engine
from zoomingo.routers import api
from zoomingo.services.errors import CatalogError, ClientError
from zoomingo.services.seeding import init_db

SERVER_ERROR_MSG = "Server error! Please try again later."

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db(engine)
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Meeting bingo: mark what happens on the call, first to bingo wins",
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(api.router)


@app.exception_handler(ClientError)
async def client_error_handler(request: Request, exc: ClientError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        field = errors[0].get("loc", ("",))[-1]
        message = f"Invalid {field}: {errors[0].get('msg', 'bad value')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(SQLAlchemyError)
@app.exception_handler(CatalogError)
async def storage_error_handler(request: Request, exc: Exception):
    logger.exception("Server error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": SERVER_ERROR_MSG})


@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": SERVER_ERROR_MSG})


@app.get("/health")
async def health():
    return {"status": "ok"}
