import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.config import get_settings
from backend.distribution.routes import router as distribution_router
from backend.errors import AppError, InternalError, NotFoundError
from backend.summary.routes import router as summary_router

settings = get_settings()
logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging(settings.log_level)

app = FastAPI(title="Meeting Summarizer API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def reject_disallowed_origins(request: Request, call_next):
    # requests without an Origin header (curl, server-to-server) pass through
    origin = request.headers.get("origin")
    if origin and origin not in settings.allowed_origins:
        logger.warning("Rejected request from origin %s", origin)
        return _envelope(403, f"CORS not allowed for origin: {origin}")
    return await call_next(request)


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code < 500:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return _envelope(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return _envelope(404, NotFoundError().message)
    return _envelope(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return _envelope(400, f"Invalid request: {detail}")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    response = _envelope(500, InternalError().message)
    # this handler runs outside CORSMiddleware, so the headers are added here
    origin = request.headers.get("origin")
    if origin and origin in settings.allowed_origins:
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Vary"] = "Origin"
    return response


app.include_router(summary_router, prefix="/api", tags=["summary"])
app.include_router(distribution_router, prefix="/api", tags=["distribution"])


@app.get("/api/health")
def health_check():
    return {"status": "Server is running"}


def run() -> None:
    uvicorn.run("backend.main:app", host=settings.api_host, port=settings.api_port, reload=settings.api_debug)


if __name__ == "__main__":
    run()
