import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from audit_trail.config import settings
from audit_trail.middleware.rate_limit import limiter
from audit_trail.routers import versions
from audit_trail.services.version_store import VersionStore

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

INVALID_CONTENT_MESSAGE = 'Request body must contain a string field named "content".'


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Server is running on port %s", settings.port)
    logger.info("API endpoints available at http://localhost:%s/api", settings.port)
    yield
    logger.info("Audit trail API stopped, %s versions discarded", len(app.state.version_store))


app = FastAPI(title="Mini Audit Trail API", lifespan=lifespan)
app.state.version_store = VersionStore()
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(RequestValidationError)
async def invalid_request_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected request body", extra={"path": request.url.path, "errors": exc.errors()})
    return JSONResponse(status_code=400, content={"error": INVALID_CONTENT_MESSAGE})


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


def _cors_headers(request: Request) -> dict[str, str]:
    origin = request.headers.get("origin")
    origins = settings.cors_origins_list
    if origin is None:
        return {}
    if "*" in origins:
        return {"Access-Control-Allow-Origin": "*"}
    if origin in origins:
        return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    return {}


@app.exception_handler(Exception)
async def log_unhandled_exceptions(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception", extra={"path": request.url.path, "method": request.method})
    # ServerErrorMiddleware sits outside CORSMiddleware, so the 500 needs its own CORS headers
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error"},
        headers=_cors_headers(request),
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(versions.router)


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Mini Audit Trail Generator Backend API is running!"


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
