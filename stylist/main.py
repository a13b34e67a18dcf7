import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from stylist.core.config import settings
from stylist.core.logging_config import configure_logging
from stylist.core.errors import (
    ConfigurationError,
    ContextParseError,
    InvalidInput,
    StylistError,
    TransportError,
)
from stylist.routers import health
from stylist.routers import style as style_router

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME)

# CORS
origins = settings.cors_origin_list
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(style_router.router, prefix=settings.API_PREFIX)

_STATUS_BY_ERROR = [
    (InvalidInput, 400),
    (ContextParseError, 422),
    (TransportError, 502),
    (ConfigurationError, 503),
]

logger = logging.getLogger("stylist.requests")


@app.exception_handler(StylistError)
async def stylist_error_handler(request: Request, exc: StylistError):
    status = next((code for cls, code in _STATUS_BY_ERROR if isinstance(exc, cls)), 500)
    logger.warning("%s %s failed status=%s error=%s", request.method, request.url.path, status, exc.code)
    return JSONResponse(status_code=status, content={"detail": exc.message, "error": exc.code})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
async def root():
    return {"name": settings.APP_NAME, "env": settings.APP_ENV}
