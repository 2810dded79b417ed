import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from src.server import config
from src.server.cors import PermissiveCORSMiddleware
from src.shared.schemas.legal_config import LegalConfig
from src.shared.utils.config import ACCESS_LOG, get_server_config
from src.shared.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Starting server, serving legal config at "
        f"{config.API_PREFIX}{config.CONFIG_ENDPOINT_PATH}"
    )
    try:
        yield
    finally:
        logger.info("Shutting down server...")


# Only the config route is exposed; the generated docs pages are turned off.
app = FastAPI(
    title=config.API_TITLE,
    version=config.API_VERSION,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Write one access log line per request, turning handler faults into 500s.

    Runs inside the CORS middleware so error responses still carry the
    allow-origin header.
    """
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(
            f"Unhandled error in {request.method} {request.url.path}: {e}",
            exc_info=e,
        )
        response = JSONResponse(
            status_code=500,
            content={config.PAYLOAD_KEY_DETAIL: config.ERROR_MSG_INTERNAL},
        )
    if ACCESS_LOG:
        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({duration_ms:.2f} ms)"
        )
    return response


# Added last so it wraps every other middleware.
# Any origin may read the config; no cookies or auth headers are involved.
app.add_middleware(
    PermissiveCORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_credentials=config.CORS_ALLOW_CREDENTIALS,
    allow_methods=config.CORS_ALLOWED_METHODS,
    allow_headers=config.CORS_ALLOWED_HEADERS,
    max_age=config.CORS_MAX_AGE_SECONDS,
)


def build_legal_config() -> LegalConfig:
    """Return the legal constants served by the API."""
    return LegalConfig.from_defaults()


router = APIRouter(prefix=config.API_PREFIX)


@router.get(config.CONFIG_ENDPOINT_PATH, response_model=LegalConfig)
async def get_config() -> LegalConfig:
    """Get the legal and financial constants used by the calculators."""
    return build_legal_config()


app.include_router(router)


def run() -> None:
    """Bind uvicorn on the configured host and port and serve the app."""
    server_config = get_server_config()
    logger.info(
        f"Listening on {server_config['host']}:{server_config['port']} "
        f"(reload={server_config['reload']})"
    )
    uvicorn.run(
        "src.server.server:app" if server_config["reload"] else app,
        host=server_config["host"],
        port=server_config["port"],
        reload=server_config["reload"],
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    run()
