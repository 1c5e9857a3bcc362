"""
MifareAccess — MIFARE Classic sector access bits calculator.

FastAPI service providing APIs for:
- Listing the NXP data block and sector trailer access profiles
- Computing the 3 access bytes of a sector from its four profiles
- Assembling the complete 16-byte sector trailer block
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError

from mifare_access.config import API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT
from mifare_access.api import access

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting MifareAccess...")
    yield
    logger.info("Shutting down MifareAccess")


app = FastAPI(
    title="MifareAccess",
    description="MIFARE Classic sector access bits calculator",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(access.router)


@app.exception_handler(RequestValidationError)
async def log_validation_error(request: Request, exc: RequestValidationError):
    """Log rejected requests (unknown profiles, out-of-range fields) before the 422."""
    logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    return await request_validation_exception_handler(request, exc)


@app.get("/api/health")
async def health():
    return {"status": "ok"}


def run():
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
