"""
Oracle program FastAPI server

Dry-run service for the price feed execution phase.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from oracle_program.config import ProgramSettings
from oracle_program.routers.execute import get_fetcher, get_settings
from oracle_program.routers.execute import router as execute_router

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: ProgramSettings) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings())
    yield
    if get_fetcher.cache_info().currsize:
        get_fetcher().close()
        get_fetcher.cache_clear()


app = FastAPI(
    title="Price Feed Oracle Program",
    description="Dry-run API for the price feed execution phase",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(execute_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": "Price Feed Oracle Program"}


@app.get("/health")
async def healthcheck():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "oracle-program",
        "proxy_base_url": get_settings().proxy_base_url,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
