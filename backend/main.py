from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
import logging
import sys

from config import app_config
from constants import LogConfig
from dtos.response import HealthResponse
from init_db import init_database
from api import tutorials

SERVICE_NAME = "Tutorials API"
SERVICE_VERSION = "1.0.0"


def configure_logging():
    """
    Attach a rotating file handler and a console handler to the root logger.

    Returns:
        Path of the log file
    """
    app_config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = app_config.LOG_DIR / LogConfig.FILE_NAME
    log_formatter = logging.Formatter(LogConfig.FORMAT)

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LogConfig.MAX_BYTES,
        backupCount=LogConfig.BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(app_config.LOG_LEVEL)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(app_config.LOG_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(app_config.LOG_LEVEL)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    return log_file


log_file = configure_logging()
logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {log_file}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {SERVICE_NAME} v{SERVICE_VERSION}")
    init_database()
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title=SERVICE_NAME,
    description="CRUD REST API for tutorials",
    version=SERVICE_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tutorials.router, tags=["tutorials"])


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(status="ok", service=SERVICE_NAME, version=SERVICE_VERSION)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"🚀 Starting {SERVICE_NAME} on http://{app_config.HOST}:{app_config.PORT}...")
    uvicorn.run(app, host=app_config.HOST, port=app_config.PORT, log_level=app_config.LOG_LEVEL.lower())
