from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from config.app_config import settings
from constants import API_PREFIX, AppState
from init_db import init_database
from api import friends
from services.schema_validator import SchemaValidator
from utils.error_handlers import request_validation_exception_handler
import logging
from logging.handlers import RotatingFileHandler
import socket
import sys

# Configure logging with rotating file handler
LOG_DIR = settings.log_dir
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "backend.log"

# Create formatters and handlers
log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

# File handler with rotation (10MB per file, keep 5 backups)
file_handler = RotatingFileHandler(
    LOG_FILE,
    maxBytes=10 * 1024 * 1024,  # 10MB
    backupCount=5,
    encoding='utf-8'
)
file_handler.setFormatter(log_formatter)
file_handler.setLevel(settings.log_level)

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(log_formatter)
console_handler.setLevel(settings.log_level)

# Configure root logger
root_logger = logging.getLogger()
root_logger.setLevel(settings.log_level)
root_logger.addHandler(file_handler)
root_logger.addHandler(console_handler)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE}")

CURRENT_APP_STATE = AppState.NORMAL
SCHEMA_STATUS = {"valid": True, "issues": []}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    global CURRENT_APP_STATE, SCHEMA_STATUS

    # Startup
    init_database()

    SCHEMA_STATUS = SchemaValidator.check()
    if not SCHEMA_STATUS["valid"]:
        logger.error("Database schema validation failed - Entering MAINTENANCE MODE")
        CURRENT_APP_STATE = AppState.MAINTENANCE
    else:
        CURRENT_APP_STATE = AppState.NORMAL
        logger.info(f"{settings.app_name} ready")

    yield

    # Shutdown
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Friends API",
    description="CRUD API for managing friends",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"] + [
        f"X-{settings.app_name}-{suffix}" for suffix in ("alert", "error", "params")
    ],
)

app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

# Include API routers
app.include_router(friends.router, prefix=API_PREFIX, tags=["friends"])


@app.get("/api/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "ok" if CURRENT_APP_STATE == AppState.NORMAL else "maintenance",
        "service": "Friends API",
        "version": "1.0.0",
        "state": CURRENT_APP_STATE,
        "schema_status": SCHEMA_STATUS
    }


if __name__ == "__main__":
    import uvicorn

    # Check if port is available
    def is_port_in_use(port: int) -> bool:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((settings.host, port))
                return False
            except OSError:
                return True

    if is_port_in_use(settings.port):
        logger.error(f"Port {settings.port} is already in use!")
        logger.error(f"   To fix: Run 'lsof -ti:{settings.port} | xargs kill -9'")
        sys.exit(1)

    logger.info(f"Starting Friends API on http://{settings.host}:{settings.port}...")
    uvicorn.run(app, host=settings.host, port=settings.port)
