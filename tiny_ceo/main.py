"""FastAPI main application."""

import random
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from . import __version__
from .config import settings
from .db import DatabaseConnection
from .services import ReplyGenerator
from .utils.logger import init_app_logger
from .analysis.tables import KEYWORD_TABLES_VERSION
from .api.v1 import conversations, agents


# Initialize logger
logger = init_app_logger(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Args:
        app: FastAPI application instance
    """
    # Startup
    logger.info("=" * 70)
    logger.info("Starting Tiny CEO...")
    logger.info("=" * 70)

    logger.info("")
    logger.info("📡 Server Configuration:")
    logger.info(f"  Host: {settings.host}")
    logger.info(f"  Port: {settings.port}")
    logger.info(f"  Debug: {settings.debug}")
    logger.info(f"  CORS Origins: {', '.join(settings.get_cors_origins())}")
    logger.info(f"  Log Level: {settings.log_level}")
    logger.info(f"  Log File: {settings.log_file}")

    logger.info("")
    logger.info("🧠 Analysis Configuration:")
    logger.info(f"  Keyword Tables: v{KEYWORD_TABLES_VERSION}")
    logger.info(f"  Max Message Length: {settings.max_message_length}")
    logger.info(f"  Reply Seed: {settings.reply_seed if settings.reply_seed is not None else 'random'}")

    logger.info("")
    logger.info("🗄️  Initializing Storage...")
    db_conn = DatabaseConnection(settings.database_path)

    conversations.db_conn = db_conn
    conversations.reply_generator = ReplyGenerator(random.Random(settings.reply_seed))

    logger.info("")
    logger.info("=" * 70)
    logger.info("✅ Tiny CEO started successfully!")
    logger.info(f"📍 Access at: http://{settings.host}:{settings.port}")
    logger.info(f"📚 API Docs: http://{settings.host}:{settings.port}/docs")
    logger.info("=" * 70)

    yield

    # Shutdown
    logger.info("Shutting down Tiny CEO...")
    db_conn.close()
    conversations.db_conn = None
    logger.info("✅ Tiny CEO shut down successfully")


# Create FastAPI application
app = FastAPI(
    title="Tiny CEO",
    description="Startup idea conversations and advisor readiness analysis",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(conversations.router)
app.include_router(agents.router)


@app.get("/")
async def read_root():
    """Describe the service."""
    return {
        "message": "Tiny CEO API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health")
async def health():
    """
    Simple health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": "Tiny CEO"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tiny_ceo.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
