"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.api import auth, checklists, products, settings_ocr, users
from src.config import get_settings
from src.database import init_db
from src.errors import register_exception_handlers

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    if settings.create_tables_on_startup:
        init_db()
        logger.info("Database tables ensured")
    yield


app = FastAPI(
    title="Checklist API",
    description="Product catalog and dateline checklists for store inspections",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
)

register_exception_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(products.router)
app.include_router(checklists.router)
app.include_router(users.router)
app.include_router(settings_ocr.router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Greeting endpoint."""
    return "Hello, World!"


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the API with uvicorn on the configured address."""
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
