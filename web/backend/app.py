#!/usr/bin/env python3
"""
CareerMatch API - FastAPI Application

Eligibility checks, job/preference scoring, the in-app notification feed
and scheduler controls.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8000/docs - API Documentation (Swagger UI)
    - http://localhost:8000/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from core.app_context import AppContext
from core.config_loader import AppConfig
from .config import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    eligibility_router,
    matching_router,
    notifications_router,
    schedulers_router
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None, context: Optional[AppContext] = None) -> FastAPI:
    """Build the application. Tests pass their own config or context."""
    config = config or (context.config if context else get_config())
    context = context or AppContext.build(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.schedulers.run_in_web:
            logger.info("Starting schedulers inside the web process")
            context.start_schedulers()
        yield
        context.stop_schedulers()

    app = FastAPI(
        title="CareerMatch API",
        description="Course eligibility, job preference matching and notifications",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.web.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(eligibility_router)
    app.include_router(matching_router)
    app.include_router(notifications_router)
    app.include_router(schedulers_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "careermatch-api"}

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting CareerMatch API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
