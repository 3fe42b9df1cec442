"""
Main application entry point for the Contacts API.

This module initializes the FastAPI application, configures logging and
CORS, registers the error handlers that render every failure as
``{"errors": message}``, and includes routers for users, contacts and
addresses.

Modules:
- FastAPI: Web framework
- CORSMiddleware: Middleware for handling CORS
- app.database: Database engine
- app.models: SQLAlchemy models
- app.errors: Error types and exception handlers
- app.users: Users router
- app.contacts: Contacts router
- app.addresses: Addresses router
- app.core: Application settings
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.database import engine
from app import models, contacts, addresses, users
from app.core import get_settings
from app.errors import register_exception_handlers
from app.logging_config import setup_logging

settings = get_settings()
setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Own the database engine for the lifetime of the process.

    Creates missing tables on startup and releases pooled connections
    on shutdown.
    """
    models.Base.metadata.create_all(bind=engine)
    logger.info("Contacts API started")
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Contacts API stopped")


# Initialize FastAPI application
app = FastAPI(title="Contacts API", lifespan=lifespan)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers for application areas
app.include_router(users.router)
app.include_router(contacts.router)
app.include_router(addresses.router)


@app.get("/")
def root():
    """
    Root endpoint for the API.

    Returns a simple JSON message directing users to the Swagger UI.

    Returns:
        dict: JSON message with information about the API
    """
    return {"msg": "Contacts API. Visit /docs for Swagger UI"}
