"""
Main application entry point for the Phonebook API.

This module initializes the FastAPI application, sets up logging,
configures CORS, checks the database on startup and includes routers
for authentication and contacts.

Modules:
- FastAPI: Web framework
- CORSMiddleware: Middleware for handling CORS
- uvicorn: ASGI server used when run as a script
- phonebook.database: Database bootstrap
- phonebook.contacts: Contacts router
- phonebook.auth: Authentication router
- phonebook.core: Application settings
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from phonebook.core import get_settings
from phonebook.logging_config import setup_logging
from phonebook.database import init_db
from phonebook import models  # noqa: F401  registers tables on Base
from phonebook.auth import router as auth_router
from phonebook.contacts import router as contacts_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Verifies the database connection and creates missing tables before
    serving. A failure is logged and aborts startup.
    """
    init_db()
    yield


# Initialize FastAPI application
app = FastAPI(title="Phonebook API", lifespan=lifespan)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers for application areas
app.include_router(auth_router)
app.include_router(contacts_router)


@app.get("/")
def root():
    """
    Root endpoint for the API.

    Returns a simple JSON message directing users to the Swagger UI.

    Returns:
        dict: JSON message with information about the API
    """
    return {"msg": "Phonebook API. Visit /docs for Swagger UI"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
