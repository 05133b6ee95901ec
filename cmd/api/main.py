"""
FastAPI Service - Main entry point for the TaskFlow API.
Implements clean separation of concerns with comprehensive logging and error handling:
- Routes are separated into modules, one per resource
- MongoDB for data persistence
- Firebase Identity Toolkit for authentication
- Every response is the same {success, message, status, data?} envelope
"""

import os
import sys
from contextlib import asynccontextmanager
from typing import Optional

# Project root must be importable when this file is run directly
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorDatabase

from core.config import get_settings
from core.container import Container, bootstrap_container
from core.database import close_database, get_database
from core.errors import ErrorKind
from core.identity import IIdentityProvider
from core.logger import logger
from internal.api.routes import (
    create_activity_routes,
    create_auth_routes,
    create_comment_routes,
    create_health_routes,
    create_label_routes,
    create_project_routes,
    create_task_routes,
)
from internal.api.utils import error_response
from services import ActivityService, CommentService, LabelService, ProjectService, TaskService
from services.interfaces import IAuthService


# Lifespan context manager
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.
    Connects to MongoDB on startup unless a database was injected.
    """
    settings = get_settings()
    try:
        logger.info(
            f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
        )
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Debug mode: {settings.debug}")
        logger.info(f"API: {settings.api_host}:{settings.api_port}{settings.api_prefix}")

        if app.state.database is None:
            try:
                logger.info("Initializing MongoDB connection...")
                db = await get_database()
                logger.info("MongoDB connected successfully")

                await db.create_indexes()

                logger.info("Performing MongoDB health check...")
                if await db.health_check():
                    logger.info("MongoDB health check passed")
                else:
                    logger.warning("MongoDB health check failed")

            except Exception as e:
                logger.error(f"Failed to initialize MongoDB: {e}")
                logger.exception("MongoDB initialization error details:")
                raise
        else:
            logger.info("Using injected database, skipping MongoDB connection")

        logger.info(
            f"========== {settings.app_name} API service started successfully =========="
        )

    except Exception as e:
        logger.error(f"Fatal error in application lifespan: {e}")
        logger.exception("Lifespan error details:")
        raise

    yield

    # Shutdown sequence
    logger.info("========== Shutting down API service ==========")

    try:
        await app.state.identity_provider.close()
    except Exception as e:
        logger.error(f"Error closing identity provider client: {e}")

    if app.state.database is None:
        try:
            await close_database()
            logger.info("MongoDB disconnected successfully")
        except Exception as e:
            logger.error(f"Error disconnecting from MongoDB: {e}")
            logger.exception("MongoDB disconnect error details:")

    logger.info("========== API service stopped successfully ==========")


def _database_check(database: Optional[AsyncIOMotorDatabase]):
    if database is not None:

        async def check_injected_database() -> bool:
            await database.list_collection_names()
            return True

        return check_injected_database

    async def check_global_database() -> bool:
        mongodb = await get_database()
        return await mongodb.health_check()

    return check_global_database


def create_app(
    database: Optional[AsyncIOMotorDatabase] = None,
    identity_provider: Optional[IIdentityProvider] = None,
) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.
    Includes comprehensive logging and error handling.

    Args:
        database: Database to use instead of connecting to MONGODB_URL
        identity_provider: Identity provider to use instead of Firebase

    Returns:
        FastAPI: Configured application instance
    """
    try:
        logger.info("Creating FastAPI application...")
        settings = get_settings()

        description = """
## TaskFlow API

Task and project management backend.

### Resources

* **Tasks** - create, update, assign and track tasks by user, status, assignee or project
* **Projects** - projects and their team members
* **Comments** - discussion on tasks
* **Labels** - coloured labels for tasks
* **Activities** - audit trail of actions on tasks
* **Auth** - login, registration and user profiles

### Responses

Every endpoint answers with `{success, message, status, data?, error?}`;
the HTTP status code always equals `status`.
        """

        tags_metadata = [
            {"name": "Tasks", "description": "Task CRUD and lookups."},
            {"name": "Projects", "description": "Project CRUD, lookups and team membership."},
            {"name": "Comments", "description": "Comments on tasks."},
            {"name": "Labels", "description": "Task labels."},
            {"name": "Activities", "description": "Activity records for tasks."},
            {"name": "Auth", "description": "Login, registration, logout and user profiles."},
            {"name": "Health", "description": "Health check endpoints (API and MongoDB)."},
        ]

        logger.debug("Configuring FastAPI instance...")
        app = FastAPI(
            title=settings.app_name,
            version=settings.app_version,
            description=description,
            lifespan=lifespan,
            openapi_tags=tags_metadata,
            docs_url="/docs",
            redoc_url="/redoc",
            openapi_url="/openapi.json",
        )

        bootstrap_container(database=database, identity_provider=identity_provider)
        app.state.database = database
        app.state.identity_provider = Container.resolve(IIdentityProvider)

        logger.debug("Adding CORS middleware...")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],  # Configure appropriately for production
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        @app.exception_handler(RequestValidationError)
        async def validation_exception_handler(request: Request, exc: RequestValidationError):
            violations = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            ]
            logger.warning(f"Rejected request {request.method} {request.url.path}: {violations}")
            return error_response(
                f"Invalid request: {'; '.join(violations)}",
                400,
                ErrorKind.VALIDATION_FAILURE,
            )

        @app.exception_handler(Exception)
        async def unhandled_exception_handler(request: Request, exc: Exception):
            logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
            logger.exception("Unhandled error details:")
            message = "Internal server error"
            if get_settings().expose_error_details:
                message = f"{message}: {exc}"
            return error_response(message, 500, ErrorKind.INTERNAL_ERROR)

        logger.debug("Including API routes...")

        app.include_router(create_health_routes(_database_check(database)))
        app.include_router(create_auth_routes(Container.resolve(IAuthService)))
        app.include_router(create_task_routes(Container.resolve(TaskService)))
        app.include_router(create_project_routes(Container.resolve(ProjectService)))
        app.include_router(create_comment_routes(Container.resolve(CommentService)))
        app.include_router(create_label_routes(Container.resolve(LabelService)))
        app.include_router(create_activity_routes(Container.resolve(ActivityService)))
        logger.info("API routes registered")

        logger.info("FastAPI application created successfully")
        return app

    except Exception as e:
        logger.error(f"Failed to create FastAPI application: {e}")
        logger.exception("Application creation error details:")
        raise


# Create application instance
try:
    logger.info("Initializing TaskFlow API...")
    app = create_app()
    logger.info("Application instance created successfully")
except Exception as e:
    logger.error(f"Failed to create application instance: {e}")
    logger.exception("Startup error details:")
    raise


# Run with: python cmd/api/main.py
if __name__ == "__main__":
    import uvicorn

    try:
        settings = get_settings()

        logger.info("========== Starting Uvicorn Server ==========")
        logger.info(f"Host: {settings.api_host}")
        logger.info(f"Port: {settings.api_port}")
        logger.info(f"Reload: {settings.api_reload}")
        logger.info(f"Workers: {settings.api_workers}")

        # Reloader subprocesses import the app by name and need the project root
        current_pythonpath = os.environ.get("PYTHONPATH", "")
        if PROJECT_ROOT not in current_pythonpath:
            os.environ["PYTHONPATH"] = (
                f"{PROJECT_ROOT}:{current_pythonpath}" if current_pythonpath else PROJECT_ROOT
            )

        if settings.api_reload:
            uvicorn.run(
                "main:app",
                app_dir=os.path.dirname(os.path.abspath(__file__)),
                host=settings.api_host,
                port=settings.api_port,
                reload=True,
                log_level="info" if settings.debug else "warning",
            )
        else:
            uvicorn.run(
                app,
                host=settings.api_host,
                port=settings.api_port,
                workers=1,
                log_level="info" if settings.debug else "warning",
            )

    except Exception as e:
        logger.error(f"Failed to start Uvicorn server: {e}")
        logger.exception("Uvicorn startup error details:")
        raise
