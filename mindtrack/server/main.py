"""
MindTrack Server - FastAPI application
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mindtrack import __version__
from mindtrack.config import settings
from mindtrack.server.api import activity_router, mindset_router
from mindtrack.server.services.activity_service import initialize_default_activity_types
from mindtrack.storage import init_database
from mindtrack.utils import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan

    Creates the tables and seeds the shared activity types on startup
    """
    logger.info("Initializing MindTrack database...")
    try:
        init_database()
        initialize_default_activity_types()
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise

    yield


app = FastAPI(
    lifespan=lifespan,
    title="MindTrack API",
    version=__version__,
    description="""
    ## MindTrack backend

    Self-improvement tracking service.

    ### Modules

    - **Mindset**: daily self-test, history and eligibility
    - **Activity**: activity types, activity records and time usage analysis

    Every endpoint identifies the caller through the `X-User-Id` header.
    """,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(mindset_router, prefix="/api")
app.include_router(activity_router, prefix="/api")


@app.get("/", tags=["Root"])
async def root():
    """
    Service information and endpoint overview
    """
    return {
        "service": "MindTrack API",
        "version": __version__,
        "status": "running",
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_spec": "/openapi.json"
        },
        "endpoints": {
            "self_test": "/api/mindset/self-test",
            "activity_types": "/api/mindset/activity/types",
            "activity_records": "/api/mindset/activity/records",
            "analyze": "/api/mindset/activity/analyze"
        }
    }


@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "service": "mindtrack-api",
        "version": __version__
    }


def run():
    """Console entry point"""
    import os
    import uvicorn

    # MINDTRACK_DEV=1 enables auto reload
    is_dev_mode = os.environ.get("MINDTRACK_DEV", "0") == "1"
    if is_dev_mode:
        uvicorn.run(
            "mindtrack.server.main:app",
            host="0.0.0.0",
            port=int(os.environ.get("MINDTRACK_PORT", "3001")),
            reload=True,
            reload_dirs=["mindtrack"],
            log_level="info"
        )
    else:
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=int(os.environ.get("MINDTRACK_PORT", "3001")),
            log_level="info"
        )


if __name__ == "__main__":
    run()
