"""
Backend entry point for TechMigo lesson authoring.

Serves the admin dashboard's lesson authoring API: quiz text import,
lesson form actions, and saving lessons through the course/lesson service.

Run with: python main.py [--port PORT]
"""

import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path

# Set up import paths before any local imports
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

# Load .env.local first (if exists), then .env as fallback
# .env.local is gitignored and used for local dev overrides
load_dotenv(project_root / ".env.local")  # Local overrides (gitignored)
load_dotenv()  # Fallback to .env

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import (
    check_required_env_vars,
    get_allowed_origins,
    get_api_port,
    get_lesson_service_url,
    get_sentry_dsn,
)

# Import routes using full paths
from web_api.routes.lessons import router as lessons_router
from web_api.routes.quizzes import router as quizzes_router


sentry_dsn = get_sentry_dsn()
if sentry_dsn:
    sentry_sdk.init(
        dsn=sentry_dsn,
        environment=os.environ.get("TECHMIGO_ENVIRONMENT", "development"),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    Checks configuration on startup. There are no background services;
    the lesson service client opens a connection per request.
    """
    ok, warnings = check_required_env_vars()
    for warning in warnings:
        print(warning)
    if not ok:
        raise RuntimeError("Missing required environment variables")

    print(f"Lesson service: {get_lesson_service_url()}")

    yield

    print("Shutting down...")


# Create FastAPI app with lifespan
app = FastAPI(
    title="TechMigo Lesson Authoring API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(quizzes_router)
app.include_router(lessons_router)


@app.get("/api/status")
async def api_status():
    """API status endpoint."""
    return {"status": "ok"}


@app.get("/health")
async def health():
    """Health check endpoint with detailed status."""
    return {
        "status": "healthy",
        "lesson_service_url": get_lesson_service_url(),
    }


if __name__ == "__main__":
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description="TechMigo Lesson Authoring Server")
    parser.add_argument(
        "--port",
        type=int,
        default=get_api_port(),
        help="Port to run the server on (default: API_PORT or 8000)",
    )
    args = parser.parse_args()

    # Pass app object directly (not string) to avoid module reimport issues
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=args.port,
    )
