"""
Centralized configuration for the TechMigo lesson authoring backend.

Provides environment-aware settings so main.py and the route modules
read configuration the same way.
"""

import os


def is_dev_mode() -> bool:
    """Check if running in development mode (DEV_MODE env)."""
    return os.getenv("DEV_MODE", "").lower() in ("true", "1", "yes")


def is_production() -> bool:
    """Check if running in the production environment."""
    return os.environ.get("TECHMIGO_ENVIRONMENT", "").lower() == "production"


def get_api_port() -> int:
    """Get API server port from env or default."""
    return int(os.getenv("API_PORT", "8000"))


def get_frontend_url() -> str:
    """Get the admin front end URL (used for CORS)."""
    return os.environ.get("FRONTEND_URL", "http://localhost:3000").rstrip("/")


def get_allowed_origins() -> list[str]:
    """
    Get list of allowed CORS origins.

    Includes localhost variants for dev and the configured frontend URL.
    """
    hosts = ["localhost", "127.0.0.1"]
    ports = [3000, 3001, get_api_port()]
    origins = [f"http://{host}:{port}" for host in hosts for port in ports]

    frontend_url = get_frontend_url()
    if frontend_url not in origins:
        origins.append(frontend_url)

    return origins


def get_lesson_service_url() -> str:
    """Base URL of the course/lesson service that persists lessons."""
    return os.environ.get("LESSON_SERVICE_URL", "http://localhost:3000").rstrip("/")


def get_lesson_service_timeout() -> float:
    """Timeout in seconds for calls to the lesson service."""
    return float(os.getenv("LESSON_SERVICE_TIMEOUT", "30"))


def get_sentry_dsn() -> str | None:
    """Sentry DSN, or None when error reporting is disabled."""
    return os.environ.get("SENTRY_DSN") or None


# Required environment variables for production
# Format: (name, description, required_in_dev)
REQUIRED_ENV_VARS = [
    ("LESSON_SERVICE_URL", "Base URL of the course/lesson service", False),
    ("FRONTEND_URL", "Admin front end URL for CORS", False),
    ("SENTRY_DSN", "Sentry DSN for error reporting", False),
]


def check_required_env_vars() -> tuple[bool, list[str]]:
    """
    Check that required environment variables are set.

    Returns:
        (all_ok, warnings): Tuple of success flag and list of warning messages
    """
    warnings = []
    errors = []
    in_dev = is_dev_mode()

    for name, description, required_in_dev in REQUIRED_ENV_VARS:
        value = os.environ.get(name)

        if not value:
            if is_production():
                errors.append(f"  ✗ {name}: Not set ({description})")
            elif required_in_dev or not in_dev:
                warnings.append(f"  ⚠ {name}: Not set ({description})")

    if errors:
        for error in errors:
            print(error)
        return False, warnings

    return True, warnings
