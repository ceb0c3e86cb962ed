"""Register all route modules on the FastAPI app."""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from .frontend import build_frontend_router
from .root import index_router
from .root import router as root_router
from .schedule import router as schedule_router
from .sessions import router as sessions_router


def register_routes(app: FastAPI, static_dir: Optional[Path] = None) -> None:
    """Attach all API routers to the app; with static_dir, serve the frontend at /."""
    app.include_router(root_router, tags=["health"])
    app.include_router(sessions_router, prefix="/api/session", tags=["session"])
    app.include_router(schedule_router, prefix="/api", tags=["schedule"])
    if static_dir is None:
        app.include_router(index_router)
    else:
        app.include_router(build_frontend_router(static_dir))
