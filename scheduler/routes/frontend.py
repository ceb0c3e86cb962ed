"""Serve a built single-page frontend: real files when present, index.html otherwise."""

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse


def build_frontend_router(static_dir: Path) -> APIRouter:
    """Catch-all router; must be registered after every API route."""
    root = Path(static_dir).resolve()
    index = root / "index.html"
    router = APIRouter()

    @router.get("/{full_path:path}", include_in_schema=False)
    def frontend(full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not Found")
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        if not index.is_file():
            raise HTTPException(status_code=404, detail="Frontend build not found")
        return FileResponse(index)

    return router
