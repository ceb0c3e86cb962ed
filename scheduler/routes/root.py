"""Root and health endpoints."""

from fastapi import APIRouter

from .. import __version__
from ..state import get_state

router = APIRouter()
index_router = APIRouter()


@index_router.get("/")
def root():
    state = get_state()
    return {
        "name": "Interview Scheduler API",
        "version": __version__,
        "status": "ok",
        "sessions": len(state.session_store),
        "endpoints": {
            "session": ["/api/session/init", "/api/session/{id}"],
            "schedule": ["/api/days", "/api/appointments", "/api/interviewers"],
            "mutations": ["PUT /api/appointments/{id}", "DELETE /api/appointments/{id}"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "sessions": len(state.session_store),
        "sweeper_running": state.sweeper.running,
    }
