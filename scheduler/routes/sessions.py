"""Session endpoints: create a session and check whether one exists."""

from fastapi import APIRouter

from ..models import SessionInfoResponse, SessionInitResponse
from ..state import get_state

router = APIRouter()


@router.post("/init", response_model=SessionInitResponse)
def init_session():
    """Create a new session with a fresh copy of the seed schedule."""
    session = get_state().session_store.create_session()
    return SessionInitResponse(session_id=session.id)


@router.get("/{session_id}", response_model=SessionInfoResponse)
def get_session_info(session_id: str):
    """Report whether a session id is still registered. Never fails."""
    exists = get_state().session_store.exists(session_id)
    return SessionInfoResponse(session_id=session_id, exists=exists)
