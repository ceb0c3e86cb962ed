"""Request dependencies shared by the session-scoped routes."""

import logging

from fastapi import Request

from ..services import CreatedNew, Session
from ..state import get_state

logger = logging.getLogger(__name__)


def resolve_session(request: Request) -> Session:
    """
    Resolve the acting session from the session header.

    A missing or unknown token silently creates a new session. The id of the
    session actually used is kept on request.state and echoed back in the
    response header by the app middleware.
    """
    state = get_state()
    token = request.headers.get(state.config.session_header)
    resolution = state.session_store.resolve(token)
    if isinstance(resolution, CreatedNew) and resolution.requested_id:
        logger.info(
            "Unknown session %s, issued replacement %s",
            resolution.requested_id,
            resolution.session.id,
        )
    request.state.session_id = resolution.session.id
    return resolution.session
