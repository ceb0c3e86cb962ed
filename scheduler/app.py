"""
Interview Scheduler: FastAPI app factory.

Use: uvicorn scheduler.app:app
Or:  from scheduler.app import app, create_app
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .routes import register_routes
from .services import AppointmentNotFound
from .state import AppState, get_state, reset_state

logger = logging.getLogger("scheduler")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(state: Optional[AppState] = None) -> FastAPI:
    """Build FastAPI app with CORS, request logging, routes, and the session sweeper."""
    if state is not None:
        reset_state(state)
    state = get_state()
    config = state.config
    configure_logging(config.log_level)

    _, errors = config.validate()
    for error in errors:
        logger.warning("Config: %s", error)
    static_dir = None if config.static_dir_errors() else config.static_dir

    app = FastAPI(
        title="Interview Scheduler API",
        description="Demo interview scheduler with per-session isolated schedules",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[config.session_header],
    )

    @app.middleware("http")
    async def log_and_echo_session(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        response = await call_next(request)
        session_id = getattr(request.state, "session_id", None)
        if session_id:
            response.headers[config.session_header] = session_id
        return response

    @app.exception_handler(AppointmentNotFound)
    async def appointment_not_found(request: Request, exc: AppointmentNotFound):
        return JSONResponse(status_code=404, content={"error": "Appointment not found"})

    register_routes(app, static_dir=static_dir)

    @app.on_event("startup")
    async def _start_sweeper():
        logger.info("Interview Scheduler API starting...")
        logger.info("Sessions: header=%s", config.session_header)
        if static_dir:
            logger.info("Frontend: %s", static_dir)
        get_state().sweeper.start()

    @app.on_event("shutdown")
    async def _stop_sweeper():
        await get_state().sweeper.stop()

    return app


app = create_app()
