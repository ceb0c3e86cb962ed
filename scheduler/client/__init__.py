"""Client side: HTTP API client, per-slot state machine, client-held schedule state."""

from .api import ApiError, NetworkFailure, SchedulerClient, SchedulerClientError
from .appointment import Action, AppointmentSlot, FormClosed, InvalidTransition, Mode
from .settings import ClientSettings
from .state import SchedulerApp, format_spots, short_session_id

__all__ = [
    "ApiError",
    "NetworkFailure",
    "SchedulerClient",
    "SchedulerClientError",
    "Action",
    "AppointmentSlot",
    "FormClosed",
    "InvalidTransition",
    "Mode",
    "ClientSettings",
    "SchedulerApp",
    "format_spots",
    "short_session_id",
]
