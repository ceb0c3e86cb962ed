"""Backing logic: seed loading, session store, schedule mutations, maintenance."""

from .maintenance import SessionSweeper
from .schedule import (
    AppointmentNotFound,
    book_appointment,
    cancel_appointment,
    count_spots,
    update_spots,
)
from .seed_loader import DEFAULT_SEED_PATH, SeedDataset, load_seed
from .session_store import (
    CreatedNew,
    EvictionPolicy,
    Found,
    Resolution,
    Session,
    SessionStore,
    utc_now,
)

__all__ = [
    "AppointmentNotFound",
    "book_appointment",
    "cancel_appointment",
    "count_spots",
    "update_spots",
    "DEFAULT_SEED_PATH",
    "SeedDataset",
    "load_seed",
    "CreatedNew",
    "EvictionPolicy",
    "Found",
    "Resolution",
    "Session",
    "SessionStore",
    "SessionSweeper",
    "utc_now",
]
