"""
Seed Loader

Loads the seed schedule (days, appointments, interviewers) that every new
session is copied from. The seed is read once and never mutated; each call to
SeedDataset.instantiate() builds fresh model objects from a deep copy.

Usage:
    seed = load_seed()
    days, appointments, interviewers = seed.instantiate()
    print(f"{len(days)} days, {len(appointments)} appointments")
"""

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models import Appointment, Day, Interviewer

DEFAULT_SEED_PATH = Path(__file__).resolve().parent.parent / "data" / "seed.json"


@dataclass(frozen=True)
class SeedDataset:
    """Immutable template data a new session is cloned from."""
    days: Tuple[Dict[str, Any], ...]
    appointments: Dict[str, Dict[str, Any]]
    interviewers: Dict[str, Dict[str, Any]]

    @classmethod
    def from_dict(cls, data: Dict) -> "SeedDataset":
        days = data.get("days")
        appointments = data.get("appointments")
        interviewers = data.get("interviewers")
        if not isinstance(days, list):
            raise ValueError("seed 'days' must be a list")
        if not isinstance(appointments, dict) or not isinstance(interviewers, dict):
            raise ValueError("seed 'appointments' and 'interviewers' must be objects keyed by id")
        days = copy.deepcopy(days)
        for day in days:
            free = 0
            for appointment_id in day.get("appointments", []):
                if str(appointment_id) not in appointments:
                    raise ValueError(
                        f"day {day.get('name')!r} references unknown appointment {appointment_id}"
                    )
                if appointments[str(appointment_id)].get("interview") is None:
                    free += 1
            # spots is derived; a stale value in the file is ignored
            day["spots"] = free
        return cls(
            days=tuple(days),
            appointments={str(k): copy.deepcopy(v) for k, v in appointments.items()},
            interviewers={str(k): copy.deepcopy(v) for k, v in interviewers.items()},
        )

    def instantiate(self) -> Tuple[List[Day], Dict[str, Appointment], Dict[str, Interviewer]]:
        """Build an independent, mutable copy of the seed as models."""
        days = [Day.model_validate(copy.deepcopy(d)) for d in self.days]
        appointments = {
            key: Appointment.model_validate(copy.deepcopy(value))
            for key, value in self.appointments.items()
        }
        interviewers = {
            key: Interviewer.model_validate(copy.deepcopy(value))
            for key, value in self.interviewers.items()
        }
        return days, appointments, interviewers


def load_seed(path: Optional[Union[Path, str]] = None) -> SeedDataset:
    """Load the seed dataset from JSON (defaults to the bundled data/seed.json)."""
    seed_path = Path(path) if path else DEFAULT_SEED_PATH
    if not seed_path.exists():
        raise FileNotFoundError(f"Seed dataset not found: {seed_path}")
    with open(seed_path) as f:
        data = json.load(f)
    return SeedDataset.from_dict(data)
