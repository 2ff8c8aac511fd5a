"""
Weaving floor schema: derived values for beams, production entries and looms.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LoomStatus(str, Enum):
    RUNNING = "running"
    IDLE = "idle"
    MAINTENANCE = "maintenance"
    BREAKDOWN = "breakdown"


@dataclass(frozen=True)
class BeamWeight:
    """Beam yarn weight: ``raw`` in kg and its magnitude-dropping display form."""

    raw: float
    formatted: float


@dataclass(frozen=True)
class Variance:
    """Actual minus target, absolute and as a percentage of target."""

    variance: float
    percentage: float


@dataclass(frozen=True)
class YarnWastage:
    """Issued yarn not accounted for by consumption, in kg and percent of issue."""

    wastage_quantity: float
    wastage_percentage: float


@dataclass(frozen=True)
class LoomStatusDisplay:
    label: str
    color: str


@dataclass(frozen=True)
class LoomAvailability:
    available: bool
    reason: str
