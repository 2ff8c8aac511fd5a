"""
Challan schema: delivery/invoice documents carrying an interest-bearing balance.

Overdue is not a stored state. A challan in any non-terminal status is
overdue purely as a function of the current date versus ``due_date``, and is
recomputed on every read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Optional


class ChallanStatus(str, Enum):
    """Lifecycle status. PAID and CANCELLED are terminal for interest purposes."""

    OPEN = "Open"
    PAID = "Paid"
    OVERDUE = "Overdue"
    CANCELLED = "Cancelled"


class InterestType(str, Enum):
    SIMPLE = "simple"
    COMPOUND = "compound"


@dataclass(frozen=True)
class InterestTracking:
    """
    Interest terms frozen onto the challan when it is issued.

    Attributes:
        principal_amount: Balance interest accrues on; None means "use the subtotal".
        interest_rate: Interest in percent per day.
        interest_type: Simple or compound accrual.
        interest_accrued: Interest last persisted on the document.
    """

    principal_amount: Optional[float] = None
    interest_rate: Optional[float] = 0
    interest_type: Optional[InterestType | str] = InterestType.COMPOUND
    interest_accrued: float = 0


@dataclass(frozen=True)
class ChallanTotals:
    total_meters: float = 0
    total_weight: float = 0
    subtotal_amount: float = 0


@dataclass(frozen=True)
class Challan:
    """The fields of a challan document that interest accrual reads."""

    status: ChallanStatus | str
    due_date: date | datetime
    interest_tracking: InterestTracking = field(default_factory=InterestTracking)
    totals: ChallanTotals = field(default_factory=ChallanTotals)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> Challan:
        """
        Build a Challan from a stored document using its camelCase keys.

        Missing sub-documents and fields fall back to the dataclass defaults;
        ``dueDate`` may be a date, a datetime or an ISO 8601 string.
        """
        tracking = doc.get("interestTracking") or {}
        totals = doc.get("totals") or {}
        due_date = doc["dueDate"]
        if isinstance(due_date, str):
            due_date = datetime.fromisoformat(due_date.replace("Z", "+00:00"))
        return cls(
            status=doc.get("status", ChallanStatus.OPEN),
            due_date=due_date,
            interest_tracking=InterestTracking(
                principal_amount=tracking.get("principalAmount"),
                interest_rate=tracking.get("interestRate", 0),
                interest_type=tracking.get("interestType", InterestType.COMPOUND),
                interest_accrued=tracking.get("interestAccrued", 0),
            ),
            totals=ChallanTotals(
                total_meters=totals.get("totalMeters", 0),
                total_weight=totals.get("totalWeight", 0),
                subtotal_amount=totals.get("subtotalAmount", 0),
            ),
        )


@dataclass(frozen=True)
class ChallanItem:
    """One fabric line on a challan."""

    ordered_meters: Optional[float]
    weight_per_meter: Optional[float]
    price_per_meter: Optional[float]


@dataclass(frozen=True)
class ItemTotals:
    """Derived weight (4 dp) and amount (2 dp) of one challan line."""

    calculated_weight: float
    calculated_amount: float
