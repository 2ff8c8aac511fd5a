"""
Yarn identity schema: the fields that make up an industry-standard yarn name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class YarnCategory(str, Enum):
    SPUN = "spun"
    FILAMENT = "filament"


@dataclass(frozen=True)
class YarnIdentity:
    """
    Components of a yarn display name.

    Attributes:
        name: Trade name, e.g. "Polyester".
        denier: Linear-mass density.
        yarn_category: Spun or filament; None when it cannot be inferred.
        tpm: Twists per meter, if specified.
        filament_count: Number of filaments (filament yarns only).
    """

    name: str
    denier: Optional[int] = None
    yarn_category: Optional[YarnCategory] = None
    tpm: Optional[int] = None
    filament_count: Optional[int] = None
