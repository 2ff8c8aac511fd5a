"""
Industry-standard yarn display names.

Formats:

    filament:  "<name> <denier>/<filaments>"            Polyester 150/48
               "<name> <denier>/<filaments> TPM <tpm>"  Polyester 150/48 TPM 800
               "<name> <denier>D[ TPM <tpm>]"           when no filament count
    spun:      "<name> <denier>/<tpm>"                  Cotton 40/600
               "<name> <denier>D"                       Cotton 40D

A spun name with TPM and a filament name share the ``N D/X`` shape, so
parsing reads that shape as filament.
"""

from __future__ import annotations

import re
from typing import Optional

from textilecalc.schemas.yarn import YarnCategory, YarnIdentity

_FILAMENT_WITH_TPM = re.compile(r"^(.+?)\s+(\d+)/(\d+)\s+TPM\s+(\d+)$")
_SLASHED = re.compile(r"^(.+?)\s+(\d+)/(\d+)$")
_PLAIN_DENIER = re.compile(r"^(.+?)\s+(\d+)D$")

_CATEGORY_LABELS = {
    YarnCategory.SPUN: "Spun Yarn",
    YarnCategory.FILAMENT: "Filament Yarn",
}


def _positive(value: Optional[int]) -> bool:
    return bool(value) and value > 0


def generate_yarn_display_name(yarn: Optional[YarnIdentity]) -> str:
    """Display name for *yarn*; just the name when no denier is known."""
    if yarn is None or not yarn.name:
        return ""
    if not yarn.denier:
        return yarn.name

    name, denier, tpm = yarn.name, yarn.denier, yarn.tpm

    if yarn.yarn_category == YarnCategory.FILAMENT:
        if _positive(yarn.filament_count):
            display = f"{name} {denier}/{yarn.filament_count}"
        else:
            display = f"{name} {denier}D"
        if _positive(tpm):
            display += f" TPM {tpm}"
    elif _positive(tpm):
        display = f"{name} {denier}/{tpm}"
    else:
        display = f"{name} {denier}D"

    return display.strip()


def parse_yarn_display_name(display_name: str) -> Optional[YarnIdentity]:
    """
    Recover yarn components from a display name.

    Returns None for an empty string. A name matching no known format comes
    back as a YarnIdentity carrying only the name.
    """
    if not display_name:
        return None

    match = _FILAMENT_WITH_TPM.match(display_name)
    if match:
        return YarnIdentity(
            name=match[1],
            denier=int(match[2]),
            filament_count=int(match[3]),
            tpm=int(match[4]),
            yarn_category=YarnCategory.FILAMENT,
        )

    match = _SLASHED.match(display_name)
    if match:
        return YarnIdentity(
            name=match[1],
            denier=int(match[2]),
            filament_count=int(match[3]),
            yarn_category=YarnCategory.FILAMENT,
        )

    match = _PLAIN_DENIER.match(display_name)
    if match:
        return YarnIdentity(name=match[1], denier=int(match[2]))

    return YarnIdentity(name=display_name)


def get_yarn_short_display(yarn: Optional[YarnIdentity]) -> str:
    """Compact form for dropdowns: no TPM suffix on filament yarns."""
    if yarn is None:
        return ""

    if yarn.yarn_category == YarnCategory.FILAMENT and yarn.filament_count:
        return f"{yarn.name} {yarn.denier}/{yarn.filament_count}"
    if yarn.tpm:
        return f"{yarn.name} {yarn.denier}/{yarn.tpm}"
    return f"{yarn.name} {yarn.denier}D"


def get_yarn_category_label(category: YarnCategory | str) -> str:
    """Human label for a yarn category; unknown categories are returned unchanged."""
    try:
        return _CATEGORY_LABELS[YarnCategory(category)]
    except ValueError:
        return str(category)
