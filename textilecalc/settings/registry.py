"""
Settings registry: loads calculation defaults from YAML at startup, validates
them against the configured limits, and exposes an immutable settings record.

The registry is a module-level singleton; call get_settings() for the default
CalculationSettings or get_registry() for the registry itself. Nothing writes
to the registry after startup.

──────────────────────────────────────────────────────────────────────────────
Threading settings into calculations
──────────────────────────────────────────────────────────────────────────────
No calculator reads settings implicitly. A caller resolves the company's
settings once (registry defaults, then registry.override(...) with the
company's stored values) and passes the resulting CalculationSettings, or the
individual values taken from it, into each calculation call.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, NamedTuple, cast

import yaml

from textilecalc.utilities.formatting import DATE_FORMATS

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_DEFAULTS_FILE = "defaults.yaml"


class Limit(NamedTuple):
    """Inclusive range a numeric setting must fall in."""

    lower: float
    upper: float


@dataclass(frozen=True)
class CalculationSettings:
    """
    Calculation defaults for one company.

    Fails fast on values no calculation could use; range limits from the
    settings table are checked by the registry.

    Attributes:
        default_gst_percentage: GST applied to a yarn segment with none given.
        default_wastage: Wastage applied to a yarn segment with none given.
        weight_precision: Decimals for formatted weights.
        cost_precision: Decimals for formatted costs.
        working_days_per_month: Days used for monthly production projections.
        crimp_percentage: Warp crimp allowance for consumption estimates.
        theoretical_wastage: Wastage used for theoretical yarn consumption.
        currency_symbol: Prefix for rendered amounts.
        currency_code: ISO 4217 code of the company currency.
        date_format: One of DD/MM/YYYY, MM/DD/YYYY, YYYY-MM-DD.
    """

    default_gst_percentage: float
    default_wastage: float
    weight_precision: int
    cost_precision: int
    working_days_per_month: float
    crimp_percentage: float
    theoretical_wastage: float
    currency_symbol: str
    currency_code: str
    date_format: str

    def __post_init__(self) -> None:
        if self.weight_precision < 1:
            raise ValueError(f"weight_precision must be >= 1, got {self.weight_precision}")
        if self.cost_precision < 1:
            raise ValueError(f"cost_precision must be >= 1, got {self.cost_precision}")
        if self.working_days_per_month <= 0:
            raise ValueError(
                f"working_days_per_month must be positive, got {self.working_days_per_month}"
            )
        if self.date_format not in DATE_FORMATS:
            raise ValueError(
                f"date_format must be one of {sorted(DATE_FORMATS)}, got {self.date_format!r}"
            )


class SettingsRegistry:
    """
    Read-only registry of calculation defaults and their limits.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        # Type annotations only; actual assignment happens in _load_*
        self.defaults: CalculationSettings
        self.limits: MappingProxyType[str, Limit]

        self._load_all()
        self.validate(self.defaults)
        logger.debug("Loaded calculation settings from %s", self._data_dir / _DEFAULTS_FILE)

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path, encoding="utf-8") as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Settings data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse settings data file {path}: {exc}") from exc

    def _load_all(self) -> None:
        data = self._load_yaml(_DEFAULTS_FILE)
        self._load_limits(data.get("limits", {}))
        self._load_defaults(data)

    def _load_limits(self, data: dict[str, Any]) -> None:
        result: dict[str, Limit] = {}
        for name, bounds in data.items():
            lower, upper = bounds
            result[name] = Limit(lower=lower, upper=upper)
        self.limits = MappingProxyType(result)

    def _load_defaults(self, data: dict[str, Any]) -> None:
        calculation = data["calculation"]
        production = data["production"]
        consumption = data["consumption"]
        display = data["display"]
        self.defaults = CalculationSettings(
            default_gst_percentage=calculation["default_gst_percentage"],
            default_wastage=calculation["default_wastage"],
            weight_precision=calculation["weight_precision"],
            cost_precision=calculation["cost_precision"],
            working_days_per_month=production["working_days_per_month"],
            crimp_percentage=consumption["crimp_percentage"],
            theoretical_wastage=consumption["theoretical_wastage"],
            currency_symbol=display["currency_symbol"],
            currency_code=display["currency_code"],
            date_format=display["date_format"],
        )

    # ── Validation ─────────────────────────────────────────────────────────────

    def validate(self, settings: CalculationSettings) -> None:
        """
        Check *settings* against the configured limits.

        Raises ValueError listing every out-of-range value found.
        """
        errors: list[str] = []
        self._check_limit(errors, "weight_precision", settings.weight_precision)
        self._check_limit(errors, "cost_precision", settings.cost_precision)
        for name in ("default_gst_percentage", "default_wastage"):
            self._check_limit(errors, "percentage", getattr(settings, name), field_name=name)
        if errors:
            raise ValueError(
                "Calculation settings validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    def _check_limit(
        self,
        errors: list[str],
        limit_name: str,
        value: float,
        field_name: str | None = None,
    ) -> None:
        limit = self.limits.get(limit_name)
        if limit is None:
            return
        if not (limit.lower <= value <= limit.upper):
            errors.append(
                f"{field_name or limit_name} must be in [{limit.lower}, {limit.upper}], got {value}"
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def override(self, **changes: Any) -> CalculationSettings:
        """
        Return the defaults with *changes* applied, validated against the limits.

        Keys set to None are ignored, so a stored settings document with unset
        fields can be passed straight through.

        Raises TypeError for unknown keys and ValueError for out-of-range values.
        """
        applied = {name: value for name, value in changes.items() if value is not None}
        settings = dataclasses.replace(self.defaults, **applied)
        self.validate(settings)
        return settings


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time so there is no lazy-init race condition
# in concurrent contexts. The registry is read-only after construction.

_registry: SettingsRegistry = SettingsRegistry()


def get_registry() -> SettingsRegistry:
    """Return the module-level registry singleton."""
    return _registry


def get_settings() -> CalculationSettings:
    """Return the default calculation settings."""
    return _registry.defaults
