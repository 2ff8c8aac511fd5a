from .registry import CalculationSettings, Limit, SettingsRegistry, get_registry, get_settings

__all__ = [
    "CalculationSettings",
    "Limit",
    "SettingsRegistry",
    "get_registry",
    "get_settings",
]
