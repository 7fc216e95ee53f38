from .config import Settings, settings, get_settings, SOLAR_RADIUS_KM

__all__ = ["Settings", "settings", "get_settings", "SOLAR_RADIUS_KM"]
