from .settings import Settings, LineSettings, NlpSettings, get_settings

__all__ = ["Settings", "LineSettings", "NlpSettings", "get_settings"]
