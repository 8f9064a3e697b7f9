from apps.oauth2.setup.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
