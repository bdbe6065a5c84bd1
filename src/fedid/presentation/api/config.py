"""API configuration adapter.

Bridges the centralized fedid_config settings with the API layer.
"""

from fastapi import Request

from fedid_config.settings import Settings, get_settings


def get_api_settings(request: Request) -> Settings:
    """Get the settings the running app was created with.

    Falls back to the centralized configuration when the app was built
    without explicit settings.
    """
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        return get_settings()
    return settings
