"""
FastAPI dependency returning the process-wide settings.
"""

from oauth_bridge.core.config import AppSettings, get_settings


def get_app_settings() -> AppSettings:
    """Settings dependency; tests override it with a modified copy."""
    return get_settings()


__all__ = ["get_app_settings"]
