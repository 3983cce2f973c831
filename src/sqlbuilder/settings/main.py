from typing import Optional

from .base import BuilderSettings


# Singleton instance
_settings: Optional[BuilderSettings] = None


def get_settings(force_reload: bool = False) -> BuilderSettings:
    """Get the singleton settings instance.

    Settings are loaded from ``SQLBUILDER_*`` environment variables (and an
    optional ``.env`` file) on first access and reused afterwards.

    Args:
        force_reload: If True, creates a new settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        BuilderSettings: The singleton settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()

        # Pick up environment changes
        new_settings = get_settings(force_reload=True)
        ```
    """
    global _settings

    if _settings is None or force_reload:
        _settings = BuilderSettings()

    return _settings


def _reload_settings() -> BuilderSettings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
