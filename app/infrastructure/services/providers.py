"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from infrastructure.configuration import Settings

if TYPE_CHECKING:
    from infrastructure.i18n import MessageService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_message_service() -> "MessageService":
    """
    Get application-scoped message service singleton.

    The bundle is resolved when the service is created, using the data
    directory and locale from settings, so lookups never touch the disk.
    Reload it with ``get_message_service().reload()``.

    Raises:
        BundleResolutionError: If the default locale bundle cannot be created.

    Returns:
        MessageService: Cached message service instance.
    """
    from infrastructure.i18n import create_message_service

    settings = get_settings()
    return create_message_service(
        data_dir=Path(settings.messages.MESSAGES_DATA_DIR),
        locale=settings.messages.MESSAGES_LOCALE,
    )
