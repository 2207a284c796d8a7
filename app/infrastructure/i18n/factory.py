"""Factory functions for creating i18n components.

Provides a convenience function for initializing the message service from
the application settings.
"""

from pathlib import Path
from typing import Optional

from infrastructure.i18n.loader import BundleLoader
from infrastructure.i18n.service import MessageService
from infrastructure.i18n.store import DocumentStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_message_service(
    data_dir: Optional[Path] = None,
    locale: Optional[str] = None,
    store: Optional[DocumentStore] = None,
    preload: bool = True,
) -> MessageService:
    """Create and configure a MessageService instance.

    Args:
        data_dir: Directory with messages_<locale>.yml files
            (default: settings.messages.MESSAGES_DATA_DIR)
        locale: Locale to request (default: settings.messages.MESSAGES_LOCALE)
        store: Document store (default: YAMLDocumentStore)
        preload: Whether to resolve the bundle immediately (default: True)

    Returns:
        MessageService: Configured message service

    Raises:
        BundleResolutionError: If preloading cannot create the default bundle

    Usage:
        # Use settings
        service = create_message_service()

        # Custom directory and locale, resolved on first lookup
        service = create_message_service(
            data_dir=Path("/srv/plugin"), locale="ru", preload=False
        )
    """
    if data_dir is None or locale is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()
        if data_dir is None:
            data_dir = Path(settings.messages.MESSAGES_DATA_DIR)
        if locale is None:
            locale = settings.messages.MESSAGES_LOCALE

    loader = BundleLoader(base_dir=Path(data_dir), store=store)
    service = MessageService(loader=loader, locale=locale)

    if preload:
        service.load()

    logger.info(
        "message_service_created",
        data_dir=str(data_dir),
        locale=locale,
        preload=preload,
    )
    return service
