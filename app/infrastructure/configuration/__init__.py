"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the message
service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    MessagesSettings: Message bundle settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    locale = settings.messages.MESSAGES_LOCALE

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.messages import MessagesSettings

__all__ = ["Settings", "MessagesSettings"]
