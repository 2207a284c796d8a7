"""Message bundle infrastructure settings."""

from typing import Any

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class MessagesSettings(InfrastructureSettings):
    """Locale message bundle configuration.

    Environment Variables:
        MESSAGES_DATA_DIR: Directory holding the messages_<locale>.yml files
            (default: ./data)
        MESSAGES_LOCALE: Locale requested at startup (default: en)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        data_dir = settings.messages.MESSAGES_DATA_DIR
        locale = settings.messages.MESSAGES_LOCALE
        ```
    """

    MESSAGES_DATA_DIR: str = Field(
        default="./data",
        alias="MESSAGES_DATA_DIR",
        description="Directory containing messages_<locale>.yml bundle files",
    )
    MESSAGES_LOCALE: str = Field(
        default="en",
        alias="MESSAGES_LOCALE",
        description="Locale requested when the message service starts",
    )

    @field_validator("MESSAGES_LOCALE", mode="before")
    @classmethod
    def _normalize_locale(cls, v: Any) -> str:
        """Strip and lower-case the locale, falling back to "en" when blank."""
        if v is None:
            return "en"
        locale = str(v).strip().lower()
        return locale or "en"
