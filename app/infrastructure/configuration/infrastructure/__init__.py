"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.messages import MessagesSettings

__all__ = [
    "MessagesSettings",
]
