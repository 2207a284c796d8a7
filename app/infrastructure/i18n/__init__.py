"""i18n system - localized command messages.

Loads per-locale message bundles, recovers from missing or corrupt locale
files by falling back to the default locale, and formats messages with
positional placeholders and colour markup.

Main components:
- models: MessageBundle, default messages, locale file naming
- formatting: format_key, substitute, colorize
- store: DocumentStore and YAMLDocumentStore
- loader: BundleLoader (locale fallback and self-healing)
- resolver: MessageResolver (info/error/help/usage lookups)
- service: MessageService (process-wide active bundle)
"""

from infrastructure.i18n.exceptions import (
    BundlePersistenceError,
    BundleResolutionError,
    MalformedDocumentError,
    MessagesError,
)
from infrastructure.i18n.factory import create_message_service
from infrastructure.i18n.formatting import colorize, format_key, substitute
from infrastructure.i18n.loader import BundleLoader, ResolutionState
from infrastructure.i18n.models import DEFAULT_LOCALE, MessageBundle
from infrastructure.i18n.resolver import MessageResolver
from infrastructure.i18n.service import MessageService
from infrastructure.i18n.store import DocumentStore, YAMLDocumentStore

__all__ = [
    "DEFAULT_LOCALE",
    "MessageBundle",
    "format_key",
    "substitute",
    "colorize",
    "DocumentStore",
    "YAMLDocumentStore",
    "BundleLoader",
    "ResolutionState",
    "MessageResolver",
    "MessageService",
    "create_message_service",
    "MessagesError",
    "MalformedDocumentError",
    "BundlePersistenceError",
    "BundleResolutionError",
]
