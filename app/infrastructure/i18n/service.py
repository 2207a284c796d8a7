"""Message service holding the process-wide active message bundle.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

import threading
from typing import Any, List, Optional

from infrastructure.i18n.loader import BundleLoader
from infrastructure.i18n.models import DEFAULT_LOCALE
from infrastructure.i18n.resolver import MessageResolver
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class MessageService:
    """Context object owning the active MessageResolver.

    Loading builds a complete new bundle first and then replaces the single
    resolver reference, so lookups running on other threads see either the
    old bundle or the new one, never a partial one. Reloads are serialized;
    once a bundle is published, lookups take no lock and do no I/O. A lookup
    on a service that was never loaded resolves the bundle once, under the
    reload lock.

    Usage:
        loader = BundleLoader(Path("./data"))
        service = MessageService(loader, locale="ru")
        service.load()

        text = service.error("no-permission", "whitelist")

        # Explicit reload command
        service.reload("en")
    """

    def __init__(self, loader: BundleLoader, locale: str = DEFAULT_LOCALE):
        """Initialize message service.

        Args:
            loader: BundleLoader used to resolve bundles.
            locale: Locale requested when no locale is passed to load().
        """
        self.loader = loader
        self.requested_locale = locale
        self._resolver: Optional[MessageResolver] = None
        self._reload_lock = threading.Lock()

    @property
    def resolver(self) -> MessageResolver:
        """Get the active resolver, loading the requested locale on first use."""
        resolver = self._resolver
        if resolver is None:
            with self._reload_lock:
                resolver = self._resolver
                if resolver is None:
                    resolver = self._publish(self.requested_locale)
        return resolver

    @property
    def locale(self) -> str:
        """Get the locale of the active bundle."""
        return self.resolver.locale

    @property
    def is_loaded(self) -> bool:
        """Check if a bundle has been published."""
        return self._resolver is not None

    def load(self, locale: Optional[str] = None) -> MessageResolver:
        """Resolve a bundle and publish it as the active one.

        Args:
            locale: Locale to request. Defaults to the last requested locale.

        Returns:
            The newly published MessageResolver.

        Raises:
            BundleResolutionError: If the default locale bundle cannot be created.
        """
        with self._reload_lock:
            return self._publish(locale or self.requested_locale)

    def reload(self, locale: Optional[str] = None) -> MessageResolver:
        """Reload bundle files from disk, keeping the current locale by default.

        Args:
            locale: Locale to switch to, if any.

        Returns:
            The newly published MessageResolver.
        """
        return self.load(locale)

    def _publish(self, requested: str) -> MessageResolver:
        """Resolve a bundle and swap it in. Caller holds _reload_lock."""
        resolver = MessageResolver(self.loader.resolve(requested))
        self.requested_locale = requested
        self._resolver = resolver

        logger.info(
            "published_message_bundle",
            requested_locale=requested,
            locale=resolver.locale,
        )
        return resolver

    def available_locales(self) -> List[str]:
        """Get locale codes with a bundle file on disk."""
        return self.loader.available_locales()

    def info(self, key: str, *args: Any, colored: bool = True) -> Optional[str]:
        """Get an information message. See MessageResolver.info()."""
        return self.resolver.info(key, *args, colored=colored)

    def error(self, key: str, *args: Any, colored: bool = True) -> Optional[str]:
        """Get an error message. See MessageResolver.error()."""
        return self.resolver.error(key, *args, colored=colored)

    def help(
        self, command: str, sub_command: str, *args: Any, colored: bool = True
    ) -> Optional[str]:
        """Get a help message. See MessageResolver.help()."""
        return self.resolver.help(command, sub_command, *args, colored=colored)

    def usage(
        self, command: str, sub_command: str, *args: Any, colored: bool = True
    ) -> Optional[str]:
        """Get a usage message. See MessageResolver.usage()."""
        return self.resolver.usage(command, sub_command, *args, colored=colored)

    def all_help_for(self, command: str, colored: bool = True) -> Optional[List[str]]:
        """Get all help messages of a command. See MessageResolver.all_help_for()."""
        return self.resolver.all_help_for(command, colored=colored)
