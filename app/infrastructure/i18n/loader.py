"""Bundle loading with locale fallback and default-locale self-healing.

Resolution runs as a two-state machine:

    REQUESTED --(missing or corrupt file)--> DEFAULT

The DEFAULT state always ends with a bundle: an absent or corrupt default
locale file is (re)created from the compiled-in defaults. If even that
fails, BundleResolutionError is raised; it is the only exception that
leaves resolve().
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from structlog.stdlib import BoundLogger

from infrastructure.i18n.exceptions import (
    BundlePersistenceError,
    BundleResolutionError,
    MalformedDocumentError,
)
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    MESSAGES_FILE_PREFIX,
    MESSAGES_FILE_SUFFIX,
    MessageBundle,
    is_default_locale,
    locale_from_filename,
    messages_file,
)
from infrastructure.i18n.store import DocumentStore, YAMLDocumentStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class ResolutionState(str, Enum):
    """States of the locale resolution protocol."""

    REQUESTED = "requested"
    DEFAULT = "default"


class BundleLoader:
    """Resolves a usable MessageBundle for a requested locale.

    A single resolve() call may create, overwrite or delete bundle files in
    base_dir; those writes are part of the repair protocol.

    Attributes:
        base_dir: Directory holding messages_<locale>.yml files.
        store: DocumentStore used to read and write bundle documents.
    """

    def __init__(self, base_dir: Path, store: Optional[DocumentStore] = None):
        """Initialize the bundle loader.

        Args:
            base_dir: Directory holding the bundle files.
            store: Document store (default: YAMLDocumentStore).
        """
        self.base_dir = Path(base_dir)
        self.store = store or YAMLDocumentStore()

        logger.info("initialized_bundle_loader", base_dir=str(self.base_dir))

    def resolve(self, requested_locale: str) -> MessageBundle:
        """Resolve the bundle for a locale, falling back to the default locale.

        Args:
            requested_locale: Locale code (e.g., "ru"). Compared to the
                default locale case-insensitively.

        Returns:
            MessageBundle for the requested locale, or for the default locale
            when the requested one is missing or corrupt.

        Raises:
            BundleResolutionError: If the default locale bundle cannot be
                created or persisted.
        """
        self._ensure_base_dir()

        state = ResolutionState.REQUESTED
        bundle = self._attempt(requested_locale, state)

        if bundle is None:
            state = ResolutionState.DEFAULT
            bundle = self._attempt(DEFAULT_LOCALE, state)

        logger.info(
            "resolved_message_bundle",
            requested_locale=requested_locale,
            locale=bundle.locale,
            state=state.value,
        )
        return bundle

    def available_locales(self) -> List[str]:
        """Get locale codes of the bundle files present in base_dir.

        Returns:
            Sorted list of locale codes.
        """
        if not self.base_dir.is_dir():
            return []

        pattern = f"{MESSAGES_FILE_PREFIX}*{MESSAGES_FILE_SUFFIX}"
        locales = []
        for bundle_file in self.base_dir.glob(pattern):
            locale = locale_from_filename(bundle_file.name)
            if locale and bundle_file.is_file():
                locales.append(locale)
        return sorted(locales)

    def _attempt(self, locale: str, state: ResolutionState) -> Optional[MessageBundle]:
        """Try to produce a bundle for locale.

        Returns:
            MessageBundle, or None when the caller should move on to the
            default locale. Never None for the default locale.
        """
        path = messages_file(self.base_dir, locale)
        is_default = is_default_locale(locale)
        log = logger.bind(locale=locale, state=state.value, file=str(path))

        if is_default and not self.store.exists(path):
            return self._seed_default(locale, path, log)

        try:
            document = self.store.load(path)
            bundle = MessageBundle.from_document(locale, document, path=path)
            # Normalize the file and fill in missing defaults
            self.store.save(path, bundle.to_document())
        except FileNotFoundError:
            log.warning("locale_file_not_found")
            if is_default:
                return self._seed_default(locale, path, log)
            return None
        except (MalformedDocumentError, BundlePersistenceError, OSError) as e:
            log.warning("locale_file_load_failed", error=str(e))
            self._discard(path, log, fatal=is_default)
            if is_default:
                return self._seed_default(locale, path, log)
            return None

        log.debug("locale_file_loaded")
        return bundle

    def _seed_default(self, locale: str, path: Path, log: BoundLogger) -> MessageBundle:
        """Create the default locale file from the compiled-in defaults."""
        bundle = MessageBundle.defaults(locale=locale, path=path)
        try:
            self.store.create(path)
            self.store.save(path, bundle.to_document())
        except BundlePersistenceError as e:
            log.error("default_locale_seed_failed", error=str(e))
            raise BundleResolutionError(
                f"Unable to create default locale bundle at {path}: {e}"
            ) from e

        log.info("default_locale_seeded")
        return bundle

    def _discard(self, path: Path, log: BoundLogger, fatal: bool) -> None:
        """Delete a bundle file that failed to load."""
        try:
            self.store.delete(path)
        except BundlePersistenceError as e:
            log.error("locale_file_delete_failed", error=str(e))
            if fatal:
                raise BundleResolutionError(
                    f"Unable to remove corrupt default locale bundle at {path}: {e}"
                ) from e
            return

        log.info("locale_file_deleted")

    def _ensure_base_dir(self) -> None:
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(
                "bundle_directory_create_failed",
                base_dir=str(self.base_dir),
                error=str(e),
            )
            raise BundleResolutionError(
                f"Unable to create bundle directory {self.base_dir}: {e}"
            ) from e
