"""Message bundle models for the i18n system.

Defines the in-memory message bundle, the compiled-in default messages and
the locale file naming convention.
"""

from dataclasses import Field, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from infrastructure.i18n.exceptions import MalformedDocumentError
from infrastructure.i18n.formatting import format_key

DEFAULT_LOCALE = "en"

MESSAGES_FILE_PREFIX = "messages_"
MESSAGES_FILE_SUFFIX = ".yml"

# Category kinds stored in dataclass field metadata
FLAT = "flat"
NESTED = "nested"

DEFAULT_INFO_MESSAGES: Dict[str, str] = {}

DEFAULT_ERROR_MESSAGES: Dict[str, str] = {
    "no-permission": "&cYou have no permission for &6{0} &ccommand.",
}

DEFAULT_HELP_MESSAGES: Dict[str, Dict[str, str]] = {}

DEFAULT_USAGE_MESSAGES: Dict[str, Dict[str, str]] = {}


def is_default_locale(locale: str) -> bool:
    """Check whether locale is the default locale, ignoring case."""
    return locale.lower() == DEFAULT_LOCALE


def messages_file(base_dir: Path, locale: str) -> Path:
    """Build the bundle file path for a locale.

    The caller-supplied case of the locale is preserved in the file name.

    Args:
        base_dir: Directory holding the bundle files.
        locale: Locale code (e.g., "en", "ru").

    Returns:
        Path like base_dir / "messages_en.yml".
    """
    return Path(base_dir) / f"{MESSAGES_FILE_PREFIX}{locale}{MESSAGES_FILE_SUFFIX}"


def locale_from_filename(filename: str) -> Optional[str]:
    """Extract the locale code from a bundle file name.

    Returns:
        Locale code, or None if filename does not follow the convention.
    """
    if not (
        filename.startswith(MESSAGES_FILE_PREFIX)
        and filename.endswith(MESSAGES_FILE_SUFFIX)
    ):
        return None
    locale = filename[len(MESSAGES_FILE_PREFIX) : -len(MESSAGES_FILE_SUFFIX)]
    return locale or None


def _copy_nested(messages: Dict[str, Dict[str, str]]) -> Dict[str, Dict[str, str]]:
    return {command: dict(subs) for command, subs in messages.items()}


def _parse_leaf(category: str, key: Any, value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        raise MalformedDocumentError(
            f"Message '{category}.{key}' must be a string, got {type(value).__name__}"
        )
    return str(value)


def _parse_flat(category: str, value: Any) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise MalformedDocumentError(
            f"Category '{category}' must be a mapping, got {type(value).__name__}"
        )
    return {str(key): _parse_leaf(category, key, leaf) for key, leaf in value.items()}


def _parse_nested(category: str, value: Any) -> Dict[str, Dict[str, str]]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise MalformedDocumentError(
            f"Category '{category}' must be a mapping, got {type(value).__name__}"
        )
    result = {}
    for command, subs in value.items():
        result[str(command)] = _parse_flat(f"{category}.{command}", subs)
    return result


@dataclass
class MessageBundle:
    """Resolved set of message categories for a single locale.

    Flat categories map a message key to a template; nested categories map
    a command to its sub-commands' templates, e.g.
    ``bundle.help["dev"]["player"]``.

    Attributes:
        locale: Locale code this bundle was resolved for.
        path: Backing bundle file, if any.
        info: Information messages {key: template}.
        error: Error messages {key: template}.
        help: Help messages {command: {sub_command: template}}.
        usage: Usage messages {command: {sub_command: template}}.
    """

    locale: str = DEFAULT_LOCALE
    path: Optional[Path] = None
    info: Dict[str, str] = field(default_factory=dict, metadata={"category": FLAT})
    error: Dict[str, str] = field(default_factory=dict, metadata={"category": FLAT})
    help: Dict[str, Dict[str, str]] = field(
        default_factory=dict, metadata={"category": NESTED}
    )
    usage: Dict[str, Dict[str, str]] = field(
        default_factory=dict, metadata={"category": NESTED}
    )

    @staticmethod
    def category_fields() -> List[Field]:
        """Get the dataclass fields persisted as document categories."""
        return [f for f in fields(MessageBundle) if "category" in f.metadata]

    @classmethod
    def defaults(
        cls, locale: str = DEFAULT_LOCALE, path: Optional[Path] = None
    ) -> "MessageBundle":
        """Create a bundle holding the compiled-in default messages.

        Args:
            locale: Locale code for the bundle.
            path: Backing file path.

        Returns:
            MessageBundle with fresh copies of the defaults.
        """
        return cls(
            locale=locale,
            path=path,
            info=dict(DEFAULT_INFO_MESSAGES),
            error=dict(DEFAULT_ERROR_MESSAGES),
            help=_copy_nested(DEFAULT_HELP_MESSAGES),
            usage=_copy_nested(DEFAULT_USAGE_MESSAGES),
        )

    @classmethod
    def from_document(
        cls, locale: str, document: Any, path: Optional[Path] = None
    ) -> "MessageBundle":
        """Build a bundle from a loaded document, merged over the defaults.

        Expected format:
        info:
          key: template
        error:
          key: template
        help:
          command:
            sub-command: template
        usage:
          command:
            sub-command: template

        Args:
            locale: Locale code for the bundle.
            document: Parsed document.
            path: Backing file path.

        Returns:
            MessageBundle with document messages overriding the defaults.

        Raises:
            MalformedDocumentError: If the document is empty or wrongly shaped.
        """
        if document is None:
            raise MalformedDocumentError("Message document is empty")
        if not isinstance(document, dict):
            raise MalformedDocumentError(
                f"Message document must be a mapping, got {type(document).__name__}"
            )

        bundle = cls.defaults(locale=locale, path=path)
        for bundle_field in cls.category_fields():
            key = format_key(bundle_field.name)
            if key not in document:
                continue

            messages = getattr(bundle, bundle_field.name)
            if bundle_field.metadata["category"] == FLAT:
                messages.update(_parse_flat(key, document[key]))
            else:
                for command, subs in _parse_nested(key, document[key]).items():
                    messages.setdefault(command, {}).update(subs)

        return bundle

    def to_document(self) -> Dict[str, Any]:
        """Serialize the message categories into a document.

        Returns:
            Dict keyed by the on-disk category names.
        """
        document: Dict[str, Any] = {}
        for bundle_field in self.category_fields():
            messages = getattr(self, bundle_field.name)
            if bundle_field.metadata["category"] == FLAT:
                document[format_key(bundle_field.name)] = dict(messages)
            else:
                document[format_key(bundle_field.name)] = _copy_nested(messages)
        return document
