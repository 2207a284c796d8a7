"""Document store interface and implementations.

Defines the contract for reading and writing bundle documents and provides
the YAML-based store used for messages_<locale>.yml files.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml

from infrastructure.i18n.exceptions import BundlePersistenceError, MalformedDocumentError
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class DocumentStore(ABC):
    """Abstract base for bundle document stores.

    Implementations map a file path to a nested key-value document and back.
    """

    def exists(self, path: Path) -> bool:
        """Check whether a document file exists at path."""
        return Path(path).is_file()

    @abstractmethod
    def load(self, path: Path) -> Any:
        """Load the document stored at path.

        Args:
            path: Document file path.

        Returns:
            Parsed document (None for an empty file).

        Raises:
            FileNotFoundError: If the file does not exist.
            MalformedDocumentError: If the content cannot be parsed.
        """
        pass

    @abstractmethod
    def save(self, path: Path, document: Any) -> None:
        """Persist a document to path, replacing any previous content.

        Raises:
            BundlePersistenceError: If the document cannot be written.
        """
        pass

    def create(self, path: Path) -> None:
        """Create an empty document file, including parent directories.

        Raises:
            BundlePersistenceError: If the file cannot be created.
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
        except OSError as e:
            raise BundlePersistenceError(f"Failed to create {path}: {e}") from e

    def delete(self, path: Path) -> None:
        """Delete the document file at path if it exists.

        Raises:
            BundlePersistenceError: If the file exists but cannot be removed.
        """
        path = Path(path)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise BundlePersistenceError(f"Failed to delete {path}: {e}") from e


class YAMLDocumentStore(DocumentStore):
    """Document store for YAML bundle files.

    Writes go to a temporary sibling file which is then renamed over the
    target, so a failed write never leaves a half-written bundle behind.
    """

    def load(self, path: Path) -> Any:
        """Load and parse a YAML document.

        Args:
            path: YAML file path.

        Returns:
            Parsed document, or None for an empty file.

        Raises:
            FileNotFoundError: If the file does not exist.
            MalformedDocumentError: If YAML parsing or decoding fails.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise MalformedDocumentError(f"Failed to parse {path}: {e}") from e

    def save(self, path: Path, document: Any) -> None:
        """Dump a document as YAML.

        Args:
            path: YAML file path.
            document: Document to write.

        Raises:
            BundlePersistenceError: If the file cannot be written.
        """
        path = Path(path)
        temp_file = path.with_name(f"{path.name}.tmp")
        try:
            with open(temp_file, "w", encoding="utf-8") as f:
                yaml.safe_dump(
                    document,
                    f,
                    allow_unicode=True,
                    default_flow_style=False,
                    sort_keys=False,
                )
            os.replace(temp_file, path)
        except (OSError, yaml.YAMLError) as e:
            temp_file.unlink(missing_ok=True)
            raise BundlePersistenceError(f"Failed to write {path}: {e}") from e

        logger.debug("saved_document", file=str(path))
