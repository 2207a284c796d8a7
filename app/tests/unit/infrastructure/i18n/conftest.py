"""Feature-level fixtures for i18n system tests.

Provides data directories, loaders and resolvers for locale resolution and
message lookup scenarios.
"""

import pytest

from infrastructure.i18n import BundleLoader, MessageResolver, YAMLDocumentStore
from infrastructure.i18n.exceptions import BundlePersistenceError
from tests.factories.i18n import make_message_bundle, write_messages_file


class FailingWriteStore(YAMLDocumentStore):
    """YAML store whose writes always fail."""

    def create(self, path):
        raise BundlePersistenceError(f"read-only: {path}")

    def save(self, path, document):
        raise BundlePersistenceError(f"read-only: {path}")


@pytest.fixture
def data_dir(tmp_path):
    """Empty plug-in data directory."""
    directory = tmp_path / "plugin"
    directory.mkdir()
    return directory


@pytest.fixture
def populated_data_dir(data_dir):
    """Data directory with valid en and ru bundle files.

    Returns a directory structure like:
    - messages_en.yml
    - messages_ru.yml
    """
    write_messages_file(data_dir, "en")
    write_messages_file(
        data_dir,
        "ru",
        document={
            "info": {"reloaded": "&aСообщения перезагружены."},
            "error": {"no-permission": "&cУ вас нет прав на команду &6{0}&c."},
            "help": {"dev": {"player": "&e/dev player <ник>"}},
            "usage": {},
        },
    )
    return data_dir


@pytest.fixture
def bundle_loader(data_dir):
    """BundleLoader over the empty data directory."""
    return BundleLoader(data_dir)


@pytest.fixture
def failing_store():
    """Document store that cannot write anything."""
    return FailingWriteStore()


@pytest.fixture
def message_bundle():
    """MessageBundle built from the default test document."""
    return make_message_bundle()


@pytest.fixture
def resolver(message_bundle):
    """MessageResolver over the default test bundle."""
    return MessageResolver(message_bundle)
