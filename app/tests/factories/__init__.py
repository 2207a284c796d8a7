"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_message_bundle,
    make_message_document,
    write_messages_file,
)

__all__ = [
    "make_message_bundle",
    "make_message_document",
    "write_messages_file",
]
