"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- Message documents as stored in messages_<locale>.yml
- MessageBundle
- Bundle files on disk
"""

from pathlib import Path
from typing import Optional

import yaml

from infrastructure.i18n import MessageBundle
from infrastructure.i18n.models import messages_file


def make_message_document(
    info: Optional[dict] = None,
    error: Optional[dict] = None,
    help: Optional[dict] = None,
    usage: Optional[dict] = None,
) -> dict:
    """Create a message document.

    Args:
        info: Information messages {key: template}.
        error: Error messages {key: template}.
        help: Help messages {command: {sub_command: template}}.
        usage: Usage messages {command: {sub_command: template}}.

    Returns:
        Document dict with all four categories.
    """
    return {
        "info": info
        if info is not None
        else {
            "reloaded": "&aMessages reloaded.",
            "greeting": "Hello, {0}! I'm {1} c:",
            "farewell": "Bye &a{0}",
        },
        "error": error
        if error is not None
        else {
            "no-permission": "&cYou have no permission for &6{0} &ccommand.",
            "player-not-found": "&cPlayer &6{0} &cnot found.",
        },
        "help": help
        if help is not None
        else {
            "dev": {
                "player": "&e/dev player <name> &7- show player info",
                "reload": "&e/dev reload &7- reload messages",
            },
            "empty": {},
        },
        "usage": usage
        if usage is not None
        else {
            "dev": {
                "player": "&cUsage: /dev player {0}",
            },
        },
    }


def make_message_bundle(
    locale: str = "en",
    document: Optional[dict] = None,
    path: Optional[Path] = None,
) -> MessageBundle:
    """Create a MessageBundle from a message document.

    Args:
        locale: Locale code for the bundle.
        document: Message document (default: make_message_document()).
        path: Backing file path.

    Returns:
        MessageBundle instance.
    """
    if document is None:
        document = make_message_document()
    return MessageBundle.from_document(locale, document, path=path)


def write_messages_file(
    base_dir: Path,
    locale: str,
    document: Optional[dict] = None,
    raw: Optional[str] = None,
) -> Path:
    """Write a messages_<locale>.yml file.

    Args:
        base_dir: Directory to write into.
        locale: Locale code used in the file name.
        document: Document dumped as YAML (default: make_message_document()).
        raw: Raw file content written instead of a document.

    Returns:
        Path of the written file.
    """
    path = messages_file(base_dir, locale)
    path.parent.mkdir(parents=True, exist_ok=True)
    if raw is not None:
        path.write_text(raw, encoding="utf-8")
        return path

    if document is None:
        document = make_message_document()
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(document, f, allow_unicode=True, sort_keys=False)
    return path
