"""Message lookup with placeholder substitution and colour translation.

Every lookup returns None for an absent message instead of raising; what to
show when a message is missing is the caller's decision.
"""

from typing import Any, Dict, List, Optional

from infrastructure.i18n.formatting import colorize, substitute
from infrastructure.i18n.models import MessageBundle


class MessageResolver:
    """Answers message lookups against a single resolved MessageBundle.

    Formatting pipeline for every lookup:
        raw template -> substitute(args) -> colorize (when colored)

    Substitution runs on the raw template, so "&" inside arguments is
    translated together with the template's own markup:

        >>> resolver.info("farewell", "&bX")  # template "Bye &a{0}"
        "Bye §a§bX"

    Attributes:
        bundle: The MessageBundle lookups are answered from.
    """

    def __init__(self, bundle: MessageBundle):
        self._bundle = bundle

    @property
    def bundle(self) -> MessageBundle:
        """Get the bundle lookups are answered from."""
        return self._bundle

    @property
    def locale(self) -> str:
        """Get the locale of the underlying bundle."""
        return self._bundle.locale

    def info(self, key: str, *args: Any, colored: bool = True) -> Optional[str]:
        """Get an information message.

        Args:
            key: Message key (e.g., "reloaded").
            *args: Values for the {0}, {1}, ... placeholders.
            colored: If True, translate "&" colour markup.

        Returns:
            Formatted message, or None if there is no message for key.
        """
        return self._format(self._bundle.info.get(key), args, colored)

    def error(self, key: str, *args: Any, colored: bool = True) -> Optional[str]:
        """Get an error message.

        Args:
            key: Message key (e.g., "no-permission").
            *args: Values for the {0}, {1}, ... placeholders.
            colored: If True, translate "&" colour markup.

        Returns:
            Formatted message, or None if there is no message for key.
        """
        return self._format(self._bundle.error.get(key), args, colored)

    def help(
        self, command: str, sub_command: str, *args: Any, colored: bool = True
    ) -> Optional[str]:
        """Get the help message for a command's sub-command.

        Example: ``help("dev", "player")`` reads ``help["dev"]["player"]``.

        Args:
            command: Command that owns the sub-command.
            sub_command: Sub-command to get help for.
            *args: Values for the {0}, {1}, ... placeholders.
            colored: If True, translate "&" colour markup.

        Returns:
            Formatted message, or None if the command or sub-command is absent.
        """
        return self._format(
            self._lookup(self._bundle.help, command, sub_command), args, colored
        )

    def usage(
        self, command: str, sub_command: str, *args: Any, colored: bool = True
    ) -> Optional[str]:
        """Get the usage message for a command's sub-command.

        Args:
            command: Command that owns the sub-command.
            sub_command: Sub-command to get usage for.
            *args: Values for the {0}, {1}, ... placeholders.
            colored: If True, translate "&" colour markup.

        Returns:
            Formatted message, or None if the command or sub-command is absent.
        """
        return self._format(
            self._lookup(self._bundle.usage, command, sub_command), args, colored
        )

    def all_help_for(self, command: str, colored: bool = True) -> Optional[List[str]]:
        """Get every help message of a command, one per sub-command.

        Args:
            command: Command to get help messages for.
            colored: If True, translate "&" colour markup.

        Returns:
            Help messages in sub-command order, an empty list for a command
            without sub-commands, or None if the command is absent.
        """
        sub_commands = self._bundle.help.get(command)
        if sub_commands is None:
            return None

        if colored:
            return [colorize(message) for message in sub_commands.values()]
        return list(sub_commands.values())

    def has_info(self, key: str) -> bool:
        """Check if an information message exists for key."""
        return key in self._bundle.info

    def has_error(self, key: str) -> bool:
        """Check if an error message exists for key."""
        return key in self._bundle.error

    def has_help(self, command: str, sub_command: str) -> bool:
        """Check if a help message exists for command and sub-command."""
        return self._lookup(self._bundle.help, command, sub_command) is not None

    def has_usage(self, command: str, sub_command: str) -> bool:
        """Check if a usage message exists for command and sub-command."""
        return self._lookup(self._bundle.usage, command, sub_command) is not None

    @staticmethod
    def _lookup(
        messages: Dict[str, Dict[str, str]], command: str, sub_command: str
    ) -> Optional[str]:
        sub_commands = messages.get(command)
        if sub_commands is None:
            return None
        return sub_commands.get(sub_command)

    @staticmethod
    def _format(template: Optional[str], args: tuple, colored: bool) -> Optional[str]:
        message = substitute(template, *args)
        return colorize(message) if colored else message
