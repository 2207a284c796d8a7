"""Formatting primitives for message templates.

Provides the key naming bridge used at the document boundary and the two
template transforms applied at lookup time:
- format_key: "noPermission" -> "no-permission"
- substitute: positional {0}, {1}, ... placeholders
- colorize: "&" colour markup -> section sign
"""

from typing import Any, Optional

COLOR_CHAR = "&"
SECTION_SIGN = "§"
KEY_SEPARATOR = "-"


def format_key(identifier: str) -> str:
    """Convert a compounded-capitalization identifier to an on-disk key.

    Every uppercase character is lower-cased and prefixed with a hyphen.
    Characters without case (digits, underscores) are dropped.

    Args:
        identifier: Field identifier (e.g., "noPermission").

    Returns:
        Hyphenated lower-case key (e.g., "no-permission").
    """
    chars = []
    for char in identifier:
        if char.islower():
            chars.append(char)
        elif char.isupper():
            chars.append(KEY_SEPARATOR)
            chars.append(char.lower())
    return "".join(chars)


def substitute(template: Optional[str], *args: Any) -> Optional[str]:
    """Replace "{0}", "{1}", ... "{n}" in template with positional arguments.

    Tokens without a matching argument are left as they are.

    Args:
        template: Message template, or None.
        *args: Values inserted in place of their index token.

    Returns:
        The substituted message, or None when template is None.

    Examples:
        >>> substitute("Hello, {0}! I'm {1} c:", "Notch", "NyanGuyMF")
        "Hello, Notch! I'm NyanGuyMF c:"
    """
    if template is None or not args:
        return template

    message = template
    for index, value in enumerate(args):
        message = message.replace(f"{{{index}}}", str(value))

    return message


def colorize(text: Optional[str]) -> Optional[str]:
    """Translate "&" colour markup into the section sign colour marker.

    Args:
        text: Text to translate, or None.

    Returns:
        Translated text, or None when text is None.
    """
    if text is None:
        return None

    return text.replace(COLOR_CHAR, SECTION_SIGN)
