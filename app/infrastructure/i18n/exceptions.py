"""Custom exceptions for the message bundle system.

Only BundleResolutionError ever escapes BundleLoader.resolve(); the other
exceptions are raised by the document store and bundle construction and are
absorbed by the loader's fallback protocol.
"""


class MessagesError(Exception):
    """Base exception for all message bundle errors.

    Example:
        try:
            service.load("ru")
        except MessagesError as e:
            logger.error("messages_error", error=str(e))
    """

    pass


class MalformedDocumentError(MessagesError, ValueError):
    """Raised when a bundle document is empty, unparsable or wrongly shaped.

    Example:
        >>> MessageBundle.from_document("en", None)
        Traceback (most recent call last):
        ...
        MalformedDocumentError: Message document is empty
    """

    pass


class BundlePersistenceError(MessagesError):
    """Raised when a bundle file cannot be created, written or deleted."""

    pass


class BundleResolutionError(MessagesError):
    """Raised when not even the default locale bundle can be created.

    This is the single fatal failure of locale resolution; the system has no
    valid message state to operate on.
    """

    pass
