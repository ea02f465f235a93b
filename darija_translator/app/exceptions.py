class TranslationError(Exception):
    """Raised when a translation cannot be produced by the chat API."""


class UpstreamError(TranslationError):
    """The chat API answered, but not with a usable translation."""


class TransportError(TranslationError):
    """The chat API could not be reached or did not answer in time."""
