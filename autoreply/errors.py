"""Error kinds raised across the reply pipeline."""


class AutoReplyError(Exception):
    """Base class for every error the reply pipeline raises on purpose."""


class ValidationError(AutoReplyError):
    """Operator input was malformed; nothing was changed."""


class TransportError(AutoReplyError):
    """The messaging provider refused or failed to take an outbound message."""


class AIBackendError(AutoReplyError):
    """The generative-text backend could not produce a usable reply."""


class InternalError(AutoReplyError):
    """Unexpected failure while handling an inbound message."""
