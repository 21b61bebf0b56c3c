# PURPOSE: Failure categories for external responder calls.
# CONTEXT: The retry helper decides what to retry from the class alone; the
#          DialogueManager maps each class to its own user-facing message.


class ResponderError(RuntimeError):
    """Non-retryable responder failure (bad request, unexpected payload, ...)."""
    category = "generic"


class TransientResponderError(ResponderError):
    """Temporary failure (5xx, connection reset); worth retrying."""
    category = "generic"


class ResponderTimeout(TransientResponderError):
    category = "timeout"


class ResponderRateLimited(ResponderError):
    category = "rate_limited"


class ResponderAuthError(ResponderError):
    category = "auth"
