from wealthchat.responders.base import ExternalResponder, ResponderRequest
from wealthchat.responders.errors import (
    ResponderAuthError,
    ResponderError,
    ResponderRateLimited,
    ResponderTimeout,
    TransientResponderError,
)
from wealthchat.responders.loader import load_responder
from wealthchat.responders.retry import call_with_retry

__all__ = [
    "ExternalResponder",
    "ResponderRequest",
    "ResponderError",
    "TransientResponderError",
    "ResponderTimeout",
    "ResponderRateLimited",
    "ResponderAuthError",
    "load_responder",
    "call_with_retry",
]
