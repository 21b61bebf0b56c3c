"""WealthChat: slot-filling wealth projection chatbot."""

__version__ = "0.1.0"
