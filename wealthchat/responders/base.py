from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ResponderRequest:
    """
    Everything an external responder sees for one free-chat turn.

    attributes:
    - message: str – the user's (guardrail-approved) message.
    - system_prompt: str – role and topic boundaries, already branded.
    - history: list – prior {"role", "content"} messages, oldest first.
    - projection_summary: str|None – compact text summary of the user's projection.
    """
    message: str
    system_prompt: str
    history: List[Dict[str, str]] = field(default_factory=list)
    projection_summary: Optional[str] = None

    def user_content(self) -> str:
        if not self.projection_summary:
            return self.message
        return f"{self.projection_summary}\n\nUser question: {self.message}"


class ExternalResponder:
    """Interface for remote language-model responders."""

    name = "base"

    async def generate(self, request: ResponderRequest) -> str:
        raise NotImplementedError
