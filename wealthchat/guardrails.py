"""
Rule-based guardrails for free-chat turns.

PURPOSE:
- Block jailbreak, PII and inappropriate messages with fixed responses.
- Flag requests for specific investment advice so the caller adds a disclaimer.
- Decide whether a message is about personal finance at all.
- Label the message intent so local replies can be chosen without a model.

CONTEXT:
- Called by DialogueManager before any external responder is consulted.
- Every function here is pure and total: None or non-string input is coerced to
  text and nothing raises. Raw user text is never logged, only lengths and labels.
"""

from __future__ import annotations
from typing import Iterable

import structlog

from wealthchat.constants.messages import GUARDRAIL_RESPONSES
from wealthchat.constants.topics import (
    ALLOWED_TOPICS,
    FINANCIAL_ADVICE_PATTERNS,
    FINANCIAL_INDICATORS,
    INAPPROPRIATE_PATTERNS,
    INTENT_PATTERNS,
    JAILBREAK_PATTERNS,
    OFF_TOPIC_CATEGORIES,
    OFF_TOPIC_KEYWORDS,
    PII_PATTERNS,
)
from wealthchat.model_interface.types import GuardrailVerdict, TopicDefinition

log = structlog.get_logger(__name__)

SHORT_MESSAGE_CHARS = 10

# (patterns, category, severity, allowed); evaluated in order, first match wins.
_SAFETY_RULES = (
    (JAILBREAK_PATTERNS, "jailbreak-attempt", "high", False),
    (PII_PATTERNS, "pii-request", "medium", False),
    (INAPPROPRIATE_PATTERNS, "inappropriate", "medium", False),
    (FINANCIAL_ADVICE_PATTERNS, "financial-advice", "low", True),
)


def _as_text(text) -> str:
    if text is None:
        return ""
    return text if isinstance(text, str) else str(text)


def check_guardrails(text) -> GuardrailVerdict:
    """
    Run the safety checks in priority order.

    parameters:
    - text: str – the user's message (anything else is coerced to str).

    returns:
    - GuardrailVerdict – blocked verdicts carry a canned response; a
      financial-advice verdict is allowed with severity "low" and an empty
      response so the caller answers and appends a disclaimer.
    """
    message = _as_text(text).strip()
    if len(message) < 2:
        return GuardrailVerdict(allowed=True, category="allowed", reason="trivial")

    for patterns, category, severity, allowed in _SAFETY_RULES:
        for pattern in patterns:
            if pattern.search(message):
                verdict = GuardrailVerdict(
                    allowed=allowed,
                    category=category,
                    response="" if allowed else GUARDRAIL_RESPONSES[category],
                    severity=severity,
                    reason=f"pattern:{category}",
                )
                if allowed:
                    log.info("guardrail.flagged", category=category, chars=len(message))
                else:
                    log.warning("guardrail.blocked", category=category, severity=severity, chars=len(message))
                return verdict

    return GuardrailVerdict(allowed=True, category="allowed")


def topic_score(text, topics: Iterable[TopicDefinition] = ALLOWED_TOPICS) -> int:
    """
    Relevance score: priority per keyword hit, double priority per pattern hit,
    plus one per generic financial indicator word.
    """
    lowered = _as_text(text).lower()
    score = 0
    for topic in topics:
        for keyword in topic.keywords:
            if keyword in lowered:
                score += topic.priority
        for pattern in topic.patterns:
            if pattern.search(lowered):
                score += topic.priority * 2
    score += sum(1 for word in FINANCIAL_INDICATORS if word in lowered)
    return score


def off_topic_count(text) -> int:
    lowered = _as_text(text).lower()
    return sum(1 for keyword in OFF_TOPIC_KEYWORDS if keyword in lowered)


def is_on_topic(text, topics: Iterable[TopicDefinition] = ALLOWED_TOPICS) -> bool:
    """
    True when the message is plausibly about personal finance.

    notes:
    - Messages shorter than 10 characters (numbers, "yes", "thanks") always pass.
    - A message with no off-topic keyword passes regardless of its score.
    - Keyword matching is by substring, so "api" also matches inside "capital".
    """
    message = _as_text(text)
    if len(message) < SHORT_MESSAGE_CHARS:
        return True
    off_topic = off_topic_count(message)
    if off_topic == 0:
        return True
    score = topic_score(message, topics)
    on_topic = score > off_topic * 2
    log.debug("guardrail.topic_scored", score=score, off_topic=off_topic, on_topic=on_topic)
    return on_topic


def off_topic_category(text) -> str:
    """Pick the redirect flavour for an off-topic message ('general' if none fits)."""
    lowered = _as_text(text).lower()
    for category, keywords in OFF_TOPIC_CATEGORIES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return "general"


def classify_intent(text) -> str:
    """Return the first matching intent label, or 'general'."""
    message = _as_text(text)
    for label, pattern in INTENT_PATTERNS:
        if pattern.search(message):
            return label
    return "general"
