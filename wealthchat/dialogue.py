"""
Slot-filling dialogue for the wealth projection chatbot.

PURPOSE:
- Walk the user through one question per profile field, re-prompting on bad answers.
- Run the projection once the profile is complete and switch to free chat.
- In free chat: guardrails first, then restart detection, topic relevance, and
  finally the external responder (or a local reply).

CONTEXT:
- The conversation is an immutable ConversationState passed in and returned on
  every call; the DialogueManager itself holds no per-conversation data, so one
  instance can serve many conversations.
- Only the responder call suspends, hence handle_turn() is async.
  handle_turn_sync() wraps it for the CLI and the Lambda handler.
"""

from __future__ import annotations
import asyncio
import math
import os
from dataclasses import dataclass, field, replace
from enum import Enum
from functools import lru_cache
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple

import structlog

from wealthchat.agent_io import make_ok_message, make_user_message
from wealthchat.config import Settings, load_settings
from wealthchat.constants.messages import (
    BONUS_SUGGESTION,
    OFF_TOPIC_RESPONSES,
    RESPONDER_FAILURES,
    RESTART_PROMPT,
    SHORT_DISCLAIMER,
    STAGE_PROMPTS,
    VALIDATION_ERRORS,
)
from wealthchat.constants.projection import PROFILE_BOUNDS
from wealthchat.formatting import format_currency, projection_context, projection_message
from wealthchat.guardrails import check_guardrails, classify_intent, is_on_topic, off_topic_category
from wealthchat.local_advice import local_reply
from wealthchat.model_interface.loader import load_model
from wealthchat.model_interface.projection_model import Clock, ProjectionModel
from wealthchat.model_interface.types import (
    FinancialProfile,
    GuardrailVerdict,
    PartialProfile,
    ProjectionResult,
)
from wealthchat.responders.base import ExternalResponder, ResponderRequest
from wealthchat.responders.errors import ResponderError
from wealthchat.responders.loader import load_responder
from wealthchat.responders.retry import call_with_retry
from wealthchat.tools.calculators import suggested_bonus_savings
from wealthchat.utils.input_parser import parse_amount

log = structlog.get_logger(__name__)

PROMPT_PATH = os.path.join(os.path.dirname(__file__), "prompts", "wealth_system_prompt.md")


class Stage(str, Enum):
    GREETING = "greeting"
    AGE = "age"
    INCOME = "income"
    CURRENT_SAVINGS = "current_savings"
    MONTHLY_SAVINGS = "monthly_savings"
    MONTHLY_INVESTMENT = "monthly_investment"
    INCREASE_GOAL = "increase_goal"
    BONUS_SAVINGS = "bonus_savings"
    PROJECTION = "projection"
    FREE_CHAT = "free_chat"


# stage -> (profile field collected, stage that follows)
COLLECTION_STEPS: Mapping[Stage, Tuple[str, Stage]] = {
    Stage.GREETING: ("age", Stage.INCOME),
    Stage.AGE: ("age", Stage.INCOME),
    Stage.INCOME: ("annual_income", Stage.CURRENT_SAVINGS),
    Stage.CURRENT_SAVINGS: ("current_savings", Stage.MONTHLY_SAVINGS),
    Stage.MONTHLY_SAVINGS: ("monthly_savings", Stage.MONTHLY_INVESTMENT),
    Stage.MONTHLY_INVESTMENT: ("monthly_investment", Stage.INCREASE_GOAL),
    Stage.INCREASE_GOAL: ("increase_percentage", Stage.BONUS_SAVINGS),
    Stage.BONUS_SAVINGS: ("bonus_savings", Stage.PROJECTION),
}


@dataclass(frozen=True)
class ConversationState:
    """
    Everything the caller must keep between turns.

    attributes:
    - stage: Stage – the question currently being asked.
    - profile: PartialProfile – fields collected so far.
    - history: tuple – recent free-chat messages ({"role", "content"}), oldest first.
    - projection: ProjectionResult|None – set on entering free chat; not serialised.
    """
    stage: Stage = Stage.GREETING
    profile: PartialProfile = field(default_factory=PartialProfile)
    history: Tuple[Dict[str, str], ...] = ()
    projection: Optional[ProjectionResult] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stage": self.stage.value,
            "profile": self.profile.to_dict(),
            "history": [dict(m) for m in self.history],
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ConversationState":
        """
        Rebuild a state from to_dict() output.

        raises:
        - ValueError – unknown stage name.
        """
        data = data or {}
        return cls(
            stage=Stage(data.get("stage") or Stage.GREETING.value),
            profile=PartialProfile.from_dict(data.get("profile")),
            history=tuple(
                {"role": str(m["role"]), "content": str(m["content"])}
                for m in data.get("history") or ()
            ),
        )


@dataclass(frozen=True)
class TurnResult:
    reply: str
    state: ConversationState
    verdict: Optional[GuardrailVerdict] = None
    intent: Optional[str] = None
    dispatched: bool = False


@lru_cache(maxsize=4)
def load_system_prompt(company: str) -> str:
    with open(PROMPT_PATH, "r", encoding="utf-8") as f:
        return f.read().replace("{company}", company)


def _in_bounds(field_name: str, value: float) -> bool:
    low, high = PROFILE_BOUNDS[field_name]
    if not math.isfinite(value) or value < low or value > high:
        return False
    if field_name == "age" and value != int(value):
        return False
    return True


class DialogueManager:
    """
    Stateless driver for the conversation state machine.

    parameters:
    - model: ProjectionModel|None – defaults to load_model().
    - responder: ExternalResponder|None – defaults to load_responder(settings);
      None there means local replies only.
    - settings: Settings|None – defaults to load_settings().
    - clock: callable|None – forwarded to the projection engine for as_of.
    - sleep: awaitable sleep used between responder retries.
    """

    def __init__(
        self,
        model: Optional[ProjectionModel] = None,
        responder: Optional[ExternalResponder] = None,
        settings: Optional[Settings] = None,
        clock: Optional[Clock] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.settings = settings or load_settings()
        self.model = model or load_model()
        self.responder = responder if responder is not None else load_responder(self.settings)
        self.clock = clock
        self._sleep = sleep

    @property
    def company(self) -> str:
        return self.settings.company_name

    # ---- public API ---------------------------------------------------------

    def new_conversation(self) -> ConversationState:
        return ConversationState()

    def start(self, state: Optional[ConversationState] = None) -> TurnResult:
        state = state or self.new_conversation()
        return TurnResult(reply=self._prompt(state.stage, state.profile), state=state)

    async def handle_turn(self, state: ConversationState, text) -> TurnResult:
        """
        Apply one user message to the conversation.

        parameters:
        - state: ConversationState – current state (never modified).
        - text: str – the user's message.

        returns:
        - TurnResult – reply text plus the next state.

        raises:
        - ProfileError – a completed profile fails the engine's invariants.
        """
        text = "" if text is None else str(text)
        if state.stage in COLLECTION_STEPS:
            return self._collect(state, text)
        if state.stage == Stage.PROJECTION:
            return self._enter_free_chat(state)
        return await self._free_chat(state, text)

    def handle_turn_sync(self, state: ConversationState, text) -> TurnResult:
        return asyncio.run(self.handle_turn(state, text))

    # ---- data collection ----------------------------------------------------

    def _prompt(self, stage: Stage, profile: PartialProfile) -> str:
        if stage == Stage.BONUS_SAVINGS:
            amount = suggested_bonus_savings(profile.annual_income or 0)
            suggestion = BONUS_SUGGESTION.format(company=self.company, amount=format_currency(amount))
            return STAGE_PROMPTS["bonus_savings"].format(company=self.company, suggestion=suggestion)
        return STAGE_PROMPTS[stage.value].format(company=self.company)

    def _collect(self, state: ConversationState, text: str) -> TurnResult:
        field_name, next_stage = COLLECTION_STEPS[state.stage]
        value = parse_amount(text)

        if value is None:
            log.info("turn.validation_failed", stage=state.stage.value, reason="unparseable")
            return TurnResult(reply=VALIDATION_ERRORS["unparseable"], state=state)
        if not _in_bounds(field_name, value):
            log.info("turn.validation_failed", stage=state.stage.value, reason="out_of_range")
            return TurnResult(reply=VALIDATION_ERRORS[field_name].format(company=self.company), state=state)

        profile = state.profile.merge(**{field_name: int(value) if field_name == "age" else value})
        advanced = replace(state, stage=next_stage, profile=profile)
        log.info("turn.advanced", field=field_name, stage=next_stage.value)

        if next_stage == Stage.PROJECTION:
            return self._enter_free_chat(advanced)
        return TurnResult(reply=self._prompt(next_stage, profile), state=advanced)

    def _run_projection(self, profile: FinancialProfile) -> ProjectionResult:
        return self.model.project(profile, clock=self.clock)

    def _enter_free_chat(self, state: ConversationState) -> TurnResult:
        frozen = state.profile.freeze()
        projection = self._run_projection(frozen)
        done = replace(state, stage=Stage.FREE_CHAT, projection=projection)
        reply = "\n\n".join([projection_message(frozen, projection, self.company), STAGE_PROMPTS["free_chat"]])
        return TurnResult(reply=reply, state=done)

    # ---- free chat ----------------------------------------------------------

    async def _free_chat(self, state: ConversationState, text: str) -> TurnResult:
        verdict = check_guardrails(text)
        if not verdict.allowed:
            return TurnResult(reply=verdict.response, state=state, verdict=verdict)

        intent = classify_intent(text)
        if intent == "restart":
            log.info("turn.restarted")
            fresh = ConversationState(stage=Stage.AGE)
            return TurnResult(reply=RESTART_PROMPT, state=fresh, verdict=verdict, intent=intent)

        if state.projection is None:
            state = replace(state, projection=self._run_projection(state.profile.freeze()))

        dispatched = False
        if not is_on_topic(text):
            category = off_topic_category(text)
            log.info("turn.off_topic", category=category)
            reply = OFF_TOPIC_RESPONSES[category].format(company=self.company)
            answered = False
        else:
            reply, dispatched = await self._answer(state, text, intent)
            answered = True

        if verdict.category == "financial-advice":
            reply = f"{reply}\n\n{SHORT_DISCLAIMER}"

        if answered:
            state = self._remember(state, text, reply)
        return TurnResult(reply=reply, state=state, verdict=verdict, intent=intent, dispatched=dispatched)

    async def _answer(self, state: ConversationState, text: str, intent: str) -> Tuple[str, bool]:
        profile = state.profile.freeze()
        fallback = local_reply(intent, profile, state.projection, self.company)
        if self.responder is None:
            return fallback, False

        n = self.settings.history_messages
        request = ResponderRequest(
            message=text,
            system_prompt=load_system_prompt(self.company),
            history=list(state.history[-n:]) if n > 0 else [],
            projection_summary=projection_context(profile, state.projection),
        )
        try:
            reply = await call_with_retry(
                lambda: self.responder.generate(request),
                timeout=self.settings.responder_timeout_s,
                max_retries=self.settings.responder_max_retries,
                base_delay=self.settings.responder_backoff_s,
                sleep=self._sleep,
            )
        except ResponderError as e:
            log.warning("responder.failed", responder=self.responder.name, category=e.category,
                        error=type(e).__name__)
            return f"{RESPONDER_FAILURES[e.category]}\n\n{fallback}", True
        log.info("responder.answered", responder=self.responder.name, intent=intent)
        return reply, True

    def _remember(self, state: ConversationState, text: str, reply: str) -> ConversationState:
        history = state.history + (make_user_message(text), make_ok_message(reply))
        limit = max(self.settings.history_messages, 0)
        return replace(state, history=history[-limit:] if limit else ())
