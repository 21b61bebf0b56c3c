from __future__ import annotations
import re
from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Literal, Mapping, Optional, Tuple

Severity = Literal["low", "medium", "high"]
GuardrailCategory = Literal[
    "allowed",
    "off-topic",
    "inappropriate",
    "jailbreak-attempt",
    "pii-request",
    "financial-advice",
]
IntentLabel = Literal[
    "restart",
    "product_info",
    "education",
    "retirement",
    "savings_tips",
    "investment",
    "closing",
    "help",
    "general",
]


class ProfileError(ValueError):
    """A profile reached the projection engine with missing or out-of-range data."""


class ProfileIncompleteError(ProfileError):
    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(f"Profile is missing fields: {', '.join(self.missing)}")


@dataclass(frozen=True)
class FinancialProfile:
    age: int
    annual_income: float
    current_savings: float
    monthly_savings: float
    monthly_investment: float
    increase_percentage: float
    bonus_savings: float

    @property
    def base_monthly(self) -> float:
        return self.monthly_savings + self.monthly_investment

    @property
    def work_monthly_contribution(self) -> float:
        """Own monthly contribution after the planned percentage increase."""
        return self.base_monthly * (1 + self.increase_percentage / 100)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class PartialProfile:
    """Profile under construction; every field stays None until its stage succeeds."""
    age: Optional[int] = None
    annual_income: Optional[float] = None
    current_savings: Optional[float] = None
    monthly_savings: Optional[float] = None
    monthly_investment: Optional[float] = None
    increase_percentage: Optional[float] = None
    bonus_savings: Optional[float] = None

    def merge(self, **values: Any) -> "PartialProfile":
        return replace(self, **values)

    def missing(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is None)

    def is_complete(self) -> bool:
        return not self.missing()

    def freeze(self) -> FinancialProfile:
        missing = self.missing()
        if missing:
            raise ProfileIncompleteError(missing)
        return FinancialProfile(**self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "PartialProfile":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})


@dataclass(frozen=True)
class Milestone:
    baseline: int
    with_bonus: int
    bonus_contribution: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "baseline": self.baseline,
            "with_bonus": self.with_bonus,
            "bonus_contribution": self.bonus_contribution,
        }


@dataclass(frozen=True)
class YearRecord:
    year: int
    age: int
    baseline: int
    with_bonus: int
    total_contributions: int
    total_earnings: int
    bonus_contribution: int

    def to_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class Assumptions:
    pre_transition_rate: float
    post_transition_rate: float
    inflation_rate: float
    transition_age: int
    horizon_age: int
    compounding_frequency: str = "monthly"

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ProjectionResult:
    milestones: Mapping[int, Milestone]
    year_by_year: Tuple[YearRecord, ...]
    assumptions: Assumptions
    as_of: str

    def __post_init__(self):
        # Read-only view so a published result cannot be edited in place.
        object.__setattr__(self, "milestones", MappingProxyType(dict(self.milestones)))
        object.__setattr__(self, "year_by_year", tuple(self.year_by_year))

    @property
    def horizon(self) -> int:
        return max(self.milestones)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "milestones": {year: m.to_dict() for year, m in self.milestones.items()},
            "year_by_year": [r.to_dict() for r in self.year_by_year],
            "assumptions": self.assumptions.to_dict(),
            "as_of": self.as_of,
        }


@dataclass(frozen=True)
class GuardrailVerdict:
    allowed: bool
    category: GuardrailCategory
    response: str = ""
    severity: Optional[Severity] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class TopicDefinition:
    name: str
    keywords: FrozenSet[str]
    patterns: Tuple[re.Pattern, ...]
    priority: int
