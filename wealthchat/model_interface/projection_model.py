from __future__ import annotations
from datetime import datetime
from typing import Callable, Optional

from wealthchat.model_interface.types import FinancialProfile, ProjectionResult

Clock = Callable[[], datetime]


class ProjectionModel:
    """Interface every projection engine implements."""

    def project(self, profile: FinancialProfile, clock: Optional[Clock] = None) -> ProjectionResult:
        raise NotImplementedError
