from typing import Protocol

from src.application.schemas import Plan


class PlanSinkPort(Protocol):
    def save_plan(self, user_id: str, plan: Plan) -> None:
        """
        Persist an accepted plan for the user. Called by the presentation layer,
        never by the assessment core.
        """
        ...
