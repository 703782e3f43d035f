"""JSON file storage for accepted therapy plans."""
import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from src.application.ports import PlanSinkPort
from src.application.schemas import Plan


logger = logging.getLogger(__name__)


class JsonPlanStore(PlanSinkPort):
    """Keeps one progress record per user in a single JSON file."""

    def __init__(self, storage_path: str):
        """
        Args:
            storage_path: Path to the JSON file. Parent directories are created
                          on first use.
        """
        self.storage_path = storage_path
        self._ensure_storage_exists()

    def _ensure_storage_exists(self) -> None:
        storage_dir = os.path.dirname(self.storage_path)
        if storage_dir and not os.path.exists(storage_dir):
            os.makedirs(storage_dir, exist_ok=True)

        if not os.path.exists(self.storage_path) or os.path.getsize(self.storage_path) == 0:
            self._save_records({})

    def _load_records(self) -> Dict[str, Any]:
        try:
            with open(self.storage_path, 'r') as f:
                return json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError:
            logger.warning("Plan store %s is not valid JSON; starting empty", self.storage_path)
            return {}

    def _save_records(self, records: Dict[str, Any]) -> None:
        with open(self.storage_path, 'w') as f:
            json.dump(records, f, indent=2)

    def save_plan(self, user_id: str, plan: Plan) -> None:
        """
        Store ``plan`` as the user's current plan, resetting their progress.

        Args:
            user_id: Identifier of the user accepting the plan
            plan: The accepted plan
        """
        records = self._load_records()
        records[user_id] = {
            "userId": user_id,
            "currentPlan": plan.model_dump(mode="json"),
            "startDate": datetime.now(timezone.utc).isoformat(),
            "completedTherapies": [],
            "dailyProgress": {},
        }
        self._save_records(records)
        logger.info("Saved %d-day %s plan for user %s", plan.plan_days, plan.topic_id.value, user_id)

    def load_progress(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Returns:
            The stored progress record, or None if the user has no plan
        """
        return self._load_records().get(user_id)

    def load_plan(self, user_id: str) -> Optional[Plan]:
        record = self.load_progress(user_id)
        if record is None:
            return None
        return Plan.model_validate(record["currentPlan"])
