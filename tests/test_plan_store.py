"""Unit tests for the JSON plan store."""
import json
import os
import tempfile

import pytest

from src.application.use_cases import PlanBuilder
from src.domain.models import ScoreResult, Severity, TopicId
from src.infrastructure.storage.plan_store import JsonPlanStore


@pytest.fixture
def temp_storage():
    """Create a temporary storage file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', delete=False, suffix='.json') as f:
        temp_path = f.name

    yield temp_path

    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def plan():
    result = ScoreResult(
        severity=Severity.MILD, plan_days=10, combined_score=2.5, rating_score=5, binary_score=0
    )
    return PlanBuilder().build_plan(TopicId.SOCIAL_ANXIETY, result)


class TestJsonPlanStore:
    """Test saving and loading accepted plans."""

    def test_initialization_creates_empty_file(self, temp_storage):
        JsonPlanStore(temp_storage)
        with open(temp_storage, 'r') as f:
            assert json.load(f) == {}

    def test_creates_missing_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "plans.json")
            JsonPlanStore(path)
            assert os.path.exists(path)

    def test_save_writes_progress_record(self, temp_storage, plan):
        store = JsonPlanStore(temp_storage)
        store.save_plan("user-1", plan)

        with open(temp_storage, 'r') as f:
            record = json.load(f)["user-1"]
        assert record["userId"] == "user-1"
        assert record["completedTherapies"] == []
        assert record["dailyProgress"] == {}
        assert record["currentPlan"]["severity"] == "mild"
        assert record["currentPlan"]["topic_id"] == "social-anxiety"

    def test_load_plan_round_trip(self, temp_storage, plan):
        store = JsonPlanStore(temp_storage)
        store.save_plan("user-1", plan)
        assert store.load_plan("user-1") == plan
        assert store.load_plan("someone-else") is None

    def test_new_plan_replaces_old(self, temp_storage, plan):
        store = JsonPlanStore(temp_storage)
        store.save_plan("user-1", plan)
        store.save_plan("user-1", plan)
        store.save_plan("user-2", plan)
        with open(temp_storage, 'r') as f:
            assert set(json.load(f)) == {"user-1", "user-2"}

    def test_corrupt_file_treated_as_empty(self, temp_storage):
        with open(temp_storage, 'w') as f:
            f.write("{not json")
        store = JsonPlanStore(temp_storage)
        assert store.load_progress("user-1") is None
