"""
Shared test fixtures

Every test gets a fresh in-memory store and a scheduler that is never started
unless the test starts it.
"""
import os

# Must be set before doordont.core.config is imported
os.environ["STORE_BACKEND"] = "memory"
os.environ["EMAIL_USER"] = ""
os.environ["EMAIL_PASS"] = ""

import pytest
import pytz
from apscheduler.schedulers.background import BackgroundScheduler

from doordont.models.goal import GoalCreateRequest, Punishment
from doordont.services.goals.locks import GoalLocks
from doordont.services.goals.service import GoalService
from doordont.services.notifications.service import NotificationService
from doordont.services.scheduler.service import EvaluationScheduler
from doordont.services.storage.memory_store import InMemoryGoalStore
from doordont.services.users.service import UserService


class RecordingTransport:
    """Send callback that records messages instead of delivering them"""

    def __init__(self, result=True):
        self.result = result
        self.sent = []

    def __call__(self, target, subject, body):
        self.sent.append({"target": target, "subject": subject, "body": body})
        return self.result


@pytest.fixture
def store():
    return InMemoryGoalStore()


@pytest.fixture
def locks():
    return GoalLocks()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def notifications(transport):
    return NotificationService(transport)


@pytest.fixture
def evaluation_scheduler(store, notifications, locks):
    scheduler = EvaluationScheduler(
        store=store,
        notifications=notifications,
        locks=locks,
        scheduler=BackgroundScheduler(timezone=pytz.utc),
        production=True,
        reset_counter=False
    )
    yield scheduler
    scheduler.shutdown()


@pytest.fixture
def goal_service(store, evaluation_scheduler, locks):
    return GoalService(store, evaluation_scheduler, locks)


@pytest.fixture
def user_service(store):
    return UserService(store)


@pytest.fixture
def username(user_service):
    user_service.create_user("jon@example.com", "superawesomepassword")
    return "jon@example.com"


@pytest.fixture
def make_goal(store, username):
    """Insert a goal directly into the store with a given counter"""
    def _make_goal(initiate=True, frequency=4, counter=0, description="go to the gym"):
        goal_id = store.insert_goal(description, Punishment.EMAIL, initiate, frequency, username)
        for _ in range(counter):
            store.increment_counter(goal_id)
        return goal_id
    return _make_goal


@pytest.fixture
def goal_request(username):
    return GoalCreateRequest(
        description="go to the gym",
        punishment=Punishment.EMAIL,
        initiate=True,
        frequency=4,
        username=username
    )
