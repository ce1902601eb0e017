"""
Dependency injection for shared clients and resources
"""
from functools import lru_cache

from supabase import create_client, Client

from doordont.core.config import settings
from doordont.core.constants import STORE_BACKEND_MEMORY
from doordont.services.external.mailer import send_email
from doordont.services.goals.locks import GoalLocks
from doordont.services.goals.service import GoalService
from doordont.services.notifications.service import NotificationService
from doordont.services.scheduler.service import EvaluationScheduler
from doordont.services.storage import GoalStore, InMemoryGoalStore, SupabaseGoalStore
from doordont.services.users.service import UserService


def get_supabase_client() -> Client:
    """Get Supabase client instance"""
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


@lru_cache(maxsize=None)
def get_goal_store() -> GoalStore:
    """Get the configured goal store (shared by requests and scheduled jobs)"""
    if settings.STORE_BACKEND == STORE_BACKEND_MEMORY:
        return InMemoryGoalStore()
    return SupabaseGoalStore(get_supabase_client())


@lru_cache(maxsize=None)
def get_goal_locks() -> GoalLocks:
    return GoalLocks()


@lru_cache(maxsize=None)
def get_notification_service() -> NotificationService:
    return NotificationService(send_email)


@lru_cache(maxsize=None)
def get_evaluation_scheduler() -> EvaluationScheduler:
    return EvaluationScheduler(
        store=get_goal_store(),
        notifications=get_notification_service(),
        locks=get_goal_locks()
    )


def get_goal_service() -> GoalService:
    return GoalService(get_goal_store(), get_evaluation_scheduler(), get_goal_locks())


def get_user_service() -> UserService:
    return UserService(get_goal_store())
