"""
Scheduler Service - Background scheduler lifecycle management
Owns the APScheduler instance and the goal -> job registry
"""
import logging
import threading
from contextlib import suppress
from typing import Dict, List, Optional

from apscheduler.job import Job
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from doordont.core.config import settings
from doordont.core.constants import EVALUATION_JOB_ID_PREFIX, EVALUATION_MISFIRE_GRACE_SECONDS
from doordont.core.exceptions import DoOrDontException, SchedulerError
from doordont.models.goal import GoalEvaluation
from doordont.services.goals.locks import GoalLocks
from doordont.services.notifications.service import NotificationService
from doordont.services.storage.base import GoalStore
from doordont.utils.timezone import get_scheduler_tz
from .jobs import evaluate_goal_job

logger = logging.getLogger(__name__)


def build_evaluation_trigger(production: Optional[bool] = None, timezone=None) -> CronTrigger:
    """
    Build the evaluation cadence

    Production evaluates once a week on EVALUATION_DAY_OF_WEEK; every other
    mode evaluates daily at the same time of day.

    Args:
        production: Override for settings.is_production
        timezone: Override for the scheduler timezone

    Returns:
        CronTrigger for the evaluation jobs
    """
    if production is None:
        production = settings.is_production
    day_of_week = settings.EVALUATION_DAY_OF_WEEK if production else "*"
    return CronTrigger(
        day_of_week=day_of_week,
        hour=settings.EVALUATION_HOUR,
        minute=settings.EVALUATION_MINUTE,
        timezone=timezone or get_scheduler_tz()
    )


def job_id_for(goal_id: int) -> str:
    return f"{EVALUATION_JOB_ID_PREFIX}_{goal_id}"


class EvaluationScheduler:
    """
    Schedules one recurring evaluation job per goal

    Jobs run on the scheduler's thread pool, so goals are evaluated
    independently. Each job has max_instances=1, so fires for the same goal
    never overlap.
    """

    def __init__(
        self,
        store: GoalStore,
        notifications: NotificationService,
        locks: GoalLocks,
        scheduler: Optional[BackgroundScheduler] = None,
        production: Optional[bool] = None,
        reset_counter: Optional[bool] = None
    ):
        self.store = store
        self.notifications = notifications
        self.locks = locks
        self.scheduler = scheduler or BackgroundScheduler(timezone=get_scheduler_tz())
        self.production = settings.is_production if production is None else production
        self.reset_counter = (
            settings.RESET_COUNTER_AFTER_EVALUATION if reset_counter is None else reset_counter
        )
        self._jobs: Dict[int, Job] = {}
        self._registry_lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self.scheduler.running

    def start(self) -> None:
        """Start the background scheduler"""
        if self.scheduler.running:
            logger.warning("Scheduler already running")
            return

        if not self.reset_counter:
            logger.warning(
                "RESET_COUNTER_AFTER_EVALUATION is off: counters carry over between "
                "evaluation periods until reset manually"
            )
        self.scheduler.start()
        cadence = "weekly" if self.production else "daily"
        logger.info(f"Scheduler started - evaluating goals {cadence}")

    def shutdown(self) -> None:
        """Stop the background scheduler"""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Scheduler stopped")
        with self._registry_lock:
            self._jobs.clear()

    def schedule_goal(self, goal_id: int, target: str) -> Job:
        """
        Register the recurring evaluation for a goal

        Scheduling a goal again replaces its existing job.

        Args:
            goal_id: Goal to evaluate
            target: Notification address for failures

        Returns:
            The APScheduler job

        Raises:
            SchedulerError: If the job cannot be added
        """
        # A stopped scheduler keeps duplicates in its pending list instead of replacing them
        if not self.scheduler.running:
            with suppress(JobLookupError):
                self.scheduler.remove_job(job_id_for(goal_id))

        try:
            job = self.scheduler.add_job(
                func=evaluate_goal_job,
                trigger=build_evaluation_trigger(self.production),
                kwargs={
                    "goal_id": goal_id,
                    "target": target,
                    "store": self.store,
                    "notifications": self.notifications,
                    "locks": self.locks,
                    "reset_counter": self.reset_counter,
                    "on_missing": self.cancel_goal
                },
                id=job_id_for(goal_id),
                name=f"Evaluate goal {goal_id}",
                replace_existing=True,
                max_instances=1,
                coalesce=True,
                misfire_grace_time=EVALUATION_MISFIRE_GRACE_SECONDS
            )
        except Exception as e:
            logger.error(f"[SCHEDULER] Failed to schedule goal {goal_id}: {e}")
            raise SchedulerError(f"Failed to schedule goal {goal_id}: {e}")

        with self._registry_lock:
            self._jobs[goal_id] = job
        logger.info(f"[SCHEDULER] Scheduled evaluation for goal {goal_id} ({target})")
        return job

    def cancel_goal(self, goal_id: int) -> bool:
        """
        Stop evaluating a goal

        Returns:
            True if a job was registered for the goal
        """
        with self._registry_lock:
            job = self._jobs.pop(goal_id, None)

        with suppress(JobLookupError):
            self.scheduler.remove_job(job_id_for(goal_id))

        if job is not None:
            logger.info(f"[SCHEDULER] Cancelled evaluation for goal {goal_id}")
        return job is not None

    def is_scheduled(self, goal_id: int) -> bool:
        with self._registry_lock:
            return goal_id in self._jobs

    def scheduled_goal_ids(self) -> List[int]:
        with self._registry_lock:
            return sorted(self._jobs)

    def get_job(self, goal_id: int) -> Optional[Job]:
        with self._registry_lock:
            return self._jobs.get(goal_id)

    def run_now(self, goal_id: int, target: str) -> Optional[GoalEvaluation]:
        """Run one evaluation for a goal immediately, on the calling thread"""
        return evaluate_goal_job(
            goal_id=goal_id,
            target=target,
            store=self.store,
            notifications=self.notifications,
            locks=self.locks,
            reset_counter=self.reset_counter,
            on_missing=self.cancel_goal
        )

    def restore_jobs(self) -> int:
        """
        Schedule every persisted goal, targeting its owner

        Returns:
            Number of goals scheduled
        """
        goals = self.store.list_all_goals()
        scheduled = 0
        for goal in goals:
            try:
                owner = self.store.get_user_by_id(goal.user_id)
                self.schedule_goal(goal.id, owner.username)
                scheduled += 1
            except DoOrDontException as e:
                logger.error(f"[SCHEDULER] Could not restore evaluation for goal {goal.id}: {e}")

        logger.info(f"[SCHEDULER] Restored {scheduled} goal evaluation(s)")
        return scheduled
